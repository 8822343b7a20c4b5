import json

import pandas as pd
import streamlit as st


def render(bundle):
    st.header("Analysis Report")
    res = bundle.result

    st.subheader("1. Inputs")
    st.caption(f"Unit system: {bundle.unit_system.value}")
    inputs_df = pd.DataFrame(
        [{"input": name, "value": value} for name, value in bundle.inputs.to_dict().items()]
    )
    st.table(inputs_df)

    st.divider()
    st.subheader("2. Results")
    st.table(pd.DataFrame(bundle.results_summary, columns=["quantity", "value", "units"]))
    st.caption(
        f"Mn = {res.Mn_precise:,.0f} {res.units.moment_precise} = {res.Mn_display:.1f} {res.units.moment_display}"
        f" | rho = {res.rho:.5f}"
    )

    st.subheader("3. Checks")
    checklist_df = pd.DataFrame(
        bundle.checklist,
        columns=["Check", "Code Ref", "Formula", "State", "Value", "Comment"],
    )
    st.table(checklist_df)

    st.subheader("4. Active Warnings")
    if bundle.warnings:
        for warning in bundle.warnings:
            st.warning(warning)
    else:
        st.success("No active warnings for the current inputs.")

    st.divider()
    st.subheader("5. Export")
    payload = bundle.export_payload()
    csv_data = pd.DataFrame(bundle.results_summary).to_csv(index=False).encode("utf-8")

    cexp1, cexp2 = st.columns(2)
    cexp1.download_button(
        label="Download results (CSV)",
        data=csv_data,
        file_name="beam_mn_results.csv",
        mime="text/csv",
    )
    cexp2.download_button(
        label="Download full report (JSON)",
        data=json.dumps(payload, indent=2, ensure_ascii=False),
        file_name="beam_mn_report.json",
        mime="application/json",
    )
