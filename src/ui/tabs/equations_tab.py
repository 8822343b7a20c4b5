import streamlit as st


def render(bundle):
    st.header("Calculations (Step by Step)")
    st.caption("Whitney stress block, steel assumed to yield first and checked by strain compatibility.")

    for step in bundle.equations:
        st.markdown(f"**{step.title}**")
        st.latex(step.latex)
        if step.passed is True:
            st.success(step.note)
        elif step.passed is False:
            st.error(step.note)
