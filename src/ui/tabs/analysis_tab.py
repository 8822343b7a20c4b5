import matplotlib.pyplot as plt
import streamlit as st

from src.ui import plotting


def _render_status_box(status_code: str, message: str) -> None:
    if status_code == "ok":
        st.success(message)
    elif status_code == "warning":
        st.warning(message)
    else:
        st.error(message)


def _show(fig) -> None:
    st.pyplot(fig)
    plt.close(fig)


def render(bundle):
    res = bundle.result
    u = res.units
    st.header("Nominal Moment Strength (Mn)")

    _render_status_box(res.status_code, res.status)

    # 1) Diagrams
    c1, c2, c3 = st.columns(3)
    with c1:
        _show(plotting.draw_cross_section(res))
    with c2:
        _show(plotting.draw_strain_profile(res))
    with c3:
        _show(plotting.draw_stress_diagram(res))

    # 2) Results summary
    st.divider()
    st.subheader("Results Summary")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("As", f"{res.As:.4g} {u.area}")
    m2.metric("T = C", f"{res.T_display:.1f} {u.force_k}")
    m3.metric("a", f"{res.a:.4f} {u.length}")
    m4.metric("c", f"{res.c:.4f} {u.length}")

    m5, m6, m7, m8 = st.columns(4)
    m5.metric("εy", f"{res.epsilon_y:.5f}")
    m6.metric("εs", f"{res.epsilon_s:.5f}")
    m7.metric("Mn", f"{res.Mn_display:.1f} {u.moment_display}",
              help=f"{res.Mn_precise:,.0f} {u.moment_precise}")
    m8.metric("As,min", f"{res.As_min:.4g} {u.area}")

    s1, s2 = st.columns(2)
    with s1:
        if res.yields:
            st.success("Steel yields (εs ≥ εy): fs = fy")
        else:
            st.warning(f"Steel does not yield (εs < εy): fs = εs·Es = {res.fs:.1f} {u.stress}")
    with s2:
        if res.As_check:
            st.success(f"As ≥ As,min ({res.As:.4g} ≥ {res.As_min:.4g} {u.area})")
        else:
            st.error(f"As < As,min ({res.As:.4g} < {res.As_min:.4g} {u.area})")
