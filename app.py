import logging
import streamlit as st
from src.models.beta1 import beta1_for_fc
from src.models.reporting import build_analysis_report
from src.models.units import UnitSystem, labels_for
from src.models.validation import InvalidInput
from src.ui.design_state import (
    UNIT_WIDGET_KEY,
    get_input_snapshot,
    get_unit_system,
    init_design_state,
    switch_unit_system,
    update_section_inputs,
    widget_key,
)
from src.ui.tabs import analysis_tab, equations_tab, report_tab

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

# Page Config
st.set_page_config(page_title="Beam Mn Analyzer", page_icon="🏗️", layout="wide")

init_design_state(st.session_state)


def _on_unit_change():
    switch_unit_system(st.session_state, st.session_state[UNIT_WIDGET_KEY])


# Sidebar (Inputs)
st.sidebar.title("Input Parameters")
st.sidebar.radio(
    "Unit System",
    [u.value for u in UnitSystem],
    key=UNIT_WIDGET_KEY,
    horizontal=True,
    on_change=_on_unit_change,
)
unit_system = get_unit_system(st.session_state)
u = labels_for(unit_system)

st.sidebar.subheader("Materials")
fc_prime = st.sidebar.number_input(f"f'c (Concrete) [{u.stress}]", key=widget_key("fc_prime"), format="%.1f")
fy = st.sidebar.number_input(f"fy (Steel Yield) [{u.stress}]", key=widget_key("fy"), format="%.1f")
Es = st.sidebar.number_input(f"Es (Steel Modulus) [{u.stress}]", key=widget_key("Es"), format="%.0f")
beta1 = st.sidebar.number_input("β1 (Stress Block)", key=widget_key("beta1"), step=0.01, format="%.3f")
st.sidebar.caption(f"ACI 318 Table 22.2.2.4.3 suggests β1 = {beta1_for_fc(fc_prime, unit_system):.3f}")
epsilon_cu = st.sidebar.number_input("εcu (Ult. Strain)", key=widget_key("epsilon_cu"), step=0.0001, format="%.4f")

st.sidebar.divider()
st.sidebar.subheader("Geometry")
b = st.sidebar.number_input(f"b (Width) [{u.length}]", key=widget_key("b"), format="%.2f")
h = st.sidebar.number_input(f"h (Total Depth) [{u.length}]", key=widget_key("h"), format="%.2f")
d = st.sidebar.number_input(f"d (Eff. Depth) [{u.length}]", key=widget_key("d"), format="%.2f")

st.sidebar.divider()
st.sidebar.subheader("Reinforcement")
num_bars = st.sidebar.number_input("Number of Bars", key=widget_key("num_bars"), step=1)
bar_area = st.sidebar.number_input(f"Bar Area (each) [{u.area}]", key=widget_key("bar_area"), format="%.2f")

update_section_inputs(
    st.session_state,
    fc_prime=fc_prime, fy=fy, Es=Es, beta1=beta1, epsilon_cu=epsilon_cu,
    b=b, h=h, d=d, num_bars=num_bars, bar_area=bar_area,
)

# Run Analysis
try:
    bundle = build_analysis_report(get_input_snapshot(st.session_state), unit_system)
except InvalidInput as e:
    st.sidebar.error(str(e))
    st.stop()

# Main App
st.title("🏗️ Singly Reinforced Beam - Nominal Moment Strength")

tab_analysis, tab_equations, tab_report = st.tabs(["📐 Diagrams", "🧮 Equations", "📄 Report"])

with tab_analysis:
    analysis_tab.render(bundle)

with tab_equations:
    equations_tab.render(bundle)

with tab_report:
    report_tab.render(bundle)
