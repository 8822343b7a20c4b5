from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from src.models.section_inputs import SectionInputs, default_inputs
from src.models.units import UnitSystem

INPUT_FIELDS = ("fc_prime", "fy", "Es", "beta1", "epsilon_cu", "b", "h", "d", "num_bars", "bar_area")
WIDGET_PREFIX = "input_"
UNIT_WIDGET_KEY = "unit_system_choice"


def widget_key(name: str) -> str:
    return f"{WIDGET_PREFIX}{name}"


def _load_preset(session_state: MutableMapping[str, Any], unit_system: UnitSystem) -> None:
    preset = default_inputs(unit_system).to_dict()
    session_state["unit_system"] = unit_system.value
    session_state["section_inputs"] = dict(preset)
    for name, value in preset.items():
        session_state[widget_key(name)] = value


def init_design_state(session_state: MutableMapping[str, Any]) -> None:
    if "unit_system" not in session_state or "section_inputs" not in session_state:
        _load_preset(session_state, UnitSystem.IMPERIAL)
    if UNIT_WIDGET_KEY not in session_state:
        session_state[UNIT_WIDGET_KEY] = session_state["unit_system"]
    for name in INPUT_FIELDS:
        if widget_key(name) not in session_state:
            session_state[widget_key(name)] = session_state["section_inputs"][name]


def switch_unit_system(session_state: MutableMapping[str, Any], unit_system: UnitSystem | str) -> None:
    """Replace every input with the preset of ``unit_system``."""
    unit_system = UnitSystem(unit_system)
    _load_preset(session_state, unit_system)
    session_state[UNIT_WIDGET_KEY] = unit_system.value


def update_section_inputs(session_state: MutableMapping[str, Any], **kwargs: Any) -> None:
    init_design_state(session_state)
    unknown = set(kwargs) - set(INPUT_FIELDS)
    if unknown:
        raise KeyError(f"Unknown section inputs: {sorted(unknown)}")
    session_state["section_inputs"].update(kwargs)


def get_unit_system(session_state: MutableMapping[str, Any]) -> UnitSystem:
    init_design_state(session_state)
    return UnitSystem(session_state["unit_system"])


def get_input_snapshot(session_state: MutableMapping[str, Any]) -> SectionInputs:
    init_design_state(session_state)
    data = session_state["section_inputs"]
    return SectionInputs(**{name: data[name] for name in INPUT_FIELDS})
