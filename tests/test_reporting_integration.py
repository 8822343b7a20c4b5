import json

import pytest

from src.models.reporting import build_analysis_report
from src.models.section_inputs import IMPERIAL_DEFAULTS, SI_DEFAULTS
from src.models.units import UnitSystem
from src.models.validation import InvalidInput


def test_report_bundle_contains_payload_sections():
    bundle = build_analysis_report(IMPERIAL_DEFAULTS, UnitSystem.IMPERIAL)
    payload = bundle.export_payload()

    assert payload["unit_system"] == "Imperial"
    assert payload["inputs"]["num_bars"] == 4
    assert "trace" in payload["result"]
    assert len(payload["equations"]) == 8
    assert len(payload["checklist"]) == 3
    assert payload["warnings"] == []
    json.dumps(payload, ensure_ascii=False)


def test_report_collects_warnings():
    bundle = build_analysis_report(SI_DEFAULTS.with_changes(num_bars=12), "SI")
    assert bundle.unit_system is UnitSystem.SI
    assert bundle.result.yields is False
    assert any("Does Not Yield" in w for w in bundle.warnings)


def test_report_deterministic_for_same_inputs():
    p1 = build_analysis_report(SI_DEFAULTS, UnitSystem.SI).export_payload()
    p2 = build_analysis_report(SI_DEFAULTS, UnitSystem.SI).export_payload()
    assert p1 == p2


def test_report_propagates_invalid_input():
    with pytest.raises(InvalidInput):
        build_analysis_report(SI_DEFAULTS.with_changes(b=0.0), UnitSystem.SI)
