from __future__ import annotations

from typing import Any

from src.models.result_types import AnalysisResult


def _state_from_status_code(status_code: str) -> str:
    if status_code == "ok":
        return "pass"
    if status_code == "warning":
        return "warning"
    return "pending"


def _governing_min_term(res: AnalysisResult) -> str:
    if res.As_min_sqrt_term >= res.As_min_flat_term:
        return "sqrt(fc') term governs"
    return "flat term governs"


def build_results_summary(res: AnalysisResult) -> list[dict[str, Any]]:
    u = res.units
    return [
        {"quantity": "As", "value": round(res.As, 4), "units": u.area},
        {"quantity": "T = C", "value": round(res.T_display, 2), "units": u.force_k},
        {"quantity": "a", "value": round(res.a, 4), "units": u.length},
        {"quantity": "c", "value": round(res.c, 4), "units": u.length},
        {"quantity": "epsilon_y", "value": round(res.epsilon_y, 5), "units": "-"},
        {"quantity": "epsilon_s", "value": round(res.epsilon_s, 5), "units": "-"},
        {"quantity": "fs", "value": round(res.fs, 1), "units": u.stress},
        {"quantity": "Mn", "value": round(res.Mn_display, 1), "units": u.moment_display},
        {"quantity": "As,min", "value": round(res.As_min, 4), "units": u.area},
    ]


def build_status_summary(res: AnalysisResult) -> dict[str, Any]:
    return {
        "unit_system": res.unit_system.value,
        "state": _state_from_status_code(res.status_code),
        "yields": "yes" if res.yields else "no",
        "min_steel": "satisfied" if res.As_check else "not satisfied",
        "min_steel_criterion": _governing_min_term(res),
        "Mn_display": round(float(res.Mn_display), 2),
        "rho": round(float(res.rho), 5),
    }


def build_analysis_checklist(res: AnalysisResult) -> list[dict[str, str]]:
    u = res.units
    rows: list[dict[str, str]] = []
    rows.append(
        {
            "Check": "Tension steel yields",
            "Code Ref": "ACI 318 Section 22.2.1",
            "Formula": "epsilon_s >= epsilon_y",
            "State": "pass" if res.yields else "fail",
            "Value": f"epsilon_s={res.epsilon_s:.5f} | epsilon_y={res.epsilon_y:.5f}",
            "Comment": "fs = fy" if res.yields else f"fs = epsilon_s * Es = {res.fs:.1f} {u.stress}",
        }
    )
    rows.append(
        {
            "Check": "Minimum steel",
            "Code Ref": "ACI 318 Eq 9.6.1.2",
            "Formula": "As >= As_min",
            "State": "pass" if res.As_check else "fail",
            "Value": f"As={res.As:.4g} {u.area} | As_min={res.As_min:.4g} {u.area}",
            "Comment": _governing_min_term(res),
        }
    )

    if res.c >= res.d:
        axis_state = "warning"
        axis_comment = "Neutral axis at or below the tension steel."
    else:
        axis_state = "pass"
        axis_comment = "Neutral axis above the tension steel."
    rows.append(
        {
            "Check": "Neutral axis location",
            "Code Ref": "ACI 318 Section 22.2.2",
            "Formula": "c < d",
            "State": axis_state,
            "Value": f"c={res.c:.4f} {u.length} | d={res.d:.4f} {u.length}",
            "Comment": axis_comment,
        }
    )
    return rows
