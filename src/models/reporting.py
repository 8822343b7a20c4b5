from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.models.analysis_checklist import (
    build_analysis_checklist,
    build_results_summary,
    build_status_summary,
)
from src.models.equations import EquationStep, build_equation_steps
from src.models.result_types import AnalysisResult
from src.models.section_analysis import analyze
from src.models.section_inputs import SectionInputs
from src.models.units import UnitSystem


@dataclass
class ReportBundle:
    inputs: SectionInputs
    unit_system: UnitSystem
    result: AnalysisResult
    results_summary: list[dict[str, Any]]
    status_summary: dict[str, Any]
    checklist: list[dict[str, str]]
    equations: list[EquationStep]
    warnings: list[str]

    def export_payload(self) -> dict[str, Any]:
        return {
            "unit_system": self.unit_system.value,
            "inputs": self.inputs.to_dict(),
            "result": self.result.to_dict(),
            "results_summary": self.results_summary,
            "status_summary": self.status_summary,
            "checklist": self.checklist,
            "equations": [step.to_dict() for step in self.equations],
            "warnings": self.warnings,
        }


def build_analysis_report(inputs: SectionInputs, unit_system: UnitSystem) -> ReportBundle:
    """Run the analysis and collect everything the report tab and exports need."""
    unit_system = UnitSystem(unit_system)
    result = analyze(inputs, unit_system)

    warnings: list[str] = []
    if result.status_code == "warning":
        warnings.extend(part.strip() for part in result.status.split("|"))

    return ReportBundle(
        inputs=inputs,
        unit_system=unit_system,
        result=result,
        results_summary=build_results_summary(result),
        status_summary=build_status_summary(result),
        checklist=build_analysis_checklist(result),
        equations=build_equation_steps(result),
        warnings=warnings,
    )
