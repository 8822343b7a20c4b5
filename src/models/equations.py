"""Step-by-step LaTeX equation trace for the nominal moment calculation."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from src.models.aci_constants import (
    MIN_AS_FLAT_COEFF_MPA,
    MIN_AS_FLAT_COEFF_PSI,
    MIN_AS_SQRT_COEFF_MPA,
    MIN_AS_SQRT_COEFF_PSI,
    WHITNEY_COEFF,
)
from src.models.result_types import AnalysisResult
from src.models.units import UnitSystem, labels_for


@dataclass(frozen=True)
class EquationStep:
    key: str
    title: str
    symbolic: str
    substituted: str
    passed: bool | None = None
    note: str = ""

    @property
    def latex(self) -> str:
        return f"{self.symbolic} {self.substituted}"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["latex"] = self.latex
        return data


def tex_unit(label: str) -> str:
    """Unit label as KaTeX/mathtext text, e.g. 'in²' -> \\text{in}^2."""
    if label.endswith("²"):
        return rf"\;\text{{{label[:-1]}}}^2"
    return rf"\;\text{{{label}}}"


def _coeff(value: float) -> str:
    return f"{value:g}"


def build_equation_steps(result: AnalysisResult) -> list[EquationStep]:
    r = result
    u = r.units or labels_for(r.unit_system)
    steps: list[EquationStep] = []

    steps.append(
        EquationStep(
            key="As",
            title="Step 1 - Steel area",
            symbolic=r"A_s = n \times A_{bar}",
            substituted=rf"= {r.num_bars} \times {r.bar_area:.2f} = {r.As:.2f}{tex_unit(u.area)}",
        )
    )
    steps.append(
        EquationStep(
            key="T",
            title="Step 1 - Tension force (assume f_s = f_y)",
            symbolic=r"T = A_s f_y",
            substituted=(
                rf"= {r.As:.2f} \times {r.fy:.0f} = {r.T:.0f}{tex_unit(u.force)}"
                rf"\;({r.T_display:.1f}{tex_unit(u.force_k)})"
            ),
        )
    )
    steps.append(
        EquationStep(
            key="a",
            title="Step 2 - Stress block depth (C = T)",
            symbolic=rf"a = \frac{{A_s f_y}}{{{_coeff(WHITNEY_COEFF)} f'_c b}}",
            substituted=(
                rf"= \frac{{{r.T:.0f}}}{{{_coeff(WHITNEY_COEFF)} \times {r.fc_prime:.0f} \times {r.b:.1f}}}"
                rf" = {r.a:.4f}{tex_unit(u.length)}"
            ),
        )
    )
    steps.append(
        EquationStep(
            key="c",
            title="Step 2 - Neutral axis depth",
            symbolic=r"c = \frac{a}{\beta_1}",
            substituted=rf"= \frac{{{r.a:.4f}}}{{{r.beta1:.2f}}} = {r.c:.4f}{tex_unit(u.length)}",
        )
    )
    steps.append(
        EquationStep(
            key="epsilon_y",
            title="Step 3 - Yield strain",
            symbolic=r"\varepsilon_y = \frac{f_y}{E_s}",
            substituted=rf"= \frac{{{r.fy:.0f}}}{{{r.Es:.0f}}} = {r.epsilon_y:.5f}",
        )
    )
    if r.yields:
        yield_note = "OK: Steel Yields"
        fs_text = rf"f_s = f_y = {r.fs:.0f}{tex_unit(u.stress)}"
    else:
        yield_note = "NOT OK: Steel Not Yielding"
        fs_text = rf"f_s = \varepsilon_s E_s = {r.fs:.0f}{tex_unit(u.stress)}"
    steps.append(
        EquationStep(
            key="epsilon_s",
            title="Step 3 - Steel strain (strain compatibility)",
            symbolic=r"\varepsilon_s = \left(\frac{d - c}{c}\right) \varepsilon_{cu}",
            substituted=(
                rf"= \left(\frac{{{r.d:.2f} - {r.c:.2f}}}{{{r.c:.2f}}}\right)({r.epsilon_cu:.4f})"
                rf" = {r.epsilon_s:.5f} \;\Rightarrow\; {fs_text}"
            ),
            passed=r.yields,
            note=yield_note,
        )
    )
    steps.append(
        EquationStep(
            key="Mn",
            title="Step 4 - Nominal moment strength",
            symbolic=r"M_n = A_s f_s \left(d - \frac{a}{2}\right)",
            substituted=(
                rf"= {r.As:.2f} \times {r.fs:.0f} \left({r.d:.2f} - \frac{{{r.a:.4f}}}{{2}}\right)"
                rf" = {r.Mn_precise:.0f}{tex_unit(u.moment_precise)}"
                rf" = \mathbf{{{r.Mn_display:.1f}}}{tex_unit(u.moment_display)}"
            ),
        )
    )

    if r.unit_system is UnitSystem.IMPERIAL:
        sqrt_coeff, flat_coeff, digits = MIN_AS_SQRT_COEFF_PSI, MIN_AS_FLAT_COEFF_PSI, 4
    else:
        sqrt_coeff, flat_coeff, digits = MIN_AS_SQRT_COEFF_MPA, MIN_AS_FLAT_COEFF_MPA, 1
    steps.append(
        EquationStep(
            key="As_min",
            title="Step 5 - Minimum steel area",
            symbolic=(
                rf"A_{{s,min}} = \max\left(\frac{{{_coeff(sqrt_coeff)}\sqrt{{f'_c}}}}{{f_y}} b_w d,"
                rf"\; \frac{{{_coeff(flat_coeff)}}}{{f_y}} b_w d\right)"
            ),
            substituted=(
                rf"= \max({r.As_min_sqrt_term:.{digits}f},\; {r.As_min_flat_term:.{digits}f})"
                rf" = {r.As_min:.{digits}f}{tex_unit(u.area)}"
            ),
            passed=r.As_check,
            note="OK" if r.As_check else "NOT OK: As < As,min",
        )
    )
    return steps
