import pytest

from src.models.equations import build_equation_steps, tex_unit
from src.models.section_analysis import analyze
from src.models.section_inputs import IMPERIAL_DEFAULTS, SI_DEFAULTS
from src.models.units import UnitSystem


@pytest.fixture
def imperial_steps():
    return build_equation_steps(analyze(IMPERIAL_DEFAULTS, UnitSystem.IMPERIAL))


class TestEquationSteps:
    def test_step_order(self, imperial_steps):
        assert [s.key for s in imperial_steps] == ["As", "T", "a", "c", "epsilon_y", "epsilon_s", "Mn", "As_min"]

    def test_numeric_substitution(self, imperial_steps):
        steps = {s.key: s for s in imperial_steps}
        assert "4 \\times 0.79 = 3.16" in steps["As"].substituted
        assert "= 189600" in steps["T"].substituted
        assert "4.6471" in steps["a"].substituted
        assert "5.4671" in steps["c"].substituted
        assert "\\mathbf{239.8}" in steps["Mn"].substituted
        assert "k-ft" in steps["Mn"].substituted

    def test_checks_annotated(self, imperial_steps):
        steps = {s.key: s for s in imperial_steps}
        assert steps["epsilon_s"].passed is True
        assert steps["epsilon_s"].note == "OK: Steel Yields"
        assert steps["As_min"].passed is True
        assert steps["a"].passed is None

    def test_non_yielding_annotation(self):
        steps = build_equation_steps(analyze(IMPERIAL_DEFAULTS.with_changes(num_bars=12), UnitSystem.IMPERIAL))
        strain = next(s for s in steps if s.key == "epsilon_s")
        assert strain.passed is False
        assert "NOT" in strain.note
        assert "\\varepsilon_s E_s" in strain.substituted

    def test_min_steel_coefficients_follow_unit_system(self, imperial_steps):
        si_steps = build_equation_steps(analyze(SI_DEFAULTS, UnitSystem.SI))
        imp_min = imperial_steps[-1].symbolic
        si_min = si_steps[-1].symbolic
        assert "{3\\sqrt{f'_c}}" in imp_min and "{200}" in imp_min
        assert "{0.25\\sqrt{f'_c}}" in si_min and "{1.4}" in si_min

    def test_latex_and_dict(self, imperial_steps):
        step = imperial_steps[0]
        assert step.latex.startswith("A_s = n")
        assert step.to_dict()["latex"] == step.latex


def test_tex_unit_handles_squared_labels():
    assert tex_unit("in²") == "\\;\\text{in}^2"
    assert tex_unit("kN-m") == "\\;\\text{kN-m}"
