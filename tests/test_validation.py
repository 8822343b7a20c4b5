import math

import pytest

from src.models.section_inputs import IMPERIAL_DEFAULTS
from src.models.validation import (
    InputConstraint,
    InvalidInput,
    check_compression_capacity,
    check_finite_results,
    check_neutral_axis,
    validate_section_inputs,
)


class TestValidateSectionInputs:
    def test_valid_preset(self):
        assert validate_section_inputs(IMPERIAL_DEFAULTS) == []

    @pytest.mark.parametrize(
        "field", ["fc_prime", "fy", "Es", "beta1", "epsilon_cu", "b", "h", "d", "bar_area"]
    )
    def test_zero_magnitude_rejected(self, field):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(**{field: 0.0}))
        assert [e.field for e in errors] == [field]
        assert errors[0].constraint is InputConstraint.NON_POSITIVE

    def test_negative_and_nan_rejected(self):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(fy=-1.0, Es=math.nan))
        assert {e.field for e in errors} == {"fy", "Es"}

    def test_infinite_rejected(self):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(b=math.inf))
        assert errors[0].field == "b"

    @pytest.mark.parametrize("num_bars", [0, -2, 1.5, True, "4"])
    def test_bar_count_must_be_positive_integer(self, num_bars):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(num_bars=num_bars))
        assert len(errors) == 1
        assert errors[0].constraint is InputConstraint.NOT_INTEGER

    def test_d_equal_to_h_allowed(self):
        assert validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(d=20.0)) == []

    def test_d_greater_than_h(self):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(d=20.5))
        assert errors[0].constraint is InputConstraint.DEPTH_EXCEEDS_HEIGHT

    def test_multiple_errors_collected(self):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(fc_prime=0.0, b=-1.0, num_bars=0))
        assert len(errors) == 3


class TestNeutralAxis:
    def test_positive_finite_ok(self):
        assert check_neutral_axis(5.47) is None

    @pytest.mark.parametrize("c", [0.0, -1.0, math.inf, math.nan])
    def test_degenerate_values(self, c):
        err = check_neutral_axis(c)
        assert err is not None
        assert err.constraint is InputConstraint.DEGENERATE_NEUTRAL_AXIS


class TestCompressionCapacity:
    def test_normal_section_ok(self):
        assert check_compression_capacity(4000.0, 12.0) is None

    @pytest.mark.parametrize("fc, b", [(1e-200, 1e-200), (1e200, 1e200)])
    def test_underflow_or_overflow(self, fc, b):
        err = check_compression_capacity(fc, b)
        assert err is not None
        assert err.constraint is InputConstraint.DEGENERATE_NEUTRAL_AXIS
        assert err.field == "c"


class TestFiniteResults:
    def test_all_finite(self):
        assert check_finite_results({"Mn": 2.88e6, "As_min": 0.7}) == []

    def test_reports_each_non_finite_value(self):
        errors = check_finite_results({"Mn": math.inf, "As_min": 0.7, "rho": math.nan})
        assert [e.field for e in errors] == ["Mn", "rho"]
        assert all(e.constraint is InputConstraint.NON_FINITE_RESULT for e in errors)


class TestInvalidInput:
    def test_message_joins_errors(self):
        errors = validate_section_inputs(IMPERIAL_DEFAULTS.with_changes(fc_prime=0.0, b=0.0))
        exc = InvalidInput(errors)
        assert "fc_prime" in str(exc)
        assert " | " in str(exc)
        assert exc.constraint is InputConstraint.NON_POSITIVE
        assert exc.field == "fc_prime"

    def test_requires_errors(self):
        with pytest.raises(ValueError, match="at least one"):
            InvalidInput([])
