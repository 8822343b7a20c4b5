import pytest

from src.models.beta1 import beta1_for_fc
from src.models.units import UnitSystem


class TestBeta1:
    @pytest.mark.parametrize("fc", [2500, 4000])
    def test_imperial_low_fc(self, fc):
        assert beta1_for_fc(fc, UnitSystem.IMPERIAL) == 0.85

    def test_imperial_interpolated(self):
        assert beta1_for_fc(5000, UnitSystem.IMPERIAL) == pytest.approx(0.80)
        assert beta1_for_fc(6000, UnitSystem.IMPERIAL) == pytest.approx(0.75)

    def test_imperial_high_fc(self):
        assert beta1_for_fc(9000, UnitSystem.IMPERIAL) == 0.65

    def test_si_low_fc(self):
        assert beta1_for_fc(20, UnitSystem.SI) == 0.85

    def test_si_medium_fc(self):
        assert 0.65 < beta1_for_fc(40, UnitSystem.SI) < 0.85
        assert beta1_for_fc(35, UnitSystem.SI) == pytest.approx(0.80)

    def test_si_high_fc(self):
        assert beta1_for_fc(60, UnitSystem.SI) == 0.65
