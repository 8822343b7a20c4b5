import dataclasses

import pytest

from src.models.aci_constants import EPSILON_CU
from src.models.section_inputs import IMPERIAL_DEFAULTS, SI_DEFAULTS, default_inputs
from src.models.units import UnitSystem


class TestPresets:
    def test_imperial_preset(self):
        p = default_inputs(UnitSystem.IMPERIAL)
        assert p is IMPERIAL_DEFAULTS
        assert (p.fc_prime, p.fy, p.Es) == (4000.0, 60000.0, 29e6)
        assert (p.b, p.h, p.d) == (12.0, 20.0, 17.5)
        assert (p.num_bars, p.bar_area) == (4, 0.79)
        assert (p.beta1, p.epsilon_cu) == (0.85, 0.003)

    def test_si_preset(self):
        p = default_inputs(UnitSystem.SI)
        assert p is SI_DEFAULTS
        assert (p.fc_prime, p.fy, p.Es) == (20.0, 420.0, 200000.0)
        assert (p.b, p.h, p.d) == (250.0, 565.0, 500.0)
        assert (p.num_bars, p.bar_area) == (3, 510.0)

    def test_presets_share_ultimate_concrete_strain(self):
        assert IMPERIAL_DEFAULTS.epsilon_cu == EPSILON_CU
        assert SI_DEFAULTS.epsilon_cu == EPSILON_CU

    def test_presets_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            IMPERIAL_DEFAULTS.b = 10.0

    def test_with_changes_returns_copy(self):
        changed = SI_DEFAULTS.with_changes(num_bars=4)
        assert changed.num_bars == 4
        assert SI_DEFAULTS.num_bars == 3

    def test_to_dict_keys(self):
        assert set(IMPERIAL_DEFAULTS.to_dict()) == {
            "fc_prime", "fy", "Es", "beta1", "epsilon_cu", "b", "h", "d", "num_bars", "bar_area",
        }
