from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any

from src.models.aci_constants import EPSILON_CU
from src.models.units import UnitSystem


@dataclass(frozen=True)
class SectionInputs:
    fc_prime: float
    fy: float
    Es: float
    beta1: float
    epsilon_cu: float
    b: float
    h: float
    d: float
    num_bars: int
    bar_area: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def with_changes(self, **kwargs: Any) -> SectionInputs:
        return replace(self, **kwargs)


# 4 No. 8 bars, fc' <= 4000 psi
IMPERIAL_DEFAULTS = SectionInputs(
    fc_prime=4000.0,
    fy=60000.0,
    Es=29e6,
    beta1=0.85,
    epsilon_cu=EPSILON_CU,
    b=12.0,
    h=20.0,
    d=17.5,
    num_bars=4,
    bar_area=0.79,
)

# 3 No. 25 bars
SI_DEFAULTS = SectionInputs(
    fc_prime=20.0,
    fy=420.0,
    Es=200000.0,
    beta1=0.85,
    epsilon_cu=EPSILON_CU,
    b=250.0,
    h=565.0,
    d=500.0,
    num_bars=3,
    bar_area=510.0,
)

_PRESETS = {
    UnitSystem.IMPERIAL: IMPERIAL_DEFAULTS,
    UnitSystem.SI: SI_DEFAULTS,
}


def default_inputs(unit_system: UnitSystem) -> SectionInputs:
    """Preset inputs loaded when the user switches to ``unit_system``."""
    return _PRESETS[UnitSystem(unit_system)]
