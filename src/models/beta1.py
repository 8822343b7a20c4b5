from __future__ import annotations

from src.models.aci_constants import (
    BETA1_HIGH,
    BETA1_LOW,
    BETA1_STEP,
    FC_BETA1_LOWER_MPA,
    FC_BETA1_LOWER_PSI,
    FC_BETA1_STEP_MPA,
    FC_BETA1_STEP_PSI,
    FC_BETA1_UPPER_MPA,
    FC_BETA1_UPPER_PSI,
)
from src.models.units import UnitSystem


def beta1_for_fc(fc_prime: float, unit_system: UnitSystem) -> float:
    """
    Stress block factor beta1 per ACI 318 Table 22.2.2.4.3.

    Args:
        fc_prime: Concrete compressive strength (psi or MPa).
        unit_system: Unit system of ``fc_prime``.
    """
    if UnitSystem(unit_system) is UnitSystem.IMPERIAL:
        upper, lower, step = FC_BETA1_UPPER_PSI, FC_BETA1_LOWER_PSI, FC_BETA1_STEP_PSI
    else:
        upper, lower, step = FC_BETA1_UPPER_MPA, FC_BETA1_LOWER_MPA, FC_BETA1_STEP_MPA

    if fc_prime <= upper:
        return BETA1_HIGH
    elif fc_prime < lower:
        return max(BETA1_LOW, BETA1_HIGH - BETA1_STEP * (fc_prime - upper) / step)
    else:
        return BETA1_LOW
