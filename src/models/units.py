"""Unit systems and display conversions. Calculations run in the input units (lb/in or N/mm)."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from src.models.aci_constants import IN_PER_FT, LB_PER_KIP, N_PER_KN, NMM_PER_KNM


class UnitSystem(str, Enum):
    IMPERIAL = "Imperial"
    SI = "SI"


@dataclass(frozen=True)
class UnitLabels:
    length: str
    area: str
    force: str
    force_k: str
    stress: str
    moment: str
    moment_precise: str
    moment_display: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


IMPERIAL_LABELS = UnitLabels(
    length="in",
    area="in²",
    force="lb",
    force_k="kips",
    stress="psi",
    moment="lb-in",
    moment_precise="k-in",
    moment_display="k-ft",
)

SI_LABELS = UnitLabels(
    length="mm",
    area="mm²",
    force="N",
    force_k="kN",
    stress="MPa",
    moment="N-mm",
    moment_precise="N-mm",
    moment_display="kN-m",
)

_LABELS = {
    UnitSystem.IMPERIAL: IMPERIAL_LABELS,
    UnitSystem.SI: SI_LABELS,
}


def labels_for(unit_system: UnitSystem) -> UnitLabels:
    """Display labels for the given unit system."""
    return _LABELS[UnitSystem(unit_system)]


def lb_to_kip(val_lb: float) -> float:
    """Convert lb to kips."""
    return val_lb / LB_PER_KIP


def N_to_kN(val_N: float) -> float:
    """Convert N to kN."""
    return val_N / N_PER_KN


def lbin_to_kipin(val_lbin: float) -> float:
    """Convert lb-in to k-in."""
    return val_lbin / LB_PER_KIP


def lbin_to_kipft(val_lbin: float) -> float:
    """Convert lb-in to k-ft."""
    return val_lbin / (LB_PER_KIP * IN_PER_FT)


def Nmm_to_kNm(val_Nmm: float) -> float:
    """Convert N-mm to kN-m."""
    return val_Nmm / NMM_PER_KNM


def to_display_force(force: float, unit_system: UnitSystem) -> float:
    """Base force (lb or N) to kips or kN."""
    if UnitSystem(unit_system) is UnitSystem.IMPERIAL:
        return lb_to_kip(force)
    return N_to_kN(force)


def to_precise_moment(moment: float, unit_system: UnitSystem) -> float:
    """Base moment (lb-in or N-mm) to k-in (Imperial) or N-mm (SI)."""
    if UnitSystem(unit_system) is UnitSystem.IMPERIAL:
        return lbin_to_kipin(moment)
    return moment


def to_display_moment(moment: float, unit_system: UnitSystem) -> float:
    """Base moment (lb-in or N-mm) to k-ft or kN-m."""
    if UnitSystem(unit_system) is UnitSystem.IMPERIAL:
        return lbin_to_kipft(moment)
    return Nmm_to_kNm(moment)
