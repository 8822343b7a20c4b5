from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from src.models.units import UnitLabels, UnitSystem


@dataclass
class TraceCheck:
    code_ref: str
    formula_id: str
    inputs: dict[str, float]
    value: float
    units: str
    status: str
    note: str = ""


@dataclass
class ResultBase:
    status: str
    status_code: str
    trace: list[TraceCheck] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def keys(self):
        return self.to_dict().keys()

    def items(self):
        return self.to_dict().items()

    def values(self):
        return self.to_dict().values()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        return len(self.to_dict())


@dataclass
class AnalysisResult(ResultBase):
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    units: UnitLabels | None = None
    # Echoed inputs
    fc_prime: float = 0.0
    fy: float = 0.0
    Es: float = 0.0
    beta1: float = 0.0
    epsilon_cu: float = 0.0
    b: float = 0.0
    h: float = 0.0
    d: float = 0.0
    num_bars: int = 0
    bar_area: float = 0.0
    # Derived
    As: float = 0.0
    T: float = 0.0
    a: float = 0.0
    c: float = 0.0
    epsilon_y: float = 0.0
    epsilon_s: float = 0.0
    yields: bool = False
    fs: float = 0.0
    moment_arm: float = 0.0
    Mn: float = 0.0
    rho: float = 0.0
    As_min_sqrt_term: float = 0.0
    As_min_flat_term: float = 0.0
    As_min: float = 0.0
    As_check: bool = False
    # Display conversions
    T_display: float = 0.0
    Mn_precise: float = 0.0
    Mn_display: float = 0.0

    @property
    def steel_level(self) -> float:
        """Height of the tension steel above the bottom fiber."""
        return self.h - self.d

    def to_dict(self) -> dict[str, Any]:
        return {
            "unit_system": self.unit_system.value,
            "units": self.units.to_dict() if self.units else {},
            "fc_prime": self.fc_prime,
            "fy": self.fy,
            "Es": self.Es,
            "beta1": self.beta1,
            "epsilon_cu": self.epsilon_cu,
            "b": self.b,
            "h": self.h,
            "d": self.d,
            "num_bars": self.num_bars,
            "bar_area": self.bar_area,
            "As": self.As,
            "T": self.T,
            "a": self.a,
            "c": self.c,
            "epsilon_y": self.epsilon_y,
            "epsilon_s": self.epsilon_s,
            "yields": self.yields,
            "fs": self.fs,
            "moment_arm": self.moment_arm,
            "Mn": self.Mn,
            "rho": self.rho,
            "As_min_sqrt_term": self.As_min_sqrt_term,
            "As_min_flat_term": self.As_min_flat_term,
            "As_min": self.As_min,
            "As_check": self.As_check,
            "T_display": self.T_display,
            "Mn_precise": self.Mn_precise,
            "Mn_display": self.Mn_display,
            "status": self.status,
            "status_code": self.status_code,
            "trace": [t.__dict__ for t in self.trace],
        }
