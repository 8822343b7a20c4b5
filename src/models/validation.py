from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import TYPE_CHECKING

from src.models.aci_constants import WHITNEY_COEFF

if TYPE_CHECKING:
    from src.models.section_inputs import SectionInputs


POSITIVE_FIELDS = ("fc_prime", "fy", "Es", "beta1", "epsilon_cu", "b", "h", "d", "bar_area")


class InputConstraint(str, Enum):
    NON_POSITIVE = "non_positive"
    NOT_INTEGER = "not_integer"
    DEPTH_EXCEEDS_HEIGHT = "depth_exceeds_height"
    DEGENERATE_NEUTRAL_AXIS = "degenerate_neutral_axis"
    NON_FINITE_RESULT = "non_finite_result"


@dataclass(frozen=True)
class InputError:
    constraint: InputConstraint
    field: str
    message: str


class InvalidInput(ValueError):
    """Raised when section inputs cannot produce a valid analysis."""

    def __init__(self, errors: list[InputError]) -> None:
        if not errors:
            raise ValueError("InvalidInput requires at least one error")
        self.errors = list(errors)
        super().__init__(" | ".join(e.message for e in self.errors))

    @property
    def constraint(self) -> InputConstraint:
        return self.errors[0].constraint

    @property
    def field(self) -> str:
        return self.errors[0].field


def _is_positive_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def _is_positive_integer(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if not math.isfinite(value) or value <= 0:
        return False
    return float(value).is_integer()


def validate_section_inputs(inputs: SectionInputs) -> list[InputError]:
    """Return input validation errors. Empty list means valid."""
    errors: list[InputError] = []
    for name in POSITIVE_FIELDS:
        value = getattr(inputs, name)
        if not _is_positive_number(value):
            errors.append(
                InputError(
                    InputConstraint.NON_POSITIVE,
                    name,
                    f"{name} must be a positive finite number, got {value!r}.",
                )
            )

    if not _is_positive_integer(inputs.num_bars):
        errors.append(
            InputError(
                InputConstraint.NOT_INTEGER,
                "num_bars",
                f"num_bars must be a positive integer, got {inputs.num_bars!r}.",
            )
        )

    if _is_positive_number(inputs.d) and _is_positive_number(inputs.h) and inputs.d > inputs.h:
        errors.append(
            InputError(
                InputConstraint.DEPTH_EXCEEDS_HEIGHT,
                "d",
                f"Effective depth d ({inputs.d}) must not exceed total depth h ({inputs.h}).",
            )
        )
    return errors


def check_neutral_axis(c: float) -> InputError | None:
    """Neutral axis depth must be strictly positive and finite."""
    if math.isfinite(c) and c > 0:
        return None
    return InputError(
        InputConstraint.DEGENERATE_NEUTRAL_AXIS,
        "c",
        f"Degenerate neutral axis depth c={c!r}; check fc', b and reinforcement.",
    )


def check_compression_capacity(fc: float, b: float) -> InputError | None:
    """The Whitney block force per unit depth, 0.85 fc b, must stay positive and finite."""
    capacity = WHITNEY_COEFF * fc * b
    if math.isfinite(capacity) and capacity > 0:
        return None
    return InputError(
        InputConstraint.DEGENERATE_NEUTRAL_AXIS,
        "c",
        f"Degenerate neutral axis: 0.85 * fc' * b = {capacity!r} for fc'={fc!r}, b={b!r}.",
    )


def check_finite_results(values: dict[str, float]) -> list[InputError]:
    """Derived quantities that overflowed to inf or nan."""
    return [
        InputError(
            InputConstraint.NON_FINITE_RESULT,
            name,
            f"{name} is not finite ({value!r}); input magnitudes are out of range.",
        )
        for name, value in values.items()
        if not math.isfinite(value)
    ]
