from __future__ import annotations

import logging
import math

from src.models.aci_constants import (
    MIN_AS_FLAT_COEFF_MPA,
    MIN_AS_FLAT_COEFF_PSI,
    MIN_AS_SQRT_COEFF_MPA,
    MIN_AS_SQRT_COEFF_PSI,
    WHITNEY_COEFF,
)
from src.models.result_types import AnalysisResult, TraceCheck
from src.models.section_inputs import SectionInputs
from src.models.units import (
    UnitSystem,
    labels_for,
    to_display_force,
    to_display_moment,
    to_precise_moment,
)
from src.models.validation import (
    InvalidInput,
    check_compression_capacity,
    check_finite_results,
    check_neutral_axis,
    validate_section_inputs,
)

logger = logging.getLogger(__name__)


def _min_steel_coefficients(unit_system: UnitSystem) -> tuple[float, float]:
    if unit_system is UnitSystem.IMPERIAL:
        return MIN_AS_SQRT_COEFF_PSI, MIN_AS_FLAT_COEFF_PSI
    return MIN_AS_SQRT_COEFF_MPA, MIN_AS_FLAT_COEFF_MPA


def _compute_As_min_terms(fc: float, fy: float, b: float, d: float,
                          unit_system: UnitSystem) -> tuple[float, float]:
    """Both candidate terms of ACI 318 Eq 9.6.1.2; the larger one governs."""
    sqrt_coeff, flat_coeff = _min_steel_coefficients(unit_system)
    sqrt_term = (sqrt_coeff * math.sqrt(fc) / fy) * b * d
    flat_term = (flat_coeff / fy) * b * d
    return sqrt_term, flat_term


def analyze(inputs: SectionInputs, unit_system: UnitSystem) -> AnalysisResult:
    """
    Nominal moment strength of a singly reinforced rectangular section.

    Steel is first assumed to yield; a and c come from that assumption and
    are kept even when the strain check shows the steel does not yield, in
    which case only fs is reduced to epsilon_s * Es.

    Args:
        inputs: Section, material and reinforcement values in consistent units.
        unit_system: Selects the As,min coefficients and display labels.

    Returns:
        AnalysisResult with every derived quantity.

    Raises:
        InvalidInput: non-positive magnitudes, non-integer bar count, d > h,
            a degenerate neutral axis, or results that overflow to inf/nan.
    """
    unit_system = UnitSystem(unit_system)
    errors = validate_section_inputs(inputs)
    if errors:
        logger.warning("Rejected section inputs: %s", "; ".join(e.message for e in errors))
        raise InvalidInput(errors)

    fc = float(inputs.fc_prime)
    fy = float(inputs.fy)
    Es = float(inputs.Es)
    beta1 = float(inputs.beta1)
    epsilon_cu = float(inputs.epsilon_cu)
    b = float(inputs.b)
    h = float(inputs.h)
    d = float(inputs.d)
    num_bars = int(inputs.num_bars)
    bar_area = float(inputs.bar_area)

    logger.info(
        "Section analysis (%s): fc=%.4g fy=%.4g b=%.4g d=%.4g bars=%d x %.4g",
        unit_system.value, fc, fy, b, d, num_bars, bar_area,
    )
    labels = labels_for(unit_system)
    trace: list[TraceCheck] = []

    # Step 1-2: steel area and tension force with fs = fy
    As = num_bars * bar_area
    T = As * fy

    # Step 3: C = T  ->  0.85 fc b a = As fy
    capacity_error = check_compression_capacity(fc, b)
    if capacity_error is not None:
        logger.warning(capacity_error.message)
        raise InvalidInput([capacity_error])
    a = (As * fy) / (WHITNEY_COEFF * fc * b)

    # Step 4
    c = a / beta1
    axis_error = check_neutral_axis(c)
    if axis_error is not None:
        logger.warning(axis_error.message)
        raise InvalidInput([axis_error])
    logger.debug("As=%.5g T=%.5g a=%.5g c=%.5g", As, T, a, c)

    trace.append(
        TraceCheck(
            code_ref="ACI 318 Section 22.2.2",
            formula_id="stress_block_depth",
            inputs={"As": As, "fy": fy, "fc": fc, "b": b},
            value=a,
            units=labels.length,
            status="ok",
        )
    )

    # Step 5: strain compatibility
    epsilon_y = fy / Es
    epsilon_s = epsilon_cu * (d - c) / c

    # Step 6
    yields = epsilon_s >= epsilon_y
    if yields:
        fs = fy
    else:
        fs = epsilon_s * Es
        logger.warning(
            "Tension steel does not yield: epsilon_s=%.5f < epsilon_y=%.5f", epsilon_s, epsilon_y
        )

    trace.append(
        TraceCheck(
            code_ref="ACI 318 Section 22.2.1",
            formula_id="steel_yield_check",
            inputs={"epsilon_s": epsilon_s, "epsilon_y": epsilon_y},
            value=fs,
            units=labels.stress,
            status="ok" if yields else "warning",
            note="" if yields else "Steel not yielding; a and c keep the yielding assumption.",
        )
    )

    # Step 7
    moment_arm = d - a / 2
    Mn = As * fs * moment_arm

    # Step 8-9
    sqrt_term, flat_term = _compute_As_min_terms(fc, fy, b, d, unit_system)
    As_min = max(sqrt_term, flat_term)
    As_check = As >= As_min

    section_area = b * d
    rho = As / section_area if section_area > 0 else math.inf

    overflow = check_finite_results({
        "epsilon_y": epsilon_y,
        "epsilon_s": epsilon_s,
        "fs": fs,
        "Mn": Mn,
        "As_min": As_min,
        "rho": rho,
    })
    if overflow:
        logger.warning("Non-finite results: %s", "; ".join(e.message for e in overflow))
        raise InvalidInput(overflow)

    trace.append(
        TraceCheck(
            code_ref="ACI 318 Eq 9.6.1.2",
            formula_id="As_min",
            inputs={"fc": fc, "fy": fy, "b": b, "d": d, "sqrt_term": sqrt_term, "flat_term": flat_term},
            value=As_min,
            units=labels.area,
            status="ok" if As_check else "warning",
        )
    )

    warnings: list[str] = []
    if not yields:
        warnings.append("Warning: Steel Does Not Yield (epsilon_s < epsilon_y)")
    if not As_check:
        warnings.append("Warning: As < As,min")
        logger.warning("Minimum steel not satisfied: As=%.5g < As_min=%.5g", As, As_min)
    if c >= d:
        warnings.append("Warning: Neutral Axis At or Below Tension Steel (c >= d)")
        logger.warning("Neutral axis below steel level: c=%.5g >= d=%.5g", c, d)

    status = " | ".join(warnings) if warnings else "OK"
    status_code = "warning" if warnings else "ok"

    return AnalysisResult(
        status=status,
        status_code=status_code,
        trace=trace,
        unit_system=unit_system,
        units=labels,
        fc_prime=fc,
        fy=fy,
        Es=Es,
        beta1=beta1,
        epsilon_cu=epsilon_cu,
        b=b,
        h=h,
        d=d,
        num_bars=num_bars,
        bar_area=bar_area,
        As=As,
        T=T,
        a=a,
        c=c,
        epsilon_y=epsilon_y,
        epsilon_s=epsilon_s,
        yields=yields,
        fs=fs,
        moment_arm=moment_arm,
        Mn=Mn,
        rho=rho,
        As_min_sqrt_term=sqrt_term,
        As_min_flat_term=flat_term,
        As_min=As_min,
        As_check=As_check,
        T_display=to_display_force(T, unit_system),
        Mn_precise=to_precise_moment(Mn, unit_system),
        Mn_display=to_display_moment(Mn, unit_system),
    )
