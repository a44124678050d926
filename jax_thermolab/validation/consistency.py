"""Physical consistency checks for the property engine.

Each check returns a :class:`CheckResult` rather than raising, so a
runner can report every failure in one pass:
- Saturation table monotonicity and agreement with steam tables
- Ideal-gas reference datum
- Antoine vapor pressure at normal boiling points
- Binary mixture identities (pure-pair, ideal enthalpy, y bounds)
- Water quality mode vs saturated liquid
"""

import logging
from dataclasses import dataclass, field
from typing import List

import jax.numpy as jnp
import numpy as np

from jax_thermolab.core.components import COMPONENT_DB, get_component
from jax_thermolab.core.mixture import mixture_curve
from jax_thermolab.core.saturation import STEAM_SAT_TABLE, saturation_lookup
from jax_thermolab.core.thermodynamics import (
    P_REF,
    T_REF,
    component_vapor_pressure,
    ideal_gas_state,
)
from jax_thermolab.core.types import SolutionModel
from jax_thermolab.core.water import KELVIN_OFFSET, water_state
from jax_thermolab.validation.reference_points import (
    ATMOSPHERIC_PRESSURE_KPA,
    NORMAL_BOILING_POINTS,
    STEAM_REFERENCE,
)

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of one consistency check.

    Attributes:
        name: Check identifier.
        passed: True if every assertion of the check held.
        max_error: Largest deviation observed (units depend on the check).
        details: Human-readable notes on each violation.
    """

    name: str
    passed: bool
    max_error: float
    details: List[str] = field(default_factory=list)


def _result(name: str, errors: List[float], tolerance: float, details: List[str]) -> CheckResult:
    max_error = float(max(errors)) if errors else 0.0
    passed = max_error <= tolerance and not details
    if passed:
        logger.info(f"{name}: PASS (max error {max_error:.3g})")
    else:
        logger.warning(f"{name}: FAIL (max error {max_error:.3g}) {details}")
    return CheckResult(name=name, passed=passed, max_error=max_error, details=details)


def check_saturation_monotonic() -> CheckResult:
    """Saturation T and P columns must be strictly increasing."""
    details = []
    for column in ("T", "P"):
        diffs = np.diff([getattr(row, column) for row in STEAM_SAT_TABLE])
        if not np.all(diffs > 0):
            details.append(f"column {column} is not strictly increasing")
    return _result("saturation_monotonic", [], 0.0, details)


def check_saturation_reference(tolerance: float = 0.02) -> CheckResult:
    """Interpolated saturation pressure and enthalpies vs steam tables.

    Args:
        tolerance: Maximum relative error.
    """
    errors = []
    details = []
    for point in STEAM_REFERENCE:
        sat = saturation_lookup("T", point.temperature_c)
        for label, calc, ref in (
            ("P", sat.P, point.pressure_kpa),
            ("hf", sat.hf, point.hf),
            ("hg", sat.hg, point.hg),
        ):
            rel = abs(float(calc) - ref) / ref
            errors.append(rel)
            if rel > tolerance:
                details.append(f"{label} at {point.temperature_c} C off by {rel:.2%}")
    return _result("saturation_reference", errors, tolerance, details)


def check_ideal_gas_datum(tolerance: float = 1e-5) -> CheckResult:
    """u, h and s vanish at the reference temperature and pressure."""
    state = ideal_gas_state(P_REF, T_REF)
    errors = [abs(float(state.u)), abs(float(state.h)), abs(float(state.s))]
    return _result("ideal_gas_datum", errors, tolerance, [])


def check_antoine_boiling_points() -> CheckResult:
    """Antoine pressure at each normal boiling point is ~101.325 kPa."""
    errors = []
    details = []
    for name, point in NORMAL_BOILING_POINTS.items():
        P = float(component_vapor_pressure(get_component(name), point.temperature_c))
        rel = abs(P - ATMOSPHERIC_PRESSURE_KPA) / ATMOSPHERIC_PRESSURE_KPA
        errors.append(rel)
        if rel * 100.0 > point.uncertainty_pct:
            details.append(f"{name}: {P:.2f} kPa at {point.temperature_c} C")
    return _result("antoine_boiling_points", errors, 0.02, details)


def check_mixture_identities(T_celsius: float = 60.0, tolerance: float = 1e-3) -> CheckResult:
    """Binary-model identities over every component pair.

    - A pure pair (same species, A = 0) has P_total equal to Psat everywhere.
    - The ideal model has zero enthalpy of mixing.
    - Vapor composition stays in [0, 1].
    """
    errors = []
    details = []
    names = list(COMPONENT_DB)

    for name in names:
        component = get_component(name)
        curve = mixture_curve(component, component, T_celsius, 0.0)
        rel = np.max(np.abs(np.asarray(curve.points.P_total) / float(curve.Psat_a) - 1.0))
        errors.append(float(rel))
        if rel > tolerance:
            details.append(f"pure {name}: P_total deviates by {rel:.2e}")

    for a in names:
        for b in names:
            if a == b:
                continue
            curve = mixture_curve(
                get_component(a), get_component(b), T_celsius, 1.0, SolutionModel.IDEAL
            )
            dH = float(jnp.max(jnp.abs(curve.points.dH_mix)))
            errors.append(dH)
            y = np.asarray(curve.points.y_a)
            if np.any(y < 0.0) or np.any(y > 1.0):
                details.append(f"{a}/{b}: y_a outside [0, 1]")

    return _result("mixture_identities", errors, tolerance, details)


def check_quality_vs_saturated_liquid(tolerance: float = 1e-3) -> CheckResult:
    """x = 0 at P matches the saturated-liquid branch of the P,T resolver."""
    errors = []
    for point in STEAM_REFERENCE:
        sat = saturation_lookup("T", point.temperature_c)
        by_quality = water_state(P=sat.P, x=0.0)
        by_pt = water_state(P=sat.P, T=sat.T + KELVIN_OFFSET)
        for name in ("v", "h", "s"):
            ref = float(getattr(by_quality, name))
            errors.append(abs(float(getattr(by_pt, name)) - ref) / max(abs(ref), 1e-12))
    return _result("quality_vs_saturated_liquid", errors, tolerance, [])


ALL_CHECKS = (
    check_saturation_monotonic,
    check_saturation_reference,
    check_ideal_gas_datum,
    check_antoine_boiling_points,
    check_mixture_identities,
    check_quality_vs_saturated_liquid,
)


def run_all_checks() -> List[CheckResult]:
    """Run every consistency check in order."""
    return [check() for check in ALL_CHECKS]
