"""Binary mixture thermodynamics.

This module provides JIT-compilable functions for:
- One-parameter Margules activity coefficients
- Modified Raoult's law partial and bubble pressures
- Ideal and regular-solution mixing energies
- P-x-y curves over a liquid composition grid

All functions are pure; nothing is cached between calls.
"""

import math
from typing import Tuple

import jax
import jax.numpy as jnp

from jax_thermolab.core.thermodynamics import component_vapor_pressure
from jax_thermolab.core.types import (
    ComponentData,
    MixtureCurve,
    MixturePoint,
    SolutionModel,
    VLECurve,
)


R_GAS = 8.314  # [J/mol/K]
KELVIN_OFFSET = 273.15

X_MIN = 1e-4  # Composition clamp away from pure components
X_MAX = 1.0 - X_MIN

STABILITY_THRESHOLD = 2.0  # Margules A above which the solution splits

DEFAULT_STEP = 0.05
GRID_END = 1.001  # Scan bound; admits x = 1 despite accumulated round-off


# =============================================================================
# Activity Coefficients
# =============================================================================


def margules_activity_coefficients(
    x_a: jnp.ndarray, A: jnp.ndarray
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """One-parameter (two-suffix) Margules activity coefficients.

    ln(gamma_a) = A x_b^2,  ln(gamma_b) = A x_a^2

    Args:
        x_a: Liquid mole fraction of component A.
        A: Margules interaction coefficient (dimensionless).

    Returns:
        Tuple of (gamma_a, gamma_b).
    """
    x_b = 1.0 - x_a
    return jnp.exp(A * x_b * x_b), jnp.exp(A * x_a * x_a)


def ideal_activity_coefficients(x_a: jnp.ndarray) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """Return ideal activity coefficients (gamma = 1)."""
    return jnp.ones_like(x_a), jnp.ones_like(x_a)


def activity_coefficients(
    x_a: jnp.ndarray, A: jnp.ndarray, model: SolutionModel
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """Activity coefficients for the selected solution model."""
    if model is SolutionModel.IDEAL:
        return ideal_activity_coefficients(x_a)
    return margules_activity_coefficients(x_a, A)


# =============================================================================
# Vapor-Liquid Equilibrium
# =============================================================================


def bubble_pressure(
    x_a: jnp.ndarray,
    Psat_a: jnp.ndarray,
    Psat_b: jnp.ndarray,
    gamma_a: jnp.ndarray = 1.0,
    gamma_b: jnp.ndarray = 1.0,
) -> Tuple[jnp.ndarray, jnp.ndarray, jnp.ndarray]:
    """Modified Raoult's law: P_i = x_i gamma_i Psat_i.

    Returns:
        Tuple of (P_a, P_b, P_total) in the units of Psat.
    """
    P_a = x_a * gamma_a * Psat_a
    P_b = (1.0 - x_a) * gamma_b * Psat_b
    return P_a, P_b, P_a + P_b


def vapor_fraction(P_a: jnp.ndarray, P_total: jnp.ndarray) -> jnp.ndarray:
    """Vapor mole fraction y_a = P_a / P_total, 0 when P_total is zero."""
    positive = P_total > 0
    return jnp.where(positive, P_a / jnp.where(positive, P_total, 1.0), 0.0)


def dew_pressure(
    y_a: jnp.ndarray, Psat_a: jnp.ndarray, Psat_b: jnp.ndarray
) -> jnp.ndarray:
    """Ideal dew pressure: 1 / P = y_a / Psat_a + y_b / Psat_b."""
    return 1.0 / (y_a / Psat_a + (1.0 - y_a) / Psat_b)


# =============================================================================
# Mixing Energies
# =============================================================================


def ideal_entropy_of_mixing(x_a: jnp.ndarray) -> jnp.ndarray:
    """Ideal entropy of mixing [J/mol/K]: -R sum(x_i ln x_i)."""
    x_b = 1.0 - x_a
    return -R_GAS * (x_a * jnp.log(x_a) + x_b * jnp.log(x_b))


def excess_enthalpy(
    x_a: jnp.ndarray, T: jnp.ndarray, A: jnp.ndarray, model: SolutionModel
) -> jnp.ndarray:
    """Regular-solution excess enthalpy [J/mol]: A R T x_a x_b (0 if ideal)."""
    if model is SolutionModel.IDEAL:
        return jnp.zeros_like(x_a * T)
    return A * R_GAS * T * x_a * (1.0 - x_a)


def is_unstable(A: jnp.ndarray, model: SolutionModel) -> jnp.ndarray:
    """Phase-split heuristic: regular solution with A above the threshold.

    A strict inequality, so A == 2.0 is still stable. This is a spinodal
    proxy, not a common-tangent analysis, and does not depend on
    composition.
    """
    if model is SolutionModel.IDEAL:
        return jnp.array(False)
    return jnp.asarray(A) > STABILITY_THRESHOLD


# =============================================================================
# Composition Curves
# =============================================================================


def composition_grid(step: float = DEFAULT_STEP) -> jnp.ndarray:
    """Liquid composition grid 0, step, 2*step, ... up to 1.

    The spacing is exactly ``step``; the last point is capped at 1. A step
    larger than 1 yields the single point x = 0.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    if step <= 0.0:
        raise ValueError(f"Composition step must be positive, got {step}")
    n_points = math.floor(GRID_END / step) + 1
    return jnp.minimum(jnp.arange(n_points) * step, 1.0)


def mixture_point(
    x_a: jnp.ndarray,
    T: jnp.ndarray,
    Psat_a: jnp.ndarray,
    Psat_b: jnp.ndarray,
    A: jnp.ndarray,
    model: SolutionModel,
) -> MixturePoint:
    """Mixture properties at one liquid composition.

    Args:
        x_a: Liquid mole fraction of A (clamped away from 0 and 1).
        T: Temperature [K].
        Psat_a: Saturation pressure of A [kPa].
        Psat_b: Saturation pressure of B [kPa].
        A: Margules interaction coefficient.
        model: Solution model.

    Returns:
        MixturePoint.
    """
    x_a = jnp.clip(x_a, X_MIN, X_MAX)
    gamma_a, gamma_b = activity_coefficients(x_a, A, model)
    P_a, P_b, P_total = bubble_pressure(x_a, Psat_a, Psat_b, gamma_a, gamma_b)

    dS = ideal_entropy_of_mixing(x_a)
    dH = excess_enthalpy(x_a, T, A, model)

    return MixturePoint(
        x_a=x_a,
        y_a=vapor_fraction(P_a, P_total),
        P_a=P_a,
        P_b=P_b,
        P_total=P_total,
        gamma_a=gamma_a,
        gamma_b=gamma_b,
        dH_mix=dH,
        dS_mix=dS,
        dG_mix=dH - T * dS,
    )


def mixture_curve(
    component_a: ComponentData,
    component_b: ComponentData,
    T_celsius: jnp.ndarray,
    margules_A: jnp.ndarray,
    model: SolutionModel = SolutionModel.REGULAR,
    step: float = DEFAULT_STEP,
) -> MixtureCurve:
    """P-x-y and mixing curves of a binary at fixed temperature.

    Args:
        component_a: First component (the one x_a and y_a refer to).
        component_b: Second component.
        T_celsius: Temperature [°C].
        margules_A: Margules interaction coefficient.
        model: IDEAL (gamma = 1, no excess enthalpy) or REGULAR.
        step: Composition grid spacing.

    Returns:
        MixtureCurve ordered by increasing x_a, plus the stability flag.
    """
    T_celsius = jnp.asarray(T_celsius, dtype=float)
    T = T_celsius + KELVIN_OFFSET
    Psat_a = component_vapor_pressure(component_a, T_celsius)
    Psat_b = component_vapor_pressure(component_b, T_celsius)

    points = jax.vmap(
        lambda x: mixture_point(x, T, Psat_a, Psat_b, margules_A, model)
    )(composition_grid(step))

    return MixtureCurve(
        points=points,
        T=T,
        Psat_a=Psat_a,
        Psat_b=Psat_b,
        unstable=is_unstable(margules_A, model),
    )


def ideal_vle_curve(
    component_a: ComponentData,
    component_b: ComponentData,
    T_celsius: jnp.ndarray,
    step: float = DEFAULT_STEP,
) -> VLECurve:
    """Raoult's-law P-x-y curve on the unclamped composition grid.

    Args:
        component_a: First component.
        component_b: Second component.
        T_celsius: Temperature [°C].
        step: Composition grid spacing.

    Returns:
        VLECurve with bubble pressure and vapor composition.
    """
    T_celsius = jnp.asarray(T_celsius, dtype=float)
    Psat_a = component_vapor_pressure(component_a, T_celsius)
    Psat_b = component_vapor_pressure(component_b, T_celsius)

    x_a = composition_grid(step)
    P_a, _, P_total = bubble_pressure(x_a, Psat_a, Psat_b)

    return VLECurve(
        x_a=x_a,
        y_a=vapor_fraction(P_a, P_total),
        P=P_total,
        T=T_celsius + KELVIN_OFFSET,
    )
