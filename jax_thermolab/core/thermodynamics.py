"""Closed-form property relations.

This module provides JIT-compilable functions for:
- Antoine equation (pure-component vapor pressure)
- Pressure unit conversion for Antoine results
- Ideal-gas state with a fixed reference datum

All functions are pure and compatible with JAX transformations (jit, vmap, grad).
"""

import jax.numpy as jnp

from jax_thermolab.core.types import (
    AntoineParams,
    ComponentData,
    Phase,
    ThermoState,
    phase_array,
)


# =============================================================================
# Constants
# =============================================================================

R_AIR = 0.287  # [kJ/kg/K]
CP_AIR = 1.005  # [kJ/kg/K]
CV_AIR = 0.718  # [kJ/kg/K]
K_AIR = 1.4

T_REF = 298.15  # Reference temperature for u, h, s [K]
P_REF = 101.325  # Reference pressure for s [kPa]

MMHG_TO_KPA = 101.325 / 760.0

# Floors applied before division / logarithms
P_FLOOR = 1e-4  # [kPa]
LOG_FLOOR = 1e-3


# =============================================================================
# Antoine Equation
# =============================================================================


def antoine_psat(
    A: jnp.ndarray, B: jnp.ndarray, C: jnp.ndarray, T_celsius: jnp.ndarray
) -> jnp.ndarray:
    """Saturation pressure from the Antoine equation.

    log10(P_sat[mmHg]) = A - B / (T[°C] + C)

    The validity range of the coefficients is not enforced.

    Args:
        A: Antoine A coefficient.
        B: Antoine B coefficient.
        C: Antoine C coefficient.
        T_celsius: Temperature [°C].

    Returns:
        Saturation pressure [mmHg].
    """
    return jnp.power(10.0, A - B / (T_celsius + C))


def mmhg_to_kpa(p_mmhg: jnp.ndarray) -> jnp.ndarray:
    """Convert a pressure from mmHg to kPa."""
    return p_mmhg * MMHG_TO_KPA


def antoine_vapor_pressure(T_celsius: jnp.ndarray, params: AntoineParams) -> jnp.ndarray:
    """Saturation pressure [kPa] for a set of Antoine parameters."""
    return mmhg_to_kpa(antoine_psat(params.A, params.B, params.C, T_celsius))


def component_vapor_pressure(
    component: ComponentData, T_celsius: jnp.ndarray
) -> jnp.ndarray:
    """Saturation pressure [kPa] of a database component."""
    return antoine_vapor_pressure(T_celsius, component.antoine)


# =============================================================================
# Ideal Gas
# =============================================================================


def ideal_gas_state(
    P: jnp.ndarray,
    T: jnp.ndarray,
    R: float = R_AIR,
    Cp: float = CP_AIR,
) -> ThermoState:
    """State of an ideal gas with constant specific heats.

    u, h and s are measured from 298.15 K / 101.325 kPa:
        v = R T / P
        u = Cv (T - T_ref),  h = Cp (T - T_ref)
        s = Cp ln(T / T_ref) - R ln(P / P_ref)

    Pressure is floored before the division and both P and T are floored
    before the logarithms, so non-positive inputs never raise.

    Args:
        P: Pressure [kPa].
        T: Temperature [K].
        R: Specific gas constant [kJ/kg/K]. Defaults to dry air.
        Cp: Constant-pressure specific heat [kJ/kg/K]. Defaults to dry air.

    Returns:
        ThermoState with z = 1 and phase "Ideal Gas".
    """
    P = jnp.asarray(P, dtype=float)
    T = jnp.asarray(T, dtype=float)

    v = R * T / jnp.maximum(P, P_FLOOR)
    Cv = Cp - R
    u = Cv * (T - T_REF)
    h = Cp * (T - T_REF)
    s = Cp * jnp.log(jnp.maximum(T, LOG_FLOOR) / T_REF) - R * jnp.log(
        jnp.maximum(P, LOG_FLOOR) / P_REF
    )

    return ThermoState(
        P=P,
        T=T,
        v=v,
        u=u,
        h=h,
        s=s,
        z=jnp.ones_like(T),
        phase_code=phase_array(Phase.IDEAL_GAS),
    )
