"""Water/steam state resolver built on the saturation table.

Three input forms are accepted, each a small NamedTuple so the branch
taken is decided by the input type rather than by which optional
arguments happen to be set:

- :class:`QualityAtPressure` / :class:`QualityAtTemperature`: two-phase
  state blended from the saturated-liquid and saturated-vapor lines.
- :class:`PressureTemperature`: single-phase (or saturated-liquid) state
  classified against the saturation temperature at P.

The single-phase correlations are teaching approximations, not IAPWS:
superheated steam extrapolates linearly from the saturated-vapor line and
compressed liquid uses a constant specific heat.
"""

from typing import NamedTuple, Optional, Union

import jax.numpy as jnp

from jax_thermolab.core.eos import R_WATER
from jax_thermolab.core.saturation import saturation_lookup
from jax_thermolab.core.thermodynamics import LOG_FLOOR, P_FLOOR
from jax_thermolab.core.types import (
    Phase,
    SaturationProperties,
    ThermoState,
    phase_array,
)


KELVIN_OFFSET = 273.15

P_DEFAULT = 101.325  # [kPa]
T_DEFAULT = 373.15  # [K]

SATURATION_MARGIN = 0.1  # Band around T_sat treated as saturated [°C]

# Superheat slopes per °C above T_sat
SUPERHEAT_DU = 1.5  # [kJ/kg/°C]
SUPERHEAT_DH = 2.0  # [kJ/kg/°C]
SUPERHEAT_DS = 0.005  # [kJ/kg/K/°C]

CP_LIQUID = 4.18  # [kJ/kg/K]
V_LIQUID = 0.001  # [m^3/kg]


class QualityAtPressure(NamedTuple):
    """Two-phase water at pressure P [kPa] and quality x."""

    P: jnp.ndarray
    x: jnp.ndarray


class QualityAtTemperature(NamedTuple):
    """Two-phase water at temperature T [K] and quality x."""

    T: jnp.ndarray
    x: jnp.ndarray


class PressureTemperature(NamedTuple):
    """Water at pressure P [kPa] and temperature T [K]."""

    P: jnp.ndarray
    T: jnp.ndarray


WaterInput = Union[QualityAtPressure, QualityAtTemperature, PressureTemperature]


def _blend(
    sat: SaturationProperties, x: jnp.ndarray, phase: Phase
) -> ThermoState:
    """Linear blend of saturated-liquid and saturated-vapor properties."""
    v = sat.vf + x * (sat.vg - sat.vf)
    h = sat.hf + x * (sat.hg - sat.hf)
    s = sat.sf + x * (sat.sg - sat.sf)
    return ThermoState(
        P=sat.P,
        T=sat.T + KELVIN_OFFSET,
        v=v,
        u=h - sat.P * v,
        h=h,
        s=s,
        x=jnp.asarray(x, dtype=float),
        phase_code=phase_array(phase),
    )


def saturated_state(spec: Union[QualityAtPressure, QualityAtTemperature]) -> ThermoState:
    """Two-phase state at a given quality.

    Args:
        spec: Pressure or temperature plus quality.

    Returns:
        ThermoState on the saturation line with phase "Saturated Mixture".
    """
    if isinstance(spec, QualityAtPressure):
        sat = saturation_lookup("P", spec.P)
    else:
        sat = saturation_lookup("T", jnp.asarray(spec.T, dtype=float) - KELVIN_OFFSET)
    return _blend(sat, spec.x, Phase.SATURATED_MIXTURE)


def pressure_temperature_state(spec: PressureTemperature) -> ThermoState:
    """Single-phase state classified against T_sat(P).

    - T above T_sat by more than the margin: superheated vapor with
      v = R T / P and u, h, s extrapolated from the saturated-vapor line.
    - T below T_sat by more than the margin: compressed liquid with
      constant cp referenced to 0 °C.
    - Otherwise: saturated liquid (x = 0) at P.

    Quality is NaN for the single-phase branches.
    """
    P = jnp.asarray(spec.P, dtype=float)
    T = jnp.asarray(spec.T, dtype=float)

    sat = saturation_lookup("P", P)
    T_c = T - KELVIN_OFFSET
    superheat = T_c - sat.T

    is_superheated = superheat > SATURATION_MARGIN
    is_subcooled = superheat < -SATURATION_MARGIN
    is_saturated = jnp.logical_not(jnp.logical_or(is_superheated, is_subcooled))

    # Superheated vapor
    u_g = sat.hg - sat.P * sat.vg
    v_vap = R_WATER * T / jnp.maximum(P, P_FLOOR)
    u_vap = u_g + SUPERHEAT_DU * superheat
    h_vap = sat.hg + SUPERHEAT_DH * superheat
    s_vap = sat.sg + SUPERHEAT_DS * superheat

    # Compressed liquid
    u_liq = CP_LIQUID * T_c
    h_liq = u_liq + P * V_LIQUID
    s_liq = CP_LIQUID * jnp.log(jnp.maximum(T, LOG_FLOOR) / KELVIN_OFFSET)

    # Saturated liquid
    sat_liq = _blend(sat, jnp.zeros_like(P), Phase.SATURATED_LIQUID)

    def pick(vap, liq, saturated):
        return jnp.where(
            is_superheated, vap, jnp.where(is_subcooled, liq, saturated)
        )

    phase_code = pick(
        int(Phase.SUPERHEATED), int(Phase.COMPRESSED_LIQUID), int(Phase.SATURATED_LIQUID)
    ).astype(jnp.int32)

    return ThermoState(
        P=P,
        T=jnp.where(is_saturated, sat_liq.T, T),
        v=pick(v_vap, V_LIQUID, sat_liq.v),
        u=pick(u_vap, u_liq, sat_liq.u),
        h=pick(h_vap, h_liq, sat_liq.h),
        s=pick(s_vap, s_liq, sat_liq.s),
        x=jnp.where(is_saturated, 0.0, jnp.nan),
        phase_code=phase_code,
    )


def resolve_water_state(spec: WaterInput) -> ThermoState:
    """Resolve a water state from one of the typed input variants."""
    if isinstance(spec, (QualityAtPressure, QualityAtTemperature)):
        return saturated_state(spec)
    if isinstance(spec, PressureTemperature):
        return pressure_temperature_state(spec)
    raise TypeError(f"Unsupported water input: {type(spec).__name__}")


def water_input(
    P: Optional[jnp.ndarray] = None,
    T: Optional[jnp.ndarray] = None,
    x: Optional[jnp.ndarray] = None,
) -> WaterInput:
    """Build the input variant matching whichever values are given.

    Quality with P (preferred) or T selects the two-phase form. Otherwise
    P and T are used, defaulting to 101.325 kPa and 373.15 K.
    """
    if x is not None and P is not None:
        return QualityAtPressure(P=P, x=x)
    if x is not None and T is not None:
        return QualityAtTemperature(T=T, x=x)
    return PressureTemperature(
        P=P_DEFAULT if P is None else P,
        T=T_DEFAULT if T is None else T,
    )


def water_state(
    P: Optional[jnp.ndarray] = None,
    T: Optional[jnp.ndarray] = None,
    x: Optional[jnp.ndarray] = None,
) -> ThermoState:
    """State of water from any of P, T and quality x.

    Args:
        P: Pressure [kPa].
        T: Temperature [K].
        x: Vapor quality (0-1).

    Returns:
        ThermoState with every property filled.
    """
    return resolve_water_state(water_input(P, T, x))
