"""Steady-flow devices (open systems, per unit mass).

This module implements simplified single-stream energy balances:
- Turbines, compressors and pumps with an isentropic efficiency
- Nozzles converting enthalpy into kinetic/potential energy
- Throttling valves (isenthalpic)
- Heat exchangers with a fixed temperature rise

Isentropic temperature ratios use a fixed exponent of 0.285 (air-like
(k - 1) / k) for every fluid.
"""

import logging
from enum import Enum
from typing import NamedTuple, Optional, Tuple

import jax.numpy as jnp

from jax_thermolab.core.types import ThermoState
from jax_thermolab.processes.fluids import Fluid

logger = logging.getLogger(__name__)


ISENTROPIC_EXPONENT = 0.285
GRAVITY = 9.81  # [m/s^2]
HEAT_EXCHANGER_RISE = 25.0  # [K]


class DeviceType(Enum):
    """Steady-flow device."""

    TURBINE = "turbine"
    COMPRESSOR = "compressor"
    PUMP = "pump"
    NOZZLE = "nozzle"
    VALVE = "valve"
    HEAT_EXCHANGER = "heat_exchanger"


DEVICE_EQUATIONS = {
    DeviceType.TURBINE: "w = eta * (h1 - h2s)",
    DeviceType.COMPRESSOR: "w = (h1 - h2s) / eta",
    DeviceType.PUMP: "w = (h1 - h2s) / eta",
    DeviceType.NOZZLE: "V2 = sqrt(2 * (h1 - h2))",
    DeviceType.VALVE: "h1 = h2 (isenthalpic)",
    DeviceType.HEAT_EXCHANGER: "q = dh + dke + dpe",
}


class SteadyFlowResult(NamedTuple):
    """Result of a steady-flow device balance.

    Attributes:
        inlet: Inlet state.
        outlet: Outlet state.
        w: Specific work produced (negative when consumed) [kJ/kg].
        q: Specific heat added [kJ/kg].
        equation: Governing relation for the device.
    """

    inlet: ThermoState
    outlet: ThermoState
    w: jnp.ndarray
    q: jnp.ndarray
    equation: str


def kinetic_energy_change(velocities: Optional[Tuple[float, float]]) -> jnp.ndarray:
    """Specific kinetic-energy change [kJ/kg] from (V1, V2) in m/s."""
    if velocities is None:
        return jnp.array(0.0)
    V1, V2 = velocities
    return (jnp.square(V2) - jnp.square(V1)) / 2000.0


def potential_energy_change(elevations: Optional[Tuple[float, float]]) -> jnp.ndarray:
    """Specific potential-energy change [kJ/kg] from (z1, z2) in m."""
    if elevations is None:
        return jnp.array(0.0)
    z1, z2 = elevations
    return GRAVITY * (z2 - z1) / 1000.0


def steady_flow_device(
    device: DeviceType,
    fluid: Fluid,
    P1: jnp.ndarray,
    T1: jnp.ndarray,
    P2: jnp.ndarray,
    efficiency: jnp.ndarray = 0.85,
    velocities: Optional[Tuple[float, float]] = None,
    elevations: Optional[Tuple[float, float]] = None,
    temperature_rise: float = HEAT_EXCHANGER_RISE,
) -> SteadyFlowResult:
    """Energy balance of a single-stream steady-flow device.

    Args:
        device: Device type.
        fluid: Working fluid.
        P1: Inlet pressure [kPa].
        T1: Inlet temperature [K].
        P2: Outlet pressure [kPa].
        efficiency: Isentropic efficiency (work devices only).
        velocities: Optional (V1, V2) [m/s]; omitted means no kinetic term.
        elevations: Optional (z1, z2) [m]; omitted means no potential term.
        temperature_rise: Heat exchanger outlet temperature rise [K].

    Returns:
        SteadyFlowResult.
    """
    P1 = jnp.asarray(P1, dtype=float)
    T1 = jnp.asarray(T1, dtype=float)
    P2 = jnp.asarray(P2, dtype=float)

    inlet = fluid.state(P1, T1)
    cp = fluid.cp_flow
    d_ke = kinetic_energy_change(velocities)
    d_pe = potential_energy_change(elevations)

    w = jnp.zeros_like(T1)
    q = jnp.zeros_like(T1)
    T2 = T1

    if device is DeviceType.TURBINE:
        w_s = cp * T1 * (1.0 - jnp.power(P2 / P1, ISENTROPIC_EXPONENT))
        w = efficiency * w_s
        T2 = T1 - w / cp
    elif device in (DeviceType.COMPRESSOR, DeviceType.PUMP):
        w_s = cp * T1 * (jnp.power(P2 / P1, ISENTROPIC_EXPONENT) - 1.0)
        w = -(w_s / efficiency)
        T2 = T1 - w / cp
    elif device is DeviceType.NOZZLE:
        h2 = inlet.h - d_ke - d_pe
        T2 = T1 + (h2 - inlet.h) / cp
    elif device is DeviceType.HEAT_EXCHANGER:
        T2 = T1 + temperature_rise
        q = cp * (T2 - T1) + d_ke + d_pe

    outlet = fluid.state(P2, T2)
    logger.debug(f"{device.value} ({fluid.name}): {DEVICE_EQUATIONS[device]}")

    return SteadyFlowResult(
        inlet=inlet,
        outlet=outlet,
        w=w,
        q=q,
        equation=DEVICE_EQUATIONS[device],
    )
