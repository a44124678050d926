"""Working fluids for the process models.

A fluid is selected once and passed into the process functions, which call
``fluid.state(P, T)`` instead of switching on substance names. Each fluid
also carries the constant specific heats the simplified process balances
use.
"""

from dataclasses import dataclass
from typing import Protocol

import jax.numpy as jnp

from jax_thermolab.core.eos import R_WATER
from jax_thermolab.core.thermodynamics import CP_AIR, R_AIR, ideal_gas_state
from jax_thermolab.core.types import ThermoState
from jax_thermolab.core.water import CP_LIQUID, PressureTemperature, pressure_temperature_state


class Fluid(Protocol):
    """Capability interface shared by all working fluids.

    Attributes:
        name: Display name.
        R: Specific gas constant [kJ/kg/K].
        cp_stage: Specific heat converting cycle-stage work to a
            temperature change [kJ/kg/K].
        cp_flow: Specific heat used by steady-flow devices [kJ/kg/K].
        cv: Constant-volume specific heat for closed systems [kJ/kg/K].
    """

    name: str
    R: float
    cp_stage: float
    cp_flow: float
    cv: float

    def state(self, P: jnp.ndarray, T: jnp.ndarray) -> ThermoState: ...


@dataclass(frozen=True)
class IdealGasFluid:
    """Ideal gas with constant specific heats."""

    name: str = "Air"
    R: float = R_AIR
    Cp: float = CP_AIR

    @property
    def cp_stage(self) -> float:
        return self.Cp

    @property
    def cp_flow(self) -> float:
        return self.Cp

    @property
    def cv(self) -> float:
        return self.Cp - self.R

    def state(self, P: jnp.ndarray, T: jnp.ndarray) -> ThermoState:
        return ideal_gas_state(P, T, R=self.R, Cp=self.Cp)


@dataclass(frozen=True)
class WaterFluid:
    """Water/steam resolved through the saturation table."""

    name: str = "Water"
    R: float = R_WATER
    cp_stage: float = CP_LIQUID
    cp_flow: float = 1.95  # Mean steam cp for device balances
    cv: float = CP_LIQUID

    def state(self, P: jnp.ndarray, T: jnp.ndarray) -> ThermoState:
        return pressure_temperature_state(PressureTemperature(P=P, T=T))


AIR = IdealGasFluid()
WATER = WaterFluid()
