"""Default configurations for the power-cycle models.

Each factory returns a :class:`CycleConfig` bundling the fluid, the
starting state and the ordered stage list, ready for
:func:`jax_thermolab.processes.cycles.run_cycle`.
"""

from typing import NamedTuple, Tuple

from jax_thermolab.processes.cycles import (
    CycleResult,
    CycleStage,
    StageDevice,
    StageKind,
    run_cycle,
)
from jax_thermolab.processes.fluids import AIR, WATER, Fluid


KELVIN_OFFSET = 273.15


class CycleConfig(NamedTuple):
    """Complete cycle definition.

    Attributes:
        fluid: Working fluid.
        initial_P: Starting pressure [kPa].
        initial_T: Starting temperature [K].
        stages: Ordered stages.
    """

    fluid: Fluid
    initial_P: float
    initial_T: float
    stages: Tuple[CycleStage, ...]


def create_rankine_cycle_config(
    boiler_pressure: float = 8000.0,
    condenser_pressure: float = 10.0,
    boiler_exit_temperature: float = 550.0 + KELVIN_OFFSET,
    condenser_exit_temperature: float = 45.0 + KELVIN_OFFSET,
    pump_efficiency: float = 0.85,
    turbine_efficiency: float = 0.88,
) -> CycleConfig:
    """Create a simple Rankine steam cycle.

    Args:
        boiler_pressure: Pump exit and boiler pressure [kPa].
        condenser_pressure: Turbine exit and condenser pressure [kPa].
        boiler_exit_temperature: Turbine inlet temperature [K].
        condenser_exit_temperature: Pump inlet temperature [K].
        pump_efficiency: Pump isentropic efficiency.
        turbine_efficiency: Turbine isentropic efficiency.

    Returns:
        CycleConfig for water.
    """
    stages = (
        CycleStage(
            name="Feed Pump",
            kind=StageKind.COMPRESSION,
            device=StageDevice.PUMP,
            efficiency=pump_efficiency,
            target_P=boiler_pressure,
            target_T=condenser_exit_temperature,
        ),
        CycleStage(
            name="Boiler",
            kind=StageKind.HEATING,
            device=StageDevice.BOILER,
            efficiency=1.0,
            target_P=boiler_pressure,
            target_T=boiler_exit_temperature,
        ),
        CycleStage(
            name="Turbine",
            kind=StageKind.EXPANSION,
            device=StageDevice.TURBINE,
            efficiency=turbine_efficiency,
            target_P=condenser_pressure,
            target_T=50.0 + KELVIN_OFFSET,
        ),
        CycleStage(
            name="Condenser",
            kind=StageKind.COOLING,
            device=StageDevice.CONDENSER,
            efficiency=1.0,
            target_P=condenser_pressure,
            target_T=condenser_exit_temperature,
        ),
    )
    return CycleConfig(
        fluid=WATER,
        initial_P=condenser_pressure,
        initial_T=condenser_exit_temperature,
        stages=stages,
    )


def create_brayton_cycle_config(
    pressure_ratio: float = 10.0,
    inlet_pressure: float = 100.0,
    inlet_temperature: float = 25.0 + KELVIN_OFFSET,
    combustor_exit_temperature: float = 1100.0 + KELVIN_OFFSET,
    compressor_efficiency: float = 0.85,
    turbine_efficiency: float = 0.88,
) -> CycleConfig:
    """Create a simple closed Brayton air cycle.

    Args:
        pressure_ratio: Compressor pressure ratio.
        inlet_pressure: Compressor inlet pressure [kPa].
        inlet_temperature: Compressor inlet temperature [K].
        combustor_exit_temperature: Turbine inlet temperature [K].
        compressor_efficiency: Compressor isentropic efficiency.
        turbine_efficiency: Turbine isentropic efficiency.

    Returns:
        CycleConfig for air.
    """
    high_pressure = inlet_pressure * pressure_ratio
    stages = (
        CycleStage(
            name="Compressor",
            kind=StageKind.COMPRESSION,
            device=StageDevice.COMPRESSOR,
            efficiency=compressor_efficiency,
            target_P=high_pressure,
            target_T=inlet_temperature,
        ),
        CycleStage(
            name="Combustor",
            kind=StageKind.HEATING,
            device=StageDevice.BOILER,
            efficiency=1.0,
            target_P=high_pressure,
            target_T=combustor_exit_temperature,
        ),
        CycleStage(
            name="Turbine",
            kind=StageKind.EXPANSION,
            device=StageDevice.TURBINE,
            efficiency=turbine_efficiency,
            target_P=inlet_pressure,
            target_T=inlet_temperature,
        ),
        CycleStage(
            name="Heat Rejection",
            kind=StageKind.COOLING,
            device=StageDevice.CONDENSER,
            efficiency=1.0,
            target_P=inlet_pressure,
            target_T=inlet_temperature,
        ),
    )
    return CycleConfig(
        fluid=AIR,
        initial_P=inlet_pressure,
        initial_T=inlet_temperature,
        stages=stages,
    )


def run_cycle_config(config: CycleConfig) -> CycleResult:
    """Run a cycle from its configuration."""
    return run_cycle(config.fluid, config.stages, config.initial_P, config.initial_T)
