"""Process models built on the property engine."""

from jax_thermolab.processes.fluids import AIR, WATER, Fluid, IdealGasFluid, WaterFluid
from jax_thermolab.processes.first_law import (
    ProcessType,
    Unknown,
    WorkConvention,
    closed_system_process,
    solve_closed_system,
)
from jax_thermolab.processes.steady_flow import DeviceType, steady_flow_device
from jax_thermolab.processes.cycles import (
    CycleStage,
    StageDevice,
    StageKind,
    cycle_ts_path,
    run_cycle,
)
from jax_thermolab.processes.config import (
    CycleConfig,
    create_brayton_cycle_config,
    create_rankine_cycle_config,
    run_cycle_config,
)
from jax_thermolab.processes.second_law import heat_engine_analysis

__all__ = [
    "AIR",
    "WATER",
    "Fluid",
    "IdealGasFluid",
    "WaterFluid",
    "ProcessType",
    "Unknown",
    "WorkConvention",
    "closed_system_process",
    "solve_closed_system",
    "DeviceType",
    "steady_flow_device",
    "CycleStage",
    "StageDevice",
    "StageKind",
    "cycle_ts_path",
    "run_cycle",
    "CycleConfig",
    "create_brayton_cycle_config",
    "create_rankine_cycle_config",
    "run_cycle_config",
    "heat_engine_analysis",
]
