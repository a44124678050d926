"""Core property modules: saturation table, ideal gas, EOS, water, mixtures."""

from jax_thermolab.core.types import (
    Phase,
    ThermoState,
    SaturationProperties,
    AntoineParams,
    ComponentData,
    CriticalProps,
)
from jax_thermolab.core.eos import (
    CardanoCubicSolver,
    NewtonCubicSolver,
    eos_state,
)
from jax_thermolab.core.water import (
    PressureTemperature,
    QualityAtPressure,
    QualityAtTemperature,
    resolve_water_state,
)

__all__ = [
    "Phase",
    "ThermoState",
    "SaturationProperties",
    "AntoineParams",
    "ComponentData",
    "CriticalProps",
    "CardanoCubicSolver",
    "NewtonCubicSolver",
    "eos_state",
    "PressureTemperature",
    "QualityAtPressure",
    "QualityAtTemperature",
    "resolve_water_state",
]
