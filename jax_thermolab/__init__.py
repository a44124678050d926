"""JAX-native thermodynamic property engine for teaching.

This package provides:
- Water/steam states from a saturation table (quality or P, T input)
- Ideal-gas and cubic (Peng-Robinson, van der Waals) equation-of-state states
- Antoine vapor pressures and binary Margules mixtures
- First-law, steady-flow, cycle and second-law process models

Quick start:
    >>> from jax_thermolab import water_state
    >>> state = water_state(P=101.325, T=400.0)
    >>> state.phase
    'Superheated'

Cycles:
    >>> from jax_thermolab.processes import (
    ...     create_rankine_cycle_config,
    ...     run_cycle_config,
    ... )
    >>> result = run_cycle_config(create_rankine_cycle_config())
    >>> [point.name for point in result.points]
    ['Start', 'Feed Pump', 'Boiler', 'Turbine', 'Condenser']
"""

__version__ = "0.1.0"

# Core types
from jax_thermolab.core.types import (
    Phase,
    EOSModel,
    SolutionModel,
    ThermoState,
    SaturationProperties,
    ComponentData,
    MixtureCurve,
)

# Property calculators
from jax_thermolab.core.saturation import saturation_lookup
from jax_thermolab.core.thermodynamics import (
    antoine_psat,
    mmhg_to_kpa,
    ideal_gas_state,
)
from jax_thermolab.core.eos import eos_state
from jax_thermolab.core.water import water_state, resolve_water_state
from jax_thermolab.core.mixture import mixture_curve
from jax_thermolab.core.components import get_component, default_margules_coefficient

__all__ = [
    # Version
    "__version__",
    # Core types
    "Phase",
    "EOSModel",
    "SolutionModel",
    "ThermoState",
    "SaturationProperties",
    "ComponentData",
    "MixtureCurve",
    # Calculators
    "saturation_lookup",
    "antoine_psat",
    "mmhg_to_kpa",
    "ideal_gas_state",
    "eos_state",
    "water_state",
    "resolve_water_state",
    "mixture_curve",
    "get_component",
    "default_margules_coefficient",
]
