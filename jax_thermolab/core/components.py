"""Reference data for pure components and binary interactions.

The component database carries Antoine coefficients in the classic
mmHg / °C form together with the critical constants used by the cubic
equations of state. The interaction database seeds the one-parameter
Margules coefficient for a species pair.
"""

from typing import Dict

import jax.numpy as jnp

from jax_thermolab.core.types import AntoineParams, ComponentData, CriticalProps


def create_antoine_params(
    A: float, B: float, C: float, T_min: float, T_max: float
) -> AntoineParams:
    """Create Antoine parameters from scalar values.

    Args:
        A: Antoine A coefficient.
        B: Antoine B coefficient.
        C: Antoine C coefficient.
        T_min: Minimum valid temperature [°C].
        T_max: Maximum valid temperature [°C].

    Returns:
        AntoineParams dataclass.
    """
    return AntoineParams(
        A=jnp.array(A),
        B=jnp.array(B),
        C=jnp.array(C),
        T_min=jnp.array(T_min),
        T_max=jnp.array(T_max),
    )


WATER = ComponentData(
    name="Water",
    formula="H2O",
    antoine=create_antoine_params(A=8.07131, B=1730.63, C=233.426, T_min=1.0, T_max=100.0),
    Pc=22060.0,
    Tc=647.1,
    omega=0.344,
)

ETHANOL = ComponentData(
    name="Ethanol",
    formula="C2H5OH",
    antoine=create_antoine_params(A=8.20417, B=1642.89, C=230.3, T_min=-57.0, T_max=80.0),
    Pc=6148.0,
    Tc=513.9,
    omega=0.645,
)

METHANE = ComponentData(
    name="Methane",
    formula="CH4",
    antoine=create_antoine_params(A=6.61184, B=389.93, C=266.0, T_min=-180.0, T_max=-150.0),
    Pc=4599.0,
    Tc=190.6,
    omega=0.011,
)

BENZENE = ComponentData(
    name="Benzene",
    formula="C6H6",
    antoine=create_antoine_params(A=6.90565, B=1211.033, C=220.79, T_min=8.0, T_max=80.0),
    Pc=4895.0,
    Tc=562.2,
    omega=0.211,
)

COMPONENT_DB: Dict[str, ComponentData] = {
    c.name: c for c in (WATER, ETHANOL, METHANE, BENZENE)
}

# Margules A coefficients (dimensionless), keyed by species pair
INTERACTION_DB: Dict[str, Dict[str, float]] = {
    "Ethanol": {"Water": 1.2, "Benzene": 1.8},
    "Water": {"Ethanol": 1.2, "Benzene": 3.2},
    "Benzene": {"Ethanol": 1.8, "Water": 3.2},
}

DEFAULT_MARGULES_A = 0.5


def get_component(name: str) -> ComponentData:
    """Look up a component by name.

    Raises:
        KeyError: If the component is not in :data:`COMPONENT_DB`.
    """
    try:
        return COMPONENT_DB[name]
    except KeyError:
        raise KeyError(
            f"Unknown component '{name}'; available: {sorted(COMPONENT_DB)}"
        ) from None


def default_margules_coefficient(name_a: str, name_b: str) -> float:
    """Seed value of the Margules coefficient for a species pair.

    A pure component (same species on both sides) has no excess energy.
    Pairs missing from the database fall back to :data:`DEFAULT_MARGULES_A`.
    """
    if name_a == name_b:
        return 0.0
    return INTERACTION_DB.get(name_a, {}).get(name_b, DEFAULT_MARGULES_A)


def critical_props(component: ComponentData) -> CriticalProps:
    """Extract the critical constants of a component."""
    return CriticalProps(Pc=component.Pc, Tc=component.Tc, omega=component.omega)
