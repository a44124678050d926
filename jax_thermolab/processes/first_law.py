"""First law for closed systems (piston-cylinder).

This module implements:
- Quasi-equilibrium processes of a fixed mass (isothermal, isobaric,
  isochoric) with boundary work, internal energy change and heat
- A single-unknown solver for Q - W = m Cv (T2 - T1)

Work sign conventions follow :class:`WorkConvention`.
"""

import logging
from enum import Enum
from typing import NamedTuple

import jax.numpy as jnp

from jax_thermolab.core.types import ThermoState
from jax_thermolab.processes.fluids import Fluid

logger = logging.getLogger(__name__)


class WorkConvention(Enum):
    """Sign convention for reported work."""

    BY_SYSTEM = "BY_SYSTEM"  # Q - W = dU (engineering)
    ON_SYSTEM = "ON_SYSTEM"  # Q + W = dU (chemistry)


class ProcessType(Enum):
    """Constraint applied between the two states."""

    ISOTHERMAL = "isothermal"
    ISOBARIC = "isobaric"
    ISOCHORIC = "isochoric"


class ClosedSystemResult(NamedTuple):
    """Result of a closed-system process.

    Attributes:
        state1: Initial state.
        state2: Final state.
        dU: Change in internal energy [kJ].
        Q: Heat added to the system [kJ].
        W: Work in the selected convention [kJ].
    """

    state1: ThermoState
    state2: ThermoState
    dU: jnp.ndarray
    Q: jnp.ndarray
    W: jnp.ndarray


def final_conditions(
    P1: jnp.ndarray, T1: jnp.ndarray, P2: jnp.ndarray, process: ProcessType
) -> tuple:
    """Final (P, T) reached by each process.

    The isobaric and isochoric cases scale the temperature by P2/P1; for
    the isobaric case P2 acts only as that scaling input.
    """
    if process is ProcessType.ISOTHERMAL:
        return P2, T1
    if process is ProcessType.ISOBARIC:
        return P1, T1 * (P2 / P1)
    return P2, T1 * (P2 / P1)


def boundary_work(
    m: jnp.ndarray,
    fluid: Fluid,
    state1: ThermoState,
    state2: ThermoState,
    process: ProcessType,
) -> jnp.ndarray:
    """Boundary work done by the system [kJ]."""
    if process is ProcessType.ISOTHERMAL:
        return m * fluid.R * state1.T * jnp.log(state2.v / state1.v)
    if process is ProcessType.ISOBARIC:
        return state1.P * m * (state2.v - state1.v)
    return jnp.zeros_like(state1.v)


def closed_system_process(
    fluid: Fluid,
    m: jnp.ndarray,
    P1: jnp.ndarray,
    T1: jnp.ndarray,
    P2: jnp.ndarray,
    process: ProcessType,
    convention: WorkConvention = WorkConvention.BY_SYSTEM,
) -> ClosedSystemResult:
    """Energy balance of a fixed mass between two states.

    Q = dU + W_by, where W_by is the boundary work done by the system.

    Args:
        fluid: Working fluid.
        m: Mass [kg].
        P1: Initial pressure [kPa].
        T1: Initial temperature [K].
        P2: Second pressure input [kPa].
        process: Process constraint.
        convention: Sign convention for the reported work.

    Returns:
        ClosedSystemResult.
    """
    state1 = fluid.state(P1, T1)
    P_final, T2 = final_conditions(state1.P, state1.T, jnp.asarray(P2, dtype=float), process)
    state2 = fluid.state(P_final, T2)

    dU = m * (state2.u - state1.u)
    W_by = boundary_work(m, fluid, state1, state2, process)
    Q = dU + W_by

    W = W_by if convention is WorkConvention.BY_SYSTEM else -W_by
    return ClosedSystemResult(state1=state1, state2=state2, dU=dU, Q=Q, W=W)


# =============================================================================
# Single-Unknown Solver
# =============================================================================


class Unknown(Enum):
    """Variable solved for by :func:`solve_closed_system`."""

    T1 = "T1"
    T2 = "T2"
    M = "m"
    Q = "Q"
    W = "W"


class SolverResult(NamedTuple):
    """Solved value and the rearranged balance used.

    Attributes:
        value: Solved value (K for temperatures, kg for mass, kJ for energy).
        equation: Human-readable form of the balance.
    """

    value: jnp.ndarray
    equation: str


_EQUATIONS = {
    Unknown.T2: "T2 = T1 + (Q - W) / (m * Cv)",
    Unknown.T1: "T1 = T2 - (Q - W) / (m * Cv)",
    Unknown.M: "m = (Q - W) / (Cv * (T2 - T1))",
    Unknown.Q: "Q = W + m * Cv * (T2 - T1)",
    Unknown.W: "W = Q - m * Cv * (T2 - T1)",
}


def solve_closed_system(
    unknown: Unknown,
    fluid: Fluid,
    T1: jnp.ndarray = 298.15,
    T2: jnp.ndarray = 298.15,
    m: jnp.ndarray = 1.0,
    Q: jnp.ndarray = 0.0,
    W: jnp.ndarray = 0.0,
) -> SolverResult:
    """Solve Q - W = m Cv (T2 - T1) for one variable.

    The value passed for the unknown itself is ignored. Degenerate inputs
    (zero mass or zero temperature change) give inf/nan rather than raising.

    Args:
        unknown: Variable to solve for.
        fluid: Working fluid providing Cv.
        T1: Initial temperature [K].
        T2: Final temperature [K].
        m: Mass [kg].
        Q: Heat added [kJ].
        W: Work done by the system [kJ].

    Returns:
        SolverResult.
    """
    T1, T2, m, Q, W = (jnp.asarray(a, dtype=float) for a in (T1, T2, m, Q, W))
    cv = fluid.cv

    if unknown is Unknown.T2:
        value = T1 + (Q - W) / (m * cv)
    elif unknown is Unknown.T1:
        value = T2 - (Q - W) / (m * cv)
    elif unknown is Unknown.M:
        value = (Q - W) / (cv * (T2 - T1))
    elif unknown is Unknown.Q:
        value = W + m * cv * (T2 - T1)
    else:
        value = Q - m * cv * (T2 - T1)

    logger.debug(f"Solved {unknown.value} for {fluid.name}: {_EQUATIONS[unknown]}")
    return SolverResult(value=value, equation=_EQUATIONS[unknown])
