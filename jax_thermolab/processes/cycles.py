"""Power cycles built by chaining stages.

Each stage takes the state left by the previous one:
- Expansion/compression stages estimate work from v dP with an
  isentropic efficiency and move to the stage exit pressure.
- Heating/cooling stages move to a target (P, T) and exchange the
  enthalpy difference as heat.

The thermal efficiency is net work over total heat input.
"""

import logging
from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple

import jax.numpy as jnp

from jax_thermolab.core.types import ThermoState
from jax_thermolab.processes.fluids import Fluid

logger = logging.getLogger(__name__)


class StageKind(Enum):
    """Role of a cycle stage."""

    EXPANSION = "expansion"
    COMPRESSION = "compression"
    HEATING = "heating"
    COOLING = "cooling"


class StageDevice(Enum):
    """Hardware realizing a stage."""

    TURBINE = "turbine"
    NOZZLE = "nozzle"
    PUMP = "pump"
    COMPRESSOR = "compressor"
    BOILER = "boiler"
    CONDENSER = "condenser"
    MIXER = "mixer"


class CycleStage(NamedTuple):
    """One stage of a cycle.

    Attributes:
        name: Display name.
        kind: Stage role.
        device: Hardware type.
        efficiency: Isentropic efficiency (work stages only).
        target_P: Exit pressure [kPa].
        target_T: Exit temperature for heat-exchange stages [K].
    """

    name: str
    kind: StageKind
    device: StageDevice
    efficiency: float
    target_P: float
    target_T: float


class StagePoint(NamedTuple):
    """State reached after a stage and the energy exchanged in it.

    Attributes:
        name: Stage name ("Start" for the initial state).
        state: State at the stage exit.
        work: Specific work produced by the stage [kJ/kg].
        heat: Specific heat added in the stage [kJ/kg].
        efficiency: Stage efficiency used.
    """

    name: str
    state: ThermoState
    work: jnp.ndarray
    heat: jnp.ndarray
    efficiency: float


class CycleResult(NamedTuple):
    """Outcome of a cycle calculation.

    Attributes:
        points: Initial point followed by one point per stage.
        total_work: Net specific work [kJ/kg].
        total_heat_in: Sum of positive stage heats [kJ/kg].
        thermal_efficiency: total_work / total_heat_in (0 if no heat input).
    """

    points: List[StagePoint]
    total_work: jnp.ndarray
    total_heat_in: jnp.ndarray
    thermal_efficiency: jnp.ndarray


def work_stage(
    fluid: Fluid, current: ThermoState, stage: CycleStage
) -> Tuple[ThermoState, jnp.ndarray]:
    """Exit state and work of an expansion or compression stage.

    w_s = v (P_exit - P); the actual enthalpy change is w_s * eta for
    expansion and w_s / eta for compression.
    """
    P_exit = jnp.asarray(stage.target_P, dtype=float)
    w_s = current.v * (P_exit - current.P)
    if stage.kind is StageKind.EXPANSION:
        w_actual = w_s * stage.efficiency
    else:
        w_actual = w_s / stage.efficiency

    T_exit = current.T + w_actual / fluid.cp_stage
    return fluid.state(P_exit, T_exit), -w_actual


def heat_stage(
    fluid: Fluid, current: ThermoState, stage: CycleStage
) -> Tuple[ThermoState, jnp.ndarray]:
    """Exit state and heat of a heating or cooling stage."""
    next_state = fluid.state(stage.target_P, stage.target_T)
    return next_state, next_state.h - current.h


def run_cycle(
    fluid: Fluid,
    stages: Sequence[CycleStage],
    initial_P: float,
    initial_T: float,
) -> CycleResult:
    """Chain the stages starting from (initial_P, initial_T).

    Args:
        fluid: Working fluid.
        stages: Ordered stages.
        initial_P: Starting pressure [kPa].
        initial_T: Starting temperature [K].

    Returns:
        CycleResult.
    """
    current = fluid.state(initial_P, initial_T)
    zero = jnp.zeros_like(current.h)
    points = [StagePoint(name="Start", state=current, work=zero, heat=zero, efficiency=1.0)]

    total_work = zero
    total_heat_in = zero

    for stage in stages:
        if stage.kind in (StageKind.EXPANSION, StageKind.COMPRESSION):
            next_state, work = work_stage(fluid, current, stage)
            heat = zero
        else:
            next_state, heat = heat_stage(fluid, current, stage)
            work = zero

        total_work = total_work + work
        total_heat_in = total_heat_in + jnp.maximum(heat, 0.0)
        points.append(
            StagePoint(
                name=stage.name,
                state=next_state,
                work=work,
                heat=heat,
                efficiency=stage.efficiency,
            )
        )
        logger.debug(f"Stage {stage.name} ({stage.kind.value}) on {fluid.name}")
        current = next_state

    has_heat = total_heat_in > 0
    thermal_efficiency = jnp.where(
        has_heat, total_work / jnp.where(has_heat, total_heat_in, 1.0), 0.0
    )

    return CycleResult(
        points=points,
        total_work=total_work,
        total_heat_in=total_heat_in,
        thermal_efficiency=thermal_efficiency,
    )


def cycle_ts_path(result: CycleResult) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """Closed (s, T) polyline through the cycle points.

    Returns:
        Tuple of (s [kJ/kg/K], T [K]), with the first point repeated at
        the end.
    """
    s = [p.state.s for p in result.points]
    T = [p.state.T for p in result.points]
    if len(s) > 1:
        s.append(s[0])
        T.append(T[0])
    return jnp.stack(s), jnp.stack(T)
