"""JAX-compatible dataclasses for thermodynamic states and reference data."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple, Optional

import chex
import jax.numpy as jnp


class Phase(IntEnum):
    """Phase classification of a state.

    Stored as an integer code inside states so that they remain valid
    pytrees under ``jax.jit``; use :attr:`label` for display.
    """

    IDEAL_GAS = 0
    SUPERHEATED = 1
    COMPRESSED_LIQUID = 2
    SATURATED_LIQUID = 3
    SATURATED_MIXTURE = 4
    LIQUID_REGION = 5
    VAPOR_REGION = 6
    SUPERCRITICAL = 7

    @property
    def label(self) -> str:
        return PHASE_LABELS[self]


PHASE_LABELS = {
    Phase.IDEAL_GAS: "Ideal Gas",
    Phase.SUPERHEATED: "Superheated",
    Phase.COMPRESSED_LIQUID: "Compressed Liquid",
    Phase.SATURATED_LIQUID: "Saturated Liquid",
    Phase.SATURATED_MIXTURE: "Saturated Mixture",
    Phase.LIQUID_REGION: "Liquid Region",
    Phase.VAPOR_REGION: "Vapor Region",
    Phase.SUPERCRITICAL: "Supercritical",
}


class EOSModel(Enum):
    """Equation of state used by :func:`jax_thermolab.core.eos.eos_state`."""

    IDEAL = "Ideal Gas"
    VAN_DER_WAALS = "Van der Waals"
    PENG_ROBINSON = "Peng-Robinson"


class SolutionModel(Enum):
    """Liquid solution model for binary mixtures."""

    IDEAL = "ideal"
    REGULAR = "regular"


@chex.dataclass
class ThermoState:
    """Snapshot of a pure (or pseudo-pure) fluid at one point.

    Attributes:
        P: Pressure [kPa].
        T: Temperature [K].
        v: Specific volume [m^3/kg].
        u: Specific internal energy [kJ/kg].
        h: Specific enthalpy [kJ/kg].
        s: Specific entropy [kJ/kg/K].
        phase_code: Integer :class:`Phase` code.
        z: Compressibility factor (1.0 for ideal gas).
        phi: Fugacity coefficient (EOS states only).
        f: Fugacity [kPa] (EOS states only).
        x: Vapor quality. NaN for single-phase water states, None when
            the calculator has no notion of quality.
    """

    P: chex.Array  # [kPa]
    T: chex.Array  # [K]
    v: chex.Array  # [m^3/kg]
    u: chex.Array  # [kJ/kg]
    h: chex.Array  # [kJ/kg]
    s: chex.Array  # [kJ/kg/K]
    phase_code: chex.Array
    z: Optional[chex.Array] = None
    phi: Optional[chex.Array] = None
    f: Optional[chex.Array] = None
    x: Optional[chex.Array] = None

    @property
    def phase(self) -> str:
        """Phase label. Not available while tracing."""
        return Phase(int(self.phase_code)).label


@chex.dataclass
class SaturationProperties:
    """Interpolated saturation properties of water.

    Attributes:
        T: Saturation temperature [°C].
        P: Saturation pressure [kPa].
        vf: Saturated-liquid specific volume [m^3/kg].
        vg: Saturated-vapor specific volume [m^3/kg].
        hf: Saturated-liquid enthalpy [kJ/kg].
        hg: Saturated-vapor enthalpy [kJ/kg].
        sf: Saturated-liquid entropy [kJ/kg/K].
        sg: Saturated-vapor entropy [kJ/kg/K].
    """

    T: chex.Array  # [°C]
    P: chex.Array  # [kPa]
    vf: chex.Array
    vg: chex.Array
    hf: chex.Array
    hg: chex.Array
    sf: chex.Array
    sg: chex.Array


@dataclass(frozen=True)
class SaturationRow:
    """One row of the steam saturation table (T in °C, P in kPa)."""

    T: float
    P: float
    vf: float
    vg: float
    hf: float
    hg: float
    sf: float
    sg: float


@chex.dataclass(frozen=True)
class AntoineParams:
    """Antoine equation parameters for a component.

    log10(P_sat[mmHg]) = A - B / (T[°C] + C)

    Attributes:
        A: Antoine A coefficient.
        B: Antoine B coefficient.
        C: Antoine C coefficient.
        T_min: Minimum valid temperature [°C].
        T_max: Maximum valid temperature [°C].
    """

    A: chex.Array
    B: chex.Array
    C: chex.Array
    T_min: chex.Array  # Valid temperature range, not enforced
    T_max: chex.Array


@dataclass(frozen=True)
class ComponentData:
    """Reference record for a chemical species.

    Attributes:
        name: Species name used as lookup key.
        formula: Chemical formula.
        antoine: Antoine vapor-pressure coefficients (mmHg, °C).
        Pc: Critical pressure [kPa].
        Tc: Critical temperature [K].
        omega: Acentric factor.
    """

    name: str
    formula: str
    antoine: AntoineParams
    Pc: float
    Tc: float
    omega: float


class CriticalProps(NamedTuple):
    """Critical constants consumed by the cubic equations of state."""

    Pc: float  # [kPa]
    Tc: float  # [K]
    omega: float


@chex.dataclass
class MixturePoint:
    """Binary mixture properties at one liquid composition.

    Attributes:
        x_a: Liquid mole fraction of component A.
        y_a: Vapor mole fraction of component A.
        P_a: Partial pressure of A [kPa].
        P_b: Partial pressure of B [kPa].
        P_total: Bubble pressure [kPa].
        gamma_a: Activity coefficient of A.
        gamma_b: Activity coefficient of B.
        dH_mix: Enthalpy of mixing [J/mol].
        dS_mix: Entropy of mixing [J/mol/K].
        dG_mix: Gibbs energy of mixing [J/mol].
    """

    x_a: chex.Array
    y_a: chex.Array
    P_a: chex.Array
    P_b: chex.Array
    P_total: chex.Array
    gamma_a: chex.Array
    gamma_b: chex.Array
    dH_mix: chex.Array
    dS_mix: chex.Array
    dG_mix: chex.Array


@chex.dataclass
class MixtureCurve:
    """Mixture properties over a composition grid.

    Every array field of :class:`MixturePoint` is present here with shape
    (n_points,), ordered by increasing ``x_a``.

    Attributes:
        points: Vectorized :class:`MixturePoint` over the grid.
        T: Temperature [K].
        Psat_a: Pure-component saturation pressure of A [kPa].
        Psat_b: Pure-component saturation pressure of B [kPa].
        unstable: True if the interaction strength predicts a phase split.
    """

    points: MixturePoint
    T: chex.Array
    Psat_a: chex.Array
    Psat_b: chex.Array
    unstable: chex.Array

    @property
    def n_points(self) -> int:
        return int(self.points.x_a.shape[0])

    def point(self, i: int) -> MixturePoint:
        """Return the i-th composition point."""
        return MixturePoint(
            **{name: value[i] for name, value in self.points.items()}
        )

    def as_sequence(self) -> list:
        """Return the ordered list of composition points."""
        return [self.point(i) for i in range(self.n_points)]


@chex.dataclass
class VLECurve:
    """Ideal Raoult's-law P-x-y data at fixed temperature.

    Attributes:
        x_a: Liquid mole fraction of A, shape (n_points,).
        y_a: Vapor mole fraction of A, shape (n_points,).
        P: Bubble pressure [kPa], shape (n_points,).
        T: Temperature [K].
    """

    x_a: chex.Array
    y_a: chex.Array
    P: chex.Array
    T: chex.Array


def phase_array(phase: Phase) -> jnp.ndarray:
    """Return the integer code of ``phase`` as a JAX scalar."""
    return jnp.array(int(phase), dtype=jnp.int32)
