"""Cubic equations of state.

This module provides JIT-compilable functions for:
- Peng-Robinson and van der Waals cubic coefficients in Z
- Cubic root solvers behind a common interface
- Compressibility, specific volume, phase region and fugacity

Only v, z, phase and phi/f are produced; u, h and s are left at zero
because departure functions are not integrated.
"""

from typing import NamedTuple, Protocol

import jax.numpy as jnp
from jax import lax

from jax_thermolab.core.types import (
    CriticalProps,
    EOSModel,
    Phase,
    ThermoState,
    phase_array,
)


R_WATER = 0.4615  # [kJ/kg/K]

NEWTON_ITERATIONS = 10
Z_LIQUID_MAX = 0.3  # Z below this is classified as liquid
Z_VAPOR_MIN = 0.7  # Z above this is classified as vapor

SQRT2 = 2.0**0.5


class CubicCoefficients(NamedTuple):
    """Coefficients of Z^3 + c2 Z^2 + c1 Z + c0 = 0 and the reduced A, B."""

    c2: jnp.ndarray
    c1: jnp.ndarray
    c0: jnp.ndarray
    A: jnp.ndarray
    B: jnp.ndarray


# =============================================================================
# Root Solvers
# =============================================================================


class CubicRootSolver(Protocol):
    """Returns one compressibility root of Z^3 + c2 Z^2 + c1 Z + c0 = 0."""

    def __call__(
        self, c2: jnp.ndarray, c1: jnp.ndarray, c0: jnp.ndarray
    ) -> jnp.ndarray: ...


class NewtonCubicSolver:
    """Fixed-iteration Newton-Raphson from Z = 1.

    No convergence check is made; the result after ``n_iter`` steps is
    returned as is, which may be non-physical for extreme inputs.
    """

    def __init__(self, n_iter: int = NEWTON_ITERATIONS, z0: float = 1.0):
        self.n_iter = n_iter
        self.z0 = z0

    def __call__(self, c2, c1, c0):
        def body_fn(_, z):
            f = ((z + c2) * z + c1) * z + c0
            df = (3.0 * z + 2.0 * c2) * z + c1
            df_safe = jnp.where(jnp.abs(df) < 1e-12, 1e-12, df)
            return z - f / df_safe

        z_init = jnp.full(jnp.shape(c2), self.z0, dtype=jnp.result_type(c2, float))
        return lax.fori_loop(0, self.n_iter, body_fn, z_init)


class CardanoCubicSolver:
    """Closed-form (Cardano / trigonometric) solver.

    Picks the largest real root for ``root='vapor'`` and the smallest for
    ``root='liquid'``. Opt-in only; the default path stays on Newton.
    """

    def __init__(self, root: str = "vapor"):
        if root not in ("vapor", "liquid"):
            raise ValueError(f"root must be 'vapor' or 'liquid', got {root!r}")
        self.root = root

    def __call__(self, c2, c1, c0):
        shift = c2 / 3.0
        p = c1 - c2 * c2 / 3.0
        q = 2.0 * c2**3 / 27.0 - c2 * c1 / 3.0 + c0
        disc = (q / 2.0) ** 2 + (p / 3.0) ** 3

        # One real root
        sqrt_disc = jnp.sqrt(jnp.maximum(disc, 0.0))
        single = jnp.cbrt(-q / 2.0 + sqrt_disc) + jnp.cbrt(-q / 2.0 - sqrt_disc) - shift

        # Three real roots
        r = jnp.sqrt(jnp.maximum(-(p**3) / 27.0, 1e-30))
        phi = jnp.arccos(jnp.clip(-q / (2.0 * r), -1.0, 1.0))
        m = 2.0 * jnp.sqrt(jnp.maximum(-p / 3.0, 0.0))
        roots = jnp.stack(
            [m * jnp.cos((phi + 2.0 * jnp.pi * k) / 3.0) - shift for k in range(3)]
        )
        picked = jnp.max(roots, axis=0) if self.root == "vapor" else jnp.min(roots, axis=0)

        return jnp.where(disc >= 0.0, single, picked)


DEFAULT_SOLVER = NewtonCubicSolver()


# =============================================================================
# Cubic Coefficients
# =============================================================================


def pr_kappa(omega: jnp.ndarray) -> jnp.ndarray:
    """Peng-Robinson kappa(omega)."""
    return 0.37464 + 1.54226 * omega - 0.26992 * omega * omega


def pr_alpha(T: jnp.ndarray, Tc: jnp.ndarray, omega: jnp.ndarray) -> jnp.ndarray:
    """Peng-Robinson alpha(T) = (1 + kappa (1 - sqrt(Tr)))^2."""
    Tr = T / Tc
    return (1.0 + pr_kappa(omega) * (1.0 - jnp.sqrt(Tr))) ** 2


def peng_robinson_coefficients(
    P: jnp.ndarray, T: jnp.ndarray, critical: CriticalProps, R: float = R_WATER
) -> CubicCoefficients:
    """Cubic-in-Z coefficients of the Peng-Robinson equation.

    Z^3 + (B - 1) Z^2 + (A - 3B^2 - 2B) Z + (B^3 + B^2 - AB) = 0
    """
    Pc, Tc, omega = critical.Pc, critical.Tc, critical.omega
    a = 0.45724 * (R * R * Tc * Tc) / Pc * pr_alpha(T, Tc, omega)
    b = 0.0778 * (R * Tc) / Pc

    A = a * P / (R * R * T * T)
    B = b * P / (R * T)

    return CubicCoefficients(
        c2=B - 1.0,
        c1=A - 3.0 * B * B - 2.0 * B,
        c0=B**3 + B * B - A * B,
        A=A,
        B=B,
    )


def van_der_waals_coefficients(
    P: jnp.ndarray, T: jnp.ndarray, critical: CriticalProps, R: float = R_WATER
) -> CubicCoefficients:
    """Cubic-in-Z coefficients of the van der Waals equation.

    Z^3 - (1 + B) Z^2 + A Z - AB = 0
    """
    Pc, Tc = critical.Pc, critical.Tc
    a = 27.0 * (R * R * Tc * Tc) / (64.0 * Pc)
    b = R * Tc / (8.0 * Pc)

    A = a * P / (R * R * T * T)
    B = b * P / (R * T)

    return CubicCoefficients(c2=-(1.0 + B), c1=A, c0=-A * B, A=A, B=B)


# =============================================================================
# Fugacity
# =============================================================================


def pr_fugacity_coefficient(z: jnp.ndarray, A: jnp.ndarray, B: jnp.ndarray) -> jnp.ndarray:
    """Closed-form Peng-Robinson fugacity coefficient.

    ln(phi) = Z - 1 - ln(Z - B)
              - A / (2 sqrt(2) B) ln[(Z + (1 + sqrt2) B) / (Z + (1 - sqrt2) B)]
    """
    ln_phi = (
        z
        - 1.0
        - jnp.log(jnp.maximum(z - B, 1e-4))
        - A / (2.0 * SQRT2 * B) * jnp.log((z + (1.0 + SQRT2) * B) / (z + (1.0 - SQRT2) * B))
    )
    return jnp.exp(ln_phi)


def vdw_fugacity_coefficient(z: jnp.ndarray, A: jnp.ndarray, B: jnp.ndarray) -> jnp.ndarray:
    """Van der Waals fugacity coefficient: ln(phi) = Z - 1 - ln(Z - B) - A / Z."""
    ln_phi = z - 1.0 - jnp.log(jnp.maximum(z - B, 1e-4)) - A / z
    return jnp.exp(ln_phi)


# =============================================================================
# State
# =============================================================================


def classify_compressibility(z: jnp.ndarray) -> jnp.ndarray:
    """Phase code from thresholds on Z."""
    return jnp.where(
        z < Z_LIQUID_MAX,
        int(Phase.LIQUID_REGION),
        jnp.where(z > Z_VAPOR_MIN, int(Phase.VAPOR_REGION), int(Phase.SUPERCRITICAL)),
    ).astype(jnp.int32)


def eos_state(
    P: jnp.ndarray,
    T: jnp.ndarray,
    model: EOSModel,
    critical: CriticalProps,
    R: float = R_WATER,
    solver: CubicRootSolver = DEFAULT_SOLVER,
    compute_fugacity: bool = True,
) -> ThermoState:
    """State from a cubic equation of state.

    Args:
        P: Pressure [kPa].
        T: Temperature [K].
        model: Equation of state. IDEAL short-circuits to v = RT/P.
        critical: Critical constants of the species (CriticalProps or
            ComponentData).
        R: Specific gas constant of the basis [kJ/kg/K].
        solver: Root finder for the cubic in Z.
        compute_fugacity: Whether to fill phi and f.

    Returns:
        ThermoState with v, z, phase (and phi, f). u, h, s are zero.
    """
    P = jnp.asarray(P, dtype=float)
    T = jnp.asarray(T, dtype=float)
    zero = jnp.zeros_like(P * T)

    if model is EOSModel.IDEAL:
        return ThermoState(
            P=P,
            T=T,
            v=R * T / P,
            u=zero,
            h=zero,
            s=zero,
            z=jnp.ones_like(zero),
            phase_code=phase_array(Phase.IDEAL_GAS),
        )

    if model is EOSModel.PENG_ROBINSON:
        coeffs = peng_robinson_coefficients(P, T, critical, R)
        fugacity_fn = pr_fugacity_coefficient
    elif model is EOSModel.VAN_DER_WAALS:
        coeffs = van_der_waals_coefficients(P, T, critical, R)
        fugacity_fn = vdw_fugacity_coefficient
    else:
        raise ValueError(f"Unsupported equation of state: {model!r}")

    z = solver(coeffs.c2, coeffs.c1, coeffs.c0)
    v = z * R * T / P

    phi = f = None
    if compute_fugacity:
        phi = fugacity_fn(z, coeffs.A, coeffs.B)
        f = P * phi

    return ThermoState(
        P=P,
        T=T,
        v=v,
        u=zero,
        h=zero,
        s=zero,
        z=z,
        phi=phi,
        f=f,
        phase_code=classify_compressibility(z),
    )
