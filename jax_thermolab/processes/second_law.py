"""Second-law analysis of a heat engine between two reservoirs."""

from typing import NamedTuple

import jax.numpy as jnp


T_DEAD_STATE = 298.15  # [K]

# Tolerances for the feasibility test
S_GEN_TOLERANCE = 1e-7
EFFICIENCY_TOLERANCE = 1e-6


class HeatEngineResult(NamedTuple):
    """Second-law figures of a heat engine.

    Attributes:
        Q_L: Heat rejected to the cold reservoir [kJ].
        eta_thermal: Thermal efficiency W / Q_H.
        eta_carnot: Reversible limit 1 - T_L / T_H.
        S_gen: Entropy generated [kJ/K].
        exergy_destroyed: T0 * S_gen [kJ].
        is_impossible: True if the engine violates the second law.
    """

    Q_L: jnp.ndarray
    eta_thermal: jnp.ndarray
    eta_carnot: jnp.ndarray
    S_gen: jnp.ndarray
    exergy_destroyed: jnp.ndarray
    is_impossible: jnp.ndarray


def _safe_ratio(num: jnp.ndarray, den: jnp.ndarray) -> jnp.ndarray:
    return num / jnp.where(den > 0, den, 1.0)


def heat_engine_analysis(
    T_H: jnp.ndarray,
    T_L: jnp.ndarray,
    Q_H: jnp.ndarray,
    W: jnp.ndarray,
    T0: jnp.ndarray = T_DEAD_STATE,
) -> HeatEngineResult:
    """Entropy generation and efficiency limits of a heat engine.

    Args:
        T_H: Hot reservoir temperature [K].
        T_L: Cold reservoir temperature [K].
        Q_H: Heat drawn from the hot reservoir [kJ].
        W: Net work produced [kJ].
        T0: Dead-state temperature for exergy [K].

    Returns:
        HeatEngineResult. Efficiencies and S_gen are zero when Q_H <= 0
        (or T_H <= 0 for the Carnot limit).
    """
    T_H, T_L, Q_H, W, T0 = (jnp.asarray(a, dtype=float) for a in (T_H, T_L, Q_H, W, T0))

    Q_L = Q_H - W
    has_heat = Q_H > 0
    eta_thermal = jnp.where(has_heat, _safe_ratio(W, Q_H), 0.0)
    eta_carnot = jnp.where(T_H > 0, 1.0 - _safe_ratio(T_L, T_H), 0.0)
    S_gen = jnp.where(has_heat, Q_L / T_L - _safe_ratio(Q_H, T_H), 0.0)

    is_impossible = jnp.logical_or(
        S_gen < -S_GEN_TOLERANCE, eta_thermal > eta_carnot + EFFICIENCY_TOLERANCE
    )

    return HeatEngineResult(
        Q_L=Q_L,
        eta_thermal=eta_thermal,
        eta_carnot=eta_carnot,
        S_gen=S_gen,
        exergy_destroyed=T0 * S_gen,
        is_impossible=is_impossible,
    )
