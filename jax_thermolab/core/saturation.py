"""Steam saturation table and its piecewise-linear interpolator.

The table holds ten rows from the triple point to the critical point.
:func:`saturation_lookup` is the only interpolation primitive in the
package; every saturation-dependent calculation goes through it.
"""

from typing import Tuple

import jax.numpy as jnp

from jax_thermolab.core.types import SaturationProperties, SaturationRow


STEAM_SAT_TABLE: Tuple[SaturationRow, ...] = (
    SaturationRow(T=0.01, P=0.6117, vf=0.001, vg=206.1, hf=0.0, hg=2501.0, sf=0.0, sg=9.155),
    SaturationRow(T=20.0, P=2.339, vf=0.001002, vg=57.76, hf=83.9, hg=2537.4, sf=0.2965, sg=8.666),
    SaturationRow(T=50.0, P=12.35, vf=0.001012, vg=12.03, hf=209.3, hg=2591.3, sf=0.7038, sg=8.075),
    SaturationRow(T=100.0, P=101.4, vf=0.001043, vg=1.673, hf=419.1, hg=2675.6, sf=1.307, sg=7.354),
    SaturationRow(T=150.0, P=476.2, vf=0.001091, vg=0.3925, hf=632.2, hg=2745.9, sf=1.842, sg=6.837),
    SaturationRow(T=200.0, P=1555.0, vf=0.001157, vg=0.1272, hf=852.3, hg=2792.0, sf=2.331, sg=6.430),
    SaturationRow(T=250.0, P=3976.0, vf=0.001252, vg=0.0500, hf=1085.8, hg=2800.4, sf=2.794, sg=6.072),
    SaturationRow(T=300.0, P=8588.0, vf=0.001404, vg=0.0216, hf=1345.0, hg=2750.1, sf=3.255, sg=5.706),
    SaturationRow(T=350.0, P=16530.0, vf=0.001741, vg=0.0088, hf=1671.2, hg=2563.6, sf=3.778, sg=5.211),
    SaturationRow(T=374.0, P=22060.0, vf=0.003106, vg=0.0031, hf=2099.0, hg=2099.0, sf=4.43, sg=4.43),
)

SATURATION_COLUMNS = ("T", "P", "vf", "vg", "hf", "hg", "sf", "sg")

# Column-major view of the table, built once at import
_TABLE = {
    name: jnp.array([getattr(row, name) for row in STEAM_SAT_TABLE])
    for name in SATURATION_COLUMNS
}

T_TRIPLE = STEAM_SAT_TABLE[0].T  # [°C]
T_CRITICAL = STEAM_SAT_TABLE[-1].T  # [°C]
P_TRIPLE = STEAM_SAT_TABLE[0].P  # [kPa]
P_CRITICAL = STEAM_SAT_TABLE[-1].P  # [kPa]

_DOMAIN = {
    "T": (T_TRIPLE, T_CRITICAL),
    "P": (P_TRIPLE, P_CRITICAL),
}


def lerp(
    x: jnp.ndarray,
    x1: jnp.ndarray,
    x2: jnp.ndarray,
    y1: jnp.ndarray,
    y2: jnp.ndarray,
) -> jnp.ndarray:
    """Linear interpolation between (x1, y1) and (x2, y2).

    A degenerate bracket (x1 == x2) returns y1 without dividing.
    """
    span = x2 - x1
    degenerate = span == 0
    safe_span = jnp.where(degenerate, 1.0, span)
    return jnp.where(degenerate, y1, y1 + (x - x1) * (y2 - y1) / safe_span)


def saturation_lookup(key: str, value: jnp.ndarray) -> SaturationProperties:
    """Interpolate saturation properties of water.

    The value is clamped into the table domain ([0.01, 374] °C or
    [0.6117, 22060] kPa) instead of raising. The lower bracketing row is
    the last row whose successor is still below the lookup value, which
    makes an exact table hit resolve from the row below it.

    Args:
        key: 'T' to look up by temperature [°C] or 'P' by pressure [kPa].
        value: Lookup value.

    Returns:
        SaturationProperties with every column interpolated.

    Raises:
        ValueError: If ``key`` is not 'T' or 'P'.
    """
    if key not in _DOMAIN:
        raise ValueError(f"Saturation lookup key must be 'T' or 'P', got {key!r}")

    lo, hi = _DOMAIN[key]
    lookup = jnp.clip(jnp.asarray(value, dtype=float), lo, hi)

    column = _TABLE[key]
    n_rows = column.shape[0]
    # Linear scan: count successors that are still below the lookup value
    i = jnp.sum(column[1:] < lookup)
    i = jnp.minimum(i, n_rows - 2)
    x1 = column[i]
    x2 = column[i + 1]

    return SaturationProperties(
        **{
            name: lerp(lookup, x1, x2, _TABLE[name][i], _TABLE[name][i + 1])
            for name in SATURATION_COLUMNS
        }
    )


def saturation_temperature(P: jnp.ndarray) -> jnp.ndarray:
    """Saturation temperature [°C] at pressure P [kPa]."""
    return saturation_lookup("P", P).T


def saturation_pressure(T_celsius: jnp.ndarray) -> jnp.ndarray:
    """Saturation pressure [kPa] at temperature T [°C]."""
    return saturation_lookup("T", T_celsius).P
