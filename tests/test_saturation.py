"""Tests for the steam saturation table interpolator."""

import jax
import jax.numpy as jnp
import pytest

from jax_thermolab.core.saturation import (
    P_CRITICAL,
    P_TRIPLE,
    STEAM_SAT_TABLE,
    T_CRITICAL,
    lerp,
    saturation_lookup,
    saturation_pressure,
    saturation_temperature,
)


class TestSaturationTable:
    """Tests for the reference table itself."""

    def test_ten_rows(self):
        assert len(STEAM_SAT_TABLE) == 10

    def test_columns_increasing(self):
        """T and P must be strictly increasing for the bracket search."""
        T = [row.T for row in STEAM_SAT_TABLE]
        P = [row.P for row in STEAM_SAT_TABLE]
        assert all(b > a for a, b in zip(T, T[1:]))
        assert all(b > a for a, b in zip(P, P[1:]))

    def test_critical_row_collapses(self):
        """At the critical point liquid and vapor properties coincide."""
        row = STEAM_SAT_TABLE[-1]
        assert row.hf == row.hg
        assert row.sf == row.sg


class TestSaturationLookup:
    """Tests for saturation_lookup."""

    def test_exact_row_by_temperature(self):
        sat = saturation_lookup("T", 100.0)
        assert jnp.allclose(sat.P, 101.4, rtol=1e-4)
        assert jnp.allclose(sat.hf, 419.1, rtol=1e-4)
        assert jnp.allclose(sat.hg, 2675.6, rtol=1e-4)

    def test_midpoint_interpolation(self):
        """Halfway between 50 and 100 C every column is the row average."""
        sat = saturation_lookup("T", 75.0)
        assert jnp.allclose(sat.P, (12.35 + 101.4) / 2, rtol=1e-4)
        assert jnp.allclose(sat.hf, (209.3 + 419.1) / 2, rtol=1e-4)
        assert jnp.allclose(sat.sg, (8.075 + 7.354) / 2, rtol=1e-4)

    def test_lookup_by_pressure(self):
        """Atmospheric pressure sits just below the 100 C row."""
        sat = saturation_lookup("P", 101.325)
        assert 99.9 < float(sat.T) < 100.0
        assert jnp.allclose(sat.P, 101.325, rtol=1e-5)

    def test_clamps_below_triple_point(self):
        sat = saturation_lookup("T", -10.0)
        assert jnp.allclose(sat.P, P_TRIPLE, rtol=1e-5)
        assert jnp.allclose(sat.T, 0.01, atol=1e-5)

    def test_clamps_above_critical_point(self):
        sat = saturation_lookup("P", 50000.0)
        assert jnp.allclose(sat.P, P_CRITICAL, rtol=1e-5)
        assert jnp.allclose(sat.T, T_CRITICAL, rtol=1e-5)

    def test_invalid_key_raises(self):
        with pytest.raises(ValueError, match="'T' or 'P'"):
            saturation_lookup("h", 100.0)

    def test_liquid_volume_below_vapor(self):
        T_values = jnp.linspace(1.0, 370.0, 25)
        sats = jax.vmap(lambda T: saturation_lookup("T", T))(T_values)
        assert jnp.all(sats.vf < sats.vg)
        assert jnp.all(sats.hf < sats.hg)

    def test_pressure_monotonic(self):
        T_values = jnp.linspace(1.0, 370.0, 25)
        P_values = jax.vmap(saturation_pressure)(T_values)
        assert jnp.all(jnp.diff(P_values) > 0)

    def test_temperature_pressure_inverse(self):
        T = saturation_temperature(saturation_pressure(180.0))
        assert jnp.allclose(T, 180.0, atol=1e-2)


class TestLerp:
    """Tests for the interpolation primitive."""

    def test_linear(self):
        assert jnp.allclose(lerp(1.5, 1.0, 2.0, 10.0, 20.0), 15.0)

    def test_degenerate_bracket(self):
        """Identical bracket ends return the lower value."""
        result = lerp(1.0, 1.0, 1.0, 5.0, 7.0)
        assert jnp.isfinite(result)
        assert jnp.allclose(result, 5.0)
