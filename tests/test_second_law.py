"""Tests for the heat engine second-law analysis."""

import jax.numpy as jnp

from jax_thermolab.processes.second_law import T_DEAD_STATE, heat_engine_analysis


class TestHeatEngine:
    """Tests for heat_engine_analysis."""

    def test_real_engine(self):
        result = heat_engine_analysis(1000.0, 300.0, 100.0, 40.0)
        assert jnp.allclose(result.Q_L, 60.0)
        assert jnp.allclose(result.eta_thermal, 0.4)
        assert jnp.allclose(result.eta_carnot, 0.7)
        assert jnp.allclose(result.S_gen, 0.1, rtol=1e-5)
        assert jnp.allclose(result.exergy_destroyed, T_DEAD_STATE * 0.1, rtol=1e-5)
        assert not bool(result.is_impossible)

    def test_reversible_engine_is_possible(self):
        result = heat_engine_analysis(1000.0, 300.0, 100.0, 70.0)
        assert jnp.allclose(result.S_gen, 0.0, atol=1e-6)
        assert not bool(result.is_impossible)

    def test_perpetual_motion_flagged(self):
        result = heat_engine_analysis(1000.0, 300.0, 100.0, 80.0)
        assert float(result.S_gen) < 0.0
        assert bool(result.is_impossible)

    def test_no_heat_input(self):
        result = heat_engine_analysis(1000.0, 300.0, 0.0, 0.0)
        assert float(result.eta_thermal) == 0.0
        assert float(result.S_gen) == 0.0
        assert not bool(result.is_impossible)

    def test_zero_hot_reservoir(self):
        result = heat_engine_analysis(0.0, 300.0, 100.0, 10.0)
        assert float(result.eta_carnot) == 0.0

    def test_custom_dead_state(self):
        result = heat_engine_analysis(1000.0, 300.0, 100.0, 40.0, T0=300.0)
        assert jnp.allclose(result.exergy_destroyed, 30.0, rtol=1e-5)
