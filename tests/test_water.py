"""Tests for the water/steam state resolver."""

import jax
import jax.numpy as jnp
import pytest

from jax_thermolab.core.saturation import saturation_lookup
from jax_thermolab.core.types import Phase
from jax_thermolab.core.water import (
    CP_LIQUID,
    KELVIN_OFFSET,
    V_LIQUID,
    PressureTemperature,
    QualityAtPressure,
    QualityAtTemperature,
    resolve_water_state,
    water_input,
    water_state,
)


class TestQualityMode:
    """Tests for two-phase states."""

    def test_half_quality_at_pressure(self):
        state = water_state(P=101.4, x=0.5)
        assert state.phase == "Saturated Mixture"
        assert jnp.allclose(state.v, (0.001043 + 1.673) / 2, rtol=1e-4)
        assert jnp.allclose(state.h, (419.1 + 2675.6) / 2, rtol=1e-4)
        assert jnp.allclose(state.T, 373.15, atol=1e-3)
        assert jnp.allclose(state.x, 0.5)

    def test_quality_endpoints(self):
        sat = saturation_lookup("P", 500.0)
        liquid = water_state(P=500.0, x=0.0)
        vapor = water_state(P=500.0, x=1.0)
        assert jnp.allclose(liquid.h, sat.hf, rtol=1e-5)
        assert jnp.allclose(vapor.h, sat.hg, rtol=1e-5)
        assert jnp.allclose(vapor.s, sat.sg, rtol=1e-5)

    def test_quality_at_temperature(self):
        state = water_state(T=373.15, x=1.0)
        assert jnp.allclose(state.h, 2675.6, rtol=1e-4)
        assert jnp.allclose(state.P, 101.4, rtol=1e-3)

    def test_internal_energy_relation(self):
        state = water_state(P=1000.0, x=0.3)
        assert jnp.allclose(state.u, state.h - state.P * state.v, rtol=1e-5)

    def test_pressure_preferred_over_temperature(self):
        """With P, T and x all given the pressure form is used."""
        state = water_state(P=101.4, T=500.0, x=0.5)
        assert jnp.allclose(state.T, 373.15, atol=1e-3)


class TestPressureTemperatureMode:
    """Tests for single-phase classification."""

    def test_superheated(self):
        P, T = 101.325, 400.0
        state = water_state(P=P, T=T)
        sat = saturation_lookup("P", P)
        superheat = T - KELVIN_OFFSET - sat.T

        assert state.phase == "Superheated"
        assert jnp.allclose(state.v, 0.4615 * T / P, rtol=1e-5)
        assert jnp.allclose(state.h, sat.hg + 2.0 * superheat, rtol=1e-5)
        assert jnp.allclose(state.s, sat.sg + 0.005 * superheat, rtol=1e-5)
        assert jnp.isnan(state.x)

    def test_compressed_liquid(self):
        state = water_state(P=101.325, T=300.0)
        T_c = 300.0 - KELVIN_OFFSET
        assert state.phase == "Compressed Liquid"
        assert jnp.allclose(state.u, CP_LIQUID * T_c, rtol=1e-5)
        assert jnp.allclose(state.h, CP_LIQUID * T_c + 101.325 * V_LIQUID, rtol=1e-5)
        assert jnp.allclose(state.s, CP_LIQUID * jnp.log(300.0 / KELVIN_OFFSET), rtol=1e-4)
        assert jnp.allclose(state.v, V_LIQUID)
        assert jnp.isnan(state.x)

    def test_saturated_liquid_band(self):
        """Within 0.1 C of T_sat the state snaps to saturated liquid."""
        state = water_state(P=101.325, T=373.15)
        sat = saturation_lookup("P", 101.325)
        assert state.phase == "Saturated Liquid"
        assert jnp.allclose(state.T, sat.T + KELVIN_OFFSET, atol=1e-3)
        assert jnp.allclose(state.h, sat.hf, rtol=1e-5)
        assert jnp.allclose(state.x, 0.0)

    def test_saturated_liquid_keeps_given_pressure(self):
        """Above the table the lookup clamps, but the reported P is the input."""
        state = water_state(P=30000.0, T=647.15)
        assert state.phase == "Saturated Liquid"
        assert jnp.allclose(state.P, 30000.0)

    def test_band_edges(self):
        assert water_state(P=101.325, T=373.25).phase == "Superheated"
        assert water_state(P=101.325, T=372.95).phase == "Compressed Liquid"

    def test_defaults(self):
        """No arguments resolves 101.325 kPa and 373.15 K."""
        state = water_state()
        assert state.phase == "Saturated Liquid"

    def test_vmap_over_temperature(self):
        T_values = jnp.array([300.0, 373.15, 450.0])
        states = jax.vmap(lambda T: water_state(P=101.325, T=T))(T_values)
        codes = [int(c) for c in states.phase_code]
        assert codes == [
            Phase.COMPRESSED_LIQUID,
            Phase.SATURATED_LIQUID,
            Phase.SUPERHEATED,
        ]


class TestInputVariants:
    """Tests for the tagged input forms."""

    def test_routing(self):
        assert isinstance(water_input(P=100.0, x=0.5), QualityAtPressure)
        assert isinstance(water_input(T=400.0, x=0.5), QualityAtTemperature)
        assert isinstance(water_input(P=100.0, T=400.0), PressureTemperature)

    def test_missing_values_default(self):
        spec = water_input(P=200.0)
        assert spec == PressureTemperature(P=200.0, T=373.15)

    def test_resolve_matches_wrapper(self):
        a = resolve_water_state(QualityAtPressure(P=300.0, x=0.4))
        b = water_state(P=300.0, x=0.4)
        assert jnp.allclose(a.h, b.h)

    def test_unsupported_input_raises(self):
        with pytest.raises(TypeError, match="Unsupported water input"):
            resolve_water_state((101.325, 373.15))

    def test_zero_quality_matches_saturated_liquid(self):
        with_quality = water_state(P=101.325, T=373.15, x=0.0)
        without = water_state(P=101.325, T=373.15)
        for name in ("v", "h", "s", "u"):
            assert jnp.allclose(getattr(with_quality, name), getattr(without, name), rtol=1e-5)
