"""Tests for JIT compilation and vectorization of the property calculators.

Each calculator should:
1. JIT compile without error (selectors closed over as static values)
2. Match eager execution
3. Vectorize over a batch of inputs with vmap
"""

import jax
import jax.numpy as jnp
import pytest

from jax_thermolab.core.components import ETHANOL, WATER
from jax_thermolab.core.eos import eos_state
from jax_thermolab.core.mixture import mixture_curve
from jax_thermolab.core.saturation import saturation_lookup
from jax_thermolab.core.thermodynamics import ideal_gas_state
from jax_thermolab.core.types import EOSModel, Phase
from jax_thermolab.core.water import water_state
from jax_thermolab.processes.fluids import AIR
from jax_thermolab.processes.steady_flow import DeviceType, steady_flow_device


class TestJITCompilation:
    """Tests for JIT compilation."""

    def test_saturation_lookup(self):
        lookup = jax.jit(lambda T: saturation_lookup("T", T))
        eager = saturation_lookup("T", 123.0)
        jitted = lookup(123.0)
        assert jnp.allclose(jitted.P, eager.P)
        assert jnp.allclose(jitted.hg, eager.hg)

    def test_ideal_gas(self):
        jitted = jax.jit(ideal_gas_state)(150.0, 450.0)
        eager = ideal_gas_state(150.0, 450.0)
        assert jnp.allclose(jitted.s, eager.s)
        assert int(jitted.phase_code) == Phase.IDEAL_GAS

    def test_eos_state(self):
        fn = jax.jit(lambda P, T: eos_state(P, T, EOSModel.PENG_ROBINSON, WATER))
        jitted = fn(101.325, 373.15)
        eager = eos_state(101.325, 373.15, EOSModel.PENG_ROBINSON, WATER)
        assert jnp.allclose(jitted.z, eager.z)
        assert jnp.allclose(jitted.phi, eager.phi)

    @pytest.mark.parametrize("T", [300.0, 373.15, 450.0])
    def test_water_pressure_temperature(self, T):
        fn = jax.jit(lambda P, T: water_state(P=P, T=T))
        jitted = fn(101.325, T)
        eager = water_state(P=101.325, T=T)
        assert int(jitted.phase_code) == int(eager.phase_code)
        assert jnp.allclose(jitted.h, eager.h)

    def test_water_quality(self):
        fn = jax.jit(lambda P, x: water_state(P=P, x=x))
        assert jnp.allclose(fn(500.0, 0.3).h, water_state(P=500.0, x=0.3).h)

    def test_mixture_curve(self):
        fn = jax.jit(lambda T, A: mixture_curve(ETHANOL, WATER, T, A))
        jitted = fn(70.0, 1.2)
        eager = mixture_curve(ETHANOL, WATER, 70.0, 1.2)
        assert jnp.allclose(jitted.points.P_total, eager.points.P_total)
        assert bool(jitted.unstable) == bool(eager.unstable)

    def test_steady_flow(self):
        fn = jax.jit(
            lambda P1, T1, P2, eta: steady_flow_device(DeviceType.TURBINE, AIR, P1, T1, P2, eta).w
        )
        eager = steady_flow_device(DeviceType.TURBINE, AIR, 1000.0, 900.0, 100.0, 0.85).w
        assert jnp.allclose(fn(1000.0, 900.0, 100.0, 0.85), eager)


class TestVmap:
    """Tests for batched evaluation."""

    def test_eos_over_pressure(self):
        P_values = jnp.linspace(50.0, 500.0, 6)
        states = jax.vmap(lambda P: eos_state(P, 500.0, EOSModel.PENG_ROBINSON, WATER))(P_values)
        assert states.z.shape == (6,)
        # Compressibility drops as pressure rises
        assert jnp.all(jnp.diff(states.z) < 0)

    def test_mixture_over_interaction(self):
        A_values = jnp.array([0.0, 1.0, 2.5])
        curves = jax.vmap(lambda A: mixture_curve(ETHANOL, WATER, 60.0, A))(A_values)
        assert curves.points.P_total.shape == (3, 21)
        assert [bool(u) for u in curves.unstable] == [False, False, True]

    def test_water_quality_sweep(self):
        x_values = jnp.linspace(0.0, 1.0, 11)
        states = jax.vmap(lambda x: water_state(P=1000.0, x=x))(x_values)
        assert jnp.all(jnp.diff(states.h) > 0)
        assert jnp.all(states.phase_code == int(Phase.SATURATED_MIXTURE))
