"""Tests for steady-flow device balances."""

import jax.numpy as jnp
import pytest

from jax_thermolab.processes.fluids import AIR, WATER
from jax_thermolab.processes.steady_flow import (
    ISENTROPIC_EXPONENT,
    DeviceType,
    kinetic_energy_change,
    potential_energy_change,
    steady_flow_device,
)

CP = AIR.cp_flow


class TestEnergyTerms:
    """Tests for kinetic and potential energy changes."""

    def test_kinetic_energy(self):
        assert jnp.allclose(kinetic_energy_change((10.0, 300.0)), (90000.0 - 100.0) / 2000.0)

    def test_potential_energy(self):
        assert jnp.allclose(potential_energy_change((0.0, 100.0)), 0.981)

    def test_omitted_terms_are_zero(self):
        assert float(kinetic_energy_change(None)) == 0.0
        assert float(potential_energy_change(None)) == 0.0


class TestWorkDevices:
    """Tests for turbines, compressors and pumps."""

    def test_turbine(self):
        result = steady_flow_device(DeviceType.TURBINE, AIR, 1000.0, 1000.0, 100.0, efficiency=0.85)
        w_s = CP * 1000.0 * (1.0 - 0.1**ISENTROPIC_EXPONENT)
        assert jnp.allclose(result.w, 0.85 * w_s, rtol=1e-5)
        assert jnp.allclose(result.outlet.T, 1000.0 - 0.85 * w_s / CP, rtol=1e-5)
        assert jnp.allclose(result.outlet.P, 100.0)
        assert float(result.q) == 0.0

    def test_compressor_consumes_work(self):
        result = steady_flow_device(DeviceType.COMPRESSOR, AIR, 100.0, 300.0, 1000.0, efficiency=0.8)
        w_s = CP * 300.0 * (10.0**ISENTROPIC_EXPONENT - 1.0)
        assert jnp.allclose(result.w, -w_s / 0.8, rtol=1e-5)
        assert float(result.outlet.T) > 300.0

    def test_lower_efficiency_less_turbine_work(self):
        good = steady_flow_device(DeviceType.TURBINE, AIR, 1000.0, 1000.0, 100.0, efficiency=0.9)
        poor = steady_flow_device(DeviceType.TURBINE, AIR, 1000.0, 1000.0, 100.0, efficiency=0.6)
        assert float(poor.w) < float(good.w)

    def test_pump_matches_compressor(self):
        pump = steady_flow_device(DeviceType.PUMP, AIR, 100.0, 300.0, 500.0)
        compressor = steady_flow_device(DeviceType.COMPRESSOR, AIR, 100.0, 300.0, 500.0)
        assert jnp.allclose(pump.w, compressor.w)

    def test_water_uses_flow_cp(self):
        result = steady_flow_device(DeviceType.TURBINE, WATER, 1000.0, 700.0, 100.0, efficiency=1.0)
        w_s = 1.95 * 700.0 * (1.0 - 0.1**ISENTROPIC_EXPONENT)
        assert jnp.allclose(result.w, w_s, rtol=1e-5)


class TestNonWorkDevices:
    """Tests for nozzles, valves and heat exchangers."""

    def test_valve_isenthalpic(self):
        result = steady_flow_device(DeviceType.VALVE, AIR, 500.0, 350.0, 100.0)
        assert jnp.allclose(result.outlet.T, 350.0)
        assert jnp.allclose(result.outlet.h, result.inlet.h)
        assert float(result.w) == 0.0
        assert float(result.q) == 0.0

    def test_nozzle_converts_enthalpy(self):
        result = steady_flow_device(
            DeviceType.NOZZLE, AIR, 300.0, 500.0, 100.0, velocities=(10.0, 300.0)
        )
        d_ke = (300.0**2 - 10.0**2) / 2000.0
        assert jnp.allclose(result.outlet.T, 500.0 - d_ke / CP, rtol=1e-5)
        assert jnp.allclose(result.inlet.h - result.outlet.h, d_ke, rtol=1e-3)

    def test_heat_exchanger_default_rise(self):
        result = steady_flow_device(DeviceType.HEAT_EXCHANGER, AIR, 200.0, 300.0, 200.0)
        assert jnp.allclose(result.outlet.T, 325.0)
        assert jnp.allclose(result.q, CP * 25.0, rtol=1e-5)

    def test_heat_exchanger_with_elevation(self):
        result = steady_flow_device(
            DeviceType.HEAT_EXCHANGER,
            AIR,
            200.0,
            300.0,
            200.0,
            elevations=(0.0, 100.0),
            temperature_rise=10.0,
        )
        assert jnp.allclose(result.q, CP * 10.0 + 0.981, rtol=1e-5)

    @pytest.mark.parametrize("device", list(DeviceType))
    def test_equation_label(self, device):
        result = steady_flow_device(device, AIR, 200.0, 400.0, 100.0)
        assert isinstance(result.equation, str)
        assert result.equation
