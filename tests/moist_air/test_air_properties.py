"""
Unit tests for the dry, saturated and moist air properties.

Reference values are from the ASHRAE Handbook - Fundamentals (2017) ch. 1
tables and from the PsychroLib test suite.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from psychrocalc.moist_air import (
    MIN_HUM_RATIO,
    get_degree_of_saturation,
    get_dry_air_density,
    get_dry_air_enthalpy,
    get_dry_air_volume,
    get_hum_ratio_from_enthalpy_and_t_dry_bulb,
    get_hum_ratio_from_rel_hum,
    get_moist_air_density,
    get_moist_air_enthalpy,
    get_moist_air_volume,
    get_sat_air_enthalpy,
    get_sat_hum_ratio,
    get_t_dry_bulb_from_enthalpy_and_hum_ratio,
    get_t_dry_bulb_from_moist_air_volume_and_hum_ratio,
    get_vapor_pressure_deficit,
)
from psychrocalc.shared import PsychroDomainError
from psychrocalc.vapor import AshraeSaturationVapor


# ==============================================================================
# Test Class: Dry air
# ==============================================================================

class TestDryAir:

    def test_si_enthalpy(self):
        assert_allclose(get_dry_air_enthalpy(25.0, unit_system='si'), 25148.0, rtol=3e-4)

    def test_ip_enthalpy(self):
        assert_allclose(get_dry_air_enthalpy(77.0, unit_system='ip'), 18.498, rtol=0.001)

    def test_si_volume(self):
        assert_allclose(get_dry_air_volume(25.0, 101325.0, unit_system='si'), 0.8443, rtol=0.001)

    def test_ip_volume(self):
        assert_allclose(get_dry_air_volume(77.0, 14.696, unit_system='ip'), 13.5251, rtol=0.001)

    def test_si_density(self):
        assert_allclose(get_dry_air_density(25.0, 101325.0, unit_system='si'), 1.0 / 0.8443, rtol=0.001)

    def test_ip_density(self):
        assert_allclose(get_dry_air_density(77.0, 14.696, unit_system='ip'), 1.0 / 13.5251, rtol=0.001)

    def test_density_is_reciprocal_of_volume(self, unit_system):
        volume = get_dry_air_volume(20.0, 90000.0, unit_system)
        density = get_dry_air_density(20.0, 90000.0, unit_system)

        assert_allclose(volume * density, 1.0, rtol=1e-12)

    def test_si_t_dry_bulb_from_enthalpy(self):
        result = get_t_dry_bulb_from_enthalpy_and_hum_ratio(81316.0, 0.02, unit_system='si')
        assert_allclose(result, 30.0, atol=0.001)

    def test_ip_t_dry_bulb_from_enthalpy(self):
        result = get_t_dry_bulb_from_enthalpy_and_hum_ratio(42.6168, 0.02, unit_system='ip')
        assert_allclose(result, 85.97, atol=0.05)

    def test_si_hum_ratio_from_enthalpy(self):
        result = get_hum_ratio_from_enthalpy_and_t_dry_bulb(81316.0, 30.0, unit_system='si')
        assert_allclose(result, 0.02, rtol=0.001)

    def test_ip_hum_ratio_from_enthalpy(self):
        result = get_hum_ratio_from_enthalpy_and_t_dry_bulb(42.6168, 86.0, unit_system='ip')
        assert_allclose(result, 0.02, rtol=0.001)

    def test_hum_ratio_from_dry_air_enthalpy_is_floored(self):
        enthalpy = get_dry_air_enthalpy(30.0, unit_system='si')
        assert get_hum_ratio_from_enthalpy_and_t_dry_bulb(enthalpy, 30.0, unit_system='si') == MIN_HUM_RATIO

    def test_negative_hum_ratio_raises(self):
        with pytest.raises(PsychroDomainError, match="Humidity ratio cannot be negative"):
            get_t_dry_bulb_from_enthalpy_and_hum_ratio(50000.0, -0.01, unit_system='si')


# ==============================================================================
# Test Class: Saturated air
# ==============================================================================

class TestSaturatedAir:

    @pytest.mark.parametrize("temp,expected,rtol", [
        (5.0, 0.005425, 0.005),
        (25.0, 0.020173, 0.005),
        (50.0, 0.086863, 0.01),
    ])
    def test_si_sat_hum_ratio(self, temp, expected, rtol):
        assert_allclose(get_sat_hum_ratio(temp, 101325.0, unit_system='si'), expected, rtol=rtol)

    @pytest.mark.parametrize("temp,expected,rtol", [
        (-4.0, 0.0006373, 0.01),
        (41.0, 0.005425, 0.005),
        (77.0, 0.020173, 0.005),
    ])
    def test_ip_sat_hum_ratio(self, temp, expected, rtol):
        assert_allclose(get_sat_hum_ratio(temp, 14.696, unit_system='ip'), expected, rtol=rtol)

    @pytest.mark.parametrize("temp,expected", [(-20.0, -18542.0), (5.0, 18639.0), (25.0, 76504.0)])
    def test_si_sat_air_enthalpy(self, temp, expected):
        assert_allclose(get_sat_air_enthalpy(temp, 101325.0, unit_system='si'), expected, rtol=0.01)

    @pytest.mark.parametrize("temp,expected", [(41.0, 15.699), (77.0, 40.576), (122.0, 126.066)])
    def test_ip_sat_air_enthalpy(self, temp, expected):
        assert_allclose(get_sat_air_enthalpy(temp, 14.696, unit_system='ip'), expected, rtol=0.01)

    def test_sat_hum_ratio_out_of_bounds(self):
        with pytest.raises(PsychroDomainError):
            get_sat_hum_ratio(-120.0, 101325.0, unit_system='si')

    def test_sat_hum_ratio_array(self):
        temps = np.array([[5.0, 25.0], [50.0, 85.0]])
        result = get_sat_hum_ratio(temps, 101325.0, unit_system='si')

        assert result.shape == (2, 2)
        assert np.all(np.diff(result.ravel()) > 0.0)

    def test_sat_hum_ratio_scalar_returns_float(self):
        assert isinstance(get_sat_hum_ratio(25.0, 101325.0, unit_system='si'), float)


# ==============================================================================
# Test Class: Moist air
# ==============================================================================

class TestMoistAir:

    def test_si_enthalpy(self):
        assert_allclose(get_moist_air_enthalpy(30.0, 0.02, unit_system='si'), 81316.0, rtol=3e-4)

    def test_ip_enthalpy(self):
        assert_allclose(get_moist_air_enthalpy(86.0, 0.02, unit_system='ip'), 42.6168, rtol=3e-4)

    def test_si_volume(self):
        assert_allclose(get_moist_air_volume(30.0, 0.02, 95461.0, unit_system='si'), 0.940855374352943, rtol=3e-4)

    def test_ip_volume(self):
        assert_allclose(get_moist_air_volume(86.0, 0.02, 14.175, unit_system='ip'), 14.7205749002918, rtol=3e-4)

    def test_si_density(self):
        assert_allclose(get_moist_air_density(30.0, 0.02, 95461.0, unit_system='si'), 1.08411986348219, rtol=3e-4)

    def test_ip_density(self):
        assert_allclose(get_moist_air_density(86.0, 0.02, 14.175, unit_system='ip'), 0.0692907720594378, rtol=3e-4)

    def test_si_t_dry_bulb_from_volume(self):
        result = get_t_dry_bulb_from_moist_air_volume_and_hum_ratio(0.940855374352943, 0.02, 95461.0, unit_system='si')
        assert_allclose(result, 30.0, rtol=3e-4)

    def test_ip_t_dry_bulb_from_volume(self):
        result = get_t_dry_bulb_from_moist_air_volume_and_hum_ratio(14.7205749002918, 0.02, 14.175, unit_system='ip')
        assert_allclose(result, 86.0, rtol=3e-4)

    def test_enthalpy_round_trip(self, unit_system):
        enthalpy = get_moist_air_enthalpy(24.0, 0.012, unit_system)
        result = get_t_dry_bulb_from_enthalpy_and_hum_ratio(enthalpy, 0.012, unit_system)

        assert_allclose(result, 24.0, rtol=1e-10)

    def test_zero_hum_ratio_uses_floor(self, unit_system):
        assert get_moist_air_enthalpy(20.0, 0.0, unit_system) == get_moist_air_enthalpy(
            20.0, MIN_HUM_RATIO, unit_system
        )

    def test_negative_hum_ratio_raises(self):
        with pytest.raises(PsychroDomainError):
            get_moist_air_volume(25.0, -0.001, 101325.0, unit_system='si')

    def test_broadcasting(self):
        result = get_moist_air_volume(np.array([10.0, 20.0, 30.0]), 0.01, 101325.0, unit_system='si')

        assert result.shape == (3,)
        assert np.all(np.diff(result) > 0.0)


# ==============================================================================
# Test Class: Vapor pressure deficit and degree of saturation
# ==============================================================================

class TestDeficitAndSaturation:

    def test_vapor_pressure_deficit(self):
        hum_ratio = get_hum_ratio_from_rel_hum(25.0, 0.5, 101325.0, unit_system='si')
        sat_vapor_pressure = AshraeSaturationVapor(unit_system='si').calculate(25.0)

        result = get_vapor_pressure_deficit(25.0, hum_ratio, 101325.0, unit_system='si')
        assert_allclose(result, 0.5 * sat_vapor_pressure, rtol=1e-9)

    def test_vapor_pressure_deficit_zero_at_saturation(self):
        sat_hum_ratio = get_sat_hum_ratio(25.0, 101325.0, unit_system='si')
        assert_allclose(get_vapor_pressure_deficit(25.0, sat_hum_ratio, 101325.0, unit_system='si'), 0.0, atol=1e-6)

    def test_degree_of_saturation_at_saturation(self, unit_system):
        sat_hum_ratio = get_sat_hum_ratio(20.0, 95000.0, unit_system)
        assert_allclose(get_degree_of_saturation(20.0, sat_hum_ratio, 95000.0, unit_system), 1.0)

    def test_degree_of_saturation_half(self):
        sat_hum_ratio = get_sat_hum_ratio(30.0, 101325.0, unit_system='si')
        result = get_degree_of_saturation(30.0, 0.5 * sat_hum_ratio, 101325.0, unit_system='si')

        assert_allclose(result, 0.5)

    def test_degree_of_saturation_negative_raises(self):
        with pytest.raises(PsychroDomainError):
            get_degree_of_saturation(30.0, -0.002, 101325.0, unit_system='si')
