from typing import NamedTuple, Union

import numpy.typing as npt

Value = Union[float, npt.NDArray]


class PsychrometricState(NamedTuple):
    """
    Complete set of psychrometric properties of a moist air state.

    Fields are floats for scalar inputs and ndarrays of the broadcast input
    shape for array inputs. Units follow the unit system of the calculator
    that produced the state.

    Attributes
    ----------
    t_dry_bulb : float or ndarray
        Dry-bulb temperature, °F [IP] or °C [SI].
    pressure : float or ndarray
        Atmospheric pressure, psi [IP] or Pa [SI].
    hum_ratio : float or ndarray
        Humidity ratio, never below MIN_HUM_RATIO.
    t_wet_bulb : float or ndarray
        Thermodynamic wet-bulb temperature.
    t_dew_point : float or ndarray
        Dew point temperature.
    rel_hum : float or ndarray
        Relative humidity in [0, 1].
    vapor_pressure : float or ndarray
        Partial pressure of water vapor.
    moist_air_enthalpy : float or ndarray
        Btu/lb [IP] or J/kg [SI] of dry air.
    moist_air_volume : float or ndarray
        ft³/lb [IP] or m³/kg [SI] of dry air.
    degree_of_saturation : float or ndarray
        Humidity ratio over saturation humidity ratio.
    moist_air_density : float or ndarray
        lb/ft³ [IP] or kg/m³ [SI].
    """

    t_dry_bulb: Value
    pressure: Value
    hum_ratio: Value
    t_wet_bulb: Value
    t_dew_point: Value
    rel_hum: Value
    vapor_pressure: Value
    moist_air_enthalpy: Value
    moist_air_volume: Value
    degree_of_saturation: Value
    moist_air_density: Value
