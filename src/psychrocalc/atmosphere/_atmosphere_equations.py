"""
Standard atmosphere and conversions between station and sea level pressure.

References:
    ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 3 and 4
    Hess SL, Introduction to theoretical meteorology, Holt Rinehart and
    Winston, NY 1959, ch. 6.5
    Stull RB, Meteorology for scientists and engineers, 2nd edition,
    Brooks/Cole 2000, ch. 1
"""

from typing import Union

import numpy as np
import numpy.typing as npt

from psychrocalc.atmosphere._atmosphere_constants import ATMOSPHERE_CONSTANTS_REGISTRY
from psychrocalc.shared._dispatch import as_scalar_or_array, broadcast_inputs
from psychrocalc.shared._enum_tools import parse_enum
from psychrocalc.units._enums import UnitSystem
from psychrocalc.units._unit_constants import UNIT_CONSTANTS_REGISTRY


def get_standard_atm_pressure(
    altitude: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Standard atmosphere barometric pressure at a given altitude (eqn 3).

    Parameters
    ----------
    altitude : float or array-like
        Altitude in ft [IP] or m [SI].
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Pressure in psi [IP] or Pa [SI].

    Examples
    --------
    >>> get_standard_atm_pressure(1000.0, unit_system='ip')
    14.175...
    """
    c = ATMOSPHERE_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    altitude = np.asarray(altitude, dtype=np.float64)

    pressure = c.sea_level_pressure * (1.0 - c.pressure_lapse * altitude) ** c.pressure_exponent
    return as_scalar_or_array(pressure)


def get_standard_atm_temperature(
    altitude: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Standard atmosphere temperature at a given altitude (eqn 4), in °F [IP]
    or °C [SI].
    """
    c = ATMOSPHERE_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    altitude = np.asarray(altitude, dtype=np.float64)

    return as_scalar_or_array(c.sea_level_temperature - c.temperature_lapse * altitude)


def get_sea_level_pressure(
    station_pressure: Union[float, npt.ArrayLike],
    altitude: Union[float, npt.ArrayLike],
    t_dry_bulb: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Sea level pressure from station pressure.

    The air column is taken at the station temperature plus half the
    standard lapse over the altitude, and the pressure is reduced with the
    hypsometric equation P_sl = P_station·exp(z / H).

    Parameters
    ----------
    station_pressure : float or array-like
        Observed station pressure in psi [IP] or Pa [SI].
    altitude : float or array-like
        Altitude in ft [IP] or m [SI].
    t_dry_bulb : float or array-like
        Dry-bulb temperature in °F [IP] or °C [SI]. The US standard
        procedure uses the average of the current station temperature and
        the one from 12 hours earlier.
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Sea level pressure in psi [IP] or Pa [SI].
    """
    unit_system = parse_enum(value=unit_system, enum_class=UnitSystem)
    c = ATMOSPHERE_CONSTANTS_REGISTRY[unit_system]
    zero_offset = UNIT_CONSTANTS_REGISTRY[unit_system].zero_offset

    station_pressure, altitude, t_dry_bulb = broadcast_inputs(station_pressure, altitude, t_dry_bulb)

    t_column = t_dry_bulb + c.column_lapse * altitude / 2.0
    scale_height = c.r_air * (t_column + zero_offset) / c.gravity

    return as_scalar_or_array(station_pressure * np.exp(altitude / scale_height))


def get_station_pressure(
    sea_level_pressure: Union[float, npt.ArrayLike],
    altitude: Union[float, npt.ArrayLike],
    t_dry_bulb: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Station pressure from sea level pressure, the inverse of
    get_sea_level_pressure().
    """
    reduction = get_sea_level_pressure(1.0, altitude, t_dry_bulb, unit_system)
    return as_scalar_or_array(np.asarray(sea_level_pressure, dtype=np.float64) / reduction)
