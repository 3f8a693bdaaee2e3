"""
Conversions between humidity ratio, specific humidity, vapor pressure,
relative humidity and wet-bulb or dew point temperature that need no
iterative solver.

Every function accepts scalars or array-likes (broadcast together) and
returns a float for scalar inputs, an ndarray otherwise. Humidity ratios are
floored at MIN_HUM_RATIO.
"""

from typing import Union

import numpy as np
import numpy.typing as npt

from psychrocalc.moist_air._jit_equations import (
    _hum_ratio_from_wet_bulb_scalar,
    _hum_ratio_from_wet_bulb_vectorised,
)
from psychrocalc.moist_air._moist_air_constants import (
    MIN_HUM_RATIO,
    MOLECULAR_WEIGHT_RATIO,
    WET_BULB_CONSTANTS_REGISTRY,
)
from psychrocalc.moist_air._validation import (
    check_hum_ratio,
    check_not_above_dry_bulb,
    check_rel_hum,
    check_vapor_pressure,
)
from psychrocalc.shared._dispatch import (
    as_scalar_or_array,
    broadcast_inputs,
    dispatch_scalar_or_vector,
)
from psychrocalc.shared._exceptions import PsychroDomainError
from psychrocalc.units._enums import UnitSystem
from psychrocalc.vapor._vapor_equations import AshraeSaturationVapor


def get_hum_ratio_from_vapor_pressure(
    vapor_pressure: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
) -> Union[float, npt.NDArray]:
    """
    Humidity ratio from the partial pressure of water vapor.

    Reference: ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 20

    Parameters
    ----------
    vapor_pressure : float or array-like
        Partial pressure of water vapor in psi [IP] or Pa [SI].
    pressure : float or array-like
        Atmospheric pressure in psi [IP] or Pa [SI].

    Returns
    -------
    float or ndarray
        Humidity ratio in lb_H2O/lb_dry_air [IP] or kg_H2O/kg_dry_air [SI].

    Raises
    ------
    PsychroDomainError
        If the vapor pressure is negative.
    """
    check_vapor_pressure(vapor_pressure)
    vapor_pressure, pressure = broadcast_inputs(vapor_pressure, pressure)

    hum_ratio = MOLECULAR_WEIGHT_RATIO * vapor_pressure / (pressure - vapor_pressure)
    return as_scalar_or_array(np.maximum(hum_ratio, MIN_HUM_RATIO))


def get_vapor_pressure_from_hum_ratio(
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
) -> Union[float, npt.NDArray]:
    """
    Partial pressure of water vapor from humidity ratio.

    Reference: ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 20 solved for pw

    Parameters
    ----------
    hum_ratio : float or array-like
        Humidity ratio in lb_H2O/lb_dry_air [IP] or kg_H2O/kg_dry_air [SI].
    pressure : float or array-like
        Atmospheric pressure in psi [IP] or Pa [SI].

    Returns
    -------
    float or ndarray
        Partial pressure of water vapor in psi [IP] or Pa [SI].

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    check_hum_ratio(hum_ratio)
    hum_ratio, pressure = broadcast_inputs(hum_ratio, pressure)

    bounded_hum_ratio = np.maximum(hum_ratio, MIN_HUM_RATIO)
    return as_scalar_or_array(pressure * bounded_hum_ratio / (MOLECULAR_WEIGHT_RATIO + bounded_hum_ratio))


def get_specific_hum_from_hum_ratio(hum_ratio: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """
    Specific humidity from humidity ratio (eqn 9b).

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    check_hum_ratio(hum_ratio)

    bounded_hum_ratio = np.maximum(np.asarray(hum_ratio, dtype=np.float64), MIN_HUM_RATIO)
    return as_scalar_or_array(bounded_hum_ratio / (1.0 + bounded_hum_ratio))


def get_hum_ratio_from_specific_hum(specific_hum: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """
    Humidity ratio from specific humidity (eqn 9b solved for W).

    Raises
    ------
    PsychroDomainError
        If the specific humidity is outside [0, 1).
    """
    specific_hum = np.asarray(specific_hum, dtype=np.float64)

    if np.any(~((specific_hum >= 0.0) & (specific_hum < 1.0))):
        raise PsychroDomainError("Specific humidity is outside range [0, 1)")

    hum_ratio = specific_hum / (1.0 - specific_hum)
    return as_scalar_or_array(np.maximum(hum_ratio, MIN_HUM_RATIO))


def get_vapor_pressure_from_rel_hum(
    t_dry_bulb: Union[float, npt.ArrayLike],
    rel_hum: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Partial pressure of water vapor from relative humidity.

    Reference: ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 12, 22

    Parameters
    ----------
    t_dry_bulb : float or array-like
        Dry-bulb temperature in °F [IP] or °C [SI].
    rel_hum : float or array-like
        Relative humidity in [0, 1].
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Partial pressure of water vapor in psi [IP] or Pa [SI].

    Raises
    ------
    PsychroDomainError
        If the relative humidity is outside [0, 1] or the temperature is
        outside the saturation equation bounds.
    """
    check_rel_hum(rel_hum)
    sat_vapor_pressure = AshraeSaturationVapor(unit_system=unit_system).calculate(t_dry_bulb)

    return as_scalar_or_array(np.asarray(rel_hum, dtype=np.float64) * sat_vapor_pressure)


def get_rel_hum_from_vapor_pressure(
    t_dry_bulb: Union[float, npt.ArrayLike],
    vapor_pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Relative humidity from the partial pressure of water vapor.

    Reference: ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 12, 22

    Raises
    ------
    PsychroDomainError
        If the vapor pressure is negative.
    """
    check_vapor_pressure(vapor_pressure)
    sat_vapor_pressure = AshraeSaturationVapor(unit_system=unit_system).calculate(t_dry_bulb)

    return as_scalar_or_array(np.asarray(vapor_pressure, dtype=np.float64) / sat_vapor_pressure)


def get_vapor_pressure_from_dewpoint(
    t_dew_point: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Partial pressure of water vapor from dew point temperature, the
    saturation vapor pressure at the dew point (eqn 36).
    """
    return AshraeSaturationVapor(unit_system=unit_system).calculate(t_dew_point)


def get_hum_ratio_from_wet_bulb(
    t_dry_bulb: Union[float, npt.ArrayLike],
    t_wet_bulb: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Humidity ratio from dry-bulb and wet-bulb temperatures.

    Direct evaluation of ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 33
    (wet bulb at or above freezing) and eqn 35 (below freezing). This is the
    function the wet-bulb bisection solver inverts.

    Parameters
    ----------
    t_dry_bulb : float or array-like
        Dry-bulb temperature in °F [IP] or °C [SI].
    t_wet_bulb : float or array-like
        Wet-bulb temperature in °F [IP] or °C [SI].
    pressure : float or array-like
        Atmospheric pressure in psi [IP] or Pa [SI].
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Humidity ratio in lb_H2O/lb_dry_air [IP] or kg_H2O/kg_dry_air [SI].

    Raises
    ------
    PsychroDomainError
        If the wet-bulb temperature is above the dry-bulb temperature or
        outside the saturation equation bounds.

    Examples
    --------
    >>> get_hum_ratio_from_wet_bulb(86.0, 77.0, 14.175, unit_system='ip')
    0.01871...
    """
    check_not_above_dry_bulb(t_wet_bulb, t_dry_bulb, name="Wet bulb")

    vapor_equation = AshraeSaturationVapor(unit_system=unit_system)
    vapor_equation._check_bounds(t_wet_bulb)
    wet_bulb_curve = WET_BULB_CONSTANTS_REGISTRY[vapor_equation.unit_system]

    return dispatch_scalar_or_vector(
        scalar_func=_hum_ratio_from_wet_bulb_scalar,
        vector_func=_hum_ratio_from_wet_bulb_vectorised,
        inputs=(t_dry_bulb, t_wet_bulb, pressure),
        constants=(
            vapor_equation.unit,
            vapor_equation.curve.ice,
            vapor_equation.curve.water,
            wet_bulb_curve.ice,
            wet_bulb_curve.water,
        ),
    )


def get_hum_ratio_from_rel_hum(
    t_dry_bulb: Union[float, npt.ArrayLike],
    rel_hum: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Humidity ratio from dry-bulb temperature and relative humidity.

    Raises
    ------
    PsychroDomainError
        If the relative humidity is outside [0, 1].
    """
    vapor_pressure = get_vapor_pressure_from_rel_hum(t_dry_bulb, rel_hum, unit_system)
    return get_hum_ratio_from_vapor_pressure(vapor_pressure, pressure)


def get_rel_hum_from_hum_ratio(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Relative humidity from dry-bulb temperature and humidity ratio.

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    vapor_pressure = get_vapor_pressure_from_hum_ratio(hum_ratio, pressure)
    return get_rel_hum_from_vapor_pressure(t_dry_bulb, vapor_pressure, unit_system)


def get_hum_ratio_from_dewpoint(
    t_dew_point: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Humidity ratio from dew point temperature (eqn 13).
    """
    vapor_pressure = get_vapor_pressure_from_dewpoint(t_dew_point, unit_system)
    return get_hum_ratio_from_vapor_pressure(vapor_pressure, pressure)
