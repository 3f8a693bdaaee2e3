"""
Properties of dry, saturated and moist air.

References:
    ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 1, 11, 14, 26, 28, 30
    ASHRAE Handbook - Fundamentals (2009) ch. 1 eqn 12 (degree of saturation)
    Oke (1987) eqn 2.13a (vapor pressure deficit)
"""

from typing import Union

import numpy as np
import numpy.typing as npt

from psychrocalc.moist_air._humidity_conversions import get_rel_hum_from_hum_ratio
from psychrocalc.moist_air._jit_equations import (
    _sat_hum_ratio_scalar,
    _sat_hum_ratio_vectorised,
)
from psychrocalc.moist_air._moist_air_constants import (
    ENTHALPY_CONSTANTS_REGISTRY,
    MIN_HUM_RATIO,
    MOIST_AIR_VOLUME_FACTOR,
)
from psychrocalc.moist_air._validation import check_hum_ratio
from psychrocalc.shared._dispatch import (
    as_scalar_or_array,
    broadcast_inputs,
    dispatch_scalar_or_vector,
)
from psychrocalc.shared._enum_tools import parse_enum
from psychrocalc.units._enums import UnitSystem
from psychrocalc.units._unit_constants import UNIT_CONSTANTS_REGISTRY
from psychrocalc.vapor._vapor_equations import AshraeSaturationVapor


def _bounded_hum_ratio(hum_ratio: Union[float, npt.ArrayLike]) -> npt.NDArray:
    check_hum_ratio(hum_ratio)
    return np.maximum(np.asarray(hum_ratio, dtype=np.float64), MIN_HUM_RATIO)


# Dry air

def get_dry_air_enthalpy(
    t_dry_bulb: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Dry air enthalpy from dry-bulb temperature (eqn 28).

    Returns
    -------
    float or ndarray
        Enthalpy in Btu/lb [IP] or J/kg [SI].
    """
    c = ENTHALPY_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    return as_scalar_or_array(c.scale * c.cp_air * np.asarray(t_dry_bulb, dtype=np.float64))


def get_dry_air_volume(
    t_dry_bulb: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Dry air specific volume from the perfect gas law (eqn 14).

    In IP units the pressure is converted from psi to lb/ft² with the
    factor 144.

    Parameters
    ----------
    t_dry_bulb : float or array-like
        Dry-bulb temperature in °F [IP] or °C [SI].
    pressure : float or array-like
        Atmospheric pressure in psi [IP] or Pa [SI].
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Specific volume in ft³/lb [IP] or m³/kg [SI].
    """
    unit = UNIT_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    t_dry_bulb, pressure = broadcast_inputs(t_dry_bulb, pressure)

    volume = unit.r_dry_air * (t_dry_bulb + unit.zero_offset) / (unit.pressure_factor * pressure)
    return as_scalar_or_array(volume)


def get_dry_air_density(
    t_dry_bulb: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Dry air density from the perfect gas law (eqn 14).

    Returns
    -------
    float or ndarray
        Density in lb/ft³ [IP] or kg/m³ [SI].
    """
    unit = UNIT_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    t_dry_bulb, pressure = broadcast_inputs(t_dry_bulb, pressure)

    density = unit.pressure_factor * pressure / unit.r_dry_air / (t_dry_bulb + unit.zero_offset)
    return as_scalar_or_array(density)


def get_t_dry_bulb_from_enthalpy_and_hum_ratio(
    moist_air_enthalpy: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Dry-bulb temperature from moist air enthalpy and humidity ratio
    (eqn 30 solved for T).

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    c = ENTHALPY_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    moist_air_enthalpy, hum_ratio = broadcast_inputs(moist_air_enthalpy, _bounded_hum_ratio(hum_ratio))

    t_dry_bulb = (moist_air_enthalpy / c.scale - c.latent * hum_ratio) / (c.cp_air + c.cp_vapor * hum_ratio)
    return as_scalar_or_array(t_dry_bulb)


def get_hum_ratio_from_enthalpy_and_t_dry_bulb(
    moist_air_enthalpy: Union[float, npt.ArrayLike],
    t_dry_bulb: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Humidity ratio from moist air enthalpy and dry-bulb temperature
    (eqn 30 solved for W), floored at MIN_HUM_RATIO.
    """
    c = ENTHALPY_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    moist_air_enthalpy, t_dry_bulb = broadcast_inputs(moist_air_enthalpy, t_dry_bulb)

    hum_ratio = (moist_air_enthalpy / c.scale - c.cp_air * t_dry_bulb) / (c.latent + c.cp_vapor * t_dry_bulb)
    return as_scalar_or_array(np.maximum(hum_ratio, MIN_HUM_RATIO))


# Saturated air

def get_sat_hum_ratio(
    t_dry_bulb: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Humidity ratio of saturated air (eqn 36 solved for W).

    Parameters
    ----------
    t_dry_bulb : float or array-like
        Dry-bulb temperature in °F [IP] or °C [SI].
    pressure : float or array-like
        Atmospheric pressure in psi [IP] or Pa [SI].
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Saturation humidity ratio, floored at MIN_HUM_RATIO.

    Raises
    ------
    PsychroDomainError
        If the temperature is outside the saturation equation bounds.
    """
    vapor_equation = AshraeSaturationVapor(unit_system=unit_system)
    vapor_equation._check_bounds(t_dry_bulb)

    return dispatch_scalar_or_vector(
        scalar_func=_sat_hum_ratio_scalar,
        vector_func=_sat_hum_ratio_vectorised,
        inputs=(t_dry_bulb, pressure),
        constants=(vapor_equation.unit, vapor_equation.curve.ice, vapor_equation.curve.water),
    )


def get_sat_air_enthalpy(
    t_dry_bulb: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Enthalpy of saturated air in Btu/lb [IP] or J/kg [SI].
    """
    sat_hum_ratio = get_sat_hum_ratio(t_dry_bulb, pressure, unit_system)
    return get_moist_air_enthalpy(t_dry_bulb, sat_hum_ratio, unit_system)


# Moist air

def get_vapor_pressure_deficit(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Vapor pressure deficit, pws(T)·(1 - RH), in psi [IP] or Pa [SI].

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    rel_hum = get_rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, unit_system)
    sat_vapor_pressure = AshraeSaturationVapor(unit_system=unit_system).calculate(t_dry_bulb)

    return as_scalar_or_array(sat_vapor_pressure * (1.0 - np.asarray(rel_hum)))


def get_degree_of_saturation(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Degree of saturation, the humidity ratio divided by the saturation
    humidity ratio at the same temperature and pressure.

    The definition is absent from the 2017 Handbook; the 2009 edition
    (ch. 1 eqn 12) is used.

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    bounded_hum_ratio = _bounded_hum_ratio(hum_ratio)
    sat_hum_ratio = get_sat_hum_ratio(t_dry_bulb, pressure, unit_system)

    return as_scalar_or_array(bounded_hum_ratio / sat_hum_ratio)


def get_moist_air_enthalpy(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Moist air enthalpy (eqn 30).

    Parameters
    ----------
    t_dry_bulb : float or array-like
        Dry-bulb temperature in °F [IP] or °C [SI].
    hum_ratio : float or array-like
        Humidity ratio in lb_H2O/lb_dry_air [IP] or kg_H2O/kg_dry_air [SI].
    unit_system : str or UnitSystem
        'ip' or 'si'.

    Returns
    -------
    float or ndarray
        Enthalpy in Btu/lb [IP] or J/kg [SI].

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.

    Examples
    --------
    >>> get_moist_air_enthalpy(86.0, 0.02, unit_system='ip')
    42.62368
    """
    c = ENTHALPY_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    t_dry_bulb, hum_ratio = broadcast_inputs(t_dry_bulb, _bounded_hum_ratio(hum_ratio))

    enthalpy = c.scale * (c.cp_air * t_dry_bulb + hum_ratio * (c.latent + c.cp_vapor * t_dry_bulb))
    return as_scalar_or_array(enthalpy)


def get_moist_air_volume(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Specific volume of moist air per unit mass of dry air (eqn 26).

    In IP units R_da/144 = 0.370486, the coefficient printed in eqn 26.

    Returns
    -------
    float or ndarray
        Specific volume in ft³/lb [IP] or m³/kg [SI].

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    unit = UNIT_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    t_dry_bulb, hum_ratio, pressure = broadcast_inputs(t_dry_bulb, _bounded_hum_ratio(hum_ratio), pressure)

    volume = (
        unit.r_dry_air
        * (t_dry_bulb + unit.zero_offset)
        * (1.0 + MOIST_AIR_VOLUME_FACTOR * hum_ratio)
        / (unit.pressure_factor * pressure)
    )
    return as_scalar_or_array(volume)


def get_t_dry_bulb_from_moist_air_volume_and_hum_ratio(
    moist_air_volume: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Dry-bulb temperature from moist air specific volume and humidity ratio
    (eqn 26 solved for T).

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    unit = UNIT_CONSTANTS_REGISTRY[parse_enum(value=unit_system, enum_class=UnitSystem)]
    moist_air_volume, hum_ratio, pressure = broadcast_inputs(
        moist_air_volume, _bounded_hum_ratio(hum_ratio), pressure
    )

    t_abs = (
        moist_air_volume
        * (unit.pressure_factor * pressure)
        / (unit.r_dry_air * (1.0 + MOIST_AIR_VOLUME_FACTOR * hum_ratio))
    )
    return as_scalar_or_array(t_abs - unit.zero_offset)


def get_moist_air_density(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
    unit_system: Union[str, UnitSystem],
) -> Union[float, npt.NDArray]:
    """
    Moist air density (eqn 11), (1 + W) / v.

    Returns
    -------
    float or ndarray
        Density in lb/ft³ [IP] or kg/m³ [SI].

    Raises
    ------
    PsychroDomainError
        If the humidity ratio is negative.
    """
    bounded_hum_ratio = _bounded_hum_ratio(hum_ratio)
    moist_air_volume = get_moist_air_volume(t_dry_bulb, bounded_hum_ratio, pressure, unit_system)

    return as_scalar_or_array((1.0 + bounded_hum_ratio) / moist_air_volume)
