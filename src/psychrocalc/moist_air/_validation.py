"""
Range checks shared by the moist air relations.
"""

from typing import Union

import numpy as np
import numpy.typing as npt

from psychrocalc.shared._exceptions import PsychroDomainError


def check_hum_ratio(hum_ratio: Union[float, npt.ArrayLike]) -> None:
    """
    Raises
    ------
    PsychroDomainError
        If any humidity ratio is negative or NaN.
    """
    if np.any(~(np.asarray(hum_ratio, dtype=np.float64) >= 0.0)):
        raise PsychroDomainError("Humidity ratio cannot be negative")


def check_rel_hum(rel_hum: Union[float, npt.ArrayLike]) -> None:
    """
    Raises
    ------
    PsychroDomainError
        If any relative humidity is outside [0, 1] or NaN.
    """
    rel_hum_array = np.asarray(rel_hum, dtype=np.float64)

    if np.any(~((rel_hum_array >= 0.0) & (rel_hum_array <= 1.0))):
        raise PsychroDomainError("Relative humidity is outside range [0, 1]")


def check_vapor_pressure(vapor_pressure: Union[float, npt.ArrayLike]) -> None:
    """
    Raises
    ------
    PsychroDomainError
        If any vapor pressure is negative or NaN.
    """
    if np.any(~(np.asarray(vapor_pressure, dtype=np.float64) >= 0.0)):
        raise PsychroDomainError("Partial pressure of water vapor in moist air cannot be negative")


def check_not_above_dry_bulb(
    temp: Union[float, npt.ArrayLike],
    t_dry_bulb: Union[float, npt.ArrayLike],
    name: str,
) -> None:
    """
    Raises
    ------
    PsychroDomainError
        If a wet-bulb or dew point temperature exceeds the dry-bulb temperature.
    """
    if np.any(~(np.asarray(temp, dtype=np.float64) <= np.asarray(t_dry_bulb, dtype=np.float64))):
        raise PsychroDomainError(f"{name} temperature is above dry bulb temperature")
