"""
Conversions between temperature scales.

Exact conversions, ASHRAE Handbook - Fundamentals (2017) ch. 1 section 3.
"""

from typing import Union

import numpy as np
import numpy.typing as npt

from psychrocalc.units._unit_constants import (
    ZERO_CELSIUS_AS_KELVIN,
    ZERO_FAHRENHEIT_AS_RANKINE,
)


def get_t_rankine_from_t_fahrenheit(t_fahrenheit: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """Temperature in °R given temperature in °F."""
    return np.asarray(t_fahrenheit, dtype=np.float64)[()] + ZERO_FAHRENHEIT_AS_RANKINE


def get_t_fahrenheit_from_t_rankine(t_rankine: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """Temperature in °F given temperature in °R."""
    return np.asarray(t_rankine, dtype=np.float64)[()] - ZERO_FAHRENHEIT_AS_RANKINE


def get_t_kelvin_from_t_celsius(t_celsius: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """Temperature in K given temperature in °C."""
    return np.asarray(t_celsius, dtype=np.float64)[()] + ZERO_CELSIUS_AS_KELVIN


def get_t_celsius_from_t_kelvin(t_kelvin: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """Temperature in °C given temperature in K."""
    return np.asarray(t_kelvin, dtype=np.float64)[()] - ZERO_CELSIUS_AS_KELVIN
