"""
Equation interface for the ASHRAE saturation vapor pressure model.
"""

from typing import Tuple, Union

import numpy as np
import numpy.typing as npt

from psychrocalc.shared._dispatch import dispatch_scalar_or_vector
from psychrocalc.shared._enum_tools import parse_enum
from psychrocalc.shared._exceptions import PsychroDomainError
from psychrocalc.units._enums import UnitSystem
from psychrocalc.units._unit_constants import UNIT_CONSTANTS_REGISTRY, UnitConstants
from psychrocalc.vapor._jit_equations import (
    _d_ln_sat_vapor_pressure_scalar,
    _d_ln_sat_vapor_pressure_vectorised,
    _sat_vapor_pressure_scalar,
    _sat_vapor_pressure_vectorised,
)
from psychrocalc.vapor._vapor_constants import (
    SATURATION_CONSTANTS_REGISTRY,
    SaturationCurve,
)


class AshraeSaturationVapor:
    """
    Saturation vapor pressure of water from the ASHRAE Handbook.

    Evaluates ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 5 (over ice)
    and eqn 6 (over liquid water), split at the triple point of water, and
    the analytic derivative of its natural log, which the dew point solver
    uses.

    Parameters
    ----------
    unit_system : str or UnitSystem
        'ip' (°F, psi) or 'si' (°C, Pa).

    Attributes
    ----------
    unit_system : UnitSystem
        System of units of inputs and outputs.
    unit : UnitConstants
        Unit-dependent constants (offsets, triple point, bounds, tolerance).
    curve : SaturationCurve
        Ice and water coefficients for the unit system.
    temp_bounds : tuple[float, float]
        Validity range: [-148, 392] °F or [-100, 200] °C.

    Examples
    --------
    >>> vapor = AshraeSaturationVapor(unit_system='si')
    >>> print(f"{vapor.calculate(25.0):.1f} Pa")
    3169.7 Pa

    >>> vapor = AshraeSaturationVapor(unit_system='ip')
    >>> print(f"{vapor.calculate(77.0):.5f} psi")
    0.45973 psi

    >>> import numpy as np
    >>> vapor.calculate(np.array([-4.0, 41.0, 212.0]))
    array([ 0.01497...,  0.12656..., 14.70...])
    """

    unit_system: UnitSystem
    unit: UnitConstants
    curve: SaturationCurve
    temp_bounds: Tuple[float, float]

    def __init__(self, unit_system: Union[str, UnitSystem]):
        self.unit_system = parse_enum(value=unit_system, enum_class=UnitSystem)
        self.unit = UNIT_CONSTANTS_REGISTRY[self.unit_system]
        self.curve = SATURATION_CONSTANTS_REGISTRY[self.unit_system]
        self._update_temp_bounds()

    def _update_temp_bounds(self) -> None:
        self.temp_bounds = (self.unit.t_min, self.unit.t_max)

    def _check_bounds(self, temp: Union[float, npt.ArrayLike]) -> None:
        """
        Reject temperatures outside the range of validity of the equations.

        Raises
        ------
        PsychroDomainError
            If any temperature is outside temp_bounds or is NaN.
        """
        temp_array = np.asarray(temp, dtype=np.float64)
        min_bound, max_bound = self.temp_bounds

        # NaN fails both comparisons and is rejected
        if np.any(~((temp_array >= min_bound) & (temp_array <= max_bound))):
            unit_label = "°F" if self.unit_system == UnitSystem.IP else "°C"
            raise PsychroDomainError(
                f"Dry bulb temperature must be in range [{min_bound:g}, {max_bound:g}]{unit_label}. "
                f"Got range [{np.min(temp_array):g}, {np.max(temp_array):g}]"
            )

    def get_temp_bounds(self) -> Tuple[float, float]:
        """Return the (min, max) validity range in °F [IP] or °C [SI]."""
        return self.temp_bounds

    def calculate(self, temp: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
        """
        Saturation vapor pressure at a given dry-bulb temperature.

        Parameters
        ----------
        temp : float or array-like
            Dry-bulb temperature(s) in °F [IP] or °C [SI].

        Returns
        -------
        float or ndarray
            Saturation vapor pressure in psi [IP] or Pa [SI].

        Raises
        ------
        PsychroDomainError
            If a temperature is outside temp_bounds or is NaN.
        """
        self._check_bounds(temp)

        return dispatch_scalar_or_vector(
            scalar_func=_sat_vapor_pressure_scalar,
            vector_func=_sat_vapor_pressure_vectorised,
            inputs=(temp,),
            constants=(self.unit, self.curve.ice, self.curve.water),
        )

    def calculate_ln_derivative(self, temp: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
        """
        Derivative of ln(saturation vapor pressure) with respect to temperature.

        Uses the same triple point split as calculate().

        Parameters
        ----------
        temp : float or array-like
            Dry-bulb temperature(s) in °F [IP] or °C [SI].

        Returns
        -------
        float or ndarray
            d ln(pws)/dT in 1/°F [IP] or 1/K [SI].
        """
        self._check_bounds(temp)

        return dispatch_scalar_or_vector(
            scalar_func=_d_ln_sat_vapor_pressure_scalar,
            vector_func=_d_ln_sat_vapor_pressure_vectorised,
            inputs=(temp,),
            constants=(self.unit, self.curve.ice, self.curve.water),
        )
