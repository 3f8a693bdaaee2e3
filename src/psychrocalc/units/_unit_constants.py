"""
Unit-dependent constants shared by the psychrometric equations.

References:
    ASHRAE Handbook - Fundamentals (2017) ch. 1 and ch. 39
"""

from typing import NamedTuple

from psychrocalc.units._enums import UnitSystem

ZERO_FAHRENHEIT_AS_RANKINE = 459.67
ZERO_CELSIUS_AS_KELVIN = 273.15

# Temperature tolerance of the solvers, 0.001 K expressed in each unit system
TOLERANCE_SI = 0.001
TOLERANCE_IP = 0.001 * 9.0 / 5.0


class UnitConstants(NamedTuple):
    """
    Scalars that change with the system of units.

    All fields are floats so the tuple can be passed straight into the
    Numba kernels.

    Attributes
    ----------
    zero_offset : float
        Offset from the user temperature scale to the absolute one
        (°F -> °R or °C -> K).
    triple_point : float
        Triple point of water. Branch boundary of the saturation curve.
    freezing_point : float
        Freezing point of water. Branch boundary of the wet-bulb equation.
    t_min : float
        Lower validity bound of the saturation vapor pressure equation.
    t_max : float
        Upper validity bound of the saturation vapor pressure equation.
    tolerance : float
        Convergence tolerance on temperatures for both solvers.
    r_dry_air : float
        Gas constant of dry air, ft·lbf/lb/°R [IP] or J/kg/K [SI].
    pressure_factor : float
        Converts pressure to the units of r_dry_air: 144 in²/ft² [IP], 1 [SI].
    """

    zero_offset: float
    triple_point: float
    freezing_point: float
    t_min: float
    t_max: float
    tolerance: float
    r_dry_air: float
    pressure_factor: float


IP_CONSTANTS = UnitConstants(
    zero_offset=ZERO_FAHRENHEIT_AS_RANKINE,
    triple_point=32.018,
    freezing_point=32.0,
    t_min=-148.0,
    t_max=392.0,
    tolerance=TOLERANCE_IP,
    r_dry_air=53.350,
    pressure_factor=144.0,
)

SI_CONSTANTS = UnitConstants(
    zero_offset=ZERO_CELSIUS_AS_KELVIN,
    triple_point=0.01,
    freezing_point=0.0,
    t_min=-100.0,
    t_max=200.0,
    tolerance=TOLERANCE_SI,
    r_dry_air=287.042,
    pressure_factor=1.0,
)

UNIT_CONSTANTS_REGISTRY = {
    UnitSystem.IP: IP_CONSTANTS,
    UnitSystem.SI: SI_CONSTANTS,
}
