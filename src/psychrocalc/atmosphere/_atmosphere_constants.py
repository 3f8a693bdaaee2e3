"""
Coefficients of the standard atmosphere and the hypsometric pressure
reduction.
"""

from typing import NamedTuple

from psychrocalc.units._enums import UnitSystem


class AtmosphereConstants(NamedTuple):
    """
    Attributes
    ----------
    sea_level_pressure : float
        Standard pressure at sea level, psi [IP] or Pa [SI].
    pressure_lapse : float
        Altitude coefficient of eqn 3, 1/ft [IP] or 1/m [SI].
    pressure_exponent : float
        Exponent of eqn 3.
    sea_level_temperature : float
        Standard temperature at sea level, °F [IP] or °C [SI].
    temperature_lapse : float
        Standard lapse rate of eqn 4, °F/ft [IP] or °C/m [SI].
    column_lapse : float
        Lapse rate used for the mean air column temperature.
    r_air : float
        Gas constant of air in the scale height, ft·lbf/lb/°R [IP] or J/kg/K [SI].
    gravity : float
        Divides r_air·T to give the scale height; 1 [IP] (lbf = lb·g), 9.807 m/s² [SI].
    """

    sea_level_pressure: float
    pressure_lapse: float
    pressure_exponent: float
    sea_level_temperature: float
    temperature_lapse: float
    column_lapse: float
    r_air: float
    gravity: float


IP_ATMOSPHERE = AtmosphereConstants(
    sea_level_pressure=14.696,
    pressure_lapse=6.8754e-06,
    pressure_exponent=5.2559,
    sea_level_temperature=59.0,
    temperature_lapse=0.00356620,
    column_lapse=0.0036,
    r_air=53.351,
    gravity=1.0,
)

SI_ATMOSPHERE = AtmosphereConstants(
    sea_level_pressure=101325.0,
    pressure_lapse=2.25577e-05,
    pressure_exponent=5.2559,
    sea_level_temperature=15.0,
    temperature_lapse=0.0065,
    column_lapse=0.0065,
    r_air=287.055,
    gravity=9.807,
)

ATMOSPHERE_CONSTANTS_REGISTRY = {
    UnitSystem.IP: IP_ATMOSPHERE,
    UnitSystem.SI: SI_ATMOSPHERE,
}
