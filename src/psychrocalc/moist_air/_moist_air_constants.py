"""
Coefficients of the moist air relations of ASHRAE Handbook - Fundamentals
(2017) ch. 1.

References:
    ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 20, 26, 28, 30, 33, 35
"""

from typing import NamedTuple

from psychrocalc.units._enums import UnitSystem

MIN_HUM_RATIO = 1e-7
"""float: Floor applied to every humidity ratio, lb_H2O/lb_dry_air [IP] or kg_H2O/kg_dry_air [SI]."""

MOLECULAR_WEIGHT_RATIO = 0.621945
"""float: Ratio of the molecular weights of water and dry air."""

MOIST_AIR_VOLUME_FACTOR = 1.607858
"""float: Inverse of MOLECULAR_WEIGHT_RATIO, as it appears in eqn 26."""


class WetBulbConstants(NamedTuple):
    """
    Coefficients of the humidity ratio from wet-bulb temperature equation.

    Equation:
        W = ((latent - latent_slope·Twb)·Ws* - cp_air·(Tdb - Twb))
            / (latent + cp_vapor·Tdb - wet_bulb_slope·Twb)

    Attributes
    ----------
    latent : float
        Latent heat term, Btu/lb [IP] or kJ/kg [SI].
    latent_slope : float
        Temperature coefficient of the latent term.
    cp_air : float
        Specific heat of dry air.
    cp_vapor : float
        Specific heat of water vapor.
    wet_bulb_slope : float
        Specific heat of liquid water (eqn 33) or ice (eqn 35).
    """

    latent: float
    latent_slope: float
    cp_air: float
    cp_vapor: float
    wet_bulb_slope: float


class WetBulbCurve(NamedTuple):
    """Wet-bulb coefficients over ice (eqn 35) and liquid water (eqn 33)."""

    ice: WetBulbConstants
    water: WetBulbConstants


class EnthalpyConstants(NamedTuple):
    """
    Coefficients of the moist air enthalpy equation.

    Equation:
        h = scale·(cp_air·T + W·(latent + cp_vapor·T))

    Attributes
    ----------
    scale : float
        1 [IP] for Btu/lb, 1000 [SI] to convert kJ/kg to J/kg.
    cp_air : float
        Specific heat of dry air.
    latent : float
        Enthalpy of saturated water vapor at 0 °F [IP] or 0 °C [SI].
    cp_vapor : float
        Specific heat of water vapor.
    """

    scale: float
    cp_air: float
    latent: float
    cp_vapor: float


SI_WET_BULB_WATER = WetBulbConstants(
    latent=2501.0, latent_slope=2.326, cp_air=1.006, cp_vapor=1.86, wet_bulb_slope=4.186
)
SI_WET_BULB_ICE = WetBulbConstants(
    latent=2830.0, latent_slope=0.24, cp_air=1.006, cp_vapor=1.86, wet_bulb_slope=2.1
)
IP_WET_BULB_WATER = WetBulbConstants(
    latent=1093.0, latent_slope=0.556, cp_air=0.240, cp_vapor=0.444, wet_bulb_slope=1.0
)
IP_WET_BULB_ICE = WetBulbConstants(
    latent=1220.0, latent_slope=0.04, cp_air=0.240, cp_vapor=0.444, wet_bulb_slope=0.48
)

WET_BULB_CONSTANTS_REGISTRY = {
    UnitSystem.IP: WetBulbCurve(ice=IP_WET_BULB_ICE, water=IP_WET_BULB_WATER),
    UnitSystem.SI: WetBulbCurve(ice=SI_WET_BULB_ICE, water=SI_WET_BULB_WATER),
}

ENTHALPY_CONSTANTS_REGISTRY = {
    UnitSystem.IP: EnthalpyConstants(scale=1.0, cp_air=0.240, latent=1061.0, cp_vapor=0.444),
    UnitSystem.SI: EnthalpyConstants(scale=1000.0, cp_air=1.006, latent=2501.0, cp_vapor=1.86),
}
