"""
Constants for the ASHRAE saturation vapor pressure equations.

Implements:
- Over ice, eqn 5 (below the triple point)
- Over liquid water, eqn 6 (above the triple point)

for both IP and SI units.

References:
    ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 5 & 6
    Hyland, R. W. and A. Wexler (1983)
"""

from typing import NamedTuple

from psychrocalc.units._enums import UnitSystem


class SaturationConstants(NamedTuple):
    """
    Coefficients of the Hyland-Wexler form used by ASHRAE.

    Equation:
        ln(pws) = A/T + B + C·T + D·T² + E·T³ + F·T⁴ + G·ln(T)

    with T the absolute temperature (°R [IP] or K [SI]). Signs are carried
    by the coefficients.
    """

    A: float
    B: float
    C: float
    D: float
    E: float
    F: float
    G: float


class SaturationCurve(NamedTuple):
    """The two branches of the saturation curve for one unit system."""

    ice: SaturationConstants
    water: SaturationConstants


SI_ICE = SaturationConstants(
    A=-5.6745359e3,
    B=6.3925247,
    C=-9.677843e-3,
    D=6.2215701e-7,
    E=2.0747825e-9,
    F=-9.484024e-13,
    G=4.1635019,
)

SI_WATER = SaturationConstants(
    A=-5.8002206e3,
    B=1.3914993,
    C=-4.8640239e-2,
    D=4.1764768e-5,
    E=-1.4452093e-8,
    F=0.0,
    G=6.5459673,
)

IP_ICE = SaturationConstants(
    A=-1.0214165e4,
    B=-4.8932428,
    C=-5.3765794e-3,
    D=1.9202377e-7,
    E=3.5575832e-10,
    F=-9.0344688e-14,
    G=4.1635019,
)

IP_WATER = SaturationConstants(
    A=-1.0440397e4,
    B=-1.1294650e1,
    C=-2.7022355e-2,
    D=1.2890360e-5,
    E=-2.4780681e-9,
    F=0.0,
    G=6.5459673,
)

SATURATION_CONSTANTS_REGISTRY = {
    UnitSystem.IP: SaturationCurve(ice=IP_ICE, water=IP_WATER),
    UnitSystem.SI: SaturationCurve(ice=SI_ICE, water=SI_WATER),
}
