"""
Enums for selecting the system of units.
"""

from enum import Enum


class UnitSystem(Enum):
    """
    System of units used by every psychrometric formula.

    Attributes
    ----------
    IP : str
        Inch-pound units: °F, psi, Btu/lb, ft³/lb.
    SI : str
        International system: °C, Pa, J/kg, m³/kg.
    """

    IP = "ip"
    SI = "si"
