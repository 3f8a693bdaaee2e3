"""
Process-wide unit system context.

Every formula in psychrocalc takes the unit system explicitly. This module
only backs the module-level convenience API: set the unit system once at
start-up, before any calculation, and do not change it while calculations
may be running. There is no lock.
"""

import logging
from typing import Optional, Union

from psychrocalc.shared._enum_tools import parse_enum
from psychrocalc.shared._exceptions import UnitSystemNotSetError
from psychrocalc.units._enums import UnitSystem
from psychrocalc.units._unit_constants import UNIT_CONSTANTS_REGISTRY, UnitConstants

logger = logging.getLogger(__name__)

_ACTIVE_UNIT_SYSTEM: Optional[UnitSystem] = None


def set_unit_system(unit_system: Union[str, UnitSystem]) -> None:
    """
    Set the system of units used by the module-level API.

    Parameters
    ----------
    unit_system : str or UnitSystem
        ``UnitSystem.IP`` / ``UnitSystem.SI`` or ``"ip"`` / ``"si"``.

    Raises
    ------
    ValueError
        If the string is not a recognised unit system.
    TypeError
        If unit_system is neither a string nor a UnitSystem.

    Examples
    --------
    >>> from psychrocalc.units import set_unit_system, is_imperial
    >>> set_unit_system("SI")
    >>> is_imperial()
    False
    """
    global _ACTIVE_UNIT_SYSTEM

    unit_system = parse_enum(value=unit_system, enum_class=UnitSystem)

    if _ACTIVE_UNIT_SYSTEM is not None and _ACTIVE_UNIT_SYSTEM != unit_system:
        logger.warning(
            "Unit system changed from %s to %s; results computed before the change "
            "are in the previous units.",
            _ACTIVE_UNIT_SYSTEM.name,
            unit_system.name,
        )

    _ACTIVE_UNIT_SYSTEM = unit_system
    logger.debug(
        "Unit system set to %s (tolerance %g)",
        unit_system.name,
        UNIT_CONSTANTS_REGISTRY[unit_system].tolerance,
    )


def get_unit_system() -> UnitSystem:
    """
    Return the active system of units.

    Raises
    ------
    UnitSystemNotSetError
        If set_unit_system() has not been called.
    """
    if _ACTIVE_UNIT_SYSTEM is None:
        raise UnitSystemNotSetError(
            "Unit system has not been set. Call set_unit_system() with 'ip' or 'si' first."
        )
    return _ACTIVE_UNIT_SYSTEM


def is_imperial() -> bool:
    """
    Check whether the active system of units is IP.

    Raises
    ------
    UnitSystemNotSetError
        If set_unit_system() has not been called.
    """
    return get_unit_system() == UnitSystem.IP


def get_unit_constants(unit_system: Union[str, UnitSystem]) -> UnitConstants:
    """Return the unit-dependent constants for a system of units."""
    unit_system = parse_enum(value=unit_system, enum_class=UnitSystem)
    return UNIT_CONSTANTS_REGISTRY[unit_system]


def get_tolerance(unit_system: Optional[Union[str, UnitSystem]] = None) -> float:
    """
    Return the solver temperature tolerance.

    0.001 K in SI and the same interval in °R (0.0018) in IP. Uses the
    active unit system when none is given.
    """
    if unit_system is None:
        unit_system = get_unit_system()
    return get_unit_constants(unit_system).tolerance
