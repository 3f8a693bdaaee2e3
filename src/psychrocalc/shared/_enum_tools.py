"""
Reusable tools for validating and parsing enums.
"""

from enum import Enum
from typing import Type, TypeVar, Union

E = TypeVar("E", bound=Enum)


def parse_enum(value: Union[str, E], enum_class: Type[E]) -> E:
    """Parse and validate an enum from a string or enum instance.

    Strings are matched case-insensitively against the member values first
    and then against the member names, so both ``"si"`` and ``"SI"`` resolve
    to ``UnitSystem.SI``. Enum instances of the expected class pass through.

    Parameters
    ----------
    value : str or E
        The value to parse. Either a string naming a member (by value or by
        name) or an instance of ``enum_class``.
    enum_class : Type[E]
        The enum class to parse into.

    Returns
    -------
    E
        Valid instance of ``enum_class``.

    Raises
    ------
    ValueError
        If the string does not match any member.
    TypeError
        If value is neither a string nor an instance of ``enum_class``.

    Examples
    --------
    >>> from psychrocalc.units import UnitSystem
    >>> parse_enum("IP", UnitSystem)
    <UnitSystem.IP: 'ip'>

    >>> parse_enum(UnitSystem.SI, UnitSystem)
    <UnitSystem.SI: 'si'>

    >>> parse_enum("metric", UnitSystem)
    ValueError: Invalid enum 'metric'. Available are the following: [ip, si]

    >>> parse_enum(1, UnitSystem)
    TypeError: value must be str or UnitSystem, got int
    """
    if isinstance(value, enum_class):
        return value

    if isinstance(value, str):
        key = value.strip().lower()

        for member in enum_class:
            if str(member.value).lower() == key or member.name.lower() == key:
                return member

        valid_enums = ", ".join([str(e.value) for e in enum_class])
        raise ValueError(
            f"Invalid enum '{value}'. Available are the following: [{valid_enums}]"
        )

    raise TypeError(
        f"value must be str or {enum_class.__name__}, got {type(value).__name__}"
    )
