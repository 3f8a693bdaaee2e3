"""
Exceptions raised by the psychrometric calculations.

Implements:
 - PsychroError (base)
 - UnitSystemNotSetError (configuration error)
 - PsychroDomainError (input outside the valid range)
 - ConvergenceError (solver ran out of iterations)
"""

from typing import Optional


class PsychroError(Exception):
    """Base class for every error raised by psychrocalc."""


class UnitSystemNotSetError(PsychroError, RuntimeError):
    """
    Raised when a calculation reads the process-wide unit system before
    ``set_unit_system`` has been called.
    """


class PsychroDomainError(PsychroError, ValueError):
    """
    Raised when an input lies outside the physically or mathematically valid
    range of an equation (negative humidity ratio, relative humidity outside
    [0, 1], temperature outside the saturation model bounds, ...).
    """


class ConvergenceError(PsychroError, RuntimeError):
    """
    Raised when an iterative solver exhausts its iteration limit without
    meeting its tolerance.

    Attributes
    ----------
    iterations : int or None
        Number of iterations performed before giving up.
    """

    def __init__(self, message: str, iterations: Optional[int] = None):
        super().__init__(message)
        self.iterations = iterations
