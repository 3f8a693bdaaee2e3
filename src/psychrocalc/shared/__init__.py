from ._enum_tools import parse_enum

from ._exceptions import (
    PsychroError,
    UnitSystemNotSetError,
    PsychroDomainError,
    ConvergenceError
)

from ._solver_result import (
    MAX_ITER_COUNT,
    SolverResult,
    SolverStatus
)


__all__ = [
    'parse_enum',

    'PsychroError',
    'UnitSystemNotSetError',
    'PsychroDomainError',
    'ConvergenceError',

    'MAX_ITER_COUNT',
    'SolverResult',
    'SolverStatus'
]
