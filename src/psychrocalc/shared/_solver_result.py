"""
Tagged results returned by the bounded iterative solvers.

The JIT kernels cannot raise rich exceptions, so every solver returns a
(root, iterations, status) triple. The plain integer status codes are the
ones compiled into the kernels; SolverStatus mirrors them on the Python side.
"""

from enum import IntEnum
from typing import NamedTuple, Union

import numpy as np
import numpy.typing as npt

from psychrocalc.shared._exceptions import ConvergenceError, PsychroDomainError

MAX_ITER_COUNT = 100
"""int: Maximum number of iterations before a solver gives up."""

STATUS_CONVERGED = 0
STATUS_MAX_ITERATIONS = 1
STATUS_OUT_OF_BOUNDS = 2


class SolverStatus(IntEnum):
    """
    Outcome of an iterative solve.

    Attributes
    ----------
    CONVERGED : int
        Tolerance met within the iteration limit.
    MAX_ITERATIONS : int
        Iteration budget exhausted without meeting the tolerance.
    OUT_OF_BOUNDS : int
        No solution exists inside the validity bounds of the equations.
    """

    CONVERGED = STATUS_CONVERGED
    MAX_ITERATIONS = STATUS_MAX_ITERATIONS
    OUT_OF_BOUNDS = STATUS_OUT_OF_BOUNDS


class SolverResult(NamedTuple):
    """
    Result of a scalar or vectorised solve.

    Attributes
    ----------
    root : float or ndarray
        Solution(s). Undefined where the status is not CONVERGED.
    iterations : int or ndarray
        Iterations performed.
    status : SolverStatus or ndarray
        Outcome code(s), see SolverStatus.
    """

    root: Union[float, npt.NDArray]
    iterations: Union[int, npt.NDArray]
    status: Union[SolverStatus, npt.NDArray]

    @property
    def converged(self) -> Union[bool, npt.NDArray]:
        """True where the solver met its tolerance."""
        return self.status == STATUS_CONVERGED


def raise_for_status(result: SolverResult, solver_name: str, out_of_bounds_message: str) -> None:
    """
    Turn a failed SolverResult into the matching exception.

    Out-of-bounds statuses are checked first: they mean no solution exists,
    which is a domain error rather than a numerical failure.

    Parameters
    ----------
    result : SolverResult
        Scalar or vectorised solver output.
    solver_name : str
        Name used in the convergence error message.
    out_of_bounds_message : str
        Message of the domain error.

    Raises
    ------
    PsychroDomainError
        If any status is OUT_OF_BOUNDS.
    ConvergenceError
        If any status is MAX_ITERATIONS.
    """
    status = np.asarray(result.status)

    if np.any(status == STATUS_OUT_OF_BOUNDS):
        raise PsychroDomainError(out_of_bounds_message)

    if np.any(status == STATUS_MAX_ITERATIONS):
        iterations = int(np.max(result.iterations))
        raise ConvergenceError(
            f"Convergence not reached in {solver_name} after {iterations} iterations.",
            iterations=iterations,
        )
