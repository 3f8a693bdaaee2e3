"""
Routing of scalar and array inputs to the JIT scalar or vectorised kernels.
"""

from typing import Any, Callable, Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

from psychrocalc.shared._solver_result import SolverResult, SolverStatus


def broadcast_inputs(*values: Union[float, npt.ArrayLike]) -> Tuple[npt.NDArray, ...]:
    """
    Convert inputs to float64 arrays and broadcast them to a common shape.

    Scalars are expanded to match array inputs (NumPy broadcasting). Two
    arrays must have the same shape.

    Parameters
    ----------
    *values : float or array-like
        Inputs of the calculation, e.g. dry-bulb temperature and pressure.

    Returns
    -------
    tuple of ndarray
        Broadcast float64 arrays, 0-d when every input is scalar.

    Raises
    ------
    ValueError
        If the inputs cannot be broadcast together.
    """
    arrays = [np.asarray(value, dtype=np.float64) for value in values]

    try:
        return tuple(np.broadcast_arrays(*arrays))
    except ValueError as err:
        shapes = ", ".join(str(array.shape) for array in arrays)
        raise ValueError(
            f"Input arrays must have the same shape or be scalar. Got shapes: {shapes}"
        ) from err


def is_scalar_input(*arrays: npt.NDArray) -> bool:
    """True when every input is 0-dimensional."""
    return all(np.ndim(array) == 0 for array in arrays)


def as_scalar_or_array(result: npt.NDArray) -> Union[float, npt.NDArray]:
    """Return a float for 0-d results, the array unchanged otherwise."""
    if np.ndim(result) == 0:
        return float(result)
    return result


def dispatch_scalar_or_vector(
    scalar_func: Callable[..., float],
    vector_func: Callable[..., npt.NDArray],
    inputs: Sequence[Union[float, npt.ArrayLike]],
    constants: Sequence[Any] = (),
) -> Union[float, npt.NDArray]:
    """
    Evaluate a kernel on scalar or array inputs.

    Scalar inputs go to ``scalar_func`` and return a float. Array inputs are
    broadcast, flattened for ``vector_func`` and reshaped back to the input
    shape.

    Parameters
    ----------
    scalar_func : callable
        JIT-compiled scalar kernel, ``f(*inputs, *constants) -> float``.
    vector_func : callable
        JIT-compiled vectorised kernel taking 1-d arrays.
    inputs : sequence of float or array-like
        Positional inputs of the kernel.
    constants : sequence, optional
        Trailing arguments forwarded unchanged (unit and equation constants).

    Returns
    -------
    float or ndarray
    """
    arrays = broadcast_inputs(*inputs)

    if is_scalar_input(*arrays):
        return float(scalar_func(*[float(array.item()) for array in arrays], *constants))

    original_shape = arrays[0].shape
    flattened = [array.flatten() for array in arrays]
    result = vector_func(*flattened, *constants)
    return result.reshape(original_shape)


def dispatch_solver(
    scalar_func: Callable[..., Tuple[float, int, int]],
    vector_func: Callable[..., Tuple[npt.NDArray, npt.NDArray, npt.NDArray]],
    inputs: Sequence[Union[float, npt.ArrayLike]],
    constants: Sequence[Any] = (),
) -> SolverResult:
    """
    Evaluate a solver kernel on scalar or array inputs.

    Same routing as :func:`dispatch_scalar_or_vector`, for kernels that
    return a ``(root, iterations, status)`` triple.

    Returns
    -------
    SolverResult
        Scalars (with a SolverStatus) for scalar inputs, arrays otherwise.
    """
    arrays = broadcast_inputs(*inputs)

    if is_scalar_input(*arrays):
        root, iterations, status = scalar_func(
            *[float(array.item()) for array in arrays], *constants
        )
        return SolverResult(float(root), int(iterations), SolverStatus(status))

    original_shape = arrays[0].shape
    flattened = [array.flatten() for array in arrays]
    roots, iterations, status = vector_func(*flattened, *constants)

    return SolverResult(
        roots.reshape(original_shape),
        iterations.reshape(original_shape),
        status.reshape(original_shape),
    )
