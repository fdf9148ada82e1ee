"""Helpers for elementwise formulas that accept scalars or array-likes."""

from typing import Union
import numpy as np

ArrayLike = Union[float, int, np.ndarray, list, tuple]


def as_float_array(values) -> np.ndarray:
    """Convert scalars, lists, pandas Series or ndarrays to a float ndarray."""
    return np.asarray(values, dtype=float)


def like_input(result, *inputs):
    """
    Return ``result`` as a Python float when every input was a scalar.

    Args:
        result: Computed ndarray
        *inputs: The arguments the result was broadcast from

    Returns:
        float for all-scalar inputs, otherwise ``result`` as an ndarray
    """
    result = np.asarray(result, dtype=float)
    if result.ndim == 0 and all(np.ndim(v) == 0 for v in inputs if v is not None):
        return float(result)
    return result
