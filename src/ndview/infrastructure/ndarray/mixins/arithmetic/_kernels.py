"""
numpy kernels behind Ndarray arithmetic.

Each kernel takes two numpy operands already converted to the result kind and
already broadcast-compatible, and returns a fresh numpy array of that kind.

Integer kernels wrap on overflow like the native fixed-width types do.
Integer division truncates toward zero; floating division follows IEEE 754
(``x / 0`` gives ``inf`` or ``nan``).
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from .....domain._dtype import DataType

Kernel = Callable[[np.ndarray, np.ndarray, DataType], np.ndarray]


def _add(a: np.ndarray, b: np.ndarray, dtype: DataType) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.add(a, b)


def _sub(a: np.ndarray, b: np.ndarray, dtype: DataType) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.subtract(a, b)


def _mul(a: np.ndarray, b: np.ndarray, dtype: DataType) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.multiply(a, b)


def _div(a: np.ndarray, b: np.ndarray, dtype: DataType) -> np.ndarray:
    if dtype.is_floating:
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return np.true_divide(a, b)

    if np.any(np.asarray(b) == 0):
        raise ZeroDivisionError("integer division by zero")
    with np.errstate(over="ignore"):
        q = np.asarray(np.floor_divide(a, b))
        # floor -> truncation where the exact quotient is negative and inexact
        inexact = np.asarray(np.remainder(a, b)) != 0
        negative = (np.asarray(a) < 0) != (np.asarray(b) < 0)
        return q + (inexact & negative).astype(q.dtype)


KERNELS: Dict[str, Kernel] = {
    "add": _add,
    "sub": _sub,
    "mul": _mul,
    "div": _div,
}
