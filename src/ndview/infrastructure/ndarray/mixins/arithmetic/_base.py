"""
Elementwise arithmetic mixin for the concrete Ndarray.

This module defines `NdarrayMixinArithmetic`, which implements ``+ - * /``
(regular, reflected and in-place) and unary ``-`` between arrays and Python
scalars.

Semantics
---------
- Shapes broadcast (see `broadcast_shapes`); incompatible shapes raise
  `ShapeError` before any computation.
- Two arrays of different kinds produce the kind with the larger native code
  (``int8 < int16 < int32 < int64 < float32 < float64``).
- A scalar operand takes the array's kind, except that a float scalar applied
  to an integer array promotes the result to float64.
- In-place forms require the right operand to broadcast to the left operand's
  own shape and write the result back through the view, converting to the
  left operand's kind.

Operands are read through `to_numpy`, so contiguous views are consumed as a
window over the shared buffer and strided views are gathered.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np

from .....domain._dtype import DataType
from .....domain._errors import ShapeError
from .....domain.geometry import broadcast_shapes
from ....storage import numpy_dtype_of
from ._kernels import KERNELS

Number = Union[int, float]


class NdarrayMixinArithmetic:
    """
    Arithmetic operators for the concrete Ndarray.
    """

    def _operand(self, other: Any) -> Optional[Tuple[np.ndarray, DataType]]:
        """
        numpy values and kind of the right-hand operand, or None when the
        operand is not supported (the operator then returns NotImplemented).
        """
        if isinstance(other, NdarrayMixinArithmetic):
            return other.to_numpy(), other.dtype
        if isinstance(other, (bool, np.bool_)):
            return None
        if isinstance(other, (int, float, np.integer, np.floating)):
            if isinstance(other, (float, np.floating)) and self.dtype.is_integer:
                return np.asarray(other, dtype=np.float64), DataType.FLOAT64
            return np.asarray(other).astype(numpy_dtype_of(self.dtype)), self.dtype
        return None

    def _binary(self, other: Any, op: str, reflected: bool = False) -> Any:
        resolved = self._operand(other)
        if resolved is None:
            return NotImplemented
        values, kind = resolved

        broadcast_shapes(self.shape, values.shape)
        target = DataType.promote(self.dtype, kind)
        np_dtype = numpy_dtype_of(target)
        a = self.to_numpy().astype(np_dtype, copy=False)
        b = values.astype(np_dtype, copy=False)
        if reflected:
            a, b = b, a

        out = KERNELS[op](a, b, target)
        return type(self)._from_numpy(np.asarray(out, dtype=np_dtype), target)

    def _inplace(self, other: Any, op: str) -> Any:
        resolved = self._operand(other)
        if resolved is None:
            return NotImplemented
        shape = broadcast_shapes(self.shape, resolved[0].shape)
        if shape != self.shape:
            raise ShapeError(
                f"In-place operand of shape {resolved[0].shape} does not broadcast "
                f"to the target shape {self.shape}",
                self.shape,
                resolved[0].shape,
            )
        result = self._binary(other, op)
        self._write(result.to_numpy().astype(numpy_dtype_of(self.dtype)))
        return self

    def __add__(self, other: Any) -> Any:
        return self._binary(other, "add")

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, "sub")

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, "sub", reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, "mul")

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, "mul", reflected=True)

    def __truediv__(self, other: Any) -> Any:
        """
        Elementwise division.

        Integer kinds truncate toward zero and raise `ZeroDivisionError` on a
        zero divisor; floating kinds follow IEEE 754.
        """
        return self._binary(other, "div")

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, "div", reflected=True)

    def __iadd__(self, other: Any) -> Any:
        return self._inplace(other, "add")

    def __isub__(self, other: Any) -> Any:
        return self._inplace(other, "sub")

    def __imul__(self, other: Any) -> Any:
        return self._inplace(other, "mul")

    def __itruediv__(self, other: Any) -> Any:
        return self._inplace(other, "div")

    def __neg__(self) -> Any:
        with np.errstate(over="ignore"):
            values = np.negative(self.to_numpy())
        return type(self)._from_numpy(np.asarray(values), self.dtype)

    def __pos__(self) -> Any:
        return self.copy()
