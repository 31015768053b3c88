"""
Reduction mixin for the concrete Ndarray.

This module declares `NdarrayMixinReduction`, exposing `sum`, `min`, `max`
and `mean`. Each reduces either every element (``axis=None``, returning a
plain Python number) or one axis (returning an array one rank down).

Result kinds
------------
- `sum`, `min`, `max` keep the array's kind (integer sums wrap like the
  native fixed-width type),
- `mean` always produces float64.

The element read itself is the layout-specific `_reduce` path registered in
`_ndarray_reduce`: contiguous views reduce the raw buffer window in place,
strided views gather first.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

import numpy as np

from .....domain._dtype import DataType
from .....domain._errors import ShapeError
from .....domain.geometry import normalize_axis
from ....storage import numpy_dtype_of

Number = Union[int, float]
Reducer = Callable[[np.ndarray, Optional[int]], np.ndarray]


class NdarrayMixinReduction:
    """
    Whole-array and per-axis reductions for the concrete Ndarray.
    """

    def _reduce(self, reducer: Reducer, axis: Optional[int]) -> Any:
        """Apply ``reducer(values, axis)`` to this view's elements."""
        raise NotImplementedError

    def _reduction(
        self,
        name: str,
        reducer: Reducer,
        kind: DataType,
        axis: Optional[int],
        needs_elements: bool,
    ) -> Any:
        if axis is not None:
            axis = normalize_axis(axis, self.ndim)
        if needs_elements:
            empty = self.size == 0 if axis is None else self.shape[axis] == 0
            if empty:
                raise ShapeError(
                    f"{name}() of an empty selection is undefined", self.shape
                )

        out = self._reduce(reducer, axis)
        if axis is None:
            return np.asarray(out).item()
        return type(self)._from_numpy(
            np.asarray(out, dtype=numpy_dtype_of(kind)), kind
        )

    def sum(self, axis: Optional[int] = None) -> Any:
        """
        Sum of the elements.

        Parameters
        ----------
        axis : Optional[int]
            Axis to reduce; every element when None. Negative values count
            from the end.

        Returns
        -------
        int | float | Ndarray
            A plain number for ``axis=None``, otherwise an array with
            ``axis`` removed. The sum of no elements is 0.
        """
        np_dtype = numpy_dtype_of(self.dtype)
        return self._reduction(
            "sum",
            lambda v, ax: np.sum(v, axis=ax, dtype=np_dtype),
            self.dtype,
            axis,
            needs_elements=False,
        )

    def min(self, axis: Optional[int] = None) -> Any:
        """
        Smallest element (see `sum` for ``axis``).

        Raises
        ------
        ShapeError
            If the reduced selection holds no element.
        """
        return self._reduction(
            "min", lambda v, ax: np.min(v, axis=ax), self.dtype, axis, True
        )

    def max(self, axis: Optional[int] = None) -> Any:
        """
        Largest element (see `sum` for ``axis``).

        Raises
        ------
        ShapeError
            If the reduced selection holds no element.
        """
        return self._reduction(
            "max", lambda v, ax: np.max(v, axis=ax), self.dtype, axis, True
        )

    def mean(self, axis: Optional[int] = None) -> Any:
        """Arithmetic mean as float64; an empty selection raises `ShapeError`."""
        return self._reduction(
            "mean",
            lambda v, ax: np.mean(v, axis=ax, dtype=np.float64),
            DataType.FLOAT64,
            axis,
            True,
        )
