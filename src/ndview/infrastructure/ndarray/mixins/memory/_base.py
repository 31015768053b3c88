"""
Ndarray memory mixin: materialization, copies and bulk writes.

This module defines `NdarrayMixinMemory`, the focused mixin that moves
elements between an array view and fresh buffers:

- `to_numpy` / `to_list`: read the view in logical order,
- `copy` / `as_type` : dense, owned copies (same kind / converted kind),
- `assign` / `fill`  : validated in-place writes through the view.

`to_numpy` and `_write` are declared here and implemented per `Layout` in the
sibling modules via `ndarray_control_path_manager`; everything else is
layout-agnostic and builds on those two.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np

from .....domain._dimension import dimension_of
from .....domain._dtype import DataType
from .....domain._errors import UnsupportedTypeError
from .....domain.geometry import Geometry, broadcast_geometry
from ....storage import memory_view_of, numpy_dtype_of

Number = Union[int, float]


def offset_grid(geometry: Geometry) -> np.ndarray:
    """
    Buffer position of every element, shaped like the view.

    Built axis by axis as ``offset + sum(arange(n_k) * stride_k)``, so
    stride-0 axes repeat positions.
    """
    pos = np.asarray(geometry.offset, dtype=np.int64)
    for n, s in zip(geometry.shape, geometry.strides):
        pos = pos[..., None] + np.arange(n, dtype=np.int64) * s
    return pos


class NdarrayMixinMemory:
    """
    Materialization and copy utilities for the concrete Ndarray.
    """

    def to_numpy(self, copy: bool = False) -> np.ndarray:
        """
        numpy array holding this view's elements with this view's shape.

        Parameters
        ----------
        copy : bool
            When False (default) a contiguous view returns a numpy view of
            the shared storage; strided views always return a gathered copy.
        """
        raise NotImplementedError

    def _write(self, values: np.ndarray) -> None:
        """Store ``values`` (already shaped like the view) through the view."""
        raise NotImplementedError

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        out = self.to_numpy(copy=bool(copy))
        if dtype is not None:
            out = out.astype(dtype, copy=False)
        return out

    def to_list(self) -> Any:
        """Nested Python lists of plain numbers (a bare number for 0-D)."""
        return self.to_numpy().tolist()

    def copy(self) -> Any:
        """
        Deep, dense, owned copy.

        Allocates new storage of ``size`` elements and writes the view's
        elements in row-major logical order; the result never aliases the
        source.
        """
        values = self.to_numpy(copy=True)
        return type(self)._from_numpy(values, self.dtype)

    def as_type(self, dtype: Any) -> Any:
        """
        Element-wise converted copy.

        Conversion follows the target kind's native behavior: narrowing
        integer conversion wraps and float-to-integer truncates toward zero.

        Parameters
        ----------
        dtype : DataType | str | type
            Target kind.
        """
        target = DataType.of(dtype)
        values = self.to_numpy().astype(numpy_dtype_of(target))
        return type(self)._from_numpy(values, target)

    def assign(self, value: Any) -> None:
        """
        Broadcast ``value`` into this view, in place.

        Parameters
        ----------
        value : Ndarray | array-like | number
            Source. Its shape must broadcast to this view's shape.

        Raises
        ------
        ShapeError
            If the source shape does not broadcast to this view's shape.
            Nothing is written in that case.
        UnsupportedTypeError
            If the source is not numeric.
        """
        if isinstance(value, NdarrayMixinMemory):
            src = value.to_numpy(copy=value.data is self.data)
        else:
            if isinstance(value, bool):
                raise UnsupportedTypeError(type(value))
            src = np.asarray(value)
            if src.dtype.kind not in "iuf":
                raise UnsupportedTypeError(src.dtype)

        broadcast_geometry(Geometry.dense(src.shape), self.shape)
        self._write(np.broadcast_to(src, self.shape))

    def fill(self, value: Number) -> None:
        """Write ``value`` into every element of the view."""
        self.assign(value)

    @classmethod
    def _from_numpy(cls, values: np.ndarray, dtype: Any) -> Any:
        """Owned array adopting a fresh numpy buffer of the given kind."""
        target = DataType.of(dtype)
        values = np.asarray(values)
        flat = np.ascontiguousarray(values, dtype=numpy_dtype_of(target)).reshape(-1)
        return cls(
            memory_view_of(flat, target),
            shape=values.shape,
            dtype=target,
            dim=dimension_of(len(values.shape)),
        )
