"""
View-derivation mixin (zero-copy structural ops).

This module defines `NdarrayMixinViews`, which implements the operations that
re-derive shape, strides and offset while reusing the same storage:
`slice`, `index`, `transpose`, `reshape`, `squeeze`, `unsqueeze` and
`broadcast_to`.

Design notes
------------
- Every result shares storage with its source; mutation through one is
  visible through the other.
- `reshape` is the only operation that may have to copy. A non-contiguous
  source is materialized only when the caller allows it, and the implicit
  case emits a `CopyWarning` so the copy is never silently free.
"""

from __future__ import annotations

import warnings
from typing import Any, Optional, Sequence, Tuple, Union

from .....domain._dimension import dimension_of
from .....domain._errors import BoundsError, ConstructionError, CopyWarning, ShapeError
from .....domain._slice import RInt, Slice
from .....domain.geometry import (
    broadcast_geometry,
    drop_axis,
    insert_axis,
    normalize_axis,
    reshape,
    size_of,
    slice_axis,
    squeeze_axis,
    transpose,
    validate_shape,
)
from ...._config import get_config


def _unpack_shape(shape: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """Accept both ``f(2, 3)`` and ``f((2, 3))``."""
    if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
        return tuple(shape[0])
    return shape


class NdarrayMixinViews:
    """
    Structural, storage-sharing operations for the concrete Ndarray.
    """

    def slice(self, axis: int, s: Union[Slice, slice]) -> Any:
        """
        Select a range along ``axis`` (rank preserved, storage shared).

        Parameters
        ----------
        axis : int
            Axis to slice; negative values count from the end.
        s : Slice | slice
            Range to keep. Builtin slices resolve ``None`` bounds against the
            axis length.

        Returns
        -------
        Ndarray
            View whose ``axis`` has length ``ceil((stop - start) / step)``.
        """
        axis = normalize_axis(axis, self.ndim)
        if isinstance(s, slice):
            s = Slice.from_builtin(s, self.shape[axis])
        if not isinstance(s, Slice):
            raise TypeError(f"Expected a Slice or slice, got {type(s).__name__}")
        return self._derive(slice_axis(self.geometry, axis, s), self.dim)

    def index(self, axis: int, i: Union[int, RInt]) -> Any:
        """
        Fix ``axis`` at position ``i`` (rank reduced by one, storage shared).

        Indexing the only axis of a 1-D array yields a 0-dimensional view.
        """
        if isinstance(i, RInt):
            i = i.data
        return self._derive(drop_axis(self.geometry, axis, i), self.dim.remove_axis())

    def transpose(self, *axes: int) -> Any:
        """
        Permute the axes (storage shared, offset unchanged).

        Parameters
        ----------
        *axes : int
            Permutation of ``range(ndim)``; reverses the axes when omitted.

        Raises
        ------
        ShapeError
            If ``axes`` is not a permutation.
        """
        axes = _unpack_shape(axes)
        if not axes:
            axes = tuple(range(self.ndim - 1, -1, -1))
        return self._derive(transpose(self.geometry, axes), self.dim)

    @property
    def T(self) -> Any:
        """Axes reversed (see `transpose`)."""
        return self.transpose()

    def reshape(self, *shape: int, copy: Optional[bool] = None) -> Any:
        """
        Present the elements under a new shape.

        Parameters
        ----------
        *shape : int
            New axis lengths; their product must equal ``size``.
        copy : Optional[bool]
            - ``None`` (default): view when contiguous, otherwise copy and
              emit `CopyWarning`.
            - ``False``: view only; a non-contiguous source raises.
            - ``True``: always return a reshaped copy.

        Raises
        ------
        ShapeError
            On a size mismatch, or for ``copy=False`` on a non-contiguous view.
        """
        try:
            new_shape = validate_shape(_unpack_shape(shape))
        except ConstructionError as e:
            raise ShapeError(str(e), self.shape) from e
        if size_of(new_shape) != self.size:
            raise ShapeError(
                f"Cannot reshape array of size {self.size} into shape {new_shape}",
                self.shape,
                new_shape,
            )

        if copy:
            src = self.copy()
        elif self.is_contiguous():
            src = self
        elif copy is False:
            raise ShapeError(
                f"Cannot reshape a non-contiguous view of shape {self.shape} "
                "without a copy; pass copy=True",
                self.shape,
                new_shape,
            )
        else:
            if get_config().warn_on_copy:
                warnings.warn(
                    f"Reshaping a non-contiguous view of shape {self.shape} "
                    "materializes a copy; the result does not share storage.",
                    CopyWarning,
                    stacklevel=2,
                )
            src = self.copy()

        return src._derive(reshape(src.geometry, new_shape), dimension_of(len(new_shape)))

    def flatten(self) -> Any:
        """Dense one-dimensional copy of the elements in row-major order."""
        out = self.copy()
        return out._derive(reshape(out.geometry, (out.size,)), dimension_of(1))

    def squeeze(self, *axes: int) -> Any:
        """
        Drop length-1 axes (all of them when ``axes`` is empty).

        Raises
        ------
        ShapeError
            If a named axis does not have length 1.
        """
        axes = _unpack_shape(axes)
        if axes:
            targets = {normalize_axis(a, self.ndim) for a in axes}
        else:
            targets = {i for i, n in enumerate(self.shape) if n == 1}

        geometry = self.geometry
        for axis in sorted(targets, reverse=True):
            geometry = squeeze_axis(geometry, axis)
        return self._derive(geometry, dimension_of(geometry.ndim))

    def unsqueeze(self, *axes: int) -> Any:
        """
        Insert length-1 axes at the given positions of the result.

        Raises
        ------
        BoundsError
            If a position is outside the result's axes or repeated.
        """
        axes = _unpack_shape(axes)
        out_ndim = self.ndim + len(axes)
        positions = sorted(a + out_ndim if a < 0 else a for a in axes)
        if len(set(positions)) != len(positions):
            raise BoundsError(f"Repeated axis in unsqueeze: {tuple(axes)}")

        geometry = self.geometry
        for axis in positions:
            if axis < 0 or axis >= out_ndim:
                raise BoundsError(
                    f"axis {axis} is out of bounds for result dimension {out_ndim}",
                    index=axis,
                    length=out_ndim,
                )
            geometry = insert_axis(geometry, axis)
        return self._derive(geometry, dimension_of(geometry.ndim))

    def broadcast_to(self, *shape: int) -> Any:
        """
        Zero-copy view of this array stretched to ``shape``.

        Stretched axes have stride 0, so every position along them reads the
        same element.

        Raises
        ------
        ShapeError
            If this shape does not broadcast to ``shape``.
        """
        target: Sequence[int] = _unpack_shape(shape)
        geometry = broadcast_geometry(self.geometry, target)
        return self._derive(geometry, dimension_of(geometry.ndim))
