"""
Concrete N-dimensional strided array view (NumPy-backed storage).

An `Ndarray` is the tuple (storage, data type, dimension, shape, strides,
offset). Several arrays may share one `MemoryView` while differing in
geometry; every structural operation (`slice`, `index`, `transpose`,
`reshape`, `squeeze`, `unsqueeze`, `broadcast_to`, ``[]``) builds a new
`Ndarray` over the same storage, so writes through one view are visible
through every overlapping view.

Behavior is composed from focused mixins:

- `NdarrayMixinIndexing`   : element access and ``[]``,
- `NdarrayMixinViews`      : storage-sharing view derivations,
- `NdarrayMixinMemory`     : materialization, copies and bulk writes,
- `NdarrayMixinIteration`  : traversal,
- `NdarrayMixinArithmetic` : elementwise operators,
- `NdarrayMixinReduction`  : sum/min/max/mean.

Layout-dependent methods are dispatched on `Ndarray.layout` through
`ndarray_control_path_manager`.

Notes
-----
Concurrent readers are safe only while no writer touches an overlapping
region; there is no internal locking.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Sequence, Tuple, TypeVar

import numpy as np

from ...domain._dimension import (
    Dimension,
    DimensionLike,
    dimension_class_of,
    dimension_of,
    require_dimension,
)
from ...domain._dtype import DataType
from ...domain._errors import ConstructionError
from ...domain._layout import Layout
from ...domain.geometry import Geometry, compute_strides, validate_shape
from .._config import get_config
from ..storage import MemoryView

from .mixins import (
    NdarrayMixinArithmetic,
    NdarrayMixinIndexing,
    NdarrayMixinIteration,
    NdarrayMixinMemory,
    NdarrayMixinReduction,
    NdarrayMixinViews,
)

T = TypeVar("T", int, float)
D = TypeVar("D", bound=Dimension)


class Ndarray(
    NdarrayMixinIndexing,
    NdarrayMixinViews,
    NdarrayMixinMemory,
    NdarrayMixinIteration,
    NdarrayMixinArithmetic,
    NdarrayMixinReduction,
    Generic[T, D],
):
    """
    Strided view over primitive storage.

    Parameters
    ----------
    data : MemoryView
        Storage to view. It is shared, never copied.
    offset : int, optional
        Buffer index of logical position ``(0, ..., 0)``. Defaults to 0.
    shape : Sequence[int], optional
        Axis lengths. Defaults to ``(len(data),)``.
    strides : Sequence[int], optional
        Buffer-index delta per axis. Defaults to the row-major strides of
        ``shape``.
    dtype : DataType | str | type, optional
        Declared element kind. Must equal ``data.dtype``; defaults to it.
    dim : Dimension | type[Dimension], optional
        Declared dimension. Its arity must equal ``len(shape)``; defaults to
        the canonical tag for that arity.
    base : Ndarray, optional
        The view this one was derived from (None for owners).

    Raises
    ------
    ConstructionError
        If ``data`` is not a `MemoryView`, the declared kind or dimension
        disagrees, the strides do not match the shape, or the view reaches
        outside the storage.
    """

    # Reflected operators must win over numpy scalar coercion.
    __array_ufunc__ = None

    def __init__(
        self,
        data: MemoryView,
        offset: int = 0,
        shape: Optional[Sequence[int]] = None,
        strides: Optional[Sequence[int]] = None,
        dtype: Any = None,
        dim: Optional[DimensionLike] = None,
        base: Optional["Ndarray"] = None,
    ) -> None:
        if not isinstance(data, MemoryView):
            raise ConstructionError(
                f"Ndarray storage must be a MemoryView, got {type(data).__name__}"
            )
        if dtype is not None and DataType.of(dtype) is not data.dtype:
            raise ConstructionError(
                f"Declared data type {DataType.of(dtype)} does not match storage "
                f"of {data.dtype}"
            )

        shape = (len(data),) if shape is None else validate_shape(shape)
        if strides is None:
            strides = compute_strides(shape)
        strides = tuple(int(s) for s in strides)
        if len(strides) != len(shape):
            raise ConstructionError(
                f"Strides {strides} do not match shape {shape} in length"
            )

        dim = dimension_of(len(shape)) if dim is None else dimension_class_of(dim, len(shape))
        require_dimension(dim, len(shape))

        geometry = Geometry(shape, strides, int(offset))
        if geometry.size > 0:
            lo, hi = geometry.span()
            if lo < 0 or hi >= len(data):
                raise ConstructionError(
                    f"View with shape {shape}, strides {strides} and offset "
                    f"{offset} reaches outside storage of size {len(data)}"
                )

        self._data = data
        self._geometry = geometry
        self._dim = dim
        self._base = base

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    @property
    def data(self) -> MemoryView:
        """Shared storage."""
        return self._data

    @property
    def dtype(self) -> DataType:
        return self._data.dtype

    @property
    def dim(self) -> Dimension:
        return self._dim

    @property
    def geometry(self) -> Geometry:
        """The ``(shape, strides, offset)`` triple of this view."""
        return self._geometry

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._geometry.shape

    @property
    def strides(self) -> Tuple[int, ...]:
        return self._geometry.strides

    @property
    def offset(self) -> int:
        return self._geometry.offset

    @property
    def ndim(self) -> int:
        return self._geometry.ndim

    @property
    def size(self) -> int:
        return self._geometry.size

    @property
    def base(self) -> Optional["Ndarray"]:
        """The view this one was derived from, or None for owners."""
        return self._base

    def is_contiguous(self) -> bool:
        """
        True when the strides equal the canonical row-major strides for the
        shape (axes of length 0 or 1 are not compared).
        """
        return self._geometry.is_contiguous()

    @property
    def layout(self) -> Layout:
        """Dispatch category of this view."""
        return Layout.CONTIGUOUS if self.is_contiguous() else Layout.STRIDED

    def _derive(self, geometry: Geometry, dim: Dimension) -> "Ndarray":
        return type(self)(
            self._data,
            offset=geometry.offset,
            shape=geometry.shape,
            strides=geometry.strides,
            dim=dim,
            base=self,
        )

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("len() of a 0-d array")
        return self.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ndarray):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.to_numpy(), other.to_numpy()))

    __hash__ = None

    def _render(self) -> str:
        threshold = get_config().print_threshold
        return np.array2string(self.to_numpy(), separator=", ", threshold=threshold)

    def __repr__(self) -> str:
        body = self._render().replace("\n", "\n" + " " * len("Ndarray("))
        return f"Ndarray({body}, dtype={self.dtype})"

    def __str__(self) -> str:
        return self._render()

