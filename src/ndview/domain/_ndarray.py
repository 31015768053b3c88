"""
Array and storage interface definitions.

This module defines the domain-level contracts for ndview arrays using
structural typing. Backends and math routines type against these protocols
rather than the concrete numpy-backed classes, which keeps the domain layer
free of numpy.

The contract mirrors the backend dispatch requirements: a consumer must be
able to read an array's shape, strides and offset together with the
underlying storage, ask whether the view is contiguous, and fall back to
element-wise access when it is not.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, Tuple, Union, runtime_checkable

from ._dimension import Dimension
from ._dtype import DataType
from ._layout import Layout

Number = Union[int, float]


@runtime_checkable
class IMemoryView(Protocol):
    """
    Primitive storage contract.

    A memory view is a fixed-length, mutable, one-kind buffer. Implementations
    never resize; a size change requires new storage.
    """

    @property
    def dtype(self) -> DataType:
        """Element kind of the buffer."""
        ...

    @property
    def data(self) -> Any:
        """Raw backend buffer (for zero-copy consumers)."""
        ...

    def __len__(self) -> int: ...

    def get(self, index: int) -> Number:
        """
        Read one element.

        Raises
        ------
        BoundsError
            If ``index`` lies outside ``[0, len)``.
        """
        ...

    def set(self, index: int, value: Number) -> None:
        """
        Write one element.

        Raises
        ------
        BoundsError
            If ``index`` lies outside ``[0, len)``.
        """
        ...

    def copy_of_range(self, start: int, end: int) -> "IMemoryView":
        """Deep copy of the half-open range ``[start, end)``."""
        ...


@runtime_checkable
class INdarray(Protocol):
    """
    N-dimensional strided array view contract.

    An `INdarray` is the tuple (storage, data type, dimension, shape,
    strides, offset). Several arrays may share one storage while differing in
    geometry; mutation through any of them is visible through all others that
    overlap the same region.

    Notes
    -----
    Concurrent readers are safe only while no writer touches an overlapping
    region. The core has no internal locking; callers that write from several
    threads must synchronize externally.
    """

    @property
    def data(self) -> IMemoryView:
        """Storage shared by this view."""
        ...

    @property
    def dtype(self) -> DataType:
        """Element kind."""
        ...

    @property
    def dim(self) -> Dimension:
        """Dimension tag, always ``dim.d == len(shape)``."""
        ...

    @property
    def shape(self) -> Tuple[int, ...]:
        """Axis lengths."""
        ...

    @property
    def strides(self) -> Tuple[int, ...]:
        """Buffer-index delta per unit step along each axis."""
        ...

    @property
    def offset(self) -> int:
        """Buffer index of logical position ``(0, ..., 0)``."""
        ...

    @property
    def size(self) -> int:
        """Number of logical elements."""
        ...

    @property
    def layout(self) -> Layout:
        """Contiguous or strided classification of the view."""
        ...

    @property
    def base(self) -> Optional["INdarray"]:
        """The view this one was derived from, or None for owners."""
        ...

    def is_contiguous(self) -> bool:
        """True when strides equal the canonical row-major strides."""
        ...

    def get(self, *indices: int) -> Number:
        """Read the element at a full multi-index."""
        ...

    def set(self, *args: Number) -> None:
        """Write ``args[-1]`` at the full multi-index ``args[:-1]``."""
        ...

    def slice(self, axis: int, s: Any) -> "INdarray":
        """Rank-preserving selection along ``axis`` (shares storage)."""
        ...

    def index(self, axis: int, i: int) -> "INdarray":
        """Rank-reducing selection along ``axis`` (shares storage)."""
        ...

    def reshape(self, *shape: int, copy: Optional[bool] = None) -> "INdarray":
        """Re-interpret the elements under a new shape."""
        ...

    def transpose(self, *axes: int) -> "INdarray":
        """Permute axes (shares storage)."""
        ...

    def copy(self) -> "INdarray":
        """Deep, dense, owned copy."""
        ...

    def as_type(self, dtype: Any) -> "INdarray":
        """Element-wise converted copy."""
        ...

    def flat(self) -> Iterator[Number]:
        """All elements in row-major logical order."""
        ...

    def to_numpy(self, copy: bool = False) -> Any:
        """Backend-native array with this view's shape."""
        ...
