"""
Primitive storage for ndview arrays (NumPy backend).

A `MemoryView` is a fixed-length, mutable, one-kind flat buffer. There is one
concrete class per primitive kind, each backed by a one-dimensional numpy
array of exactly that kind:

==================  ===========
class               data type
==================  ===========
`ByteMemoryView`    int8
`ShortMemoryView`   int16
`IntMemoryView`     int32
`LongMemoryView`    int64
`FloatMemoryView`   float32
`DoubleMemoryView`  float64
==================  ===========

The storage class is selected once from the `DataType` tag (see
`memory_view_class`), and all later element access runs against the
monomorphic numpy buffer.

Design notes
------------
- No resizing exists. A different length means new storage plus a copy.
- Indices are never wrapped: anything outside ``[0, len)`` is a
  `BoundsError`.
- Storage is shared by reference between every view derived from it and is
  reclaimed by the garbage collector with its last referencing view; there
  is no explicit close.
"""

from __future__ import annotations

import operator
from abc import ABC
from collections.abc import Sequence
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Type, Union

import numpy as np

from ...domain._dtype import DataType
from ...domain._errors import BoundsError, ConstructionError, UnsupportedTypeError

Number = Union[int, float]

_NUMPY_DTYPES: Dict[DataType, np.dtype] = {
    DataType.INT8: np.dtype(np.int8),
    DataType.INT16: np.dtype(np.int16),
    DataType.INT32: np.dtype(np.int32),
    DataType.INT64: np.dtype(np.int64),
    DataType.FLOAT32: np.dtype(np.float32),
    DataType.FLOAT64: np.dtype(np.float64),
}


def numpy_dtype_of(dtype: DataType) -> np.dtype:
    """numpy dtype backing a `DataType`."""
    return _NUMPY_DTYPES[dtype]


def data_type_of_numpy(np_dtype: Any) -> DataType:
    """
    `DataType` matching a numpy dtype.

    Raises
    ------
    UnsupportedTypeError
        For kinds without a tag (bool, unsigned, complex, object, ...).
    """
    np_dtype = np.dtype(np_dtype)
    for dtype, candidate in _NUMPY_DTYPES.items():
        if candidate == np_dtype:
            return dtype
    raise UnsupportedTypeError(np_dtype)


class MemoryView(ABC):
    """
    Flat, fixed-length storage of one primitive kind.

    Parameters
    ----------
    data : np.ndarray
        One-dimensional numpy buffer whose dtype is exactly this class's
        kind. The buffer is adopted, not copied.

    Raises
    ------
    ConstructionError
        If ``data`` is not one-dimensional or has a different kind.
    """

    __slots__ = ("_data",)

    dtype: DataType

    def __init__(self, data: np.ndarray) -> None:
        if not isinstance(data, np.ndarray) or data.ndim != 1:
            raise ConstructionError(
                f"{type(self).__name__} requires a one-dimensional numpy buffer"
            )
        if data.dtype != numpy_dtype_of(self.dtype):
            raise ConstructionError(
                f"{type(self).__name__} holds {self.dtype} elements, got buffer of {data.dtype}"
            )
        self._data = data

    @property
    def data(self) -> np.ndarray:
        """The raw numpy buffer (shared, not copied)."""
        return self._data

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return int(self._data.shape[0])

    def _check(self, index: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= self._data.shape[0]:
            raise BoundsError.out_of_range(index, int(self._data.shape[0]))
        return index

    def get(self, index: int) -> Number:
        """Element at ``index`` as a plain Python number."""
        return self._data[self._check(index)].item()

    def set(self, index: int, value: Number) -> None:
        """Store ``value`` at ``index`` using the kind's native conversion."""
        self._data[self._check(index)] = value

    def __getitem__(self, index: int) -> Number:
        return self.get(index)

    def __setitem__(self, index: int, value: Number) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._data.tolist())

    def fill(self, value: Number) -> None:
        """Write ``value`` into every position."""
        self._data.fill(value)

    def copy_of_range(self, start: int, end: int) -> "MemoryView":
        """
        Deep copy of ``[start, end)`` as new storage of the same kind.

        Raises
        ------
        BoundsError
            Unless ``0 <= start <= end <= len``.
        """
        n = len(self)
        if start < 0 or start > n:
            raise BoundsError.out_of_range(start, n + 1)
        if end < start or end > n:
            raise BoundsError(
                f"Range end {end} is invalid for start {start} and size {n}",
                index=end,
                length=n,
            )
        return type(self)(self._data[start:end].copy())

    def copy_of(self) -> "MemoryView":
        """Deep copy of the whole buffer."""
        return type(self)(self._data.copy())

    def view_as_generic(self) -> "GenericView":
        """Kind-independent sequence adapter over this storage."""
        return GenericView(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"


class ByteMemoryView(MemoryView):
    """int8 storage."""

    __slots__ = ()
    dtype = DataType.INT8


class ShortMemoryView(MemoryView):
    """int16 storage."""

    __slots__ = ()
    dtype = DataType.INT16


class IntMemoryView(MemoryView):
    """int32 storage."""

    __slots__ = ()
    dtype = DataType.INT32


class LongMemoryView(MemoryView):
    """int64 storage."""

    __slots__ = ()
    dtype = DataType.INT64


class FloatMemoryView(MemoryView):
    """float32 storage."""

    __slots__ = ()
    dtype = DataType.FLOAT32


class DoubleMemoryView(MemoryView):
    """float64 storage."""

    __slots__ = ()
    dtype = DataType.FLOAT64


_VIEW_CLASSES: Dict[DataType, Type[MemoryView]] = {
    cls.dtype: cls
    for cls in (
        ByteMemoryView,
        ShortMemoryView,
        IntMemoryView,
        LongMemoryView,
        FloatMemoryView,
        DoubleMemoryView,
    )
}


def memory_view_class(dtype: Any) -> Type[MemoryView]:
    """Storage class for a data type (or anything `DataType.of` accepts)."""
    return _VIEW_CLASSES[DataType.of(dtype)]


class GenericView(Sequence):
    """
    Uniform sequence view over any `MemoryView`.

    Reads return plain Python ``int``/``float`` whatever the underlying kind;
    writes go through the storage's native conversion. The length is fixed,
    so deletion and insertion are not supported.
    """

    __slots__ = ("_storage",)

    def __init__(self, storage: MemoryView) -> None:
        self._storage = storage

    @property
    def dtype(self) -> DataType:
        return self._storage.dtype

    def __len__(self) -> int:
        return len(self._storage)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._storage.get(i) for i in range(*index.indices(len(self)))]
        return self._storage.get(index)

    def __setitem__(self, index: int, value: Number) -> None:
        self._storage.set(index, value)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._storage)


def infer_data_type(values: Iterable[Any]) -> DataType:
    """
    Data type able to hold every value: the promotion of each element's own
    kind (``int`` -> int64, ``float`` -> float64); float64 for no values.
    """
    dtype: Optional[DataType] = None
    for v in values:
        kind = DataType.of_value(v)
        dtype = kind if dtype is None else DataType.promote(dtype, kind)
    return DataType.FLOAT64 if dtype is None else dtype


def init_memory_view(
    size: int, dtype: Any, init: Optional[Callable[[int], Number]] = None
) -> MemoryView:
    """
    Allocate storage of ``size`` elements.

    Parameters
    ----------
    size : int
        Number of elements; must be non-negative.
    dtype : DataType | str | type
        Element kind.
    init : Callable[[int], Number], optional
        Generator called exactly once per flat index, in ascending order.
        When omitted the storage is zero-filled.

    Returns
    -------
    MemoryView
        Freshly owned storage.
    """
    if size < 0:
        raise ConstructionError(f"Storage size must be non-negative, got {size}")
    cls = memory_view_class(dtype)
    np_dtype = numpy_dtype_of(cls.dtype)
    if init is None:
        return cls(np.zeros(size, dtype=np_dtype))
    values = [init(i) for i in range(size)]
    return cls(np.array(values, dtype=np_dtype).reshape(size))


def memory_view_of(host: Any, dtype: Any = None) -> MemoryView:
    """
    Wrap or convert a host buffer into storage.

    Zero-copy adoption happens whenever the host already holds elements of the
    requested kind (or ``dtype`` is omitted and the host kind is supported):

    - a `MemoryView` is returned as-is,
    - a one-dimensional numpy array is adopted directly,
    - a buffer-protocol object such as ``array.array`` is adopted through
      ``np.frombuffer``.

    Anything else, or a kind mismatch, is converted into fresh storage.

    Raises
    ------
    ConstructionError
        If the host is not one-dimensional.
    UnsupportedTypeError
        If the host kind has no data type and none was requested.
    """
    target = None if dtype is None else DataType.of(dtype)

    if isinstance(host, MemoryView):
        if target is None or target is host.dtype:
            return host
        return _VIEW_CLASSES[target](host.data.astype(numpy_dtype_of(target)))

    arr = _host_as_numpy(host)
    if arr is not None:
        if arr.ndim != 1:
            raise ConstructionError(
                f"Storage must be one-dimensional, got host buffer with shape {arr.shape}"
            )
        if target is None:
            target = data_type_of_numpy(arr.dtype)
        np_dtype = numpy_dtype_of(target)
        if arr.dtype != np_dtype:
            arr = arr.astype(np_dtype)
        return _VIEW_CLASSES[target](arr)

    values = list(host)
    if target is None:
        target = infer_data_type(values)
    return _VIEW_CLASSES[target](
        np.array(values, dtype=numpy_dtype_of(target)).reshape(len(values))
    )


def _host_as_numpy(host: Any) -> Optional[np.ndarray]:
    """numpy view of a numpy array or typed buffer, or None for plain iterables."""
    if isinstance(host, np.ndarray):
        return host
    try:
        mv = memoryview(host)
    except TypeError:
        return None
    if mv.ndim != 1:
        return np.asarray(mv)
    return np.frombuffer(host, dtype=np.dtype(mv.format))
