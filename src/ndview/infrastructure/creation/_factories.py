"""
Array builders.

Every builder allocates (or adopts) one `MemoryView` and wraps it in an owning
`Ndarray` with canonical row-major strides and offset 0.

Common parameters
-----------------
dtype : DataType | str | type, optional
    Element kind. Accepts a `DataType`, a name such as ``"int32"``, the
    Python types ``int`` (int64) and ``float`` (float64), or a numpy dtype.
    When omitted, builders that receive values infer the kind from them and
    the others default to float64.
dim : Dimension | type[Dimension], optional
    Declared dimension. Its arity must match the shape, else
    `ConstructionError`; `DN` accepts any arity.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ...domain._dimension import D1, D2, D3, D4, DN, DimensionLike
from ...domain._dtype import DataType
from ...domain._errors import ConstructionError, SliceError
from ...domain.geometry import size_of, validate_shape
from ..ndarray import Ndarray
from ..storage import (
    MemoryView,
    init_memory_view,
    memory_view_of,
    numpy_dtype_of,
)

Number = Union[int, float]
ShapeLike = Union[int, Sequence[int]]
Init = Callable[[int], Number]


def _as_shape(shape: ShapeLike) -> Tuple[int, ...]:
    try:
        return validate_shape((operator.index(shape),))
    except TypeError:
        return validate_shape(shape)


def _wrap(storage: MemoryView, shape: Sequence[int], dim: Optional[DimensionLike]) -> Ndarray:
    if len(storage) != size_of(shape):
        raise ConstructionError(
            f"The number of elements ({len(storage)}) does not match the shape "
            f"{tuple(shape)} (size {size_of(shape)})"
        )
    return Ndarray(storage, shape=shape, dtype=storage.dtype, dim=dim)


# ----------------------------------------------------------------------
# Filled arrays
# ----------------------------------------------------------------------
def empty(
    shape: ShapeLike, dtype: Any = DataType.FLOAT64, dim: Optional[DimensionLike] = None
) -> Ndarray:
    """
    Zero-initialized array of ``shape``.

    Examples
    --------
    >>> empty((2, 3), dtype="int32").to_list()
    [[0, 0, 0], [0, 0, 0]]
    """
    shape = _as_shape(shape)
    return _wrap(init_memory_view(size_of(shape), dtype), shape, dim)


zeros = empty


def ones(
    shape: ShapeLike, dtype: Any = DataType.FLOAT64, dim: Optional[DimensionLike] = None
) -> Ndarray:
    """Array of ``shape`` with every element set to 1."""
    return full(shape, 1, dtype=dtype, dim=dim)


def full(
    shape: ShapeLike,
    value: Number,
    dtype: Any = DataType.FLOAT64,
    dim: Optional[DimensionLike] = None,
) -> Ndarray:
    """Array of ``shape`` with every element set to ``value``."""
    shape = _as_shape(shape)
    storage = init_memory_view(size_of(shape), dtype)
    storage.fill(value)
    return _wrap(storage, shape, dim)


def identity(n: int, dtype: Any = DataType.FLOAT64) -> Ndarray:
    """Two-dimensional ``n x n`` array with ones on the main diagonal."""
    target = DataType.of(dtype)
    values = np.eye(n, dtype=numpy_dtype_of(target)).reshape(-1)
    return _wrap(memory_view_of(values, target), (n, n), D2)


# ----------------------------------------------------------------------
# From values
# ----------------------------------------------------------------------
def _is_row(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _nested_shape(data: Any) -> Tuple[int, ...]:
    shape: List[int] = []
    node = data
    while _is_row(node):
        shape.append(len(node))
        if not node:
            break
        node = node[0]
    return tuple(shape)


def _flatten(
    node: Any, shape: Tuple[int, ...], axis: int, path: Tuple[int, ...], out: List[Any]
) -> None:
    if axis == len(shape):
        if _is_row(node):
            raise ConstructionError(
                f"The incoming row at {list(path)} nests deeper than the rest "
                f"(expected a {len(shape)}-dimensional input)"
            )
        out.append(node)
        return
    if not _is_row(node) or len(node) != shape[axis]:
        got = len(node) if _is_row(node) else "a scalar"
        raise ConstructionError(
            f"The size of the incoming row at {list(path)} does not match the rest: "
            f"expected {shape[axis]} elements, got {got}"
        )
    for i, child in enumerate(node):
        _flatten(child, shape, axis + 1, path + (i,), out)


def _from_numpy_host(
    arr: np.ndarray,
    shape: Optional[ShapeLike],
    dtype: Any,
    dim: Optional[DimensionLike],
) -> Ndarray:
    target_shape = arr.shape if shape is None else _as_shape(shape)
    storage = memory_view_of(arr.reshape(-1), dtype)
    return _wrap(storage, target_shape, dim)


def ndarray(
    data: Any,
    shape: Optional[ShapeLike] = None,
    dtype: Any = None,
    dim: Optional[DimensionLike] = None,
) -> Ndarray:
    """
    Build an array from existing values.

    Parameters
    ----------
    data : nested sequences | flat sequence | numpy array | buffer | Ndarray
        - Nested lists/tuples: the shape is inferred; every row at a given
          depth must have the same length.
        - A flat sequence together with ``shape``: ``len(data)`` must equal
          the product of ``shape``.
        - A numpy array or buffer-protocol object (``array.array``): adopted
          without copying when its kind already matches ``dtype`` and it is
          C-contiguous; converted otherwise.
        - An `Ndarray`: copied.
    shape : int | Sequence[int], optional
        Target shape for flat input (or a re-shape of a host buffer).
    dtype, dim : optional
        See the module documentation.

    Raises
    ------
    ConstructionError
        On ragged input, an element count that does not match ``shape``, or a
        dimension mismatch.
    UnsupportedTypeError
        On elements of an unsupported kind (e.g. bool).

    Examples
    --------
    >>> ndarray([[1, 2, 3], [4, 5, 6]], dtype="int32").shape
    (2, 3)
    >>> ndarray([1, 2, 3, 4], shape=(2, 2)).to_list()
    [[1, 2], [3, 4]]
    """
    if isinstance(data, Ndarray):
        src = data.copy() if dtype is None else data.as_type(dtype)
        if shape is not None or dim is not None:
            return _wrap(src.data, src.shape if shape is None else _as_shape(shape), dim)
        return src

    if isinstance(data, np.ndarray):
        return _from_numpy_host(data, shape, dtype, dim)

    if not _is_row(data) and not isinstance(data, (int, float)):
        try:
            memoryview(data)
        except TypeError:
            pass
        else:
            storage = memory_view_of(data, dtype)
            target_shape = (len(storage),) if shape is None else _as_shape(shape)
            return _wrap(storage, target_shape, dim)

    if shape is not None:
        values = list(data)
        if any(_is_row(v) for v in values):
            raise ConstructionError(
                "A flat sequence is required when an explicit shape is given"
            )
        return _wrap(memory_view_of(values, dtype), _as_shape(shape), dim)

    inferred = _nested_shape(data)
    values: List[Any] = []
    _flatten(data, inferred, 0, (), values)
    return _wrap(memory_view_of(values, dtype), inferred, dim)


def ndarray_of(*items: Number, dtype: Any = None) -> Ndarray:
    """One-dimensional array of ``items``."""
    return _wrap(memory_view_of(list(items), dtype), (len(items),), D1)


def to_ndarray(iterable: Iterable[Number], dtype: Any = None) -> Ndarray:
    """One-dimensional array holding everything ``iterable`` yields."""
    values = list(iterable)
    return _wrap(memory_view_of(values, dtype), (len(values),), D1)


# ----------------------------------------------------------------------
# From generators
# ----------------------------------------------------------------------
def _generated(
    shape: Tuple[int, ...], init: Init, dtype: Any, dim: Optional[DimensionLike]
) -> Ndarray:
    size = size_of(shape)
    if dtype is None:
        storage = memory_view_of([init(i) for i in range(size)])
    else:
        storage = init_memory_view(size, dtype, init)
    return _wrap(storage, shape, dim)


def d1array(n: int, init: Init, dtype: Any = None) -> Ndarray:
    """
    One-dimensional array of ``n`` elements, element ``i`` being ``init(i)``.

    ``init`` is called exactly once per element, in ascending flat order.
    """
    return _generated(_as_shape(n), init, dtype, D1)


def d2array(n1: int, n2: int, init: Init, dtype: Any = None) -> Ndarray:
    """Two-dimensional counterpart of `d1array` (``init`` gets the flat index)."""
    return _generated(validate_shape((n1, n2)), init, dtype, D2)


def d3array(n1: int, n2: int, n3: int, init: Init, dtype: Any = None) -> Ndarray:
    return _generated(validate_shape((n1, n2, n3)), init, dtype, D3)


def d4array(
    n1: int, n2: int, n3: int, n4: int, init: Init, dtype: Any = None
) -> Ndarray:
    return _generated(validate_shape((n1, n2, n3, n4)), init, dtype, D4)


def dnarray(
    shape: ShapeLike, init: Init, dtype: Any = None, dim: Optional[DimensionLike] = DN
) -> Ndarray:
    """Array of any rank; ``init`` gets the row-major flat index."""
    return _generated(_as_shape(shape), init, dtype, dim)


# ----------------------------------------------------------------------
# Ranges
# ----------------------------------------------------------------------
def arange(
    start: Number, stop: Optional[Number] = None, step: Number = 1, dtype: Any = None
) -> Ndarray:
    """
    Evenly spaced values in the half-open interval ``[start, stop)``.

    ``arange(n)`` is ``arange(0, n)``. The result has
    ``ceil((stop - start) / step)`` elements (none when ``start == stop``).

    Parameters
    ----------
    dtype : optional
        int64 when every argument is an integer, float64 otherwise, unless
        given.

    Raises
    ------
    SliceError
        If ``step`` is zero or its sign disagrees with the direction of
        ``start -> stop``.
    """
    if stop is None:
        start, stop = 0, start
    if step == 0:
        raise SliceError("Step must be non-zero.", start, stop, step)
    if start < stop and step < 0:
        raise SliceError("Step must be positive.", start, stop, step)
    if start > stop and step > 0:
        raise SliceError("Step must be negative.", start, stop, step)

    if dtype is None:
        integral = all(isinstance(v, int) for v in (start, stop, step))
        dtype = DataType.INT64 if integral else DataType.FLOAT64

    size = max(0, math.ceil((stop - start) / step))
    values = [start + i * step for i in range(size)]
    return _wrap(memory_view_of(values, dtype), (size,), D1)


def linspace(
    start: Number, stop: Number, num: int = 50, dtype: Any = DataType.FLOAT64
) -> Ndarray:
    """
    ``num`` evenly spaced values over the closed interval ``[start, stop]``.

    The last element is exactly ``stop``.

    Raises
    ------
    ConstructionError
        If ``num`` is not positive.
    """
    if num <= 0:
        raise ConstructionError(
            f"The number of elements must be positive, got {num}"
        )
    values = np.linspace(float(start), float(stop), num, dtype=np.float64)
    values[-1] = stop
    target = DataType.of(dtype)
    return _wrap(memory_view_of(values.astype(numpy_dtype_of(target)), target), (num,), D1)
