"""
Shape / stride / offset geometry.

Pure integer arithmetic turning a flat buffer into an N-dimensional logical
view. A `Geometry` is the triple ``(shape, strides, offset)``; every view
derivation (slice, index, transpose, reshape, squeeze, broadcast) is a
function from one `Geometry` to another and never touches storage.

Row-major strides are::

    strides[last] = 1
    strides[i]    = strides[i + 1] * shape[i + 1]

and the buffer position of a multi-index is
``offset + sum(indices[k] * strides[k])``.

Notes
-----
- Element indices are never wrapped: a negative index is out of bounds.
- Axis *numbers* accept negative values counted from the end, as the
  structural ops of the tensor layer always have.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .._errors import BoundsError, ConstructionError, ShapeError
from .._slice import Slice

Shape = Tuple[int, ...]


@dataclass(frozen=True)
class Geometry:
    """
    Immutable ``(shape, strides, offset)`` triple.

    Attributes
    ----------
    shape : tuple[int, ...]
        Non-negative axis lengths.
    strides : tuple[int, ...]
        Buffer-index delta per unit step along each axis.
    offset : int
        Buffer index of logical position ``(0, ..., 0)``.
    """

    shape: Shape
    strides: Shape
    offset: int = 0

    def __post_init__(self) -> None:
        if len(self.shape) != len(self.strides):
            raise ConstructionError(
                f"Shape {self.shape} and strides {self.strides} differ in length"
            )
        if self.offset < 0:
            raise ConstructionError(f"Offset must be non-negative, got {self.offset}")

    @classmethod
    def dense(cls, shape: Sequence[int], offset: int = 0) -> "Geometry":
        """Canonical row-major geometry for ``shape``."""
        shape = validate_shape(shape)
        return cls(shape, compute_strides(shape), offset)

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return size_of(self.shape)

    def is_contiguous(self) -> bool:
        return is_contiguous(self.shape, self.strides)

    def span(self) -> Tuple[int, int]:
        """
        Lowest and highest buffer positions reached by the view.

        Only meaningful when ``size > 0``.
        """
        lo = hi = self.offset
        for n, s in zip(self.shape, self.strides):
            if s >= 0:
                hi += (n - 1) * s
            else:
                lo += (n - 1) * s
        return lo, hi


def validate_shape(shape: Sequence[int]) -> Shape:
    """
    Normalize a shape into a tuple of non-negative ints.

    Raises
    ------
    ConstructionError
        On negative or non-integer axis lengths.
    """
    out = []
    for n in shape:
        try:
            n = operator.index(n)
        except TypeError as e:
            raise ConstructionError(f"Shape entries must be integers, got {shape!r}") from e
        if n < 0:
            raise ConstructionError(f"Shape entries must be non-negative, got {tuple(shape)}")
        out.append(n)
    return tuple(out)


def size_of(shape: Sequence[int]) -> int:
    """Product of the axis lengths; the empty shape has size 1."""
    size = 1
    for n in shape:
        size *= n
    return size


def compute_strides(shape: Sequence[int]) -> Shape:
    """Canonical row-major strides for ``shape``."""
    strides = [0] * len(shape)
    acc = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = acc
        acc *= shape[i]
    return tuple(strides)


def is_contiguous(shape: Sequence[int], strides: Sequence[int]) -> bool:
    """
    True when ``strides`` equal the canonical strides for ``shape``.

    Axes of length 0 or 1 never advance through the buffer, so their strides
    are not compared; an empty view is trivially contiguous.
    """
    if size_of(shape) == 0:
        return True
    for n, s, c in zip(shape, strides, compute_strides(shape)):
        if n > 1 and s != c:
            return False
    return True


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Resolve a possibly negative axis number.

    Raises
    ------
    BoundsError
        If ``axis`` is outside ``[-ndim, ndim)``.
    """
    axis = operator.index(axis)
    if axis < -ndim or axis >= ndim:
        raise BoundsError(
            f"axis {axis} is out of bounds for array of dimension {ndim}",
            index=axis,
            length=ndim,
        )
    return axis + ndim if axis < 0 else axis


def check_index(index: int, length: int, axis: int) -> int:
    """
    Validate one element index against an axis length (no wraparound).

    Raises
    ------
    BoundsError
        If ``index`` is outside ``[0, length)``.
    """
    index = operator.index(index)
    if index < 0 or index >= length:
        raise BoundsError.out_of_range(index, length, axis)
    return index


def flat_offset(indices: Sequence[int], geometry: Geometry) -> int:
    """
    Buffer position of a full multi-index.

    Raises
    ------
    BoundsError
        If the number of indices differs from the arity, or any index is out
        of its axis range.
    """
    if len(indices) != geometry.ndim:
        raise BoundsError(
            f"Expected {geometry.ndim} indices, got {len(indices)}",
            length=geometry.ndim,
        )
    pos = geometry.offset
    for axis, (i, n, s) in enumerate(zip(indices, geometry.shape, geometry.strides)):
        pos += check_index(i, n, axis) * s
    return pos


def slice_axis(geometry: Geometry, axis: int, s: Slice) -> Geometry:
    """
    Geometry after selecting ``s`` along ``axis`` (rank preserved).

    The sliced axis gets length ``ceil((stop - start) / step)`` (at least 0),
    stride ``old_stride * step``, and the offset advances by
    ``start * old_stride``.
    """
    axis = normalize_axis(axis, geometry.ndim)
    n = geometry.shape[axis]
    stride = geometry.strides[axis]
    start, stop, step = s.indices(n)
    length = 0 if step == 0 else max(0, -(-(stop - start) // step))

    shape = list(geometry.shape)
    strides = list(geometry.strides)
    shape[axis] = length
    strides[axis] = stride * step
    return Geometry(tuple(shape), tuple(strides), geometry.offset + start * stride)


def drop_axis(geometry: Geometry, axis: int, index: int) -> Geometry:
    """
    Geometry after fixing ``axis`` at ``index`` (rank reduced by one).
    """
    axis = normalize_axis(axis, geometry.ndim)
    index = check_index(index, geometry.shape[axis], axis)
    offset = geometry.offset + index * geometry.strides[axis]
    shape = geometry.shape[:axis] + geometry.shape[axis + 1 :]
    strides = geometry.strides[:axis] + geometry.strides[axis + 1 :]
    return Geometry(shape, strides, offset)


def insert_axis(geometry: Geometry, axis: int) -> Geometry:
    """
    Geometry with a new length-1 axis at position ``axis``
    (``0 <= axis <= ndim``; negative values count from ``ndim + 1``).
    """
    ndim = geometry.ndim
    if axis < 0:
        axis += ndim + 1
    if axis < 0 or axis > ndim:
        raise BoundsError(
            f"axis {axis} is out of bounds for inserting into dimension {ndim}",
            index=axis,
            length=ndim + 1,
        )
    shape = geometry.shape[:axis] + (1,) + geometry.shape[axis:]
    strides = geometry.strides[:axis] + (0,) + geometry.strides[axis:]
    return Geometry(shape, strides, geometry.offset)


def squeeze_axis(geometry: Geometry, axis: int) -> Geometry:
    """
    Geometry without the length-1 axis ``axis``.

    Raises
    ------
    ShapeError
        If the axis length is not 1.
    """
    axis = normalize_axis(axis, geometry.ndim)
    if geometry.shape[axis] != 1:
        raise ShapeError(
            f"Cannot squeeze axis {axis} of length {geometry.shape[axis]}",
            geometry.shape,
        )
    return drop_axis(geometry, axis, 0)


def transpose(geometry: Geometry, axes: Sequence[int]) -> Geometry:
    """
    Geometry with shape and strides permuted by ``axes``; offset unchanged.

    Raises
    ------
    ShapeError
        If ``axes`` is not a permutation of ``range(ndim)``.
    """
    ndim = geometry.ndim
    if len(axes) != ndim:
        raise ShapeError(
            f"Permutation {tuple(axes)} does not match array dimension {ndim}",
            geometry.shape,
        )
    perm = tuple(normalize_axis(a, ndim) for a in axes)
    if sorted(perm) != list(range(ndim)):
        raise ShapeError(f"{tuple(axes)} is not a permutation of the axes", geometry.shape)
    return Geometry(
        tuple(geometry.shape[a] for a in perm),
        tuple(geometry.strides[a] for a in perm),
        geometry.offset,
    )


def reshape(geometry: Geometry, shape: Sequence[int]) -> Geometry:
    """
    Zero-copy geometry for ``shape`` over a contiguous view.

    Raises
    ------
    ShapeError
        If the total size differs, or the view is not contiguous.
    """
    try:
        new_shape = validate_shape(shape)
    except ConstructionError as e:
        raise ShapeError(str(e), geometry.shape, tuple(shape)) from e
    if size_of(new_shape) != geometry.size:
        raise ShapeError(
            f"Cannot reshape array of size {geometry.size} into shape {new_shape}",
            geometry.shape,
            new_shape,
        )
    if not geometry.is_contiguous():
        raise ShapeError(
            f"Cannot reshape a non-contiguous view of shape {geometry.shape} without a copy",
            geometry.shape,
            new_shape,
        )
    return Geometry(new_shape, compute_strides(new_shape), geometry.offset)


def iter_indices(shape: Sequence[int]) -> Iterator[Shape]:
    """
    Every multi-index of ``shape`` in row-major order (the empty shape yields
    the single index ``()``).
    """
    if size_of(shape) == 0:
        return
    ndim = len(shape)
    counter = [0] * ndim
    while True:
        yield tuple(counter)
        axis = ndim - 1
        while axis >= 0:
            counter[axis] += 1
            if counter[axis] < shape[axis]:
                break
            counter[axis] = 0
            axis -= 1
        if axis < 0:
            return


def iter_offsets(geometry: Geometry) -> Iterator[int]:
    """
    Buffer positions of every element in row-major logical order.

    Each axis advances by its own stride, so zero strides repeat positions
    and any stride pattern is followed exactly.
    """
    shape, strides = geometry.shape, geometry.strides
    if size_of(shape) == 0:
        return
    ndim = len(shape)
    counter = [0] * ndim
    pos = geometry.offset
    while True:
        yield pos
        axis = ndim - 1
        while axis >= 0:
            counter[axis] += 1
            pos += strides[axis]
            if counter[axis] < shape[axis]:
                break
            pos -= strides[axis] * shape[axis]
            counter[axis] = 0
            axis -= 1
        if axis < 0:
            return
