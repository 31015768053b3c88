"""
Pure shape / stride / offset geometry for strided views.

Everything here is numpy-free integer arithmetic shared by the storage-backed
array implementation and by any backend that consumes the geometry triple.
"""

from ._strides import (
    Geometry,
    Shape,
    check_index,
    compute_strides,
    drop_axis,
    flat_offset,
    insert_axis,
    is_contiguous,
    iter_indices,
    iter_offsets,
    normalize_axis,
    reshape,
    size_of,
    slice_axis,
    squeeze_axis,
    transpose,
    validate_shape,
)
from ._broadcast import broadcast_geometry, broadcast_shapes

__all__ = [
    "Geometry",
    "Shape",
    "broadcast_geometry",
    "broadcast_shapes",
    "check_index",
    "compute_strides",
    "drop_axis",
    "flat_offset",
    "insert_axis",
    "is_contiguous",
    "iter_indices",
    "iter_offsets",
    "normalize_axis",
    "reshape",
    "size_of",
    "slice_axis",
    "squeeze_axis",
    "transpose",
    "validate_shape",
]
