"""
Memory layout categories.

`Layout` classifies an array view by how its logical elements map onto the
storage buffer. Math and copy paths are registered per layout and selected at
runtime from ``Ndarray.layout``:

- ``CONTIGUOUS``: canonical row-major strides; the elements occupy the
  window ``data[offset : offset + size]`` in logical order, so bulk paths may
  operate on the raw buffer without copying.
- ``STRIDED``: any other strides (sliced with a step, transposed,
  broadcast); element positions must be gathered from the geometry.
"""

from enum import Enum


class Layout(Enum):
    """
    Enumeration of view layouts.
    """

    CONTIGUOUS = "contiguous"
    STRIDED = "strided"
