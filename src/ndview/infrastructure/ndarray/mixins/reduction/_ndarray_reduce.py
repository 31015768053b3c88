"""
Layout-specific element reads for Ndarray reductions.

- `ndarray_reduce_contiguous`: reduces the buffer window
  ``data[offset : offset + size]`` directly (reshaped only for per-axis
  reductions), without copying.
- `ndarray_reduce_strided`: gathers the element positions of the view, then
  reduces.
"""

from typing import Any, Optional

from ..._ndarray_builder import ndarray_control_path_manager
from .....domain._layout import Layout
from ..memory import offset_grid

from ._base import NdarrayMixinReduction as NMR, Reducer


@ndarray_control_path_manager(NMR, NMR._reduce, Layout.CONTIGUOUS)
def ndarray_reduce_contiguous(self, reducer: Reducer, axis: Optional[int]) -> Any:
    start = self.offset
    window = self.data.data[start : start + self.size]
    if axis is None:
        return reducer(window, None)
    return reducer(window.reshape(self.shape), axis)


@ndarray_control_path_manager(NMR, NMR._reduce, Layout.STRIDED)
def ndarray_reduce_strided(self, reducer: Reducer, axis: Optional[int]) -> Any:
    values = self.data.data[offset_grid(self.geometry)]
    if axis is None:
        return reducer(values.reshape(-1), None)
    return reducer(values, axis)
