"""
Bulk writes through an Ndarray view (contiguous and strided paths).

Registers the layout-specific implementations of the internal
`Ndarray._write(values)` hook used by `assign`, `fill` and in-place
arithmetic:

- contiguous views write into the reshaped buffer window,
- strided views scatter into the gathered element positions.

Callers validate shapes before calling `_write`, so a failure never leaves a
partially written view.
"""

import numpy as np

from ..._ndarray_builder import ndarray_control_path_manager
from .....domain._layout import Layout

from ._base import NdarrayMixinMemory as NMM, offset_grid


@ndarray_control_path_manager(NMM, NMM._write, Layout.CONTIGUOUS)
def ndarray_write_contiguous(self, values: np.ndarray) -> None:
    start = self.offset
    window = self.data.data[start : start + self.size].reshape(self.shape)
    window[...] = values


@ndarray_control_path_manager(NMM, NMM._write, Layout.STRIDED)
def ndarray_write_strided(self, values: np.ndarray) -> None:
    self.data.data[offset_grid(self.geometry)] = values
