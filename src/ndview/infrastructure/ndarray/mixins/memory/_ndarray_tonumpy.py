"""
Ndarray-to-numpy materialization (contiguous and strided paths).

This module registers the layout-specific implementations of
`Ndarray.to_numpy()` through `ndarray_control_path_manager`:

- `ndarray_tonumpy_contiguous`: reshapes the raw buffer window
  ``data[offset : offset + size]``; no element is copied unless asked.
- `ndarray_tonumpy_strided`: gathers every element position from the
  geometry (stride-0 axes repeat values) into a fresh array.
"""

import numpy as np

from ..._ndarray_builder import ndarray_control_path_manager
from .....domain._layout import Layout

from ._base import NdarrayMixinMemory as NMM, offset_grid


@ndarray_control_path_manager(NMM, NMM.to_numpy, Layout.CONTIGUOUS)
def ndarray_tonumpy_contiguous(self, copy: bool = False) -> np.ndarray:
    """
    Materialize a contiguous view by windowing the storage buffer.

    Returns
    -------
    np.ndarray
        A numpy view sharing storage (``copy=False``) or an owned copy.
    """
    start = self.offset
    window = self.data.data[start : start + self.size].reshape(self.shape)
    return window.copy() if copy else window


@ndarray_control_path_manager(NMM, NMM.to_numpy, Layout.STRIDED)
def ndarray_tonumpy_strided(self, copy: bool = False) -> np.ndarray:
    """
    Materialize a strided view by gathering element positions.

    Returns
    -------
    np.ndarray
        Always a fresh array (fancy indexing copies).
    """
    return self.data.data[offset_grid(self.geometry)]
