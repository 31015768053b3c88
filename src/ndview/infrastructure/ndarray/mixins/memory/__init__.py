"""
Ndarray memory operation registrations.

Imports the layout-specific implementations of `to_numpy` and `_write` for
their registration side effects and re-exports `NdarrayMixinMemory`.
"""

from ._ndarray_tonumpy import *
from ._ndarray_write import *
from ._base import NdarrayMixinMemory, offset_grid

__all__ = [
    NdarrayMixinMemory.__name__,
    offset_grid.__name__,
]
