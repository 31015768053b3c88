"""
Reduction mixin and layout-specific implementations for Ndarray.

The implementation module is imported for its side effect of registering the
contiguous and strided control paths of `_reduce`.

Public API
----------
- ``NdarrayMixinReduction``
"""

from ._ndarray_reduce import *
from ._base import NdarrayMixinReduction

__all__ = [
    NdarrayMixinReduction.__name__,
]
