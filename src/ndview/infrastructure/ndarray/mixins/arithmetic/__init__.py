"""
Elementwise arithmetic mixin for Ndarray.

Public API
----------
- ``NdarrayMixinArithmetic``
"""

from ._base import NdarrayMixinArithmetic

__all__ = [
    NdarrayMixinArithmetic.__name__,
]
