"""
Iteration mixin for Ndarray.
"""

from ._base import NdarrayMixinIteration

__all__ = [
    NdarrayMixinIteration.__name__,
]
