"""
Element access and ``[]`` indexing mixin for Ndarray.
"""

from ._base import NdarrayMixinIndexing

__all__ = [
    NdarrayMixinIndexing.__name__,
]
