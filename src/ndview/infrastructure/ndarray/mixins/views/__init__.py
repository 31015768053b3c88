"""
Storage-sharing view derivations for Ndarray.
"""

from ._base import NdarrayMixinViews

__all__ = [
    NdarrayMixinViews.__name__,
]
