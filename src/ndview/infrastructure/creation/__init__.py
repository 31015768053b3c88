"""
Array builders (filled, from values, from generators, ranges).
"""

from ._factories import (
    arange,
    d1array,
    d2array,
    d3array,
    d4array,
    dnarray,
    empty,
    full,
    identity,
    linspace,
    ndarray,
    ndarray_of,
    ones,
    to_ndarray,
    zeros,
)

__all__ = [
    "arange",
    "d1array",
    "d2array",
    "d3array",
    "d4array",
    "dnarray",
    "empty",
    "full",
    "identity",
    "linspace",
    "ndarray",
    "ndarray_of",
    "ones",
    "to_ndarray",
    "zeros",
]
