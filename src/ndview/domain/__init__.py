"""
Domain layer of ndview: element kinds, dimension tags, slice algebra, layout
categories, errors, protocols and the pure view geometry. Nothing in this
package imports numpy.
"""

from ._errors import (
    BoundsError,
    ConstructionError,
    CopyWarning,
    NdarrayError,
    ShapeError,
    SliceError,
    UnsupportedTypeError,
)
from ._dtype import DataType
from ._dimension import (
    D1,
    D2,
    D3,
    D4,
    DN,
    Dimension,
    dimension_class_of,
    dimension_of,
    require_dimension,
)
from ._layout import Layout
from ._slice import Indexing, RInt, Slice, r, range_to
from ._ndarray import IMemoryView, INdarray

__all__ = [
    "BoundsError",
    "ConstructionError",
    "CopyWarning",
    "D1",
    "D2",
    "D3",
    "D4",
    "DN",
    "DataType",
    "Dimension",
    "IMemoryView",
    "INdarray",
    "Indexing",
    "Layout",
    "NdarrayError",
    "RInt",
    "ShapeError",
    "Slice",
    "SliceError",
    "UnsupportedTypeError",
    "dimension_class_of",
    "dimension_of",
    "r",
    "range_to",
    "require_dimension",
]
