"""
ndview: N-dimensional strided array views over flat primitive storage.

Quick start
-----------
>>> import ndview as nv
>>> a = nv.ndarray([[1, 2, 3], [4, 5, 6]], dtype="int32")
>>> a[:, nv.Slice(1, 3)].T.to_list()
[[2, 5], [3, 6]]
"""

from .domain import (
    D1,
    D2,
    D3,
    D4,
    DN,
    BoundsError,
    ConstructionError,
    CopyWarning,
    DataType,
    Dimension,
    Layout,
    NdarrayError,
    RInt,
    ShapeError,
    Slice,
    SliceError,
    UnsupportedTypeError,
    r,
    range_to,
)
from .domain.geometry import Geometry, broadcast_shapes
from .infrastructure._config import Config, config_context, get_config
from .infrastructure.creation import (
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
from .infrastructure.ndarray import Ndarray
from .infrastructure.storage import (
    ByteMemoryView,
    DoubleMemoryView,
    FloatMemoryView,
    IntMemoryView,
    LongMemoryView,
    MemoryView,
    ShortMemoryView,
    init_memory_view,
    memory_view_of,
)

int8 = DataType.INT8
int16 = DataType.INT16
int32 = DataType.INT32
int64 = DataType.INT64
float32 = DataType.FLOAT32
float64 = DataType.FLOAT64

__version__ = "0.1.0"
