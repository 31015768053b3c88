"""
Primitive storage (per-kind flat buffers) for ndview arrays.
"""

from ._memory_view import (
    ByteMemoryView,
    DoubleMemoryView,
    FloatMemoryView,
    GenericView,
    IntMemoryView,
    LongMemoryView,
    MemoryView,
    ShortMemoryView,
    data_type_of_numpy,
    infer_data_type,
    init_memory_view,
    memory_view_class,
    memory_view_of,
    numpy_dtype_of,
)

__all__ = [
    "ByteMemoryView",
    "DoubleMemoryView",
    "FloatMemoryView",
    "GenericView",
    "IntMemoryView",
    "LongMemoryView",
    "MemoryView",
    "ShortMemoryView",
    "data_type_of_numpy",
    "infer_data_type",
    "init_memory_view",
    "memory_view_class",
    "memory_view_of",
    "numpy_dtype_of",
]
