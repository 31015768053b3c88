"""
Concrete Ndarray view engine.
"""

from ._ndarray import Ndarray
from ._ndarray_builder import ndarray_control_path_manager

__all__ = [
    Ndarray.__name__,
    "ndarray_control_path_manager",
]
