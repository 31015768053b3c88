"""
Focused mixins composing the concrete `Ndarray`.

Each subpackage owns one concern and, where the behavior depends on the
view's layout, registers contiguous and strided control paths on import.
"""

from .indexing import NdarrayMixinIndexing
from .views import NdarrayMixinViews
from .memory import NdarrayMixinMemory
from .iteration import NdarrayMixinIteration
from .arithmetic import NdarrayMixinArithmetic
from .reduction import NdarrayMixinReduction

__all__ = [
    NdarrayMixinIndexing.__name__,
    NdarrayMixinViews.__name__,
    NdarrayMixinMemory.__name__,
    NdarrayMixinIteration.__name__,
    NdarrayMixinArithmetic.__name__,
    NdarrayMixinReduction.__name__,
]
