"""
Ndarray control-path manager for layout-specific dispatch.

This module defines the shared control-path manager used to register and
resolve layout-specific implementations of `Ndarray` methods.

The manager specializes the generic `create_path_builder` utility with the
state attribute name ``"layout"``, so dispatch is driven by the runtime value
of ``self.layout``:

    @ndarray_control_path_manager(Mixin, Mixin.op, Layout.CONTIGUOUS)
    def op_contiguous(self, ...): ...

    @ndarray_control_path_manager(Mixin, Mixin.op, Layout.STRIDED)
    def op_strided(self, ...): ...

Contiguous paths work on the raw buffer window ``data[offset:offset+size]``
without copying; strided paths gather element positions from the geometry.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Ndarray methods based on `self.layout`
ndarray_control_path_manager = create_path_builder("layout")
