"""
Element access and ``[]`` indexing mixin.

This module defines `NdarrayMixinIndexing`, which implements single-element
reads/writes and the ``[]`` protocol for the concrete `Ndarray`.

Key semantics
-------------
A key is one selector or a tuple of selectors, consumed left-to-right over
the axes:

- ``int`` / `RInt`: select one position and drop the axis (rank - 1),
- `Slice` / builtin ``slice``: select a range and keep the axis.

A key made only of integers covering every axis reads or writes one element.
Any other key yields a view sharing storage; assigning to such a key
broadcasts the right-hand side into the view.

Notes
-----
- Element indices are not wrapped: negative positions raise `BoundsError`.
- The host class must provide ``geometry``, ``data``, ``ndim`` and
  ``_derive(geometry, dim)``.
"""

from __future__ import annotations

import operator
from typing import Any, Optional, Tuple, Union

from .....domain._errors import BoundsError, ShapeError
from .....domain._slice import RInt, Slice
from .....domain.geometry import drop_axis, flat_offset, slice_axis

Number = Union[int, float]


def _as_position(key: Any) -> Optional[int]:
    """Integer position for an index-like selector, None for anything else."""
    if isinstance(key, bool):
        raise TypeError("Boolean values are not valid array indices")
    if isinstance(key, RInt):
        return key.data
    if isinstance(key, (Slice, slice)):
        return None
    try:
        return operator.index(key)
    except TypeError:
        return None


class NdarrayMixinIndexing:
    """
    Element access and ``[]`` indexing for the concrete Ndarray.
    """

    def get(self, *indices: int) -> Number:
        """
        Read the element at a full multi-index.

        Parameters
        ----------
        *indices : int
            One index per axis.

        Returns
        -------
        int | float
            The element as a plain Python number.

        Raises
        ------
        BoundsError
            If the number of indices differs from ``ndim`` or any index is
            outside its axis.
        """
        return self.data.get(flat_offset(indices, self.geometry))

    def set(self, *args: Number) -> None:
        """
        Write ``args[-1]`` at the full multi-index ``args[:-1]``.

        Example
        -------
        >>> a.set(1, 2, 7.5)   # a[1, 2] = 7.5
        """
        if not args:
            raise BoundsError("set() requires the indices followed by a value")
        *indices, value = args
        self.data.set(flat_offset(indices, self.geometry), value)

    def item(self) -> Number:
        """
        The single element of a one-element array.

        Raises
        ------
        ShapeError
            If the array does not hold exactly one element.
        """
        if self.size != 1:
            raise ShapeError(
                f"item() requires an array of size 1, got size {self.size}", self.shape
            )
        return self.data.get(self.geometry.offset)

    def _normalize_key(self, key: Any) -> Tuple[Any, ...]:
        keys = key if isinstance(key, tuple) else (key,)
        if len(keys) > self.ndim:
            raise BoundsError(
                f"Too many indices: array is {self.ndim}-dimensional, "
                f"but {len(keys)} were given",
                length=self.ndim,
            )
        return keys

    def _full_position(self, keys: Tuple[Any, ...]) -> Optional[Tuple[int, ...]]:
        if len(keys) != self.ndim:
            return None
        positions = tuple(_as_position(k) for k in keys)
        if any(p is None for p in positions):
            return None
        return positions

    def _view_for(self, keys: Tuple[Any, ...]) -> Any:
        geometry = self.geometry
        dim = self.dim
        axis = 0
        for k in keys:
            pos = _as_position(k)
            if pos is not None:
                geometry = drop_axis(geometry, axis, pos)
                dim = dim.remove_axis()
            elif isinstance(k, Slice):
                geometry = slice_axis(geometry, axis, k)
                axis += 1
            elif isinstance(k, slice):
                geometry = slice_axis(
                    geometry, axis, Slice.from_builtin(k, geometry.shape[axis])
                )
                axis += 1
            else:
                raise TypeError(
                    f"Array indices must be integers, RInt, Slice or slice, got {type(k).__name__}"
                )
        return self._derive(geometry, dim)

    def __getitem__(self, key: Any) -> Any:
        """
        Read one element (full integer key) or derive a view (any other key).
        """
        keys = self._normalize_key(key)
        positions = self._full_position(keys)
        if positions is not None:
            return self.get(*positions)
        return self._view_for(keys)

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write one element, or broadcast ``value`` into the selected view.
        """
        keys = self._normalize_key(key)
        positions = self._full_position(keys)
        if positions is not None:
            self.set(*positions, value)
            return
        self._view_for(keys).assign(value)
