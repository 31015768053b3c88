"""
Iteration mixin for the concrete Ndarray.

Three traversal orders are offered:

- ``iter(a)``: along the first axis, yielding elements for a 1-D array and
  rank-reduced sub-views otherwise,
- `flat`: every element in row-major logical order,
- `ndenumerate`: ``(index_tuple, value)`` pairs in row-major order.

All of them follow the view's strides exactly (including stride-0 axes), so
iterating a broadcast or transposed view never copies.
"""

from __future__ import annotations

from typing import Any, Iterator, Tuple, Union

from .....domain.geometry import iter_indices, iter_offsets

Number = Union[int, float]


class NdarrayMixinIteration:
    """
    Traversal helpers for the concrete Ndarray.
    """

    def __iter__(self) -> Iterator[Any]:
        if self.ndim == 0:
            raise TypeError("iteration over a 0-d array")
        return self._iter_first_axis()

    def _iter_first_axis(self) -> Iterator[Any]:
        if self.ndim == 1:
            for i in range(self.shape[0]):
                yield self.get(i)
        else:
            for i in range(self.shape[0]):
                yield self.index(0, i)

    def flat(self) -> Iterator[Number]:
        """All elements as plain Python numbers, row-major."""
        data = self.data
        for pos in iter_offsets(self.geometry):
            yield data.get(pos)

    def ndenumerate(self) -> Iterator[Tuple[Tuple[int, ...], Number]]:
        """
        Pairs of multi-index and element, row-major.

        Example
        -------
        >>> list(ndarray([[1, 2]]).ndenumerate())
        [((0, 0), 1), ((0, 1), 2)]
        """
        data = self.data
        for idx, pos in zip(iter_indices(self.shape), iter_offsets(self.geometry)):
            yield idx, data.get(pos)
