"""
Array-engine exceptions for ndview.

This module defines the error kinds raised by the array core. Every error
derives from `NdarrayError` and additionally from the builtin exception that
best describes it, so callers may branch either on the library hierarchy
(`except BoundsError`) or on plain Python semantics (`except IndexError`)
without parsing messages.

All errors are raised synchronously at the offending call. Operations validate
their inputs before touching storage, so a raised error never leaves a
partially-mutated array behind.
"""

from __future__ import annotations

from typing import Optional, Sequence


class NdarrayError(Exception):
    """
    Base class of every error raised by the ndview array core.
    """


class ConstructionError(NdarrayError, ValueError):
    """
    Raised when an array or storage cannot be built from the given inputs.

    Typical causes are an element count that does not match the product of
    the shape, a declared dimension whose arity differs from the shape length,
    ragged nested input, or a storage whose data type differs from the
    declared one.
    """


class BoundsError(NdarrayError, IndexError):
    """
    Raised when an index falls outside an axis or a storage buffer, or when
    the number of indices does not match the array arity.

    Attributes
    ----------
    index : Optional[int]
        The offending index, when a single index is at fault.
    axis : Optional[int]
        The axis the index was applied to, if any.
    length : Optional[int]
        The valid length of that axis (or buffer).
    """

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        axis: Optional[int] = None,
        length: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.axis = axis
        self.length = length

    @classmethod
    def out_of_range(
        cls, index: int, length: int, axis: Optional[int] = None
    ) -> "BoundsError":
        """
        Build the canonical "index out of range" error.

        Parameters
        ----------
        index : int
            The rejected index.
        length : int
            Number of valid positions (valid range is ``[0, length)``).
        axis : Optional[int]
            Axis number, or None for flat storage access.

        Returns
        -------
        BoundsError
            The constructed (not raised) error.
        """
        where = "storage" if axis is None else f"axis {axis}"
        return cls(
            f"Index {index} is out of bounds for {where} with size {length}",
            index=index,
            axis=axis,
            length=length,
        )


class SliceError(NdarrayError, ValueError):
    """
    Raised when a slice cannot be normalized (zero step outside an empty
    range, or the reserved minimum step).

    Attributes
    ----------
    start, stop, step : int
        The raw bounds that were rejected.
    """

    def __init__(self, message: str, start: int, stop: int, step: int) -> None:
        super().__init__(message)
        self.start = start
        self.stop = stop
        self.step = step


class ShapeError(NdarrayError, ValueError):
    """
    Raised on incompatible shapes: reshape to a different total size,
    broadcasting of mismatched axes, invalid permutations, or reductions that
    need at least one element.

    Attributes
    ----------
    shapes : tuple[tuple[int, ...], ...]
        The shapes involved in the failed operation.
    """

    def __init__(self, message: str, *shapes: Sequence[int]) -> None:
        super().__init__(message)
        self.shapes = tuple(tuple(s) for s in shapes)


class UnsupportedTypeError(NdarrayError, TypeError):
    """
    Raised when no data type is defined for a requested element type
    (e.g., bool, unsigned or complex kinds).

    Attributes
    ----------
    requested : object
        The object the caller tried to resolve into a data type.
    """

    def __init__(self, requested: object) -> None:
        super().__init__(f"No data type is defined for {requested!r}")
        self.requested = requested


class CopyWarning(UserWarning):
    """
    Emitted when an operation that is usually a zero-copy view had to
    materialize a copy (e.g., reshaping a non-contiguous view).
    """
