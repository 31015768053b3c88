"""
Slice and range algebra.

This module defines the values a caller uses to select along one axis:

- `Slice`: a normalized half-open ``(start, stop, step)`` triple,
- `RInt`: a "resolved index" wrapper around a single integer, which selects
  (and drops) one position along an axis and can be combined into a `Slice`
  with `RInt.to`,
- `r` / `range_to`: small helpers building those values.

Normalization rules
-------------------
- ``step == 0`` is accepted only for a zero-length range (``start == stop``),
  and such a slice is canonicalized to `Slice.EMPTY` ``(0, 0, 0)``.
- ``step == -2**31`` is reserved and rejected.
- If ``0 <= stop < start`` the bounds are swapped so that the smaller one is
  the effective start.
- ``step`` is stored as its magnitude; the sign is not retained.

Slices are transient: array views fold their effect into new shape, strides
and offset and never keep the `Slice` itself.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ._errors import BoundsError, SliceError

RESERVED_STEP = -(2**31)
"""Step value rejected so that negating any accepted step cannot overflow."""


class Indexing:
    """
    Marker base for per-axis selectors accepted by array indexing
    (`Slice` and `RInt`).
    """

    __slots__ = ()


class Slice(Indexing):
    """
    Normalized half-open range over one axis.

    Parameters
    ----------
    start : int
        First position (inclusive).
    stop : int
        End position (exclusive).
    step : int, optional
        Distance between selected positions. Stored as its magnitude.

    Raises
    ------
    SliceError
        On a zero step over a non-empty range, or on the reserved step.
    """

    __slots__ = ("_start", "_stop", "_step")

    EMPTY: "Slice"

    def __init__(self, start: int, stop: int, step: int = 1) -> None:
        start, stop, step = int(start), int(stop), int(step)
        if step == 0 and start != stop:
            raise SliceError("Step must be non-zero.", start, stop, step)
        if step == RESERVED_STEP:
            raise SliceError(
                "Step must be greater than -2**31 to avoid overflow on negation.",
                start,
                stop,
                step,
            )

        if step == 0:
            self._start, self._stop, self._step = 0, 0, 0
            return

        self._start = stop if 0 <= stop < start else start
        self._stop = start if self._start == stop else stop
        self._step = -step if step < 0 else step

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def step(self) -> int:
        return self._step

    def is_empty(self) -> bool:
        """True when the slice selects nothing regardless of axis length."""
        return self._step == 0 or self._stop <= self._start

    def by(self, step: Union[int, "RInt"]) -> "Slice":
        """
        Return a slice with the same bounds and a new step (the rightmost
        step in a chain wins).
        """
        if isinstance(step, RInt):
            step = step.data
        return Slice(self._start, self._stop, step)

    def length(self, size: Optional[int] = None) -> int:
        """
        Number of positions selected, optionally against an axis of ``size``
        positions (``stop`` is clamped to ``size``).
        """
        if self._step == 0:
            return 0
        stop = self._stop if size is None else min(self._stop, size)
        return max(0, -(-(stop - self._start) // self._step))

    def indices(self, size: int) -> Tuple[int, int, int]:
        """
        Resolve this slice against an axis of ``size`` positions.

        Returns
        -------
        tuple[int, int, int]
            ``(start, stop, step)`` with ``stop`` clamped to ``size``.

        Raises
        ------
        BoundsError
            If ``start`` lies outside ``[0, size]`` or ``stop`` is negative;
            negative bounds are not wrapped.
        """
        if self._step == 0:
            return 0, 0, 0
        if self._start < 0 or self._start > size:
            raise BoundsError(
                f"Slice start {self._start} is out of bounds for size {size}",
                index=self._start,
                length=size,
            )
        if self._stop < 0:
            raise BoundsError(
                f"Slice stop {self._stop} is negative; negative bounds are not wrapped",
                index=self._stop,
                length=size,
            )
        return self._start, max(self._start, min(self._stop, size)), self._step

    def __contains__(self, value: int) -> bool:
        if self.is_empty():
            return False
        return (
            self._start <= value < self._stop
            and (value - self._start) % self._step == 0
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return (self._start, self._stop, self._step) == (
            other._start,
            other._stop,
            other._step,
        )

    def __hash__(self) -> int:
        if self.is_empty():
            return -1
        return 31 * self._start + self._stop + self._step

    def __repr__(self) -> str:
        return f"Slice({self._start}, {self._stop}, {self._step})"

    def __str__(self) -> str:
        return f"{self._start}..{self._stop}..{self._step}"

    @classmethod
    def from_builtin(cls, s: slice, size: int) -> "Slice":
        """
        Convert a builtin ``slice`` into a `Slice` for an axis of ``size``.

        ``None`` bounds resolve to ``0`` and ``size`` and a ``None`` step to
        ``1``; the result then follows the regular normalization.

        Raises
        ------
        SliceError
            On a negative step, or on explicit bounds with ``start > stop``.
        """
        start = 0 if s.start is None else s.start
        stop = size if s.stop is None else s.stop
        step = 1 if s.step is None else s.step
        if step < 0:
            raise SliceError(
                "Negative steps are not supported in subscripts.", start, stop, step
            )
        if s.start is not None and s.stop is not None and 0 <= stop < start:
            raise SliceError(
                "Slice start must not exceed its stop in subscripts.", start, stop, step
            )
        return cls(start, stop, step)


Slice.EMPTY = Slice(0, 0, 0)


class RInt(Indexing):
    """
    A resolved single index along one axis.

    Parameters
    ----------
    data : int
        The wrapped position.
    """

    __slots__ = ("_data",)

    def __init__(self, data: int) -> None:
        self._data = int(data)

    @property
    def data(self) -> int:
        return self._data

    def to(self, that: Union[int, "RInt"]) -> Slice:
        """Build the unit-step slice ``[self, that)``."""
        return range_to(self, that)

    def __int__(self) -> int:
        return self._data

    def __index__(self) -> int:
        return self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RInt):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("RInt", self._data))

    def __repr__(self) -> str:
        return f"RInt({self._data})"


def r(value: int) -> RInt:
    """Wrap ``value`` as a resolved index."""
    return RInt(value)


def range_to(start: Union[int, RInt], stop: Union[int, RInt]) -> Slice:
    """
    Build a unit-step `Slice` from plain integers or `RInt` values, in any
    combination.
    """
    a = start.data if isinstance(start, RInt) else start
    b = stop.data if isinstance(stop, RInt) else stop
    return Slice(a, b, 1)
