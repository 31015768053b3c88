"""
Dimension tags for ndview arrays.

A `Dimension` states how many axes an array has. The fixed arities 1..4 are
modelled as singleton marker classes (`D1`, `D2`, `D3`, `D4`) so they can be
used as type parameters (``Ndarray[int, D2]``); any other arity, including
0 for scalar views, is carried at runtime by `DN`.

The invariant ``dim.d == len(shape)`` is enforced by `require_dimension`,
which every array constructor calls.
"""

from __future__ import annotations

from typing import Type, Union

from ._errors import ConstructionError


class Dimension:
    """
    Base dimension tag.

    Parameters
    ----------
    d : int
        Number of axes. Must be non-negative.

    Notes
    -----
    Tags compare equal by arity, so ``D2() == DN(2)``. Use `dimension_of` to
    obtain the canonical tag for an arity.
    """

    __slots__ = ("_d",)

    def __init__(self, d: int) -> None:
        if d < 0:
            raise ConstructionError(f"Dimension must be non-negative, got {d}")
        self._d = int(d)

    @property
    def d(self) -> int:
        """Number of axes."""
        return self._d

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self._d == other._d

    def __hash__(self) -> int:
        return hash(("Dimension", self._d))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def remove_axis(self) -> "Dimension":
        """Tag for an array with one axis fewer."""
        if self._d == 0:
            raise ConstructionError("Cannot remove an axis from a 0-dimensional tag")
        return dimension_of(self._d - 1)

    def add_axis(self) -> "Dimension":
        """Tag for an array with one axis more."""
        return dimension_of(self._d + 1)


class _FixedDimension(Dimension):
    """Singleton base for the fixed arities."""

    __slots__ = ()
    _arity = 0
    _instance = None

    def __new__(cls):
        if cls.__dict__.get("_instance") is None:
            inst = super().__new__(cls)
            Dimension.__init__(inst, cls._arity)
            cls._instance = inst
        return cls._instance

    def __init__(self) -> None:
        pass


class D1(_FixedDimension):
    """One axis."""

    __slots__ = ()
    _arity = 1


class D2(_FixedDimension):
    """Two axes."""

    __slots__ = ()
    _arity = 2


class D3(_FixedDimension):
    """Three axes."""

    __slots__ = ()
    _arity = 3


class D4(_FixedDimension):
    """Four axes."""

    __slots__ = ()
    _arity = 4


class DN(Dimension):
    """Arbitrary arity carried at runtime."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"DN({self._d})"


_FIXED = {1: D1, 2: D2, 3: D3, 4: D4}

DimensionLike = Union[Dimension, Type[Dimension]]


def dimension_of(n: int) -> Dimension:
    """
    Return the canonical tag for an arity: `D1`..`D4` for 1..4, `DN(n)`
    otherwise (including 0).
    """
    cls = _FIXED.get(n)
    if cls is not None:
        return cls()
    return DN(n)


def dimension_class_of(dim: DimensionLike, n: int) -> Dimension:
    """
    Instantiate a declared dimension for a shape of length ``n``.

    Parameters
    ----------
    dim : Dimension | type[Dimension]
        Declared dimension. A `DN` class adopts ``n``; a fixed class is
        instantiated as-is; an instance is returned unchanged.
    n : int
        Arity of the shape the dimension will describe.

    Returns
    -------
    Dimension
        The instantiated tag (not yet checked against ``n``).
    """
    if isinstance(dim, Dimension):
        return dim
    if isinstance(dim, type) and issubclass(dim, Dimension):
        if issubclass(dim, _FixedDimension):
            return dim()
        return dimension_of(n)
    raise ConstructionError(f"Expected a Dimension, got {dim!r}")


def require_dimension(dim: Dimension, n: int) -> None:
    """
    Enforce ``dim.d == n``.

    Raises
    ------
    ConstructionError
        If the arity of ``dim`` differs from ``n``.
    """
    if dim.d != n:
        raise ConstructionError(
            f"Dimension mismatch: {dim!r} has {dim.d} axes but the shape has {n}"
        )
