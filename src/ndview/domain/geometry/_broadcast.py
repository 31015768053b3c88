"""
Broadcasting rules.

Shapes are right-aligned; on every axis the lengths must be equal or one of
them must be 1. A length-1 source axis stretched to length ``k`` gets stride
0, so the broadcast view re-reads the same buffer position ``k`` times
instead of copying.
"""

from __future__ import annotations

from typing import Sequence

from .._errors import ShapeError
from ._strides import Geometry, Shape, validate_shape


def broadcast_shapes(*shapes: Sequence[int]) -> Shape:
    """
    Common shape of several operands.

    Parameters
    ----------
    *shapes : Sequence[int]
        Operand shapes.

    Returns
    -------
    tuple[int, ...]
        The broadcast shape.

    Raises
    ------
    ShapeError
        If two operands have different lengths on an axis and neither is 1.
    """
    shapes = tuple(tuple(s) for s in shapes)
    ndim = max((len(s) for s in shapes), default=0)
    padded = [(1,) * (ndim - len(s)) + s for s in shapes]

    out = []
    for axis in range(ndim):
        lengths = {s[axis] for s in padded if s[axis] != 1}
        if len(lengths) > 1:
            raise ShapeError(
                f"Shapes {' and '.join(str(s) for s in shapes)} cannot be broadcast together",
                *shapes,
            )
        out.append(lengths.pop() if lengths else 1)
    return tuple(out)


def broadcast_geometry(geometry: Geometry, shape: Sequence[int]) -> Geometry:
    """
    Zero-copy geometry presenting ``geometry`` under the larger ``shape``.

    Leading new axes and stretched length-1 axes get stride 0.

    Raises
    ------
    ShapeError
        If ``geometry.shape`` does not broadcast to ``shape`` without
        changing ``shape``.
    """
    target = validate_shape(shape)
    src = geometry.shape
    if len(src) > len(target):
        raise ShapeError(f"Cannot broadcast shape {src} to {target}", src, target)

    lead = len(target) - len(src)
    strides = [0] * lead
    for n, s, t in zip(src, geometry.strides, target[lead:]):
        if n == t:
            strides.append(s)
        elif n == 1:
            strides.append(0)
        else:
            raise ShapeError(f"Cannot broadcast shape {src} to {target}", src, target)
    return Geometry(target, tuple(strides), geometry.offset)
