"""
Data type tags for ndview arrays.

This module defines `DataType`, the closed enumeration naming which primitive
kind backs an array's storage. Generic operations pattern-match the tag once
at the API boundary and then run kind-specific code, so the tag is the single
source of truth for element kind throughout the engine.

The domain layer stays free of numpy: resolution of foreign type objects
(numpy dtypes, numpy scalar types) is done structurally through their
``name`` / ``__name__`` attributes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ._errors import UnsupportedTypeError


class DataType(Enum):
    """
    Enumeration of supported primitive element kinds.

    Each member carries:

    - ``native_code``: a stable small integer, also used as the promotion
      rank for mixed-kind arithmetic (int8 < ... < float64),
    - ``type_name``: the canonical lowercase name (``"int32"``),
    - ``itemsize``: element width in bytes,
    - ``is_floating``: whether the kind is a floating-point kind.
    """

    INT8 = (1, "int8", 1, False)
    INT16 = (2, "int16", 2, False)
    INT32 = (3, "int32", 4, False)
    INT64 = (4, "int64", 8, False)
    FLOAT32 = (5, "float32", 4, True)
    FLOAT64 = (6, "float64", 8, True)

    def __init__(
        self, native_code: int, type_name: str, itemsize: int, is_floating: bool
    ) -> None:
        self.native_code = native_code
        self.type_name = type_name
        self.itemsize = itemsize
        self.is_floating = is_floating

    def __str__(self) -> str:
        return self.type_name

    @property
    def is_integer(self) -> bool:
        """True for the signed integer kinds."""
        return not self.is_floating

    @property
    def python_type(self) -> type:
        """Plain Python type that elements of this kind are exposed as."""
        return float if self.is_floating else int

    @property
    def min_value(self) -> float:
        """Smallest representable value (integer kinds) or -inf."""
        if self.is_floating:
            return float("-inf")
        return -(1 << (self.itemsize * 8 - 1))

    @property
    def max_value(self) -> float:
        """Largest representable value (integer kinds) or +inf."""
        if self.is_floating:
            return float("inf")
        return (1 << (self.itemsize * 8 - 1)) - 1

    @classmethod
    def from_native_code(cls, code: int) -> "DataType":
        """
        Resolve a data type from its native code.

        Raises
        ------
        UnsupportedTypeError
            If no member carries ``code``.
        """
        for member in cls:
            if member.native_code == code:
                return member
        raise UnsupportedTypeError(code)

    @classmethod
    def of(cls, kind: Any) -> "DataType":
        """
        Resolve a data type from a type-like object.

        Accepted inputs:

        - a `DataType` (returned unchanged),
        - a canonical name such as ``"int32"`` or ``"float64"``,
        - the Python types ``int`` (int64) and ``float`` (float64),
        - numpy dtypes and numpy scalar types, resolved by name.

        Parameters
        ----------
        kind : Any
            Type-like object to resolve.

        Returns
        -------
        DataType
            The matching tag.

        Raises
        ------
        UnsupportedTypeError
            If the object names a kind with no tag (bool, unsigned, complex,
            object, ...).
        """
        if isinstance(kind, DataType):
            return kind
        if kind is bool:
            raise UnsupportedTypeError(kind)
        if kind is int:
            return cls.INT64
        if kind is float:
            return cls.FLOAT64

        if isinstance(kind, str):
            name = kind
        elif isinstance(kind, type):
            name = kind.__name__
        else:
            name = getattr(kind, "name", None)

        if isinstance(name, str):
            for member in cls:
                if member.type_name == name.lower():
                    return member
        raise UnsupportedTypeError(kind)

    @classmethod
    def of_value(cls, value: Any) -> "DataType":
        """
        Infer the data type of a single element.

        Python ``int`` maps to int64 and ``float`` to float64; numpy scalars
        keep their own kind.

        Raises
        ------
        UnsupportedTypeError
            If the value is not a supported numeric element.
        """
        if isinstance(value, bool):
            raise UnsupportedTypeError(type(value))
        dtype_attr = getattr(value, "dtype", None)
        if dtype_attr is not None:
            return cls.of(dtype_attr)
        if isinstance(value, int):
            return cls.INT64
        if isinstance(value, float):
            return cls.FLOAT64
        raise UnsupportedTypeError(type(value))

    @staticmethod
    def promote(a: "DataType", b: "DataType") -> "DataType":
        """
        Return the kind that wins a mixed-kind binary operation
        (the one with the larger native code).
        """
        return a if a.native_code >= b.native_code else b
