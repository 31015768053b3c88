"""
Runtime configuration for ndview.

Settings are read once from the environment and can be overridden for a
scope with `config_context`:

- ``NDVIEW_WARN_ON_COPY`` (default on): emit `CopyWarning` whenever an
  operation that is normally a view had to materialize a copy.
- ``NDVIEW_PRINT_THRESHOLD`` (default 1000): element count above which
  ``repr``/``str`` print a summary instead of every element.

Flags are considered off when set to ``"0"``, ``""`` or ``"false"`` (any case).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

_FALSY = ("0", "", "false")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Config:
    """
    Active ndview settings.

    Attributes
    ----------
    warn_on_copy : bool
        Emit `CopyWarning` on implicit copies.
    print_threshold : int
        Largest element count printed in full by ``repr``/``str``.
    """

    warn_on_copy: bool = True
    print_threshold: int = 1000

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            warn_on_copy=_env_flag("NDVIEW_WARN_ON_COPY", True),
            print_threshold=_env_int("NDVIEW_PRINT_THRESHOLD", 1000),
        )


_active: Optional[Config] = None


def get_config() -> Config:
    """Return the active configuration, reading the environment on first use."""
    global _active
    if _active is None:
        _active = Config.from_env()
    return _active


@contextmanager
def config_context(**overrides) -> Iterator[Config]:
    """
    Temporarily override configuration fields.

    Example
    -------
    >>> with config_context(warn_on_copy=False):
    ...     view.reshape(6)
    """
    global _active
    previous = get_config()
    _active = replace(previous, **overrides)
    try:
        yield _active
    finally:
        _active = previous
