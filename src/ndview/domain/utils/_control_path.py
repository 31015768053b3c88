"""
State-based method dispatch ("control paths") via decorators.

This module routes one public method to one of several registered
implementations, selected by the value of a named attribute on the instance
at call time.

Core idea
---------
- A class declares a *base* method; its signature and docstring become the
  public ones.
- Implementations are registered per ``(ClassName, MethodName, StateVal)``.
- The first registration replaces the base method with a dispatcher that
  reads ``getattr(self, state_attr)`` and calls the matching implementation
  as ``impl(self, *args, **kwargs)``.

For arrays the state attribute is ``layout``, so a contiguous view runs the
bulk path and any other view runs the strided fallback, without branching
inside the implementations themselves.
"""

from collections import namedtuple
from functools import wraps
from typing import Any, Callable, Dict, Hashable, Optional, Type, Union

from typing_extensions import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

MethodKey = namedtuple("MethodKey", ["ClassName", "MethodName", "StateVal"])
"""Key identifying one control path: owning class, method name, state value."""


def create_path_builder(state_attr: str) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Exception, Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a path builder dispatching on ``self.<state_attr>``.

    Usage::

        layout_path = create_path_builder("layout")

        class Mixin:
            def total(self) -> int: ...

        @layout_path(Mixin, Mixin.total, Layout.CONTIGUOUS)
        def total_contiguous(self) -> int: ...

        @layout_path(Mixin, Mixin.total, Layout.STRIDED)
        def total_strided(self) -> int: ...

    Parameters
    ----------
    state_attr : str
        Name of the instance attribute (usually a property) whose value
        selects the implementation.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.
        Builders created by separate calls keep separate registries.
    """
    methods_map: Dict[MethodKey, Callable] = {}

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Exception, Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator registering one control path.

        Parameters
        ----------
        cls : Type
            Class on which the dispatcher is installed.
        method : Callable
            Base method (or an already-installed dispatcher) being templated.
        state : Hashable
            State value selecting the decorated implementation.
        trap_exception : optional
            Behavior when no path matches at call time: ``None`` raises
            `NotImplementedError`; an exception type is raised; a plain
            callable is invoked as ``trap_exception(method, state)`` and its
            return value is ignored before `NotImplementedError` is raised.

        Raises
        ------
        TypeError
            If ``state`` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The control path state must be hashable. Got {state!r}")

        key = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[key] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        f"{type(self)} is missing attribute {state_attr!r}"
                    )
                cur = getattr(self, state_attr)
                sm = methods_map.get(MethodKey(cls.__name__, method.__name__, cur))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception(
                        f"Missing control path ({state_attr}={cur!r}) for {method.__name__}"
                    )
                if callable(trap_exception):
                    trap_exception(method, cur)
                raise NotImplementedError(
                    f"Missing control path ({state_attr}={cur!r}) for {method.__name__}"
                )

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
