"""Zero-argument callables that wrap a plain function or a bound method."""

from __future__ import annotations

from typing import Any, Callable


class Callback:
    """A stored action that runs when the callback is called."""

    __slots__ = ("_function",)

    def __init__(self, function: Callable[[], Any]) -> None:
        if not callable(function):
            raise TypeError(f"callback target must be callable, not {type(function).__name__}")
        self._function = function

    def __call__(self) -> None:
        self._function()

    def __repr__(self) -> str:
        return f"Callback({self._function!r})"


def function_callback(function: Callable[[], Any]) -> Callback:
    """Return a callback that calls ``function`` with no arguments."""
    return Callback(function)


def method_callback(obj: Any, method: Callable[[Any], Any] | str) -> Callback:
    """Return a callback that calls ``method`` on ``obj``.

    ``method`` is either the unbound function (``Receiver.method``) or the
    name of the method as a string.
    """
    if isinstance(method, str):
        return Callback(getattr(obj, method))
    if not callable(method):
        raise TypeError(f"method must be callable or a name, not {type(method).__name__}")
    return Callback(lambda: method(obj))