"""Periodic and one-shot event handlers driven by a millisecond clock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

from aiko.callback import Callback, function_callback
from aiko.timing import TimingManager

_MILLIS_MODULUS = 1 << 32
_SIGNED_LIMIT = 1 << 31


def _elapsed(now: int, previous: int) -> int:
    """Signed difference of two wrapping 32-bit millisecond counts."""
    difference = (now - previous) % _MILLIS_MODULUS
    return difference - _MILLIS_MODULUS if difference >= _SIGNED_LIMIT else difference


@dataclass(eq=False)
class EventHandler:
    """A callback due after ``countdown`` ms, repeating every ``period`` ms.

    A period of zero makes the handler fire once and then be removed.
    """

    callback: Callable[[], Any] = lambda: None
    period: int = 0
    countdown: int = 0

    def fire(self) -> None:
        self.callback()


class EventHandlerList:
    """Ordered handlers with a cursor that survives adds and removals."""

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []
        self._cursor = 0

    def add(self, handler: EventHandler) -> None:
        """Append a handler; an exhausted cursor will yield it next."""
        self._handlers.append(handler)

    def flush(self) -> None:
        """Remove every handler and rewind the cursor."""
        self._handlers.clear()
        self._cursor = 0

    def next(self) -> EventHandler | None:
        """Return the handler at the cursor and advance, or None at the end."""
        if self._cursor >= len(self._handlers):
            return None
        handler = self._handlers[self._cursor]
        self._cursor += 1
        return handler

    def remove(self, handler: EventHandler) -> None:
        """Remove a handler, keeping the cursor on the handler that follows it."""
        for index, candidate in enumerate(self._handlers):
            if candidate is handler:
                break
        else:
            raise ValueError("handler is not in the list")
        del self._handlers[index]
        if index < self._cursor:
            self._cursor -= 1

    def reset_iterator(self) -> None:
        """Move the cursor back to the first handler."""
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[EventHandler]:
        return iter(list(self._handlers))

    def __contains__(self, handler: object) -> bool:
        return any(candidate is handler for candidate in self._handlers)


class EventManager:
    """Runs registered handlers as time advances between calls to :meth:`loop`."""

    def __init__(self, timing: TimingManager | None = None) -> None:
        self._timing = timing if timing is not None else TimingManager()
        self._handlers = EventHandlerList()
        self._is_running = False
        self._last_loop_time = 0

    @property
    def handlers(self) -> EventHandlerList:
        return self._handlers

    def add_handler(
        self,
        handler: EventHandler | Callable[[], Any],
        period: int | None = None,
        delay: int = 0,
    ) -> EventHandler:
        """Register an :class:`EventHandler`, or a function run every ``period`` ms.

        A function first runs after ``delay`` ms. Returns the registered handler.
        """
        if not isinstance(handler, EventHandler):
            if period is None:
                raise TypeError("a period is required when adding a function")
            if period < 0 or delay < 0:
                raise ValueError("period and delay must not be negative")
            callback = handler if isinstance(handler, Callback) else function_callback(handler)
            handler = EventHandler(callback=callback, period=period, countdown=delay)
        self._handlers.add(handler)
        return handler

    def add_one_shot_handler(self, function: Callable[[], Any], delay: int) -> EventHandler:
        """Register a function that runs once, ``delay`` ms from now."""
        return self.add_handler(function, 0, delay)

    def loop(self, time: int | None = None) -> None:
        """Advance to ``time`` (ms, default the clock) and fire due handlers."""
        if time is None:
            time = self._timing.millis()
        if not self._is_running:
            self._start(time)
        elapsed = _elapsed(time, self._last_loop_time)

        for handler in self._handlers:
            handler.countdown -= elapsed

        self._handlers.reset_iterator()
        while (handler := self._handlers.next()) is not None:
            if handler.countdown <= 0:
                handler.fire()
                if handler.period > 0:
                    handler.countdown += handler.period
                elif handler in self._handlers:
                    self.remove_handler(handler)

        self._last_loop_time = time

    def remove_handler(self, handler: EventHandler) -> None:
        self._handlers.remove(handler)

    def reset(self) -> None:
        """Drop every handler and restart timing on the next loop."""
        self._handlers.flush()
        self._is_running = False

    def _start(self, time: int) -> None:
        self._last_loop_time = time
        self._is_running = True