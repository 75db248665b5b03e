"""Debounce helper for the location search box."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from .logging import get_logger

LOGGER = get_logger("utils.debounce")

DEFAULT_WAIT_SECONDS = 0.3

TimerFactory = Callable[[float, Callable[[], None]], Any]


def _thread_timer(wait: float, fire: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(wait, fire)
    timer.daemon = True
    return timer


class Debouncer:
    """Collapse bursts of calls into one invocation of ``callback``.

    Every :meth:`call` cancels the pending timer and starts a new one, so only
    the last value is delivered once ``wait`` seconds pass without new input.
    :meth:`flush` is the explicit submit path: it delivers immediately and
    drops whatever was pending. In-flight callback work is never cancelled.
    """

    def __init__(
        self,
        callback: Callable[[Any], None],
        wait: float = DEFAULT_WAIT_SECONDS,
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        self.callback = callback
        self.wait = wait
        self._timer_factory = timer_factory or _thread_timer
        self._timer: Optional[Any] = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def call(self, value: Any) -> None:
        with self._lock:
            self._cancel_locked()
            timer = self._timer_factory(self.wait, lambda: self._fire(timer, value))
            self._timer = timer
        timer.start()

    def flush(self, value: Any) -> None:
        with self._lock:
            self._cancel_locked()
        self.callback(value)

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _fire(self, timer: Any, value: Any) -> None:
        with self._lock:
            if self._timer is not timer:
                # superseded by a newer call
                return
            self._timer = None
        LOGGER.debug("debounce_fire value=%r", value)
        self.callback(value)

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
