from __future__ import annotations

"""Per-second countdown sequence, decoupled from any particular event loop."""

import logging
from typing import Callable, Iterator, Protocol


logger = logging.getLogger(__name__)

TICK_INTERVAL_SEC = 1.0


class Cancellable(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Anything that can run a callback once after a delay.

    `asyncio` event loops already fit: `loop.call_later` returns a handle
    with `cancel()`.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        ...


def tick_values(seconds: int) -> Iterator[int]:
    """Yields the remaining-second values `seconds - 1` down to `0`."""
    remaining = seconds - 1
    while remaining >= 0:
        yield remaining
        remaining -= 1


class TickSequence:
    """Delivers `tick_values(seconds)` to `on_tick`, one value per interval.

    The first value arrives one interval after `start()`, never immediately.
    After `cancel()` no further value is delivered, including one whose
    callback was already queued by the scheduler.
    """

    def __init__(
        self,
        seconds: int,
        scheduler: Scheduler,
        on_tick: Callable[[int], None],
        interval: float = TICK_INTERVAL_SEC,
    ) -> None:
        self.seconds = seconds
        self.interval = interval
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._values: Iterator[int] | None = tick_values(seconds)
        self._pending: Cancellable | None = None
        self._started = False
        self._cancelled = False
        self._exhausted = False

    @property
    def active(self) -> bool:
        return self._started and not (self._cancelled or self._exhausted)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def start(self) -> None:
        if self._started or self._cancelled:
            return
        self._started = True
        self._schedule_next()

    def cancel(self) -> None:
        if self._cancelled or self._exhausted:
            return
        self._cancelled = True
        self._values = None
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        logger.debug("tick sequence of %ss cancelled", self.seconds)

    def _schedule_next(self) -> None:
        self._pending = self._scheduler.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        self._pending = None
        if self._cancelled or self._values is None:
            return
        try:
            value = next(self._values)
        except StopIteration:
            self._finish()
            return
        if value == 0:
            self._finish()
        else:
            self._schedule_next()
        self._on_tick(value)

    def _finish(self) -> None:
        self._exhausted = True
        self._values = None
