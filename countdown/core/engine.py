from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from countdown.core.state import Idle, Running, TimerState
from countdown.core.ticks import TICK_INTERVAL_SEC, Scheduler, TickSequence


logger = logging.getLogger(__name__)

StateListener = Callable[[TimerState], None]


class TimerEngine:
    """Countdown state machine detached from UI framework.

    Commands that do not apply to the current state are ignored rather than
    reported. Every transition is pushed to subscribers in the order it
    happened, each tick included.
    """

    def __init__(self, scheduler: Scheduler, interval: float = TICK_INTERVAL_SEC) -> None:
        self._scheduler = scheduler
        self._interval = interval
        self._state: TimerState = Idle(0)
        self._sequence: TickSequence | None = None
        self._listeners: list[StateListener] = []
        self._outbox: deque[TimerState] = deque()
        self._dispatching = False

    @property
    def state(self) -> TimerState:
        return self._state

    def get_state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return isinstance(self._state, Running)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registers `listener` for future transitions and returns its unsubscribe call."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_duration(self, seconds: int) -> None:
        if not isinstance(self._state, Idle):
            logger.debug("set_duration(%s) ignored while running", seconds)
            return
        self._transition(Idle(seconds))

    def start(self) -> None:
        state = self._state
        if not isinstance(state, Idle) or state.configured_seconds <= 0:
            logger.debug("start ignored in %s", state)
            return
        total = state.configured_seconds
        sequence = TickSequence(
            total,
            self._scheduler,
            lambda value: self._on_tick(sequence, value),
            interval=self._interval,
        )
        self._sequence = sequence
        logger.info("countdown started: %ss", total)
        try:
            self._transition(Running(total, total))
        finally:
            # A subscriber may have stopped the run while it was being announced.
            if self._sequence is sequence:
                sequence.start()

    def stop(self) -> None:
        if self._sequence is not None:
            self._sequence.cancel()
            self._sequence = None
            logger.info("countdown stopped with %s", self._state)
        self._transition(Idle(0))

    def _on_tick(self, sequence: TickSequence, remaining: int) -> None:
        if sequence is not self._sequence or not isinstance(self._state, Running):
            return
        if remaining > 0:
            self._transition(Running(self._state.total_seconds, remaining))
            return
        self._sequence = None
        logger.info("countdown of %ss finished", self._state.total_seconds)
        self._transition(Idle(0))

    def _transition(self, state: TimerState) -> None:
        self._state = state
        logger.debug("state -> %s", state)
        self._outbox.append(state)
        if self._dispatching:
            return
        self._dispatching = True
        error: Exception | None = None
        try:
            while self._outbox:
                current = self._outbox.popleft()
                for listener in list(self._listeners):
                    try:
                        listener(current)
                    except Exception as exc:
                        logger.exception("state listener failed on %s", current)
                        if error is None:
                            error = exc
        finally:
            self._dispatching = False
        if error is not None:
            raise error
