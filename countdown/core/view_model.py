from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from countdown.core.engine import TimerEngine
from countdown.core.state import Idle, Running, TimerState


class TimerViewModel(QObject):
    """Qt-facing wrapper that relays engine transitions as signals.

    Views read state and issue commands through this object only; they never
    replace engine state themselves.
    """

    state_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)

    def __init__(self, engine: TimerEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._was_running = engine.is_running
        self._unsubscribe = engine.subscribe(self._on_state)

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def state(self) -> TimerState:
        return self._engine.state

    @property
    def can_start(self) -> bool:
        state = self._engine.state
        return isinstance(state, Idle) and state.can_start

    @property
    def is_running(self) -> bool:
        return isinstance(self._engine.state, Running)

    def set_duration(self, seconds: int) -> None:
        self._engine.set_duration(seconds)

    def start(self) -> None:
        self._engine.start()

    def stop(self) -> None:
        self._engine.stop()

    def close(self) -> None:
        self._unsubscribe()

    def _on_state(self, state: TimerState) -> None:
        running = isinstance(state, Running)
        self.state_changed.emit(state)
        if running != self._was_running:
            self._was_running = running
            self.running_changed.emit(running)
