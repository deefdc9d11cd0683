from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, Qt, QTimer


class QtTimerHandle:
    def __init__(self, scheduler: QtScheduler, timer: QTimer) -> None:
        self._scheduler = scheduler
        self._timer = timer

    @property
    def pending(self) -> bool:
        return self._scheduler.is_pending(self._timer)

    def cancel(self) -> None:
        self._scheduler.release(self._timer)


class QtScheduler:
    """Runs callbacks on the Qt event loop through single-shot `QTimer`s."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._timers: set[QTimer] = set()

    def call_later(self, delay: float, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setTimerType(Qt.TimerType.PreciseTimer)

        def fire() -> None:
            self.release(timer)
            callback()

        timer.timeout.connect(fire)
        self._timers.add(timer)
        timer.start(max(0, int(round(delay * 1000))))
        return QtTimerHandle(self, timer)

    def is_pending(self, timer: QTimer) -> bool:
        return timer in self._timers

    def release(self, timer: QTimer) -> None:
        if timer not in self._timers:
            return
        self._timers.discard(timer)
        timer.stop()
        timer.deleteLater()
