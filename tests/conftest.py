from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@dataclass
class ManualHandle:
    due: float
    order: int
    callback: Callable[[], None]
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock: callbacks only run when the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._handles: list[ManualHandle] = []
        self._order = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        self._order += 1
        handle = ManualHandle(self.now + delay, self._order, callback)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualHandle]:
        return [h for h in self._handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.due <= target + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: (h.due, h.order))
            self._handles.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
