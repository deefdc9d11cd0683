from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Idle:
    """No countdown is active; `configured_seconds` is the staged duration."""

    configured_seconds: int = 0

    @property
    def can_start(self) -> bool:
        return self.configured_seconds > 0


@dataclass(frozen=True)
class Running:
    total_seconds: int
    remaining_seconds: int

    @property
    def progress(self) -> float:
        """Fraction of the run still left, 1.0 at start and 0.0 at the end."""
        if self.total_seconds <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining_seconds / self.total_seconds))

    @property
    def is_even_second(self) -> bool:
        return self.remaining_seconds % 2 == 0


TimerState = Union[Idle, Running]
