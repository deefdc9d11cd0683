from __future__ import annotations

from PyQt6.QtCore import QEasingCurve, QPropertyAnimation, QRect, Qt, pyqtProperty
from PyQt6.QtGui import QColor, QFont, QPainter, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from countdown.core.state import Running
from countdown.ui.styles import LIGHT, Palette


class ProgressRing(QWidget):
    """Circular indicator of the seconds left in a running countdown."""

    RING_WIDTH = 10
    FADE_MS = 400

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(300, 300)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._palette: Palette = LIGHT
        self._progress = 1.0
        self._remaining = 0
        self._even = True
        self._opacity = 0.0
        self._fade = QPropertyAnimation(self, b"opacity", self)
        self._fade.setDuration(self.FADE_MS)
        self._fade.setEasingCurve(QEasingCurve.Type.OutCubic)

    @property
    def progress(self) -> float:
        return self._progress

    def _get_opacity(self) -> float:
        return self._opacity

    def _set_opacity(self, value: float) -> None:
        self._opacity = value
        self.update()

    opacity = pyqtProperty(float, fget=_get_opacity, fset=_set_opacity)

    @property
    def target_opacity(self) -> float:
        # Fades in as the run proceeds.
        return 1.0 - self._progress

    @property
    def ring_color(self) -> str:
        return self._palette.primary if self._even else self._palette.secondary

    def set_palette(self, palette: Palette) -> None:
        self._palette = palette
        self.update()

    def set_running(self, state: Running) -> None:
        if state.remaining_seconds == state.total_seconds:
            self._fade.stop()
            self._set_opacity(0.0)
        self._progress = state.progress
        self._remaining = state.remaining_seconds
        self._even = state.is_even_second
        self._fade.stop()
        self._fade.setStartValue(self._opacity)
        self._fade.setEndValue(self.target_opacity)
        self._fade.start()
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        side = min(self.width(), self.height()) - 2 * self.RING_WIDTH
        circle_rect = QRect(
            (self.width() - side) // 2,
            (self.height() - side) // 2,
            side,
            side,
        )

        track = QColor(self._palette.disabled_background)
        painter.setPen(QPen(track, self.RING_WIDTH))
        painter.drawEllipse(circle_rect)

        color = QColor(self.ring_color)
        color.setAlphaF(self.opacity)
        painter.setPen(QPen(color, self.RING_WIDTH, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
        span = int(-360 * 16 * self._progress)
        painter.drawArc(circle_rect, 90 * 16, span)

        font = QFont(self.font())
        font.setPointSize(max(12, side // 5))
        painter.setFont(font)
        painter.setPen(QColor(self._palette.text))
        painter.drawText(circle_rect, Qt.AlignmentFlag.AlignCenter, str(self._remaining))
        painter.end()
