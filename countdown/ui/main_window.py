from __future__ import annotations

import logging
from dataclasses import replace

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QIntValidator
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from countdown.core.state import Idle, Running, TimerState
from countdown.core.view_model import TimerViewModel
from countdown.data.settings import AppConfig, SettingsStore, save_config
from countdown.ui.duration_input import parse_duration
from countdown.ui.progress_ring import ProgressRing
from countdown.ui.styles import apply_theme, palette_for


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        view_model: TimerViewModel,
        config: AppConfig | None = None,
        store: SettingsStore | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Countdown")
        self.resize(360, 640)

        self.view_model = view_model
        self.config = config or AppConfig()
        self.store = store

        self._build_ui()
        self._connect_signals()
        self._apply_palette()
        self.render(self.view_model.state)

    def _build_ui(self) -> None:
        self.pages = QStackedWidget(self)
        self.setCentralWidget(self.pages)

        idle_page = QWidget()
        idle_layout = QVBoxLayout(idle_page)
        idle_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.seconds_label = QLabel("0")
        self.seconds_label.setObjectName("SecondsLabel")
        self.seconds_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.start_btn = QPushButton("Start")
        self.start_btn.setObjectName("StartButton")
        time_caption = QLabel("Time")
        time_caption.setObjectName("FieldCaption")
        self.time_input = QLineEdit()
        self.time_input.setValidator(QIntValidator(0, 2_147_483_647, self.time_input))
        self.time_input.setPlaceholderText("Seconds")
        idle_layout.addWidget(self.seconds_label)
        idle_layout.addWidget(self.start_btn, 0, Qt.AlignmentFlag.AlignHCenter)
        idle_layout.addSpacing(30)
        idle_layout.addWidget(time_caption)
        idle_layout.addWidget(self.time_input)

        running_page = QWidget()
        running_layout = QVBoxLayout(running_page)
        running_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.ring = ProgressRing()
        self.stop_btn = QPushButton("Stop")
        self.stop_btn.setObjectName("StopButton")
        running_layout.addWidget(self.ring, 1)
        running_layout.addWidget(self.stop_btn, 0, Qt.AlignmentFlag.AlignHCenter)

        self.pages.addWidget(idle_page)
        self.pages.addWidget(running_page)
        self.idle_page = idle_page
        self.running_page = running_page

        self.dark_action = QAction("Dark theme", self)
        self.dark_action.setCheckable(True)
        self.dark_action.setChecked(self.config.dark_theme)
        self.menuBar().addMenu("View").addAction(self.dark_action)

    def _connect_signals(self) -> None:
        self.start_btn.clicked.connect(self.view_model.start)
        self.stop_btn.clicked.connect(self.view_model.stop)
        self.time_input.textChanged.connect(self._on_time_edited)
        self.view_model.state_changed.connect(self.render)
        self.view_model.running_changed.connect(self._on_running_changed)
        self.dark_action.toggled.connect(self.set_dark_theme)

    def _on_time_edited(self, text: str) -> None:
        seconds = parse_duration(text)
        if seconds is None:
            return
        self.view_model.set_duration(seconds)

    def _on_running_changed(self, running: bool) -> None:
        if not running:
            # A stopped or finished run clears the staged duration.
            self.time_input.clear()

    def render(self, state: TimerState) -> None:
        if isinstance(state, Running):
            self.ring.set_running(state)
            self.pages.setCurrentWidget(self.running_page)
            return
        if isinstance(state, Idle):
            self.seconds_label.setText(str(state.configured_seconds))
            self.start_btn.setEnabled(state.can_start)
            self.pages.setCurrentWidget(self.idle_page)

    def set_dark_theme(self, dark: bool) -> None:
        self.config = replace(self.config, dark_theme=dark)
        self._apply_palette()
        if self.store is not None:
            save_config(self.store, self.config)
        logger.info("theme switched to %s", "dark" if dark else "light")

    def _apply_palette(self) -> None:
        app = QApplication.instance()
        if isinstance(app, QApplication):
            palette = apply_theme(app, self.config.dark_theme)
        else:
            palette = palette_for(self.config.dark_theme)
        self.ring.set_palette(palette)

    def closeEvent(self, event) -> None:  # noqa: N802
        if self.view_model.is_running:
            self.view_model.stop()
        self.view_model.close()
        event.accept()
