from __future__ import annotations

"""Application entry point.

Sets up logging and the settings store, builds the timer engine and either
opens the Qt window or runs a single countdown in the terminal.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence, TextIO

from countdown.core.engine import TimerEngine
from countdown.core.state import Idle, Running, TimerState
from countdown.core.ticks import TICK_INTERVAL_SEC
from countdown.data.settings import AppConfig, SettingsStore, load_config, save_config


logger = logging.getLogger(__name__)


def default_db_path() -> Path:
    """Standard location of the SQLite settings file in the working directory."""
    return Path.cwd() / "countdown.db"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="countdown", description="Single-screen countdown timer")
    parser.add_argument("--db", type=Path, default=None, help="settings database path")
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="dark_theme", action="store_true", default=None, help="use and remember the dark theme")
    theme.add_argument("--light", dest="dark_theme", action="store_false", help="use and remember the light theme")
    parser.add_argument("--seconds", type=int, default=None, help="pre-stage a duration in seconds")
    parser.add_argument("--headless", action="store_true", help="run one countdown in the terminal")
    parser.set_defaults(dark_theme=None)
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def describe(state: TimerState) -> str:
    if isinstance(state, Running):
        return f"{state.remaining_seconds}/{state.total_seconds}"
    return f"idle ({state.configured_seconds})"


async def run_headless(seconds: int, interval: float = TICK_INTERVAL_SEC, out: TextIO | None = None) -> list[TimerState]:
    """Runs one countdown on the current asyncio loop, printing every state."""
    out = out or sys.stdout
    loop = asyncio.get_running_loop()
    engine = TimerEngine(loop, interval=interval)
    finished = loop.create_future()
    seen: list[TimerState] = []

    def on_change(state: TimerState) -> None:
        seen.append(state)
        print(describe(state), file=out)
        if isinstance(state, Idle) and len(seen) > 1 and not finished.done():
            finished.set_result(None)

    unsubscribe = engine.subscribe(on_change)
    engine.set_duration(seconds)
    engine.start()
    try:
        if engine.is_running:
            await finished
    finally:
        unsubscribe()
        if engine.is_running:
            engine.stop()
    return seen


def run_gui(engine_seconds: int | None, config: AppConfig, store: SettingsStore) -> int:
    from PyQt6.QtWidgets import QApplication

    from countdown.core.qt_scheduler import QtScheduler
    from countdown.core.view_model import TimerViewModel
    from countdown.ui.main_window import MainWindow

    app = QApplication(sys.argv)
    engine = TimerEngine(QtScheduler(app))
    if engine_seconds is not None:
        engine.set_duration(engine_seconds)
    view_model = TimerViewModel(engine)
    window = MainWindow(view_model, config=config, store=store)
    window.show()
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.seconds is not None and args.seconds < 0:
        logger.error("duration must be a non-negative number of seconds, got %s", args.seconds)
        return 2

    store = SettingsStore(args.db or default_db_path())
    store.init_db()
    config = load_config(store)
    if args.dark_theme is not None and args.dark_theme != config.dark_theme:
        config = replace(config, dark_theme=args.dark_theme)
        save_config(store, config)

    if args.headless:
        asyncio.run(run_headless(args.seconds or 0))
        return 0
    return run_gui(args.seconds, config, store)


if __name__ == "__main__":
    raise SystemExit(main())
