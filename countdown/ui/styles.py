from __future__ import annotations

from dataclasses import asdict, dataclass

from PyQt6.QtWidgets import QApplication


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    primary: str
    secondary: str
    error: str
    field: str
    disabled_text: str
    disabled_background: str


LIGHT = Palette(
    background="#f4f1ee",
    text="#2f2a26",
    primary="#eb8f60",
    secondary="#4f9d8f",
    error="#c8553d",
    field="#fff7f1",
    disabled_text="#fff7f2",
    disabled_background="#efc2aa",
)

DARK = Palette(
    background="#1f1c1a",
    text="#f4ebe3",
    primary="#f2a176",
    secondary="#6fc3b3",
    error="#e07a66",
    field="#2c2825",
    disabled_text="#7d726a",
    disabled_background="#3a3430",
)


THEME_QSS = """
QWidget {{
    background: {background};
    color: {text};
    font-size: 13px;
}}

QMainWindow {{
    background: {background};
}}

QLabel {{
    background: transparent;
}}

QLabel#SecondsLabel {{
    font-size: 96px;
    font-weight: 300;
    color: {text};
}}

QLabel#FieldCaption {{
    font-size: 12px;
    font-weight: 600;
}}

QPushButton {{
    border: none;
    border-radius: 22px;
    padding: 10px 24px;
    min-height: 24px;
    font-size: 14px;
    font-weight: 600;
}}

QPushButton#StartButton {{
    background: {primary};
    color: #ffffff;
}}

QPushButton#StartButton:disabled {{
    background: {disabled_background};
    color: {disabled_text};
}}

QPushButton#StopButton {{
    background: {error};
    color: #ffffff;
}}

QLineEdit {{
    background: {field};
    border: 1px solid {disabled_background};
    border-radius: 16px;
    padding: 7px 10px;
    min-height: 22px;
}}

QLineEdit:focus {{
    border: 1px solid {primary};
}}
"""


def palette_for(dark: bool) -> Palette:
    return DARK if dark else LIGHT


def stylesheet(palette: Palette) -> str:
    return THEME_QSS.format(**asdict(palette))


def apply_theme(app: QApplication, dark: bool = False) -> Palette:
    palette = palette_for(dark)
    app.setStyleSheet(stylesheet(palette))
    return palette
