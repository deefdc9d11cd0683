from __future__ import annotations

"""Parsing of the duration text field before it reaches the engine."""


def parse_duration(text: str) -> int | None:
    """Returns the entered seconds, or `None` for empty, non-numeric or negative input."""
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        seconds = int(cleaned)
    except ValueError:
        return None
    if seconds < 0:
        return None
    return seconds
