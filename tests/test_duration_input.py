import pytest

from countdown.ui.duration_input import parse_duration


@pytest.mark.parametrize(
    ("text", "expected"),
    [("5", 5), (" 12 ", 12), ("0", 0), ("", None), ("   ", None), ("abc", None), ("-3", None), ("1.5", None)],
)
def test_parse_duration(text, expected) -> None:
    assert parse_duration(text) == expected
