"""Strings and optional values: colours, trimming, composing, replacing and ice cream."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})
_LAST_HOUR = 23
_EATEN_AT = 22
_ICECREAM_LEFT = 5


def current_favorite_color() -> str:
    """The favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for "green", "blue" or "red"."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """The text without whitespace at either end."""
    return text.strip()


def compose_me(text: str) -> str:
    """The text followed by " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """The text with every "cars" replaced by "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at an hour of the day: 5 before 22, 0 after, None past 23."""
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day > _LAST_HOUR:
        return None
    if time_of_day < _EATEN_AT:
        return _ICECREAM_LEFT
    return 0