"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

_BULK_THRESHOLD = 40
_FULL_PRICE = 2
_BULK_PRICE = 1


def calculate_price_of_apples(apple_number: int) -> int:
    """Two per apple, or one per apple when more than forty are bought."""
    if apple_number <= _BULK_THRESHOLD:
        return apple_number * _FULL_PRICE
    return apple_number * _BULK_PRICE


class CommandKind(enum.Enum):
    """What the transformer does to a string."""

    UPPERCASE = enum.auto()
    TRIM = enum.auto()
    APPEND = enum.auto()


@dataclass(frozen=True)
class Command:
    """A transformation; ``times`` is how often "bar" is appended for APPEND."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")

    def apply(self, text: str) -> str:
        """Return the text transformed by this command."""
        if self.kind is CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.times


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, keeping the order."""
    return [command.apply(text) for text, command in items]


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card whose grade is numeric or alphabetic."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )