"""Messages that change a state, a wrapper for any value, and lists of numbers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

_U8 = range(256)

T = TypeVar("T")


def _check_u8(*values: int) -> None:
    for value in values:
        if value not in _U8:
            raise ValueError(f"{value} is outside 0..=255")


@dataclass(frozen=True)
class Point:
    """A position with coordinates in 0..=255."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MessageState:
    """Colour, position and whether to stop, changed by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                print(text)
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same four numbers as a fixed tuple and as a list."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every number in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """A new list with every number doubled."""
    return [value * 2 for value in values]