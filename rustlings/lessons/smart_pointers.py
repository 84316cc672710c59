"""Shared data, recursive lists and clone-on-write sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_DEFAULT_WORKERS = 8


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __iter__(self) -> Iterator[int]:
        return iter(())


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    head: int
    tail: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail


def create_empty_list() -> Nil:
    """A cons list with no elements."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding 1 and 2."""
    return Cons(1, Cons(2, Nil()))


class Cow:
    """A sequence that is borrowed until it must be changed, and copied only then."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self._data: Sequence[int] = data if not owned or isinstance(data, list) else list(data)
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        """True once the data belongs to this object rather than being borrowed."""
        return self._owned

    @property
    def value(self) -> Sequence[int]:
        """The current data, borrowed or owned."""
        return self._data

    def to_mut(self) -> list[int]:
        """A list that may be changed, copying the borrowed data on first use."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if a change is needed."""
    for index, value in enumerate(cow):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def offset_sums(numbers: Iterable[int], workers: int = _DEFAULT_WORKERS) -> list[int]:
    """Sum, in one thread per offset, the numbers congruent to that offset modulo workers."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))