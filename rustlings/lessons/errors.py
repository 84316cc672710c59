"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I32_BITS = 32
_I64_BITS = 64

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width; raise ValueError as a strict parser would."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError when the name is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: five per item plus a fee of one."""
    quantity = _parse_int(item_quantity, _I32_BITS)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2 ** (_I32_BITS - 1)) <= cost <= 2 ** (_I32_BITS - 1) - 1:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> str:
    """Try to buy the typed quantity with the given tokens and describe the outcome."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A value cannot be a positive non-zero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text is not a number, or not a positive non-zero one."""

    class Kind(enum.Enum):
        CREATION = enum.auto()
        PARSE_INT = enum.auto()

    def __init__(self, kind: ParsePosNonzeroError.Kind, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.kind = kind
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(cls.Kind.CREATION, err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(cls.Kind.PARSE_INT, err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(text, _I64_BITS)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err