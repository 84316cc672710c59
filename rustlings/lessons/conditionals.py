"""Conditionals: comparisons, matching words and sale prices."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def is_even(num: int) -> bool:
    """True when the number is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3