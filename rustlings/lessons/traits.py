"""Traits: appending "Bar", shared licensing information and combined behaviours."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

_BAR = "Bar"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add "Bar" as a new element of a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, _BAR]


class Licensed:
    """Something that can describe its licence."""

    def licensing_info(self) -> str:
        """The licensing information, the same for every implementor."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both give the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides some_function."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides other_function."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


class OtherStruct(SomeTrait, OtherTrait):
    """Also has both behaviours."""


def some_func(item: SomeTrait) -> bool:
    """Call both behaviours on an item that has them."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} lacks SomeTrait or OtherTrait")
    return item.some_function() and item.other_function()