"""Coloured status lines for the terminal."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console(stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False, soft_wrap=True, emoji=False, markup=False)


def _report(symbol: str, fallback: str, message: str, style: str) -> None:
    marker = fallback if no_emoji() else symbol
    _console().print(Text.assemble((marker, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a warning line in red."""
    _report("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _report("✅", "✓", message, "green")


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    """Show a spinner with a message on standard error while the block runs."""
    with _console(stderr=True).status(Text(message)) as status:
        yield status