"""Exercises: loading them, compiling and running them, and reading their progress marker."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Name of the binary built for the current process and thread."""
    thread_id = "".join(c for c in f"ThreadId({threading.get_ident()})" if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the built binary, ignoring any error."""
    with contextlib.suppress(OSError):
        os.remove(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the progress marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done, or pending with the lines around its marker."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or of a built binary."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """The exercise did not compile."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


class RunError(Exception):
    """The built exercise exited unsuccessfully."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise
        self.output = output


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _rustc(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["rustc", *args, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
        capture_output=True,
    )


class CompiledExercise:
    """A successfully built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary, returning its output or raising RunError."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        result = subprocess.run([temp_file(), arg], capture_output=True)
        output = _output(result)
        if result.returncode != 0:
            raise RunError(self.exercise, output)
        return output

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise CompilationError when that fails."""
        path = str(self.path)
        target = temp_file()
        if self.mode is Mode.COMPILE:
            result = _rustc(path, "-o", target)
        elif self.mode is Mode.TEST:
            result = _rustc("--test", path, "-o", target)
        else:
            result = self._clippy(path, target)

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(self, _output(result))

    def _clippy(self, path: str, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from err
        # The binary is built so the exercise can also be run; a failure here
        # shows up again in the clippy run below.
        _rustc(path, "-o", target)
        # A clean is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", str(CLIPPY_CARGO_TOML_PATH), *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                str(CLIPPY_CARGO_TOML_PATH),
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ],
            capture_output=True,
        )

    def state(self) -> State:
        """Read the source and locate the "I AM NOT DONE" marker."""
        source = self.path.read_bytes().decode("utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        index = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if index is None:
            raise RuntimeError(f"marker found in {self} but on no single line")

        low = max(index - CONTEXT, 0)
        high = index + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == index)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """True when the marker has been removed; the code itself is not checked."""
        return self.state().done


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the list of exercises from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    exercises = []
    for entry in data.get("exercises", []):
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as err:
            raise ValueError(f"exercise entry is missing field {err.args[0]!r}") from err
    return exercises