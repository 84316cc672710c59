# rustlings

A library for working with a collection of small Rust exercises: it reads the
exercise list, builds and runs each exercise with the Rust toolchain, tells
whether an exercise is still marked as pending, and writes a
`rust-project.json` file for rust-analyzer. It also carries worked solutions
to many of the exercises, written as plain Python.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` (and `cargo` with Clippy for
  Clippy exercises)

## Installation

```
pip install .
```

## Exercises

Exercises are listed in an `info.toml` file, each entry with a `name`, a
`path`, a `mode` (`compile`, `test` or `clippy`) and a `hint`.

```python
from rustlings.exercise import load_exercises, CompilationError, RunError

exercises = load_exercises("info.toml")
exercise = exercises[0]

state = exercise.state()
if not state.done:
    for line in state.context:
        print(line.number, line.line, "<--" if line.important else "")

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompilationError as err:
    print(err.output.stderr)
except RunError as err:
    print(err.output.stdout)
```

- `Exercise.state()` looks for an `// I AM NOT DONE` marker comment. Without
  one the state is done; with one, `State.context` holds the marker line and up
  to two lines on either side of it as `ContextLine` values.
- `Exercise.looks_done()` is true when the marker is gone; the code itself is
  not checked.
- `Exercise.compile()` calls `rustc` (with `--test` in test mode) and builds a
  binary named by `temp_file()` in the current directory. In clippy mode it
  writes `./exercises/clippy/Cargo.toml` and runs `cargo clippy` with warnings
  denied. It returns a `CompiledExercise` or raises `CompilationError`.
- `CompiledExercise.run()` runs the binary (with `--show-output` in test mode)
  and returns an `ExerciseOutput`, or raises `RunError` when it exits
  unsuccessfully. Closing it, or leaving its `with` block, removes the binary.

## rust-analyzer support

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`get_sysroot_src()` takes the standard library sources from `RUST_SRC_PATH`
when it is set, and from `rustc --print sysroot` otherwise. Every `.rs` file
below the exercises folder becomes a crate with edition 2021 and the `test`
cfg enabled.

## Terminal output

`rustlings.ui.warn(message)` and `rustlings.ui.success(message)` print a red or
green status line. Setting the `NO_EMOJI` environment variable replaces the
emoji markers with plain symbols.

## Worked solutions

The `rustlings.lessons` package holds one module per topic: `quiz`, `errors`,
`iterators`, `conditionals`, `hashmaps`, `traits`, `strings`,
`smart_pointers`, `concurrency` and `containers`.

```python
from rustlings.lessons.quiz import calculate_price_of_apples
from rustlings.lessons.iterators import factorial, divide

calculate_price_of_apples(41)   # 41
factorial(4)                    # 24
divide(81, 9)                   # 9
```

## What this package does not do

It installs no command. There is no command-line driver, no watch mode that
rechecks exercises as files change, and nothing that verifies the whole list
in order, resets an exercise or lists progress; those steps are left to your
own code built on `load_exercises`, `Exercise` and `CompiledExercise`. There
are no worked solutions for the conversions or structs exercises.

## Running the tests

```
pip install ".[test]"
pytest
```