"""Load, build, run and track small Rust exercises, with worked solutions in Python."""

__version__ = "5.4.1"