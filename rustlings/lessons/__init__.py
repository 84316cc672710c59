"""Worked solutions to the exercises, one module per topic."""

__all__ = [
    "quiz",
    "errors",
    "iterators",
    "conditionals",
    "hashmaps",
    "traits",
    "strings",
    "smart_pointers",
    "concurrency",
    "containers",
]