"""Domain model, IR interpreter, build targets and project path helpers for node graphs."""

__version__ = "0.0.1"

__all__ = [
    "actions",
    "dirty",
    "domain",
    "ir",
    "paths",
    "ports",
    "runtime",
    "sandbox",
    "summary",
    "target",
]