"""Typed failures raised by the board core.

Everything derives from `BoardError` so the command layer can report any
board problem with a single `except` clause, while each kind also subclasses
the builtin exception callers would naturally expect (`KeyError`,
`ValueError`, `OSError`).
"""
from __future__ import annotations

from pathlib import Path
from typing import Any


class BoardError(Exception):
    """Base class for board errors."""


class NotFound(BoardError, KeyError):
    """A key or image identifier is absent from the container being queried."""

    def __init__(self, key: Any, message: str | None = None):
        super().__init__(message or f"not found: {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class NullKeyError(BoardError, ValueError):
    """A `None` key was given to a store write."""

    def __init__(self, message: str = "keys must not be None"):
        super().__init__(message)


class IOFailure(BoardError, OSError):
    """The board file could not be opened, read, or written."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class BoardFormatError(BoardError, ValueError):
    """A board description line is malformed or a board cannot be serialized."""

    def __init__(self, message: str, line_no: int | None = None, line: str | None = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
        self.line = line
