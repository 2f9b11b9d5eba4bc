# src/todo_journal/errors.py

from __future__ import annotations

from pathlib import Path


class TodoJournalError(Exception):
    """Base class for errors reported to the user by the CLI."""


class JournalNotFoundError(TodoJournalError):
    def __init__(self) -> None:
        super().__init__("Failed to find journal file.")


class JournalDecodeError(TodoJournalError, ValueError):
    """Journal has content, but it is not a JSON array of task records."""

    def __init__(self, reason: str, path: str | Path | None = None) -> None:
        self.reason = reason
        self.path = Path(path) if path is not None else None
        if self.path is None:
            msg = f"Malformed journal: {reason}"
        else:
            msg = f"Malformed journal {self.path}: {reason}"
        super().__init__(msg)


class InvalidTaskPositionError(TodoJournalError, ValueError):
    def __init__(self, position: int, count: int) -> None:
        self.position = position
        self.count = count
        super().__init__("Invalid Task ID")
