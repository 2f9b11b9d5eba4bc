# src/todo_journal/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from ..errors import JournalDecodeError

TEXT_WIDTH = 50
LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True, slots=True)
class Task:
    """
    One journal entry.

    created_at is always timezone-aware UTC. On disk it is stored as whole
    Unix seconds, so a reloaded task matches the task that was saved only to
    the second.
    """

    text: str
    created_at: datetime

    @classmethod
    def new(cls, text: str) -> Task:
        return cls(text=text, created_at=datetime.now(timezone.utc))

    def render(self) -> str:
        local = self.created_at.astimezone().strftime(LOCAL_TIME_FORMAT)
        return f"{self.text:<{TEXT_WIDTH}} [{local}]"

    def __str__(self) -> str:
        return self.render()

    # ---- JSON record form ----

    def to_record(self) -> dict[str, Any]:
        return {"text": self.text, "created_at": int(self.created_at.timestamp())}

    @classmethod
    def from_record(cls, obj: Any) -> Task:
        if not isinstance(obj, dict):
            raise JournalDecodeError(f"expected task object, got {type(obj).__name__}")

        text = obj.get("text")
        if not isinstance(text, str):
            raise JournalDecodeError("task field 'text' must be a string")

        # bool is an int subclass; JSON true/false is not a timestamp.
        ts = obj.get("created_at")
        if isinstance(ts, bool) or not isinstance(ts, int):
            raise JournalDecodeError("task field 'created_at' must be integer epoch seconds")

        try:
            created_at = datetime.fromtimestamp(ts, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise JournalDecodeError(f"task timestamp out of range: {ts}") from e

        return cls(text=text, created_at=created_at)
