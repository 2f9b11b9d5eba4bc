# src/todo_journal/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import IO, Any

from ..errors import InvalidTaskPositionError, JournalDecodeError
from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_LISTING = "Task list is empty"

Emitter = Callable[[str], None]


class TaskStore:
    """
    Journal-file backed task list.

    Lifecycle:
    - open: the file is opened read/write (created if missing) and decoded once
    - add/complete: mutate the in-memory list only
    - close: rewind, truncate and write the whole list back, exactly once

    The in-memory list is authoritative between open and close. close() is
    best-effort: I/O errors while persisting are logged at DEBUG and dropped,
    so a full disk or a permission change after open loses the updates.

    Use it as a context manager so that close() runs on every exit path:

        with TaskStore.open(path) as store:
            store.add(Task.new("buy milk"))
    """

    def __init__(self, journal_path: str | Path) -> None:
        self._path = Path(journal_path)
        self._file = self._open_file(self._path)
        self._closed = False
        try:
            self._tasks = self._collect_tasks()
        except BaseException:
            # Never constructed: nothing to persist, just release the handle.
            self._file.close()
            self._closed = True
            raise
        logger.debug("TaskStore ready journal=%s total=%d", self._path, len(self._tasks))

    @classmethod
    def open(cls, journal_path: str | Path) -> TaskStore:
        return cls(journal_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def closed(self) -> bool:
        return self._closed

    # ---- low-level helpers ----

    @staticmethod
    def _open_file(path: Path) -> IO[bytes]:
        # O_CREAT without O_TRUNC: "r+" alone fails on a missing file, "w+" would wipe it.
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        try:
            return os.fdopen(fd, "r+b")
        except BaseException:
            os.close(fd)
            raise

    def _collect_tasks(self) -> list[Task]:
        self._file.seek(0)
        data_bytes = self._file.read()
        self._file.seek(0)

        try:
            raw = data_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise JournalDecodeError(f"not valid UTF-8 ({e.reason})", self._path) from e

        # No data at all is an empty journal, not a corrupt one.
        if not raw.strip():
            return []

        # ValueError covers JSONDecodeError and the int digit limit; deep nesting hits RecursionError.
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise JournalDecodeError(str(e), self._path) from e

        if not isinstance(data, list):
            raise JournalDecodeError(
                f"expected a JSON array at top level, got {type(data).__name__}", self._path
            )

        tasks: list[Task] = []
        for i, item in enumerate(data, start=1):
            try:
                tasks.append(Task.from_record(item))
            except JournalDecodeError as e:
                raise JournalDecodeError(f"record {i}: {e.reason}", self._path) from e
        return tasks

    def _dump(self) -> bytes:
        records: list[dict[str, Any]] = [t.to_record() for t in self._tasks]
        text = json.dumps(records, ensure_ascii=False)
        # Lone surrogates (undecodable argv bytes) can only sit inside JSON strings;
        # backslashreplace turns them into \udcXX escapes that json.loads reads back.
        return text.encode("utf-8", "backslashreplace")

    # ---- public API ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added position=%d", len(self._tasks))

    def listing(self) -> list[str]:
        if not self._tasks:
            return [EMPTY_LISTING]
        return [f"{i}: {task.render()}" for i, task in enumerate(self._tasks, start=1)]

    def list_tasks(self, emit: Emitter = print) -> None:
        for line in self.listing():
            emit(line)

    def complete(self, position: int) -> Task:
        """Remove the task at 1-based `position` and return it."""
        if position < 1 or position > len(self._tasks):
            raise InvalidTaskPositionError(position, len(self._tasks))
        task = self._tasks.pop(position - 1)
        logger.debug("Task completed position=%d remaining=%d", position, len(self._tasks))
        return task

    def close(self) -> None:
        """Persist the in-memory list and release the file (best-effort, runs once)."""
        if self._closed:
            return
        self._closed = True

        try:
            # Encode first: nothing may fail between truncate and write except the I/O itself.
            payload = self._dump()
            self._file.seek(0)
            self._file.truncate(0)
            self._file.write(payload)
            self._file.flush()
            logger.debug("Journal persisted journal=%s total=%d", self._path, len(self._tasks))
        except Exception:
            logger.debug("Journal persist failed journal=%s", self._path, exc_info=True)
        finally:
            try:
                self._file.close()
            except Exception:
                logger.debug("Journal close failed journal=%s", self._path, exc_info=True)
