# tests/helpers.py

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path


def read_journal(path: Path) -> list[dict]:
    return json.loads(path.read_text("utf-8"))


def write_journal(path: Path, records: list[dict]) -> None:
    path.write_text(json.dumps(records), "utf-8")


def epoch(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> int:
    return int(datetime(year, month, day, hour, minute, tzinfo=timezone.utc).timestamp())
