# tests/conftest.py

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep tests away from the developer's real journal and .env.

    TODO_* variables are cleared and the working directory is a fresh tmp dir,
    so find_dotenv(usecwd=True) has nothing to pick up.
    """
    for name in list(os.environ):
        if name.startswith("TODO_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    (tmp_path / "home").mkdir()
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def journal_path(tmp_path: Path) -> Path:
    return tmp_path / "journal.json"
