# src/todo_journal/config.py

"""Settings loaded from environment variables (+ optional .env).

Every variable uses the TODO_ prefix. Nothing here is required: a bare
environment gives a working CLI that keeps its journal in ~/.todo-cli.json.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"
DEFAULT_JOURNAL_FILENAME = ".todo-cli.json"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    return level if level in _LOG_LEVELS else default


def find_default_journal_file() -> Path | None:
    """~/.todo-cli.json, or None when the home directory cannot be determined."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    return home / DEFAULT_JOURNAL_FILENAME


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Journal ----
    journal_file: Path | None

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "todo-cli").strip() or "todo-cli"
        log_level = _env_log_level(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_optional_path(_k("LOG_FILE"))
        journal_file = _env_optional_path(_k("JOURNAL_FILE"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            journal_file=journal_file,
        )


def get_settings() -> Settings:
    return Settings.from_env()


def resolve_journal_file(override: str | Path | None, settings: Settings) -> Path | None:
    """
    Journal path precedence:
    - explicit override (the --journal-file flag)
    - TODO_JOURNAL_FILE
    - ~/.todo-cli.json
    """
    if override is not None:
        return Path(override).expanduser()
    if settings.journal_file is not None:
        return settings.journal_file
    return find_default_journal_file()
