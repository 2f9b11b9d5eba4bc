# src/todo_journal/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, resolves the journal file, then runs
exactly one command inside a `with TaskStore.open(...)` block so the journal
is rewritten on every exit path, failed commands included.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..config import get_settings, resolve_journal_file
from ..errors import JournalNotFoundError, TodoJournalError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import registry

logger = logging.getLogger(__name__)


def build_parser(prog: str = "todo-cli") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Append, list and remove tasks kept in a JSON journal file.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-j",
        "--journal-file",
        metavar="PATH",
        default=None,
        help="Use a different journal file (default: ~/.todo-cli.json).",
    )
    registry.add_subparsers(parser)
    return parser


def _report(err: BaseException) -> int:
    print(f"Error: {err}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(console_level=settings.console_level, log_file=settings.log_file)

    args = build_parser(settings.app_name).parse_args(argv)

    journal_file = resolve_journal_file(args.journal_file, settings)
    if journal_file is None:
        return _report(JournalNotFoundError())

    try:
        with TaskStore.open(journal_file) as store:
            registry.handle(store, args.action, args)
    except (TodoJournalError, OSError) as e:
        logger.debug("Command %s failed journal=%s", args.action, journal_file, exc_info=True)
        return _report(e)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
