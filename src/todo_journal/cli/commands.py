# src/todo_journal/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import Task
from ..tasks.task_store import Emitter, TaskStore

CommandHandler = Callable[[TaskStore, argparse.Namespace, Emitter], None]
ArgumentsConfigurer = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    help_text: str
    configure: ArgumentsConfigurer | None


class CommandRegistry:
    """Journal operations exposed as subcommands (add, done, list)."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgumentsConfigurer | None = None,
    ) -> None:
        self._commands[name.lower()] = _Command(handler, help_text, configure)

    def add_subparsers(self, parser: argparse.ArgumentParser, dest: str = "action") -> None:
        sub = parser.add_subparsers(dest=dest, metavar="<command>", required=True)
        for name, command in self._commands.items():
            p = sub.add_parser(name, help=command.help_text, description=command.help_text)
            if command.configure is not None:
                command.configure(p)

    def handle(
        self,
        store: TaskStore,
        name: str,
        args: argparse.Namespace,
        emit: Emitter = print,
    ) -> None:
        command = self._commands.get(name.lower())
        if command is None:
            raise KeyError(f"Unknown command: {name}")
        logger.debug("Running command %s journal=%s", name, store.path)
        command.handler(store, args, emit)


def non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid position: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"position must not be negative: {raw!r}")
    return value


def cmd_add(store: TaskStore, args: argparse.Namespace, emit: Emitter) -> None:
    store.add(Task.new(args.text))


def cmd_done(store: TaskStore, args: argparse.Namespace, emit: Emitter) -> None:
    store.complete(args.position)


def cmd_list(store: TaskStore, args: argparse.Namespace, emit: Emitter) -> None:
    store.list_tasks(emit)


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", help="Task description.")


def _configure_done(p: argparse.ArgumentParser) -> None:
    p.add_argument("position", type=non_negative_int, help="Position shown by `list` (1-based).")


registry = CommandRegistry()

registry.register("add", cmd_add, help_text="Write a task to the journal file.", configure=_configure_add)
registry.register(
    "done",
    cmd_done,
    help_text="Remove an entry from the journal file by position.",
    configure=_configure_done,
)
registry.register("list", cmd_list, help_text="List all tasks in the journal file.")
