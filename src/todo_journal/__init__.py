"""
Personal task journal.

Components:
- tasks/task_models.py: the Task record and its JSON record form
- tasks/task_store.py: journal-file backed store (load on open, persist on close)
- cli/: command registry and the `todo-cli` entrypoint
"""

__version__ = "0.1.0"
