"""
Task subsystem.

Components:
- task_models.py: the Task record (text + UTC creation time) and its JSON form
- task_store.py: journal-file backed store, loaded on open and rewritten on close
"""
