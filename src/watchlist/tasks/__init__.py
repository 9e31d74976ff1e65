"""
Task list subsystem.

Components:
- task_models.py: data structures (Item, ChangeKind, StoreChange)
- task_store.py: in-memory ordered store with change notifications
- task_api.py: small high-level helpers used by the rest of the app
"""
