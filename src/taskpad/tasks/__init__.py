"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPage, StoreSnapshot) + blob codec
- task_store.py: in-memory store with validation, filtering, paging
- task_api.py: small high-level helpers used by the view
"""
