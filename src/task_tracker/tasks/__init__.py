"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and record-update helpers
- task_codec.py: encode/decode between tasks and the tasks file text
- task_store.py: file-backed storage with load-mutate-save operations
"""
