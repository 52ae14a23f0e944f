"""
Command-line layer.

Components:
- bootstrap.py: builds the TaskStore from Settings
- commands.py: command registry and handlers (add, update, list, ...)
- main.py: `task-cli` entrypoint
"""
