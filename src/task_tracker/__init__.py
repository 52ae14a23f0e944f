"""Single-user command-line task tracker backed by a local tasks file."""

__version__ = "0.1.0"
