"""Single-user task list driven by a numbered text menu."""

__version__ = "0.1.0"
