"""Data models for the task list.

Only exposes the Task dataclass. Tasks carry no id of their own; the
1-based position in the store is the only handle the user ever sees.
"""
from __future__ import annotations
from dataclasses import dataclass

DONE_MARK = "[x]"
OPEN_MARK = "[ ]"

@dataclass
class Task:
    """A single task.

    Fields:
        description: Single line of free text (no field delimiter).
        is_done: Completion flag; only ever flips False -> True.
    """
    description: str
    is_done: bool = False

    def render_line(self) -> str:
        mark = DONE_MARK if self.is_done else OPEN_MARK
        return f"{mark} {self.description}"
