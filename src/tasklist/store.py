"""Task store: ordered in-memory list of tasks and the three mutations.

Positions handed to the store are 1-based, exactly as typed by the user.
Out-of-range positions are rejected by returning None; the store is left
untouched so the caller knows not to persist.
"""
import logging
from typing import Iterable, Iterator, List, Optional
from tasklist.models import Task

logger = logging.getLogger(__name__)

class TaskStore:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- queries --------------------
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def numbered_lines(self) -> List[str]:
        return [f"{i}: {task.render_line()}" for i, task in enumerate(self._tasks, start=1)]

    def _index(self, position: int) -> Optional[int]:
        if 1 <= position <= len(self._tasks):
            return position - 1
        return None

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        task = Task(description=description)
        self._tasks.append(task)
        logger.debug("added task #%d: %r", len(self._tasks), description)
        return task

    def remove(self, position: int) -> Optional[Task]:
        idx = self._index(position)
        if idx is None:
            logger.info("remove rejected: position %d out of range 1..%d", position, len(self._tasks))
            return None
        task = self._tasks.pop(idx)
        logger.debug("removed task #%d: %r", position, task.description)
        return task

    def complete(self, position: int) -> Optional[Task]:
        """Mark the task at `position` done. Completing a done task is a no-op."""
        idx = self._index(position)
        if idx is None:
            logger.info("complete rejected: position %d out of range 1..%d", position, len(self._tasks))
            return None
        task = self._tasks[idx]
        task.is_done = True
        logger.debug("completed task #%d: %r", position, task.description)
        return task

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
