"""Persistence helpers (load/save) for the task list.

File format: UTF-8 text, one task per line, `description,status` where
status is "1" (done) or "0". No header, no escaping. Reading is lenient
(anything but "1" is not done, a line without a comma is a bare
description); writing always emits the strict form.
"""
import logging
from pathlib import Path
from typing import List, Union
from tasklist.models import Task

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'
DELIMITER = ','
STATUS_DONE = '1'
STATUS_OPEN = '0'

PathLike = Union[str, Path]

def format_line(task: Task) -> str:
    status = STATUS_DONE if task.is_done else STATUS_OPEN
    return f"{task.description}{DELIMITER}{status}"

def parse_line(line: str) -> Task:
    """Decode one record, splitting on the first delimiter only."""
    description, _, status = line.partition(DELIMITER)
    return Task(description=description, is_done=status == STATUS_DONE)

class Storage:
    @staticmethod
    def load_tasks(path: PathLike) -> List[Task]:
        """Load tasks from disk.

        Missing file -> empty list. Blank lines are skipped.
        """
        path = Path(path)
        if not path.exists():
            logger.info("no task file at %s, starting empty", path)
            return []
        with open(path, 'r', encoding=ENCODING, newline='') as f:
            lines = f.read().split('\n')
        tasks = [parse_line(line.rstrip('\r')) for line in lines if line.rstrip('\r')]
        logger.debug("loaded %d task(s) from %s", len(tasks), path)
        return tasks

    @staticmethod
    def save_tasks(tasks: List[Task], path: PathLike) -> None:
        """Rewrite the whole file from `tasks` (truncates, creates if absent)."""
        path = Path(path)
        with open(path, 'w', encoding=ENCODING, newline='\n') as f:
            for task in tasks:
                f.write(format_line(task) + '\n')
        logger.debug("saved %d task(s) to %s", len(tasks), path)
