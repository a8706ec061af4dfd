"""Menu loop for the task list.

Every cycle prints the numbered list and the four-item menu, reads one
line and dispatches it. Successful mutations rewrite the task file right
away; rejected input only prints a message.
"""
import logging
from pathlib import Path
from typing import Optional
from tasklist import theme
from tasklist.store import TaskStore
from tasklist.storage import DELIMITER, ENCODING, Storage

logger = logging.getLogger(__name__)

HEADER = "--ToDo List--"
MENU = (
    "1. Add a task",
    "2. Remove a task",
    "3. Mark a task as complete",
    "4. Quit",
)
INVALID_NUMBER = "Invalid task number."
INVALID_COMMAND = "Invalid command."
INVALID_DESCRIPTION = f"Task description cannot contain '{DELIMITER}'."
UNREADABLE_DESCRIPTION = "Invalid task description."


def parse_position(raw: str) -> Optional[int]:
    """Return the 1-based position typed by the user, or None if not a number."""
    text = raw.strip()
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)


def read_line(prompt: str = '') -> Optional[str]:
    """Read one line of input; None if it is not text the task file can hold.

    Covers bytes stdin cannot decode and lone surrogates (surrogateescape
    stdin) that would fail when the file is written.
    """
    try:
        line = input(prompt)
    except UnicodeDecodeError as exc:
        logger.info("undecodable input: %s", exc)
        return None
    try:
        line.encode(ENCODING)
    except UnicodeEncodeError:
        logger.info("input not representable in %s: %r", ENCODING, line)
        return None
    return line


class CLI:
    def __init__(self, store: TaskStore, path: Path):
        self.store: TaskStore = store
        self.path: Path = path

    def run(self) -> None:
        """Main loop; returns on quit or when input runs out.

        File errors raised while saving are not handled here.
        """
        try:
            while True:
                self._display()
                choice = (read_line() or '').strip()
                if choice == '4':
                    logger.debug("quit requested")
                    break
                self._handle_command(choice)
        except (KeyboardInterrupt, EOFError):
            logger.debug("input closed, leaving loop")
            print("\nGoodbye.")

    # -------------------- display --------------------
    def _display(self) -> None:
        print()
        print(theme.color(HEADER, theme.HEADER_COLOR))
        for task, line in zip(self.store, self.store.numbered_lines()):
            print(theme.color(line, theme.DONE_COLOR) if task.is_done else line)
        print()
        print("Enter a command:")
        for item in MENU:
            print(theme.color(item, theme.MENU_COLOR))

    def _error(self, message: str) -> None:
        print(theme.color(message, theme.ERROR_COLOR))

    # -------------------- command dispatch --------------------
    def _handle_command(self, choice: str) -> None:
        if choice == '1':
            self._add()
        elif choice == '2':
            self._remove()
        elif choice == '3':
            self._complete()
        else:
            logger.info("unknown command %r", choice)
            self._error(INVALID_COMMAND)

    def _save(self) -> None:
        Storage.save_tasks(self.store.tasks(), self.path)

    # -------------------- user-interactive flows --------------------
    def _add(self) -> None:
        raw = read_line("Enter task description: ")
        if raw is None:
            self._error(UNREADABLE_DESCRIPTION)
            return
        description = raw.strip()
        if DELIMITER in description:
            logger.info("rejected description containing delimiter: %r", description)
            self._error(INVALID_DESCRIPTION)
            return
        self.store.add(description)
        self._save()

    def _read_position(self, prompt: str) -> Optional[int]:
        raw = read_line(prompt)
        position = parse_position(raw) if raw is not None else None
        if position is None:
            logger.info("not a task number: %r", raw)
        return position

    def _remove(self) -> None:
        position = self._read_position("Enter the task to remove: ")
        if position is None or self.store.remove(position) is None:
            self._error("\n" + INVALID_NUMBER)
            return
        self._save()

    def _complete(self) -> None:
        position = self._read_position("Enter the task to mark as complete: ")
        if position is None or self.store.complete(position) is None:
            self._error("\n" + INVALID_NUMBER)
            return
        self._save()
