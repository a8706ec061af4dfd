"""Main entry point for the task list.

Resolves settings, loads the task file and hands over to the menu loop.
File errors are fatal: reported on stderr with exit status 1.
"""
import logging
from pathlib import Path
from typing import NoReturn, Optional
import click
from tasklist import __version__
from tasklist.cli import CLI
from tasklist.config import Settings
from tasklist.logging_setup import setup_logging
from tasklist.storage import Storage
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    '--file', '-f', 'tasks_file',
    type=click.Path(dir_okay=False, path_type=Path),
    envvar='TASKLIST_FILE',
    default=None,
    help='Task file to read and rewrite (default: tasks.txt).',
)
@click.version_option(version=__version__, prog_name='tasklist')
def main(tasks_file: Optional[Path]):
    """Manage a numbered task list from a text menu."""
    settings = Settings.from_env(tasks_file)
    setup_logging(settings.log_level)
    logger.debug("using task file %s", settings.tasks_file)
    try:
        store = TaskStore(Storage.load_tasks(settings.tasks_file))
    except (OSError, UnicodeDecodeError) as exc:
        _fatal(settings.tasks_file, exc)
    try:
        CLI(store, settings.tasks_file).run()
    except OSError as exc:
        _fatal(settings.tasks_file, exc)


def _fatal(path: Path, exc: Exception) -> NoReturn:
    logger.error("task file %s unusable: %s", path, exc)
    raise click.ClickException(f"Task file {path}: {exc}") from exc


if __name__ == "__main__":
    main()
