# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasklist import theme


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ANSI colors out of captured output even when run from a TTY."""
    monkeypatch.setattr(theme, "_ENABLE", False)
    for name in ("TASKLIST_FILE", "TASKLIST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() swaps root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"
