# tests/test_theme.py

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from tasklist import theme
from tasklist.cli import CLI
from tasklist.models import Task
from tasklist.store import TaskStore

THEME_ENV = ("NO_COLOR", "FORCE_COLOR", "COLORTERM", "TASKLIST_PRIMARY", "TASKLIST_DONE")


@pytest.fixture()
def load_theme(monkeypatch: pytest.MonkeyPatch):
    """Re-import theme under a given environment; restore it afterwards."""

    def _load(**env: str):
        for key in THEME_ENV:
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(theme)

    yield _load
    monkeypatch.undo()
    importlib.reload(theme)


def test_truecolor_palette_overrides(load_theme) -> None:
    t = load_theme(FORCE_COLOR="1", COLORTERM="truecolor", TASKLIST_PRIMARY="#102030", TASKLIST_DONE="00ff00")

    assert t.MENU_COLOR == "\033[38;2;16;32;48m"
    assert t.HEADER_COLOR == "\033[38;2;16;32;48m\033[1m"
    assert t.DONE_COLOR == "\033[38;2;0;255;0m"
    assert t.color("x", t.DONE_COLOR) == "\033[38;2;0;255;0mx\033[0m"


def test_256_color_cube_without_truecolor(load_theme) -> None:
    t = load_theme(FORCE_COLOR="1", TASKLIST_DONE="00ff00")
    assert t.DONE_COLOR == "\033[38;5;46m"


@pytest.mark.parametrize("bad", ["zzzzzz", "12345", "#1234567", "+f+f+f", ""])
def test_invalid_hex_keeps_default(load_theme, bad: str) -> None:
    t = load_theme(FORCE_COLOR="1", COLORTERM="24bit", TASKLIST_DONE=bad)
    # default #A7E399
    assert t.DONE_COLOR == "\033[38;2;167;227;153m"


def test_no_color_wins_over_force(load_theme) -> None:
    t = load_theme(FORCE_COLOR="1", NO_COLOR="", TASKLIST_DONE="00ff00")

    assert t.DONE_COLOR == ""
    assert t.RESET == ""
    assert t.color("x", t.DONE_COLOR, t.BOLD) == "x"


def test_done_tasks_are_colored_in_listing(load_theme, capsys, tmp_path: Path) -> None:
    t = load_theme(FORCE_COLOR="1", COLORTERM="truecolor", TASKLIST_DONE="00ff00")
    store = TaskStore([Task("a", is_done=True), Task("b")])

    CLI(store, tmp_path / "tasks.txt")._display()

    out = capsys.readouterr().out
    assert t.DONE_COLOR + "1: [x] a" + t.RESET + "\n" in out
    assert "\n2: [ ] b\n" in out
