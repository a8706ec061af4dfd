"""ANSI styling for the menu screen.

Colors are on when stdout is a terminal or FORCE_COLOR is truthy, and off
whenever NO_COLOR is set. Header and menu use the primary color, completed
tasks the done color; TASKLIST_PRIMARY / TASKLIST_DONE take a 6-digit hex
(leading '#' optional), anything else keeps the default.
"""
from __future__ import annotations
import os, sys
from string import hexdigits
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_DONE_DEFAULT = '#A7E399'

def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    return os.environ.get("FORCE_COLOR", "").lower() in _TRUTHY or sys.stdout.isatty()

def _truecolor() -> bool:
    colorterm = os.environ.get("COLORTERM", "").lower()
    return "truecolor" in colorterm or "24bit" in colorterm

_ENABLE = _color_enabled()
_TRUECOLOR = _ENABLE and _truecolor()

def _sgr(*params: int) -> str:
    return f"\033[{';'.join(map(str, params))}m" if _ENABLE else ''

def _parse_hex(value: str) -> Optional[tuple[int, int, int]]:
    h = value.strip().lstrip('#')
    if len(h) != 6 or not all(c in hexdigits for c in h):
        return None
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)

def _palette(env_key: str, default: str) -> str:
    """Foreground escape for one palette role, honoring the env override."""
    rgb = _parse_hex(os.environ.get(env_key, '')) or _parse_hex(default)
    if not _ENABLE or rgb is None:
        return ''
    r, g, b = rgb
    if _TRUECOLOR:
        return _sgr(38, 2, r, g, b)
    # nearest entry of the xterm 6x6x6 cube
    r6, g6, b6 = (round(x / 255 * 5) for x in rgb)
    return _sgr(38, 5, 16 + 36 * r6 + 6 * g6 + b6)

RESET = _sgr(0)
BOLD = _sgr(1)

MENU_COLOR = _palette('TASKLIST_PRIMARY', HEX_PRIMARY_DEFAULT)
HEADER_COLOR = MENU_COLOR + BOLD
DONE_COLOR = _palette('TASKLIST_DONE', HEX_DONE_DEFAULT)
ERROR_COLOR = _sgr(31)

def color(text: str, *styles: str) -> str:
    if not _ENABLE or not any(styles):
        return text
    return ''.join(styles) + text + RESET
