from __future__ import annotations
from typing import Optional

from tictactoe.config import DEFAULT_MARKERS, USE_COLOR

RESET = "\033[0m"

# SGR parameters per thing drawn on screen
STYLES = {
    "rule": "2",        # dim grid lines
    "status": "36",     # cyan
    "winner": "1;7",    # bold + reverse video
}
MARKER_STYLES = ("31", "33")   # first marker red, any other yellow


def style(role: str) -> str:
    return f"\033[{STYLES[role]}m"


def marker_style(marker: str) -> str:
    sgr = MARKER_STYLES[0] if marker == DEFAULT_MARKERS[0] else MARKER_STYLES[1]
    return f"\033[{sgr}m"


def paint(s: str, code: str, enabled: Optional[bool] = None) -> str:
    if enabled is None:
        enabled = USE_COLOR
    if not enabled:
        return s
    return f"{code}{s}{RESET}"
