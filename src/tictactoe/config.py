# src/tictactoe/config.py

from __future__ import annotations

EMPTY = " "
DEFAULT_MARKERS = ("X", "O")

DEFAULT_CONFIG_PATH = "defaultConfig.json"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# "Press <ENTER>" before the computer's move is shown
PAUSE_BEFORE_COMPUTER = True
