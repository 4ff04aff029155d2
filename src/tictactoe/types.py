# src/tictactoe/types.py

from __future__ import annotations
from typing import NamedTuple, Tuple

Marker = str                # single character, e.g. "X"
Cell = str                  # a Marker or config.EMPTY
Board = Tuple[Cell, ...]    # row-major, length N*N


class Coord(NamedTuple):
    row: int
    col: int
