# src/tictactoe/core/notation.py

from __future__ import annotations
import string
from typing import Optional

from tictactoe.types import Coord

ROW_LETTERS = string.ascii_uppercase


def algebraic_to_row_col(notation: str) -> Optional[Coord]:
    """
    "B3" -> Coord(row=1, col=2).

    Upper-case row letter followed by one or two digits. The column is not
    range-checked here, so "A99" decodes fine and "A0" gives col -1.
    """
    if len(notation) not in (2, 3):
        return None

    letter, digits = notation[0], notation[1:]
    if letter not in ROW_LETTERS:
        return None
    # str.isdigit() also accepts things like "²"
    if not all(ch in string.digits for ch in digits):
        return None

    return Coord(ord(letter) - ord("A"), int(digits) - 1)


def row_col_to_algebraic(row: int, col: int) -> str:
    if not 0 <= row < len(ROW_LETTERS):
        raise ValueError(f"Row {row} has no letter.")
    return f"{ROW_LETTERS[row]}{col + 1}"
