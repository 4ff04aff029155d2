
# src/tictactoe/core/board.py

from __future__ import annotations
from math import isqrt
from typing import Iterable, List, Optional

from tictactoe.config import DEFAULT_MARKERS, EMPTY
from tictactoe.types import Board, Cell, Coord


def generate_board(rows: int, cols: int, fill: Cell = EMPTY) -> Board:
    return (fill,) * (rows * cols)


def board_from_string(s: str, markers: Iterable[str] = DEFAULT_MARKERS) -> Optional[Board]:
    """
    Decode a row-major board string such as "X O  O  X".

    Returns None when the length is not a (non-zero) perfect square or a
    character is neither empty nor one of `markers`.
    """
    n = isqrt(len(s))
    if n == 0 or n * n != len(s):
        return None

    allowed = set(markers) | {EMPTY}
    if any(ch not in allowed for ch in s):
        return None

    return tuple(s)


def board_to_string(board: Board) -> str:
    return "".join(board)


def board_size(board: Board) -> int:
    return isqrt(len(board))


def row_col_to_index(board: Board, row: int, col: int) -> int:
    # Not range-checked; see in_bounds().
    return row * board_size(board) + col


def index_to_row_col(board: Board, i: int) -> Coord:
    n = board_size(board)
    return Coord(i // n, i % n)


def in_bounds(board: Board, coord: Coord) -> bool:
    n = board_size(board)
    return 0 <= coord.row < n and 0 <= coord.col < n


def set_board_cell(board: Board, letter: Cell, row: int, col: int) -> Board:
    i = row_col_to_index(board, row, col)
    return board[:i] + (letter,) + board[i + 1:]


def empty_indices(board: Board) -> List[int]:
    return [i for i, cell in enumerate(board) if cell == EMPTY]
