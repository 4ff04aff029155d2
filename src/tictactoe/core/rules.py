# src/tictactoe/core/rules.py

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from tictactoe.config import EMPTY
from tictactoe.core.board import board_size, in_bounds, row_col_to_index, set_board_cell
from tictactoe.core.notation import algebraic_to_row_col
from tictactoe.types import Board, Marker

Line = List[int]


def _lines(board: Board) -> Iterator[Line]:
    """Columns, then rows, then main diagonal, then anti-diagonal."""
    n = board_size(board)
    for c in range(n):
        yield [r * n + c for r in range(n)]
    for r in range(n):
        yield [r * n + c for c in range(n)]
    yield [i * (n + 1) for i in range(n)]
    # N-1, 2N-2, ... N(N-1); stepping N-1 past that would land on len-1
    yield [(i + 1) * (n - 1) for i in range(n)]


def winning_line(board: Board) -> Optional[Tuple[Marker, Line]]:
    if not board:
        return None
    for line in _lines(board):
        first = board[line[0]]
        if first == EMPTY:
            continue
        if all(board[i] == first for i in line):
            return first, line
    return None


def get_winner(board: Board) -> Optional[Marker]:
    w = winning_line(board)
    if w is None:
        return None
    return w[0]


def is_board_full(board: Board) -> bool:
    return all(cell != EMPTY for cell in board)


def is_valid_move(board: Board, notation: str) -> bool:
    coord = algebraic_to_row_col(notation)
    if coord is None or not in_bounds(board, coord):
        return False
    return board[row_col_to_index(board, coord.row, coord.col)] == EMPTY


def place_letter(board: Board, letter: Marker, notation: str) -> Optional[Board]:
    """
    Put `letter` at `notation`. Returns None for malformed or out-of-range
    notation; the input board is never modified.
    """
    coord = algebraic_to_row_col(notation)
    if coord is None or not in_bounds(board, coord):
        return None
    return set_board_cell(board, letter, coord.row, coord.col)
