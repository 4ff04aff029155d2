from __future__ import annotations
from typing import Iterable, List, Optional, Set

from tictactoe.config import CLEAR_SCREEN, EMPTY, USE_COLOR
from tictactoe.core.board import board_size, row_col_to_index
from tictactoe.core.notation import ROW_LETTERS
from tictactoe.types import Board, Cell
from tictactoe.ui.colors import marker_style, paint, style


def _piece(cell: Cell, color: bool) -> str:
    if cell == EMPTY:
        return EMPTY
    return paint(cell, marker_style(cell), color)


def clear_screen() -> None:
    print("\033[2J\033[H", end="")


def format_board(board: Board, highlight: Optional[Iterable[int]] = None, color: bool = USE_COLOR) -> str:
    """
    Grid with column numbers across the top and row letters down the side:

            1   2   3
          -------------
        A | X |   | O |
          -------------
    """
    n = board_size(board)
    hl: Set[int] = set(highlight) if highlight else set()
    rule = paint("  -" + "-" * (n * 4), style("rule"), color)

    lines: List[str] = ["  " + "".join(f"  {i + 1} " for i in range(n)), rule]
    for r in range(n):
        row = f"{ROW_LETTERS[r]} |"
        for col in range(n):
            i = row_col_to_index(board, r, col)
            p = _piece(board[i], color)
            if i in hl:
                p = paint(p, style("winner"), color)
            row += f" {p} |"
        lines.append(row)
        lines.append(rule)
    return "\n".join(lines)


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[int]] = None,
    clear: bool = CLEAR_SCREEN,
    color: bool = USE_COLOR,
) -> None:
    if clear:
        clear_screen()

    print(format_board(board, highlight, color))
    if status:
        print(paint(status, style("status"), color))
    print()
