from __future__ import annotations
from typing import Callable, Optional

from tictactoe.core.rules import is_valid_move
from tictactoe.types import Board

InputFn = Callable[[str], str]

MOVE_PROMPT = "What's your move?\n"
PAUSE_PROMPT = "Press <ENTER> to show computer's move..."
QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str, board: Board) -> Optional[str]:
    s = raw.strip()
    if s.lower() in QUIT_WORDS:
        return None
    if not is_valid_move(board, s):
        raise ValueError("Invalid move. Try again.")
    return s


def pause(input_fn: InputFn = input) -> None:
    input_fn(PAUSE_PROMPT)
