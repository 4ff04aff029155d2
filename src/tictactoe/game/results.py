from __future__ import annotations
from typing import List, Optional, Tuple

from tictactoe.core.rules import get_winner, is_board_full, winning_line
from tictactoe.game.state import Outcome
from tictactoe.io.load_config import GameConfig
from tictactoe.types import Board, Marker


def winner_with_line(board: Board) -> Optional[Tuple[Marker, List[int]]]:
    return winning_line(board)


def resolve(board: Board, config: GameConfig) -> Optional[Outcome]:
    """None while the game is still going."""
    w = get_winner(board)
    if w == config.player_letter:
        return Outcome.PLAYER_WIN
    if w == config.computer_letter:
        return Outcome.COMPUTER_WIN
    if is_board_full(board):
        return Outcome.DRAW
    return None
