from __future__ import annotations
import random
from typing import Optional

from tictactoe.core.board import empty_indices, index_to_row_col
from tictactoe.core.notation import row_col_to_algebraic
from tictactoe.game.state import GameState


class RandomAgent:
    name = "Random AI"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose_move(self, state: GameState) -> str:
        cells = empty_indices(state.board)
        if not cells:
            raise ValueError("No valid moves.")
        row, col = index_to_row_col(state.board, self.rng.choice(cells))
        return row_col_to_algebraic(row, col)
