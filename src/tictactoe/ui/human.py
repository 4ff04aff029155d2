from __future__ import annotations
from typing import Optional

from tictactoe.game.state import GameState
from tictactoe.ui.prompts import MOVE_PROMPT, InputFn, parse_move


class HumanAgent:
    name = "Human"

    def __init__(self, input_fn: Optional[InputFn] = None) -> None:
        self.input_fn = input_fn or input

    def choose_move(self, state: GameState) -> Optional[str]:
        # Keeps asking until the move is playable; None means the player quit.
        while True:
            raw = self.input_fn(MOVE_PROMPT)
            try:
                return parse_move(raw, state.board)
            except ValueError as e:
                print(e)
