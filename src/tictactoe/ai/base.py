from __future__ import annotations
from typing import Optional, Protocol

from tictactoe.game.state import GameState


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Optional[str]:
        """Algebraic notation for the next move, or None to quit."""
        ...
