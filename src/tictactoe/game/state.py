from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe.types import Board


class Turn(Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    TERMINAL = "terminal"


class Outcome(Enum):
    PLAYER_WIN = "You win!"
    COMPUTER_WIN = "Computer wins!"
    DRAW = "It's a draw!"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class GameState:
    board: Board
    turn: Turn
    outcome: Optional[Outcome] = None
    moves_played: int = 0
    last_status: str = ""
