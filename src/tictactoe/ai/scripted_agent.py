from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from tictactoe.ai.base import Agent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.core.rules import is_valid_move
from tictactoe.game.state import GameState

log = logging.getLogger(__name__)


@dataclass
class ScriptedAgent:
    """
    Plays a fixed list of moves in order.

    A scripted move that is malformed, off the board or already taken is
    skipped (and never retried). Once the script runs out, every move comes
    from `fallback`.
    """
    moves: Sequence[str] = ()
    fallback: Optional[Agent] = None
    name: str = "Computer"

    cursor: int = field(default=0, init=False)
    last_info: dict = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.moves = tuple(self.moves)
        if self.fallback is None:
            self.fallback = RandomAgent()

    @property
    def remaining(self) -> int:
        return len(self.moves) - self.cursor

    def choose_move(self, state: GameState) -> Optional[str]:
        while self.cursor < len(self.moves):
            move = self.moves[self.cursor]
            self.cursor += 1
            if is_valid_move(state.board, move):
                self.last_info = {"source": "scripted", "move": move}
                log.debug("Scripted move %s (%d left)", move, self.remaining)
                return move
            log.debug("Skipping scripted move %r: not playable", move)

        move = self.fallback.choose_move(state)
        self.last_info = {"source": self.fallback.name, "move": move}
        log.debug("Fallback %s chose %s", self.fallback.name, move)
        return move
