from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from tictactoe.ai.base import Agent
from tictactoe.config import CLEAR_SCREEN, PAUSE_BEFORE_COMPUTER, USE_COLOR
from tictactoe.game.actions import apply_move, new_game
from tictactoe.game.results import winner_with_line
from tictactoe.game.state import GameState, Turn
from tictactoe.io.load_config import GameConfig
from tictactoe.ui.prompts import InputFn, pause
from tictactoe.ui.render import render

log = logging.getLogger(__name__)


def _intro(config: GameConfig) -> None:
    print("Welcome!")
    if config.computer_moves:
        print(f"Computer will make the following moves: {','.join(config.computer_moves)}")
    print(f"Player is {config.player_letter}, Computer is {config.computer_letter}\n")


def _show(state: GameState, clear: bool, color: bool) -> None:
    w = winner_with_line(state.board) if state.turn is Turn.TERMINAL else None
    render(
        state.board,
        state.last_status,
        highlight=w[1] if w else None,
        clear=clear,
        color=color,
    )


def run_game(
    config: GameConfig,
    human: Agent,
    computer: Agent,
    input_fn: Optional[InputFn] = None,
    clear: bool = CLEAR_SCREEN,
    color: bool = USE_COLOR,
    pause_before_computer: bool = PAUSE_BEFORE_COMPUTER,
) -> GameState:
    """
    Play one game to the end and return the final state.

    The first board is drawn under the intro text; every later redraw clears
    the screen first (when `clear` is on).
    """
    input_fn = input_fn or input
    _intro(config)
    state = new_game(config)
    _show(state, clear=False, color=color)

    while state.turn is not Turn.TERMINAL:
        if state.turn is Turn.PLAYER:
            agent = human
        else:
            agent = computer
            if pause_before_computer:
                pause(input_fn)

        move = agent.choose_move(state)
        if move is None:
            print("Game quit.")
            return state

        nxt = apply_move(state, config, move)
        if nxt is None:
            # Agents only hand back playable moves.
            raise ValueError(f"{agent.name} chose an unplayable move: {move!r}")

        # Say where a computer move came from, if the agent reports it.
        info = getattr(agent, "last_info", None)
        if info and info.get("source"):
            nxt = replace(nxt, last_status=f"{nxt.last_status} ({info['source']})")

        log.debug("%s -> %s (move %d)", agent.name, move, nxt.moves_played)
        state = nxt
        _show(state, clear=clear, color=color)

    print(state.outcome.message)
    return state
