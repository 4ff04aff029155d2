from __future__ import annotations
from dataclasses import replace
from typing import Optional

from tictactoe.core.rules import is_valid_move, place_letter
from tictactoe.game.results import resolve
from tictactoe.game.state import GameState, Turn
from tictactoe.io.load_config import GameConfig
from tictactoe.types import Marker


def other(turn: Turn) -> Turn:
    if turn is Turn.PLAYER:
        return Turn.COMPUTER
    if turn is Turn.COMPUTER:
        return Turn.PLAYER
    raise ValueError("Game is over.")


def letter_for(turn: Turn, config: GameConfig) -> Marker:
    if turn is Turn.PLAYER:
        return config.player_letter
    if turn is Turn.COMPUTER:
        return config.computer_letter
    raise ValueError("Game is over.")


def new_game(config: GameConfig) -> GameState:
    board = config.initial_board()
    outcome = resolve(board, config)
    if outcome is not None:
        # e.g. a config board that already has three in a row
        return GameState(board=board, turn=Turn.TERMINAL, outcome=outcome)

    first = Turn.PLAYER if config.player_letter == "X" else Turn.COMPUTER
    return GameState(board=board, turn=first)


def apply_move(state: GameState, config: GameConfig, notation: str) -> Optional[GameState]:
    """
    Play `notation` for whoever's turn it is. Returns None (and leaves the
    state alone) if the move is malformed, off the board or on a taken cell.
    """
    if state.turn is Turn.TERMINAL:
        return None
    if not is_valid_move(state.board, notation):
        return None

    board = place_letter(state.board, letter_for(state.turn, config), notation)
    if board is None:
        return None

    who = "You" if state.turn is Turn.PLAYER else "Computer"
    outcome = resolve(board, config)
    return replace(
        state,
        board=board,
        turn=Turn.TERMINAL if outcome is not None else other(state.turn),
        outcome=outcome,
        moves_played=state.moves_played + 1,
        last_status=f"{who} played {notation}",
    )
