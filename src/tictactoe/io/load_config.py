from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from tictactoe.config import EMPTY
from tictactoe.core.board import board_from_string, board_size
from tictactoe.core.notation import ROW_LETTERS
from tictactoe.core.rules import is_board_full
from tictactoe.types import Board

log = logging.getLogger(__name__)

REQUIRED_KEYS = ("board", "playerLetter", "computerLetter", "computerMoves")


class ConfigError(Exception):
    """Base class for anything that stops a game from being set up."""


class ConfigLoadError(ConfigError):
    """File missing/unreadable or not valid JSON."""


class ConfigShapeError(ConfigError):
    """JSON parsed but does not describe a playable game."""


@dataclass(frozen=True)
class GameConfig:
    board: str
    player_letter: str
    computer_letter: str
    computer_moves: tuple[str, ...] = ()
    path: Path | None = None

    @property
    def markers(self) -> tuple[str, str]:
        return (self.player_letter, self.computer_letter)

    def initial_board(self) -> Board:
        b = board_from_string(self.board, self.markers)
        if b is None:
            where = f"{self.path}: " if self.path else ""
            raise ConfigShapeError(f"{where}Board {self.board!r} is not a valid square board.")
        return b


def _check_letter(obj: Mapping[str, Any], key: str) -> str:
    v = obj[key]
    if not isinstance(v, str) or len(v) != 1 or v == EMPTY:
        raise ConfigShapeError(f"'{key}' must be a single non-blank character, got {v!r}.")
    return v


def config_from_dict(obj: Any, path: Path | None = None) -> GameConfig:
    if not isinstance(obj, dict):
        raise ConfigShapeError(f"Expected a JSON object, got {type(obj).__name__}.")

    missing = [k for k in REQUIRED_KEYS if k not in obj]
    if missing:
        raise ConfigShapeError(f"Missing required key(s): {', '.join(missing)}")

    player = _check_letter(obj, "playerLetter")
    computer = _check_letter(obj, "computerLetter")
    if player == computer:
        raise ConfigShapeError("playerLetter and computerLetter must differ.")

    board = obj["board"]
    if not isinstance(board, str):
        raise ConfigShapeError(f"'board' must be a string, got {type(board).__name__}.")

    moves = obj["computerMoves"]
    if not isinstance(moves, list) or not all(isinstance(m, str) for m in moves):
        raise ConfigShapeError("'computerMoves' must be a list of strings.")

    cfg = GameConfig(
        board=board,
        player_letter=player,
        computer_letter=computer,
        computer_moves=tuple(moves),
        path=path,
    )

    initial = cfg.initial_board()
    where = f"{cfg.path}: " if cfg.path else ""
    if board_size(initial) > len(ROW_LETTERS):
        raise ConfigShapeError(f"{where}Board has more than {len(ROW_LETTERS)} rows.")
    if is_board_full(initial):
        raise ConfigShapeError(f"{where}Board is already full.")

    return cfg


def load_config(path: str | Path) -> GameConfig:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Error reading file {p}: {e}") from e

    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"{p} is not valid JSON: {e}") from e

    cfg = config_from_dict(obj, path=p)
    log.debug(
        "Loaded %s: board=%r player=%s computer=%s moves=%s",
        cfg.path, cfg.board, cfg.player_letter, cfg.computer_letter, list(cfg.computer_moves),
    )
    return cfg
