import pytest

from tictactoe.ai.random_agent import RandomAgent
from tictactoe.ai.scripted_agent import ScriptedAgent
from tictactoe.core.rules import is_valid_move
from tictactoe.game.state import GameState, Turn
from tictactoe.ui.human import HumanAgent


def state(board: str) -> GameState:
    return GameState(board=tuple(board), turn=Turn.COMPUTER)


class FixedAgent:
    name = "Fixed"

    def __init__(self, move):
        self.move = move
        self.calls = 0

    def choose_move(self, state):
        self.calls += 1
        return self.move


def test_random_agent_only_picks_empty_cells():
    agent = RandomAgent(seed=7)
    s = state("XOXOX O X")
    picks = {agent.choose_move(s) for _ in range(50)}
    assert picks <= {"B3", "C2"}
    assert all(is_valid_move(s.board, m) for m in picks)


def test_random_agent_is_reproducible_with_seed():
    s = state("         ")
    a = [RandomAgent(seed=3).choose_move(s) for _ in range(5)]
    b = [RandomAgent(seed=3).choose_move(s) for _ in range(5)]
    assert a == b


def test_random_agent_covers_all_open_cells():
    agent = RandomAgent(seed=0)
    s = state("X   O    ")
    picks = {agent.choose_move(s) for _ in range(300)}
    assert picks == {"A2", "A3", "B1", "B3", "C1", "C2", "C3"}


def test_random_agent_full_board():
    with pytest.raises(ValueError):
        RandomAgent().choose_move(state("XOXXOOOXX"))


def test_scripted_agent_plays_script_in_order():
    fallback = FixedAgent("C3")
    agent = ScriptedAgent(["A1", "B2"], fallback=fallback)
    assert agent.choose_move(state("         ")) == "A1"
    assert agent.last_info == {"source": "scripted", "move": "A1"}
    assert agent.choose_move(state("O        ")) == "B2"
    assert agent.remaining == 0
    assert agent.choose_move(state("O   O    ")) == "C3"
    assert agent.last_info["source"] == "Fixed"
    assert fallback.calls == 1


def test_scripted_agent_skips_unplayable_moves():
    fallback = FixedAgent("C3")
    agent = ScriptedAgent(["B2", "zz", "D9", "A1", "A2"], fallback=fallback)
    # B2 taken, zz malformed, D9 off the board
    assert agent.choose_move(state("    X    ")) == "A1"
    assert agent.cursor == 4
    assert agent.choose_move(state("O   X    ")) == "A2"
    assert fallback.calls == 0


def test_scripted_agent_does_not_retry_skipped_moves():
    fallback = FixedAgent("C3")
    agent = ScriptedAgent(["A1"], fallback=fallback)
    assert agent.choose_move(state("X        ")) == "C3"
    # A1 would be fine here, but it was already used up.
    assert agent.choose_move(state("         ")) == "C3"
    assert fallback.calls == 2


def test_scripted_agent_defaults_to_random():
    agent = ScriptedAgent()
    assert isinstance(agent.fallback, RandomAgent)
    assert agent.choose_move(state("XOXXOOOX ")) == "C3"


def _inputs(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_human_agent_retries_until_valid(capsys):
    human = HumanAgent(input_fn=_inputs("a1", "B2", "Z1", " A3 "))
    s = GameState(board=tuple("    X    "), turn=Turn.PLAYER)
    assert human.choose_move(s) == "A3"
    out = capsys.readouterr().out
    assert out.count("Invalid move. Try again.") == 3


def test_human_agent_quit():
    human = HumanAgent(input_fn=_inputs("q"))
    s = GameState(board=tuple("         "), turn=Turn.PLAYER)
    assert human.choose_move(s) is None
