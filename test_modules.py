"""
Smoke tests for the TicTacToe modules.
Checks that config, engine and the console front-end work together.
"""

import builtins

import main
from engine import EngineConfig, GameSession, MoveSelector


class ScriptedSelector:
    """Plays a fixed list of CPU moves."""

    def __init__(self, moves):
        self.moves = list(moves)

    def select_move(self, board):
        return self.moves.pop(0)


def feed_input(monkeypatch, lines):
    """Answer input() prompts from a list."""
    answers = iter(lines)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    monkeypatch.setattr(main.time, "sleep", lambda seconds: None)


def test_engine_config():
    assert EngineConfig.BOARD_CELLS == 9
    assert EngineConfig.OPTIMAL_MOVE_PROBABILITY == 0.25
    assert EngineConfig.WIN_SCORE == -EngineConfig.LOSS_SCORE
    assert EngineConfig.CPU_THINK_DELAY_MS > 0


def test_game_logic():
    session = GameSession(MoveSelector(seed=0))

    assert session.play_human_move(4).is_valid
    move = session.play_cpu_move()

    assert 0 <= move < 9
    assert move != 4
    assert not session.is_game_over


def test_print_board(capsys):
    session = GameSession(ScriptedSelector([0]))
    session.play_human_move(4)
    session.play_cpu_move()

    main.print_board(session)

    out = capsys.readouterr().out
    assert " O | 2 | 3" in out
    assert " 4 | X | 6" in out
    assert " 7 | 8 | 9" in out


def test_console_game_until_win(monkeypatch, capsys):
    game = main.ConsoleGame()
    game.session = GameSession(ScriptedSelector([3, 4]))
    feed_input(monkeypatch, ["abc", "1", "1", "2", "3", "n"])

    game.start()

    out = capsys.readouterr().out
    assert "'abc' is not a cell number" in out
    assert "Invalid move: Cell 0 is already occupied" in out
    assert ">>> CPU plays 4" in out
    assert "You Win!" in out
    assert not game.is_running


def test_console_game_quit_and_reset(monkeypatch, capsys):
    game = main.ConsoleGame()
    game.session = GameSession(ScriptedSelector([0]))
    feed_input(monkeypatch, ["5", "r", "q"])

    game.start()

    out = capsys.readouterr().out
    assert "Game reset!" in out
    assert "Game quit by user." in out
    assert game.session.board == [None] * 9
