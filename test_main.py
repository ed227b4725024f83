"""
Tests for the command line entry point and console game.
"""

import random

import pytest

import main
from logic.config import GameConfig
from logic.game_state import Mark
from logic.session import Session, Mode


def run_console(commands, session=None):
    """Feed commands to a ConsoleGame, return (session, output lines, sleeps)."""
    session = session or Session(mode=Mode.PVP)
    lines = []
    sleeps = []
    feed = iter(commands)

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    game = main.ConsoleGame(session, input_fn=fake_input, output_fn=lines.append, sleep_fn=sleeps.append)
    game.start()
    return session, lines, sleeps


def test_console_plays_a_pvp_game():
    session, lines, _ = run_console(["0", "4", "1", "7", "2", "q"])
    assert session.status.winner == Mark.X
    assert "X wins!" in "\n".join(lines)
    assert "Game quit by user." in "\n".join(lines)
    assert lines[-1] == "Score  X: 1  O: 0  Draws: 0"


def test_console_reports_rejected_moves():
    session, lines, _ = run_console(["4", "4", "9"])
    text = "\n".join(lines)
    assert "Move rejected: Cell 4 is already occupied by X" in text
    assert "Move rejected: Invalid cell 9. Must be 0-8." in text
    assert session.board.turn == Mark.O


def test_console_restart_and_unknown_commands():
    session, lines, _ = run_console(["0", "r", "hello"])
    assert session.board.cells == (None,) * 9
    assert lines.count(main.HELP_TEXT) == 2


def test_console_switches_mode_and_computer_replies():
    session = Session(mode=Mode.PVP)
    session.config.AI_REPLY_DELAY_MS = 250
    session, lines, sleeps = run_console(["m", "0"], session=session)
    assert session.mode is Mode.AI
    assert session.board.cells[4] == Mark.O
    assert sleeps == [0.25]
    assert "Player vs Computer mode. You are X." in "\n".join(lines)
    assert "\n>>> O plays 4" in lines


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.mode is None
    assert not args.no_ui
    assert args.seed is None
    assert args.delay is None


def test_build_session_from_args():
    args = main.parse_args(["--mode", "ai", "--seed", "3", "--delay", "0", "--no-ui", "--debug"])
    session = main.build_session(args)
    assert session.mode is Mode.AI
    assert session.config.AI_REPLY_DELAY_MS == 0
    assert session.config.DEBUG_MODE


def test_parse_args_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main.parse_args(["--mode", "online"])


def test_main_console_mode(monkeypatch, capsys):
    commands = iter(["4", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    assert main.main(["--no-ui", "--mode", "ai", "--delay", "0", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Mode: Player vs Computer" in out
    assert ">>> Computer is thinking..." in out
    assert "Goodbye!" in out


def computer_first_session():
    config = GameConfig()
    config.AI_MARK = Mark.X
    return Session(mode=Mode.AI, config=config, rng=random.Random(2))


def test_console_computer_playing_x_moves_first():
    session, lines, sleeps = run_console(["4", "0", "r"], session=computer_first_session())
    text = "\n".join(lines)

    assert "Wait for the computer" not in text
    assert "Move rejected: Cell 4 is already occupied by X" in text
    # Opening move, reply to O at 0, opening move after the restart
    assert lines.count("\n>>> X plays 4") == 2
    assert len(sleeps) == 3
    assert session.board.to_string() == "....X...."
    assert session.board.turn == Mark.O


def test_console_computer_playing_x_after_mode_switch():
    session = computer_first_session()
    session.set_mode(Mode.PVP)
    session, lines, _ = run_console(["m"], session=session)
    assert session.mode is Mode.AI
    assert session.board.cells[4] == Mark.X
    assert "Player vs Computer mode. You are O." in "\n".join(lines)


def test_console_debug_prints_the_computer_reason():
    session = Session(mode=Mode.AI)
    session.config.DEBUG_MODE = True
    _, lines, _ = run_console(["0"], session=session)
    assert "[debug] computer chose 4 (center)" in lines

    session = Session(mode=Mode.AI)
    _, lines, _ = run_console(["0"], session=session)
    assert not any(line.startswith("[debug]") for line in lines)
