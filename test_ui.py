"""
Tests for the Tkinter front end's move scheduling.

The window itself is not created: the UI object is built without __init__
and given a stand-in root, so these run without a display.
"""

from unittest.mock import MagicMock

import pytest

pytest.importorskip("tkinter")

from logic.config import GameConfig
from logic.game_state import Mark
from logic.session import Session, Mode
from ui import TicTacToeUI


class FakeRoot:
    """Records root.after() calls instead of running a Tk event loop."""

    def __init__(self):
        self.scheduled = {}
        self._next_id = 0

    def after(self, ms, callback):
        self._next_id += 1
        after_id = f"after#{self._next_id}"
        self.scheduled[after_id] = (ms, callback)
        return after_id

    def after_cancel(self, after_id):
        del self.scheduled[after_id]

    def run_pending(self):
        pending, self.scheduled = self.scheduled, {}
        for _, callback in pending.values():
            callback()


class FakeLabel:
    def __init__(self):
        self.text = None

    def configure(self, **kwargs):
        self.text = kwargs.get("text", self.text)


def make_ui(session):
    ui = TicTacToeUI.__new__(TicTacToeUI)
    ui.config = session.config
    ui.session = session
    ui._pending_reply = None
    ui.root = FakeRoot()
    ui.refreshes = 0

    def refresh():
        ui.refreshes += 1

    ui._refresh = refresh
    return ui


@pytest.fixture
def computer_first():
    config = GameConfig()
    config.AI_MARK = Mark.X
    config.AI_REPLY_DELAY_MS = 250
    return Session(mode=Mode.AI, config=config)


def test_schedules_the_opening_move_when_computer_plays_x(computer_first):
    ui = make_ui(computer_first)
    ui._schedule_reply()
    assert [ms for ms, _ in ui.root.scheduled.values()] == [250]

    # A second request while one is pending does not queue another move
    ui._schedule_reply()
    assert len(ui.root.scheduled) == 1

    ui.root.run_pending()
    assert computer_first.board.cells[4] == Mark.X
    assert ui._pending_reply is None


def test_human_click_then_computer_reply(computer_first):
    ui = make_ui(computer_first)
    ui._schedule_reply()
    ui.root.run_pending()

    ui._on_cell_click(0)
    assert computer_first.board.cells[0] == Mark.O
    assert len(ui.root.scheduled) == 1
    ui.root.run_pending()
    assert computer_first.board.move_count() == 3


def test_restart_schedules_a_new_opening_move(computer_first):
    ui = make_ui(computer_first)
    ui._schedule_reply()
    ui.root.run_pending()

    ui._restart()
    assert computer_first.board.move_count() == 0
    assert len(ui.root.scheduled) == 1
    ui.root.run_pending()
    assert computer_first.board.cells[4] == Mark.X


def test_restart_cancels_a_pending_reply():
    session = Session(mode=Mode.AI)
    ui = make_ui(session)
    ui._on_cell_click(0)
    assert len(ui.root.scheduled) == 1

    ui._reset_scores()
    # O moves second, so nothing is due on the fresh board
    assert ui.root.scheduled == {}
    assert session.board.move_count() == 0


def test_pvp_never_schedules():
    session = Session(mode=Mode.PVP)
    ui = make_ui(session)
    ui._schedule_reply()
    ui._on_cell_click(4)
    assert ui.root.scheduled == {}


def test_status_label_is_the_only_turn_display():
    session = Session(mode=Mode.PVP)
    ui = TicTacToeUI.__new__(TicTacToeUI)
    ui.config = session.config
    ui.session = session
    ui.status_label = FakeLabel()
    ui.score_label = FakeLabel()
    ui.board_cells = [MagicMock() for _ in range(9)]

    session.play(4)
    ui._refresh()
    assert ui.status_label.text == "Turn: O"
    assert not hasattr(ui, "turn_label")
    assert ui.score_label.text == "X: 0    O: 0    Draws: 0"
