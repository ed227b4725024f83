"""
Session layer for TicTacToe.

Owns the active board, the game mode and the running score. Front ends
send moves here and render the MoveOutcome they get back.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass
from .config import GameConfig
from .game_state import Board, Mark, new_game
from .move_validator import InvalidMoveError, MoveError
from .rules import apply_move
from .win_checker import GameResult, GameStatus, evaluate
from .ai_player import AIPlayer


class Mode(Enum):
    """Who plays O."""
    PVP = "pvp"   # Two humans on one screen
    AI = "ai"     # Human against the computer


@dataclass
class Score:
    """Results of the finished games in this session."""
    wins_x: int = 0
    wins_o: int = 0
    draws: int = 0

    def record(self, status: GameStatus):
        """Count a finished game. Unfinished statuses are ignored."""
        if status.result is GameResult.WON:
            if status.winner == Mark.X:
                self.wins_x += 1
            else:
                self.wins_o += 1
        elif status.result is GameResult.DRAWN:
            self.draws += 1

    def reset(self):
        self.wins_x = 0
        self.wins_o = 0
        self.draws = 0

    def total(self) -> int:
        return self.wins_x + self.wins_o + self.draws


@dataclass(frozen=True)
class MoveOutcome:
    """What a front end needs to render after a move."""
    index: int
    mark: Mark
    board: Board
    status: GameStatus


class Session:
    """
    One player session: a sequence of games sharing a score.

    Game flow in AI mode:
    1. Human calls play()
    2. awaiting_opponent becomes True
    3. Front end waits AI_REPLY_DELAY_MS, then calls opponent_move()
    4. Repeat until someone wins or it's a draw

    When the computer plays X, awaiting_opponent is already True on a fresh
    board, so front ends check it after every new game too.
    """

    def __init__(
        self,
        mode: Optional[Mode] = None,
        config: Optional[GameConfig] = None,
        rng=None
    ):
        """
        Args:
            mode: Starting mode, defaults to config.DEFAULT_MODE.
            config: Game settings.
            rng: Random source for the AI (see AIPlayer).
        """
        self.config = config or GameConfig()
        self.mode = mode if mode is not None else Mode(self.config.DEFAULT_MODE)
        self.ai = AIPlayer(self.config.AI_MARK, rng=rng)
        self.score = Score()
        self.board = new_game()
        self._recorded = False
        self._message = self._start_message()

    @property
    def status(self) -> GameStatus:
        return evaluate(self.board)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    @property
    def awaiting_opponent(self) -> bool:
        """True when the computer should move next."""
        return (
            self.mode is Mode.AI
            and self.board.turn == self.ai.player
            and not self.is_over
        )

    def play(self, index: int) -> MoveOutcome:
        """
        Play a human move for whoever's turn it is.

        Raises:
            InvalidMoveError: If the engine rejects the move, or it is the
                computer's turn in AI mode. The session is left unchanged.
        """
        if self.awaiting_opponent:
            raise InvalidMoveError(
                MoveError.WRONG_TURN,
                f"Wait for the computer ({self.ai.player.value}) to move"
            )
        return self._apply(index, self.board.turn)

    def opponent_move(self) -> Optional[MoveOutcome]:
        """
        Let the computer play.

        Returns:
            The outcome, or None when the computer is not due to move.
        """
        if not self.awaiting_opponent:
            return None

        move = self.ai.get_best_move(self.board)
        if move is None:
            return None
        return self._apply(move, self.ai.player)

    def restart(self, keep_scores: bool = True):
        """Start a new game, optionally clearing the score too."""
        self.board = new_game()
        self._recorded = False
        if not keep_scores:
            self.score.reset()
        self._message = self._start_message()

    def set_mode(self, mode: Mode):
        """Switch mode. The current game is abandoned, the score kept."""
        self.mode = mode
        self.restart(keep_scores=True)
        if mode is Mode.PVP:
            self._message = "Player vs Player mode. X begins."
        else:
            self._message = f"Player vs Computer mode. You are {self.ai.player.opposite().value}."

    def status_message(self) -> str:
        """One line describing the game for the status bar."""
        return self._message

    def _apply(self, index: int, mark: Mark) -> MoveOutcome:
        self.board = apply_move(self.board, index, mark)
        status = self.status

        if status.is_terminal:
            if not self._recorded:
                self.score.record(status)
                self._recorded = True
            if status.result is GameResult.WON:
                self._message = f"{status.winner.value} wins!"
            else:
                self._message = "It's a draw."
        else:
            self._message = f"Turn: {self.board.turn.value}"

        return MoveOutcome(index=index, mark=mark, board=self.board, status=status)

    @staticmethod
    def _start_message() -> str:
        return "Game start! X begins."
