"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, Mark


# All possible winning lines (as cell index triples).
# Order matters: the first fully marked line is the one reported.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class GameResult(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameStatus:
    """
    Status derived from a board.

    winner and line are only set for a won game; a draw has an empty line.
    """
    result: GameResult
    winner: Optional[Mark] = None
    line: Tuple[int, ...] = ()

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(GameResult.IN_PROGRESS)

    @classmethod
    def won(cls, winner: Mark, line: Tuple[int, ...]) -> "GameStatus":
        return cls(GameResult.WON, winner, tuple(line))

    @classmethod
    def drawn(cls) -> "GameStatus":
        return cls(GameResult.DRAWN)

    @property
    def is_terminal(self) -> bool:
        return self.result is not GameResult.IN_PROGRESS


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> GameStatus:
        """
        Work out the status of a board.

        Args:
            board: The board snapshot.

        Returns:
            WON with the first complete line in table order, DRAWN when the
            board is full with no line, IN_PROGRESS otherwise.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return GameStatus.won(winner, line)

        if board.is_full():
            return GameStatus.drawn()

        return GameStatus.in_progress()

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return self.evaluate(board).winner

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winning line."""
        return self.evaluate(board).result is GameResult.DRAWN

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, ...]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        status = self.evaluate(board)
        return status.line if status.result is GameResult.WON else None

    def _check_line(self, board: Board, line: Tuple[int, ...]) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The Mark if all 3 cells hold it, None otherwise.
        """
        first = board.cells[line[0]]
        if first is None:
            return None  # Empty cell, no winner on this line

        if all(board.cells[index] == first for index in line[1:]):
            return first

        return None


_checker = WinChecker()


def evaluate(board: Board) -> GameStatus:
    """Module level shortcut for WinChecker().evaluate()."""
    return _checker.evaluate(board)


def is_terminal(status: GameStatus) -> bool:
    """True for a won or drawn game."""
    return status.is_terminal


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    status = checker.evaluate(Board.from_string("XXXOO...."))
    print(f"Test 1 (horizontal): {status}")
    assert status == GameStatus.won(Mark.X, (0, 1, 2))

    # Test 2: Diagonal win
    status = checker.evaluate(Board.from_string("OXX.OX..O"))
    print(f"Test 2 (diagonal): {status}")
    assert status.winner == Mark.O

    # Test 3: Draw (full board, no winner)
    status = checker.evaluate(Board.from_string("XOXXOOOXX"))
    print(f"Test 3 (draw): {status}")
    assert status.result is GameResult.DRAWN

    print("\nWinChecker test done!")
