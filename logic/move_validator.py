"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import Board, Mark, CELL_COUNT
from .win_checker import WinChecker


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"
    WRONG_TURN = "wrong_turn"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class InvalidMoveError(ValueError):
    """Raised by apply_move() when a move is rejected."""

    def __init__(self, error: MoveError, message: str):
        super().__init__(message)
        self.error = error


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Index must be a cell on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    4. Must be the mover's turn
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int, mark: Mark) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark on (0-8).
            mark: Mark being placed.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check if index is on the board
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_RANGE,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = board.cells[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        # Check if game is over
        if self.win_checker.evaluate(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        # Check whose turn it is
        if mark != board.turn:
            return ValidationResult(
                is_valid=False,
                error=MoveError.WRONG_TURN,
                error_message=f"It's {board.turn.value}'s turn, not {mark.value}'s"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of empty cell indices, or an empty list once the game is over.
        """
        if self.win_checker.evaluate(board).is_terminal:
            return []

        return board.get_empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    board = Board()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(board, 4, Mark.X)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    board = board.with_mark(4, Mark.X)

    # Test invalid move (same cell)
    result = validator.validate_move(board, 4, Mark.O)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    result = validator.validate_move(board, 9, Mark.O)
    print(f"Move 9: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(board)}")

    print("\nMoveValidator test done!")
