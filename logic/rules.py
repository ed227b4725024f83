"""
Rules engine for TicTacToe.

Pure functions over Board snapshots: nothing here mutates a board or keeps
state between calls. Scoring is left to the caller (see session.py).
"""

from .game_state import Board, Mark, new_game
from .move_validator import MoveValidator, InvalidMoveError
from .win_checker import evaluate, is_terminal

__all__ = ["new_game", "apply_move", "evaluate", "is_terminal"]

_validator = MoveValidator()


def apply_move(board: Board, index: int, mark: Mark) -> Board:
    """
    Place a mark on the board.

    Args:
        board: Board before the move. Never modified.
        index: Cell index (0-8).
        mark: Mark to place, must be board.turn.

    Returns:
        A new Board with the cell set and the turn flipped.

    Raises:
        InvalidMoveError: With error set to OUT_OF_RANGE, CELL_OCCUPIED,
            GAME_OVER or WRONG_TURN.
    """
    result = _validator.validate_move(board, index, mark)
    if not result.is_valid:
        raise InvalidMoveError(result.error, result.error_message)

    return board.with_mark(index, mark)
