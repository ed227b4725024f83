"""
AI player for TicTacToe.
Picks a move with a fixed priority cascade: win, block, center, corner, side.

It only looks one move ahead, so a careful human can beat it.
"""

import random
from typing import Optional, Sequence, Tuple
from .game_state import Board, Mark
from .win_checker import WINNING_LINES, WinChecker

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)


def find_completing_cell(board: Board, mark: Mark) -> Optional[int]:
    """
    Find a line where mark holds two cells and the third is empty.

    Args:
        board: Board snapshot.
        mark: Mark to look for.

    Returns:
        The empty cell of the first such line in table order, or None.
    """
    for line in WINNING_LINES:
        cells = [board.cells[index] for index in line]
        empty = [index for index in line if board.cells[index] is None]
        if cells.count(mark) == 2 and len(empty) == 1:
            return empty[0]
    return None


def _pick(board: Board, candidates: Sequence[int], rng) -> Optional[int]:
    free = [index for index in candidates if board.cells[index] is None]
    if not free:
        return None
    return rng.choice(free)


def select_move(
    board: Board,
    own_mark: Mark,
    opponent_mark: Mark,
    rng=None
) -> Tuple[Optional[int], Optional[str]]:
    """
    Run the cascade and report which step produced the move.

    Returns:
        (index, reason) where reason is "win", "block", "center", "corner"
        or "side"; (None, None) when the board has no empty cell.
    """
    if rng is None:
        rng = random

    # 1. Win now
    move = find_completing_cell(board, own_mark)
    if move is not None:
        return move, "win"

    # 2. Block the opponent's win
    move = find_completing_cell(board, opponent_mark)
    if move is not None:
        return move, "block"

    # 3. Center
    if board.cells[CENTER] is None:
        return CENTER, "center"

    # 4. Any corner
    move = _pick(board, CORNERS, rng)
    if move is not None:
        return move, "corner"

    # 5. Any side
    move = _pick(board, SIDES, rng)
    if move is not None:
        return move, "side"

    return None, None


def choose_move(
    board: Board,
    own_mark: Mark,
    opponent_mark: Mark,
    rng=None
) -> Optional[int]:
    """
    Choose a move for own_mark.

    Args:
        board: Board snapshot, not modified.
        own_mark: Mark the AI plays.
        opponent_mark: Mark of the other player.
        rng: Anything with a choice(seq) method, used to pick among free
             corners or sides. Defaults to the random module.

    Returns:
        Cell index, or None if the board is full. Callers should check the
        game is still in progress before asking.
    """
    move, _ = select_move(board, own_mark, opponent_mark, rng)
    return move


class AIPlayer:
    """
    A rule based TicTacToe opponent bound to one mark.

    It takes a win if it has one, blocks the opponent's win, and otherwise
    prefers the center, then corners, then sides.
    """

    def __init__(self, player: Mark = Mark.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source for corner/side choices. Pass a seeded
                 random.Random for repeatable games.
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

        # Which cascade step produced the last move (for the UI / debugging)
        self.last_reason: Optional[str] = None

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the move for the current position.

        Returns:
            Cell index, or None if it's not our turn or the game is over.
        """
        self.last_reason = None

        # Check if it's our turn
        if board.turn != self.player:
            print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        if self.win_checker.evaluate(board).is_terminal:
            return None

        move, self.last_reason = select_move(
            board, self.player, self.player.opposite(), self.rng
        )
        return move


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = Board.from_string("XX..O....")
    print(board.render())
    print("\nAI is O. X is about to win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move} ({ai.last_reason})")
    assert move == 2, f"Expected 2, got {move}"

    # Test 2: AI should take a winning move
    board = Board.from_string("OO.XX...X", turn=Mark.O)
    print(board.render())
    print("\nAI is O. Can win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move} ({ai.last_reason})")
    assert move == 2, f"Expected 2, got {move}"

    print("\nAIPlayer test done!")
