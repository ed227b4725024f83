"""
Game state for TicTacToe.
Holds the board snapshot and whose turn it is.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Mark(Enum):
    """The two player marks."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# Board is 3x3, cells addressed 0-8 in row-major order
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Characters accepted as an empty cell in Board.from_string()
EMPTY_CHARS = ".- "

Cell = Optional[Mark]


@dataclass(frozen=True)
class Board:
    """
    An immutable snapshot of the TicTacToe board.

    Tracks:
    - The 9 cells (None means empty, otherwise the Mark placed there)
    - The mark whose turn it is

    Moves never change a Board in place; with_mark() returns a new one.
    """

    cells: Tuple[Cell, ...] = field(default=(None,) * CELL_COUNT)
    turn: Mark = Mark.X

    def __post_init__(self):
        # Accept lists and other iterables too, but always store a tuple
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(cells)}")
        for index, cell in enumerate(cells):
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Cell {index} must be None or a Mark, got {cell!r}")
        if not isinstance(self.turn, Mark):
            raise ValueError(f"Turn must be a Mark, got {self.turn!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_string(cls, layout: str, turn: Optional[Mark] = None) -> "Board":
        """
        Build a board from a 9 character layout like "XX.OO....".

        Args:
            layout: One character per cell, "X", "O", or ".", "-", " " for empty.
            turn: Mark to move. Inferred from the mark counts when omitted
                  (X moves when both have placed the same number).

        Returns:
            The Board.
        """
        if len(layout) != CELL_COUNT:
            raise ValueError(f"Layout must have {CELL_COUNT} characters: {layout!r}")

        cells: List[Cell] = []
        for char in layout.upper():
            if char in EMPTY_CHARS:
                cells.append(None)
            else:
                cells.append(Mark(char))

        if turn is None:
            x_count = cells.count(Mark.X)
            o_count = cells.count(Mark.O)
            turn = Mark.X if x_count == o_count else Mark.O

        return cls(cells=tuple(cells), turn=turn)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        """True once every cell holds a mark."""
        return all(cell is not None for cell in self.cells)

    def move_count(self) -> int:
        return CELL_COUNT - len(self.get_empty_cells())

    def with_mark(self, index: int, mark: Mark) -> "Board":
        """
        Place a mark and hand the turn to the other player.

        No rule checking happens here, use rules.apply_move() for that.

        Args:
            index: Cell index (0-8).
            mark: Mark to place.

        Returns:
            A new Board.
        """
        cells = list(self.cells)
        cells[index] = mark
        return Board(cells=tuple(cells), turn=mark.opposite())

    def to_string(self) -> str:
        """Inverse of from_string(), using "." for empty cells."""
        return "".join("." if cell is None else cell.value for cell in self.cells)

    def render(self) -> str:
        """
        Draw the board as text.
        Empty cells show their index so a console player knows what to type.
        """
        lines = []
        for row in range(BOARD_SIZE):
            symbols = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                cell = self.cells[index]
                symbols.append(str(index) if cell is None else cell.value)
            lines.append(" " + " | ".join(symbols))
            if row < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)


def new_game() -> Board:
    """Fresh board: 9 empty cells, X to move."""
    return Board()


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = new_game()

    # Simulate a few moves
    for index in (4, 0, 8):
        print(f"\n{board.turn.value} moves to {index}")
        board = board.with_mark(index, board.turn)
        print(board.render())

    print(f"\nLayout: {board.to_string()}, next turn: {board.turn.value}")
    print("\nBoard test done!")
