"""
Board state for the TicTacToe engine.
Tracks the 9 cells and derives whose turn it is from the marks on the board.
"""

from enum import Enum
from typing import List
from dataclasses import dataclass, field

from .config import SearchConfig


class Mark(Enum):
    """
    What a cell can hold.

    The value of a mark is also its side: +1 for X, -1 for O.
    """
    EMPTY = 0
    X = 1
    O = -1

    def opposite(self) -> "Mark":
        """Get the opposing mark."""
        if self == Mark.EMPTY:
            return Mark.EMPTY
        return Mark.O if self == Mark.X else Mark.X

    @property
    def side(self) -> int:
        return self.value

    @classmethod
    def from_side(cls, side: int) -> "Mark":
        """Get the mark that plays for a side (+1 = X, -1 = O)."""
        if side == 1:
            return cls.X
        if side == -1:
            return cls.O
        raise ValueError(f"Side must be +1 or -1, got {side}")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


class Outcome(Enum):
    """Result of a position."""
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        """Get the winning outcome for a mark."""
        if mark == Mark.X:
            return cls.X_WINS
        if mark == Mark.O:
            return cls.O_WINS
        raise ValueError("EMPTY cannot win")


_SYMBOLS = {Mark.X: "X", Mark.O: "O", Mark.EMPTY: "."}
_FROM_SYMBOL = {symbol: mark for mark, symbol in _SYMBOLS.items()}


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored in row-major order, so cell index = row * 3 + col:

         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8

    The board is mutated in place by apply_move/undo_move. It does not
    check whose turn it is; the search uses it to try moves for either side.
    """

    cells: List[Mark] = field(
        default_factory=lambda: [Mark.EMPTY] * SearchConfig.NUM_CELLS
    )

    def __post_init__(self):
        if len(self.cells) != SearchConfig.NUM_CELLS:
            raise ValueError(
                f"Board needs {SearchConfig.NUM_CELLS} cells, got {len(self.cells)}"
            )

    def __getitem__(self, cell: int) -> Mark:
        return self.cells[cell]

    def apply_move(self, cell: int, mark: Mark) -> None:
        """
        Place a mark on an empty cell.

        Args:
            cell: Cell index (0-8).
            mark: Mark.X or Mark.O.

        Raises:
            ValueError: If the mark is EMPTY or the cell is occupied.
        """
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place an EMPTY mark")
        if self.cells[cell] != Mark.EMPTY:
            raise ValueError(f"Cell {cell} is already occupied by {self.cells[cell].symbol}")
        self.cells[cell] = mark

    def undo_move(self, cell: int) -> None:
        """Clear a cell back to EMPTY (reverses apply_move)."""
        self.cells[cell] = Mark.EMPTY

    def is_full(self) -> bool:
        """True if no cell is EMPTY."""
        return Mark.EMPTY not in self.cells

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices in ascending order.
        """
        return [i for i, mark in enumerate(self.cells) if mark == Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def move_count(self) -> int:
        """Number of marks placed so far."""
        return SearchConfig.NUM_CELLS - self.count(Mark.EMPTY)

    def side_to_move(self) -> int:
        """
        Whose turn it is, derived from move parity.

        Returns:
            +1 if X is to move, -1 if O is to move.
        """
        return 1 if self.count(Mark.X) == self.count(Mark.O) else -1

    def is_legal_count(self) -> bool:
        """X moves first, so X-count minus O-count is 0 or 1."""
        return self.count(Mark.X) - self.count(Mark.O) in (0, 1)

    def copy(self) -> "Board":
        """Create a copy of the board."""
        return Board(cells=list(self.cells))

    def state_string(self) -> str:
        """Render the cells as a 9-character string, e.g. 'X.O.X....'."""
        return "".join(mark.symbol for mark in self.cells)

    @classmethod
    def from_state_string(cls, state: str) -> "Board":
        """
        Build a board from a state string made of 'X', 'O' and '.'.

        Raises:
            ValueError: If the string has the wrong length or an unknown character.
        """
        if len(state) != SearchConfig.NUM_CELLS:
            raise ValueError(
                f"State string must be {SearchConfig.NUM_CELLS} characters, got {len(state)}"
            )
        cells = []
        for char in state.upper():
            if char not in _FROM_SYMBOL:
                raise ValueError(f"Unknown cell character {char!r}")
            cells.append(_FROM_SYMBOL[char])
        return cls(cells=cells)

    def print_board(self):
        """Print the board to console."""
        size = SearchConfig.BOARD_SIZE
        print("\n┌───┬───┬───┐")

        for row in range(size):
            row_str = "│"
            for col in range(size):
                cell = row * size + col
                mark = self.cells[cell]
                # Show the cell number on empty cells so players know what to type
                label = str(cell) if mark == Mark.EMPTY else mark.symbol
                row_str += f" {label} │"
            print(row_str)

            if row < size - 1:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")
