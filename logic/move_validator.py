"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

import operator
from typing import Optional, List
from dataclasses import dataclass

from .config import SearchConfig
from .game_state import Board, Mark
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def cell_index(cell) -> Optional[int]:
    """
    Turn a cell reference into a plain int.

    Accepts any integer type (including numpy integers) but not bools.
    Returns None if the value is not a whole number.
    """
    if isinstance(cell, bool):
        return None
    try:
        return operator.index(cell)
    except TypeError:
        return None


class IllegalMoveError(ValueError):
    """Raised when a move is submitted that the rules do not allow."""

    def __init__(self, result: ValidationResult):
        super().__init__(result.error_message)
        self.result = result


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place X or O on an empty cell (0-8)
    2. Players alternate, X first
    3. Game must not be over
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, cell: int, mark: Mark) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            cell: Cell to place the mark on (0-8).
            mark: The mark being placed.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if the mark is a real player
        if mark not in (Mark.X, Mark.O):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid mark {mark!r}. Must be X or O."
            )

        # Check if game is over
        if self.win_checker.evaluate_outcome(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is a whole number in valid range
        index = cell_index(cell)
        if index is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell!r}. Must be a whole number 0-{SearchConfig.NUM_CELLS - 1}."
            )
        if not 0 <= index < SearchConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{SearchConfig.NUM_CELLS - 1}."
            )
        cell = index

        # Check if cell is empty
        if board[cell] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {board[cell].symbol}"
            )

        # Check it is this mark's turn
        expected = Mark.from_side(board.side_to_move())
        if mark != expected:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {expected.symbol}'s turn, not {mark.symbol}'s!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves for the side to move.

        Returns:
            List of empty cell indices, or an empty list once the game is over.
        """
        if self.win_checker.evaluate_outcome(board).is_terminal:
            return []
        return board.get_empty_cells()
