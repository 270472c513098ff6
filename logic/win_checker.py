"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Set, Tuple
from .game_state import Board, Mark, Outcome


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same kind in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as cell indices.
    # Scanned in this order: rows, then columns, then diagonals.
    WINNING_LINES: List[Tuple[int, int, int]] = [
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
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark from the first completed line, or None.
        """
        cells = board.cells
        for a, b, c in self.WINNING_LINES:
            first = cells[a]
            if first != Mark.EMPTY and first == cells[b] == cells[c]:
                return first
        return None

    def signed_winner(self, board: Board) -> int:
        """
        Winner as a side: +1 if X has a line, -1 if O has a line, 0 otherwise.
        """
        winner = self.check_winner(board)
        return 0 if winner is None else winner.side

    def winners(self, board: Board) -> Set[Mark]:
        """
        Every mark that owns a completed line.

        A board reached by legal play has at most one.
        """
        cells = board.cells
        found = set()
        for a, b, c in self.WINNING_LINES:
            if cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]:
                found.add(cells[a])
        return found

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw: all cells are filled AND no winner.
        """
        return board.is_full() and self.check_winner(board) is None

    def evaluate_outcome(self, board: Board) -> Outcome:
        """
        Get the outcome of a position.

        Args:
            board: The board to evaluate.

        Returns:
            X_WINS/O_WINS for the first completed line found, DRAW if the
            board is full with no line, IN_PROGRESS otherwise.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win_for(winner)
        if board.is_full():
            return Outcome.DRAW
        return Outcome.IN_PROGRESS

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        cells = board.cells
        for line in self.WINNING_LINES:
            a, b, c = line
            if cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]:
                return line
        return None
