"""
AI player for the TicTacToe engine.
Uses the Negamax algorithm to choose the best move.
"""

from typing import Dict, Optional
from .config import SearchConfig
from .game_state import Board, Mark
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe using the Negamax algorithm.

    Negamax is minimax written for one side: the value of a position for
    the side to move is the best of the negated values of the positions
    its moves lead to. Values are +1 (win), 0 (draw) and -1 (loss).

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        config: Optional[SearchConfig] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: O)
            config: Search configuration (move ordering).
            verbose: Print a summary after each decision.
        """
        if player not in (Mark.X, Mark.O):
            raise ValueError(f"AI must play X or O, got {player!r}")

        self.player = player
        self.config = config or SearchConfig()
        self.verbose = self.config.VERBOSE if verbose is None else verbose
        self.win_checker = WinChecker()

        move_order = list(self.config.MOVE_ORDER)
        if sorted(move_order) != list(range(self.config.NUM_CELLS)):
            raise ValueError(f"MOVE_ORDER must list every cell once, got {move_order}")
        self.move_order = move_order

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def negamax(self, board: Board, side: int) -> int:
        """
        Game-theoretic value of the board for the side to move.

        Moves are tried on the board in place and undone before returning,
        so the board is unchanged afterwards.

        Args:
            board: Current board (mutated during the search).
            side: +1 if X is to move, -1 if O is to move.

        Returns:
            +1 if the side to move can force a win, 0 for a draw, -1 for a loss.
        """
        self.positions_evaluated += 1

        # A completed line must be scored before the full-board check:
        # the winning move may have filled the last cell.
        winner = self.win_checker.signed_winner(board)
        if winner != 0:
            return 1 if winner == side else -1
        if board.is_full():
            return 0

        mark = Mark.from_side(side)
        best = -1
        for cell in self.move_order:
            if board[cell] != Mark.EMPTY:
                continue

            board.apply_move(cell, mark)
            value = -self.negamax(board, -side)
            board.undo_move(cell)

            if value > best:
                best = value
            if best == 1:
                break  # Nothing beats a forced win
        return best

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Ties go to the first cell in move order.

        Args:
            board: Current board. Left unchanged.

        Returns:
            Cell index of the best move, or None if no move is available.
        """
        self.positions_evaluated = 0

        # Check if it's our turn
        if board.side_to_move() != self.player.side:
            if self.verbose:
                print(f"Warning: It's not {self.player.symbol}'s turn!")
            return None

        # Nothing to choose once the game is decided
        if self.win_checker.check_winner(board) is not None or board.is_full():
            return None

        side = self.player.side
        best_value = None
        best_move = None

        for cell in self.move_order:
            if board[cell] != Mark.EMPTY:
                continue

            board.apply_move(cell, self.player)
            value = -self.negamax(board, -side)
            board.undo_move(cell)

            if best_value is None or value > best_value:
                best_value = value
                best_move = cell
                if best_value == 1:
                    break  # Winning reply found

        if best_move is None:
            # Unreachable while MOVE_ORDER covers every cell
            best_move = board.get_empty_cells()[0]

        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {best_move} (value: {best_value})"
            )

        return best_move

    def get_move_values(self, board: Board, side: Optional[int] = None) -> Dict[int, int]:
        """
        Value of every empty cell for the side to move.

        Args:
            board: Current board. Left unchanged.
            side: Side to score for (default: whoever is to move).

        Returns:
            Dict of cell index -> +1/0/-1, empty if the game is over.
        """
        if side is None:
            side = board.side_to_move()
        if self.win_checker.check_winner(board) is not None:
            return {}

        mark = Mark.from_side(side)
        values = {}
        for cell in self.move_order:
            if board[cell] != Mark.EMPTY:
                continue
            board.apply_move(cell, mark)
            values[cell] = -self.negamax(board, -side)
            board.undo_move(cell)
        return values

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, self.config.BOARD_SIZE)
        return f"Place {self.player.symbol} on cell {move} (row {row}, col {col})"

