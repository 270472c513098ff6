"""
Game session for the TicTacToe engine.

A session owns one board and is the only thing that commits moves to it.
Front-ends call:
- start_new_game() / stop_game()
- submit_move(cell, mark) -> Outcome
- compute_ai_move() -> cell (does not apply it)
- play_ai_turn() -> (cell, Outcome)
- current_outcome(), cell_at(cell), side_to_move() for rendering
"""

from typing import Optional, Tuple, Union

from .config import SearchConfig
from .game_state import Board, Mark, Outcome
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult, IllegalMoveError, cell_index
from .ai_player import AIPlayer


class GameSession:
    """
    One game of TicTacToe, optionally against the AI.

    Game flow (AI enabled, AI plays O):
    1. Human (X) submits a move
    2. Session recomputes the outcome
    3. If the game goes on, the AI computes its reply
    4. The reply is submitted like any other move
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        ai_enabled: Optional[bool] = None,
        ai_player: Optional[Mark] = None,
        config: Optional[SearchConfig] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the session with an empty board.

        Args:
            ai_enabled: Play against the AI (False = two humans).
            ai_player: Which mark the AI controls (default: O, or X if
                the config says the AI plays first).
            config: Search configuration.
            verbose: Let the AI print its search summary.
        """
        self.config = config or SearchConfig()
        self.ai_enabled = self.config.AI_ENABLED if ai_enabled is None else ai_enabled

        if ai_player is None:
            ai_player = Mark.X if self.config.AI_PLAYS_FIRST else Mark.O

        self.board = Board()
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.ai = AIPlayer(ai_player, config=self.config, verbose=verbose)

    @property
    def ai_player(self) -> Mark:
        return self.ai.player

    @property
    def human_player(self) -> Mark:
        return self.ai.player.opposite()

    # ==================== LIFECYCLE ====================

    def start_new_game(self):
        """Reset to an empty board with X to move."""
        self.board = Board()

    def stop_game(self):
        """Clean up for shutdown. Sessions hold no resources, so this just resets."""
        self.start_new_game()

    # ==================== MOVES ====================

    def submit_move(self, cell: int, mark: Union[Mark, int]) -> Outcome:
        """
        Commit a move for the side whose turn it is.

        Args:
            cell: Cell index (0-8).
            mark: The mark being placed (or its side, +1/-1); must match
                the side to move.

        Returns:
            The outcome after the move.

        Raises:
            IllegalMoveError: If the move is not allowed. The board is unchanged.
        """
        if not isinstance(mark, Mark):
            if isinstance(mark, bool) or mark not in (1, -1):
                raise IllegalMoveError(ValidationResult(
                    is_valid=False,
                    error_message=f"Invalid side {mark!r}. Must be +1 (X) or -1 (O)."
                ))
            mark = Mark.from_side(mark)

        result = self.validator.validate_move(self.board, cell, mark)
        if not result.is_valid:
            raise IllegalMoveError(result)

        self.board.apply_move(cell_index(cell), mark)
        return self.current_outcome()

    def is_ai_turn(self) -> bool:
        """True if the AI is enabled, the game is on, and the AI is to move."""
        return (
            self.ai_enabled
            and not self.current_outcome().is_terminal
            and self.board.side_to_move() == self.ai.player.side
        )

    def compute_ai_move(self) -> Optional[int]:
        """
        Choose the AI's move without applying it.

        Returns:
            Cell index, or None if no move is available (game over, or
            it is not the AI's turn).
        """
        if self.current_outcome().is_terminal:
            return None
        return self.ai.get_best_move(self.board)

    def play_ai_turn(self) -> Tuple[Optional[int], Outcome]:
        """
        Compute the AI's move and commit it.

        Returns:
            (cell, outcome). cell is None and the board is unchanged when
            the AI has no move to make.
        """
        cell = self.compute_ai_move()
        if cell is None:
            return None, self.current_outcome()
        return cell, self.submit_move(cell, self.ai.player)

    # ==================== QUERIES ====================

    def current_outcome(self) -> Outcome:
        """Outcome of the current board (recomputed on every call)."""
        return self.win_checker.evaluate_outcome(self.board)

    def cell_at(self, cell: int) -> Mark:
        index = cell_index(cell)
        if index is None or not 0 <= index < self.config.NUM_CELLS:
            raise IndexError(f"Invalid cell {cell!r}. Must be 0-{self.config.NUM_CELLS - 1}.")
        return self.board[index]

    def side_to_move(self) -> int:
        """+1 if X is to move, -1 if O is to move."""
        return self.board.side_to_move()

    def mark_to_move(self) -> Mark:
        return Mark.from_side(self.board.side_to_move())

    def turn_number(self) -> int:
        """Number of marks placed so far."""
        return self.board.move_count()

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.board)

    def valid_moves(self):
        return self.validator.get_valid_moves(self.board)
