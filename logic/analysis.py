"""
Position analysis for the TicTacToe engine.
Move-value grids for hints, and numpy tables over every reachable position.
"""

from typing import List, Optional

import numpy as np

from .config import SearchConfig
from .game_state import Board, Mark
from .win_checker import WinChecker
from .ai_player import AIPlayer


def move_value_grid(
    board: Board,
    side: Optional[int] = None,
    ai: Optional[AIPlayer] = None
) -> np.ndarray:
    """
    Negamax value of every empty cell, laid out like the board.

    Args:
        board: Current board. Left unchanged.
        side: Side to score for (default: whoever is to move).
        ai: AI used for the search (default: a fresh one).

    Returns:
        [3, 3] float array of +1/0/-1, NaN on occupied cells
        (all NaN once the game is won).
    """
    ai = ai or AIPlayer()
    grid = np.full(SearchConfig.NUM_CELLS, np.nan)
    for cell, value in ai.get_move_values(board, side).items():
        grid[cell] = value
    return grid.reshape(SearchConfig.BOARD_SIZE, SearchConfig.BOARD_SIZE)


def reachable_positions() -> List[Board]:
    """
    Every distinct board reachable from the empty board by legal play.

    Play stops at won or full boards, so those are included but never
    expanded. Boards are returned in discovery (breadth-first) order.
    """
    checker = WinChecker()
    start = Board()
    seen = {start.state_string()}
    positions = [start]
    frontier = [start]

    while frontier:
        next_frontier = []
        for board in frontier:
            if checker.evaluate_outcome(board).is_terminal:
                continue
            mark = Mark.from_side(board.side_to_move())
            for cell in board.get_empty_cells():
                child = board.copy()
                child.apply_move(cell, mark)
                key = child.state_string()
                if key in seen:
                    continue
                seen.add(key)
                positions.append(child)
                next_frontier.append(child)
        frontier = next_frontier

    return positions


def position_table(boards: List[Board]) -> np.ndarray:
    """
    Stack boards into an [N, 9] int8 matrix (+1 = X, -1 = O, 0 = empty).
    """
    if not boards:
        return np.zeros((0, SearchConfig.NUM_CELLS), dtype=np.int8)
    return np.array(
        [[mark.value for mark in board.cells] for board in boards],
        dtype=np.int8
    )


def line_owners(table: np.ndarray) -> np.ndarray:
    """
    Which sides own a completed line, for each row of a position table.

    Args:
        table: [N, 9] matrix from position_table().

    Returns:
        [N, 2] bool array: column 0 = X has a line, column 1 = O has a line.
    """
    lines = np.array(WinChecker.WINNING_LINES)
    sums = table[:, lines].astype(np.int16).sum(axis=2)  # [N, 8]
    x_owns = (sums == 3).any(axis=1)
    o_owns = (sums == -3).any(axis=1)
    return np.stack([x_owns, o_owns], axis=1)
