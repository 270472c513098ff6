"""Tests for the game session surface used by front-ends."""

import numpy as np
import pytest

from logic.analysis import move_value_grid
from logic.config import SearchConfig
from logic.game_state import Mark, Outcome
from logic.move_validator import IllegalMoveError, MoveValidator
from logic.session import GameSession


def play(session, moves):
    outcome = session.current_outcome()
    for cell in moves:
        outcome = session.submit_move(cell, session.mark_to_move())
    return outcome


def test_new_session_starts_empty_with_x_to_move():
    session = GameSession()

    assert session.current_outcome() == Outcome.IN_PROGRESS
    assert session.side_to_move() == 1
    assert all(session.cell_at(cell) == Mark.EMPTY for cell in range(9))
    assert session.turn_number() == 0
    assert session.ai_player == Mark.O
    assert session.human_player == Mark.X


def test_completing_a_row_wins():
    session = GameSession(ai_enabled=False)
    session.submit_move(0, Mark.X)
    session.submit_move(3, Mark.O)
    session.submit_move(1, Mark.X)
    session.submit_move(4, Mark.O)

    assert session.submit_move(2, Mark.X) == Outcome.X_WINS
    assert session.current_outcome() == Outcome.X_WINS
    assert session.winning_line() == (0, 1, 2)
    assert session.valid_moves() == []


def test_full_board_without_line_is_a_draw():
    session = GameSession(ai_enabled=False)

    # X O X / X O O / O X X
    assert play(session, [0, 1, 2, 4, 3, 5, 7, 6, 8]) == Outcome.DRAW
    assert session.board.state_string() == "XOXXOOOXX"


def test_side_to_move_alternates():
    session = GameSession(ai_enabled=False)
    session.submit_move(4, Mark.X)

    assert session.side_to_move() == -1
    assert session.mark_to_move() == Mark.O

    session.submit_move(0, Mark.O)
    assert session.side_to_move() == 1
    assert session.turn_number() == 2


@pytest.mark.parametrize("cell, mark", [
    (4, Mark.O),        # wrong side
    (9, Mark.X),        # out of range
    (-1, Mark.X),       # out of range
    (0, Mark.EMPTY),    # not a player
])
def test_illegal_moves_are_rejected(cell, mark):
    session = GameSession(ai_enabled=False)

    with pytest.raises(IllegalMoveError):
        session.submit_move(cell, mark)

    assert session.board.state_string() == "........."


def test_occupied_cell_is_rejected():
    session = GameSession(ai_enabled=False)
    session.submit_move(4, Mark.X)

    with pytest.raises(IllegalMoveError) as excinfo:
        session.submit_move(4, Mark.O)

    assert "occupied" in str(excinfo.value)
    assert not excinfo.value.result.is_valid
    assert session.board.state_string() == "....X...."


def test_no_moves_after_game_over():
    session = GameSession(ai_enabled=False)
    play(session, [0, 3, 1, 4, 2])

    with pytest.raises(IllegalMoveError, match="over"):
        session.submit_move(5, Mark.O)


def test_illegal_move_error_is_a_value_error():
    session = GameSession()

    with pytest.raises(ValueError):
        session.submit_move(4, Mark.O)


def test_compute_ai_move_does_not_apply_it():
    session = GameSession()
    session.submit_move(4, Mark.X)

    assert session.is_ai_turn()
    assert session.compute_ai_move() == 0
    assert session.board.state_string() == "....X...."


def test_play_ai_turn_commits_the_move():
    session = GameSession()
    session.submit_move(4, Mark.X)

    cell, outcome = session.play_ai_turn()

    assert cell == 0
    assert outcome == Outcome.IN_PROGRESS
    assert session.cell_at(0) == Mark.O
    assert session.side_to_move() == 1
    assert not session.is_ai_turn()


def test_ai_has_no_move_out_of_turn_or_after_game_over():
    session = GameSession()

    assert session.compute_ai_move() is None  # X to move
    assert session.play_ai_turn() == (None, Outcome.IN_PROGRESS)
    assert session.board.state_string() == "........."

    play(session, [0, 3, 1, 4, 2])
    assert session.compute_ai_move() is None
    assert session.play_ai_turn() == (None, Outcome.X_WINS)


def test_ai_wins_when_human_blunders():
    session = GameSession()
    session.submit_move(0, Mark.X)
    assert session.play_ai_turn()[0] == 4   # only the center holds a corner opening
    session.submit_move(8, Mark.X)
    assert session.play_ai_turn()[0] == 1   # an edge, corners lose to X's fork
    session.submit_move(2, Mark.X)          # ignores O's threat on 7

    cell, outcome = None, session.current_outcome()
    while not outcome.is_terminal:
        if session.is_ai_turn():
            cell, outcome = session.play_ai_turn()
        else:
            outcome = session.submit_move(session.valid_moves()[0], Mark.X)

    assert outcome == Outcome.O_WINS
    assert session.winning_line() is not None
    assert cell in session.winning_line()


def test_two_player_mode_never_gives_ai_the_turn():
    session = GameSession(ai_enabled=False)
    session.submit_move(4, Mark.X)

    assert not session.is_ai_turn()


def test_ai_can_play_first():
    session = GameSession(ai_player=Mark.X)

    assert session.is_ai_turn()
    assert session.play_ai_turn() == (4, Outcome.IN_PROGRESS)
    assert session.human_player == Mark.O


def test_config_picks_ai_side_and_mode():
    class AIFirst(SearchConfig):
        AI_PLAYS_FIRST = True
        AI_ENABLED = False

    session = GameSession(config=AIFirst())

    assert session.ai_player == Mark.X
    assert not session.ai_enabled


def test_start_new_game_and_stop_reset_the_board():
    session = GameSession()
    session.submit_move(4, Mark.X)
    session.play_ai_turn()

    session.start_new_game()
    assert session.board.state_string() == "........."
    assert session.side_to_move() == 1

    session.submit_move(0, Mark.X)
    session.stop_game()
    assert session.turn_number() == 0
    assert session.current_outcome() == Outcome.IN_PROGRESS


def test_sessions_do_not_share_state():
    first = GameSession()
    second = GameSession()
    first.submit_move(4, Mark.X)

    assert second.cell_at(4) == Mark.EMPTY


def test_cell_at_rejects_bad_index():
    with pytest.raises(IndexError):
        GameSession().cell_at(9)


def test_validator_lists_moves_for_game_in_progress():
    session = GameSession(ai_enabled=False)
    session.submit_move(4, Mark.X)

    assert session.valid_moves() == [0, 1, 2, 3, 5, 6, 7, 8]
    assert MoveValidator().validate_move(session.board, 0, Mark.O).is_valid


def test_submit_move_accepts_signed_side():
    session = GameSession(ai_enabled=False)

    session.submit_move(4, 1)
    session.submit_move(0, -1)
    assert session.board.state_string() == "O...X...."

    with pytest.raises(IllegalMoveError):
        session.submit_move(1, -1)  # X's turn
    with pytest.raises(IllegalMoveError, match="Invalid side"):
        session.submit_move(1, 0)


def test_numpy_cell_picked_from_value_grid_is_accepted():
    session = GameSession(ai_enabled=False)
    session.submit_move(4, Mark.X)

    cell = np.nanargmax(move_value_grid(session.board))
    assert isinstance(cell, np.integer)

    assert session.submit_move(cell, Mark.O) == Outcome.IN_PROGRESS
    assert session.board.state_string() == "O...X...."
    assert session.cell_at(np.int64(0)) == Mark.O
    assert all(type(mark) is Mark for mark in session.board.cells)


@pytest.mark.parametrize("cell", [True, False, 1.0, "1", None])
def test_non_integer_cells_are_rejected(cell):
    session = GameSession(ai_enabled=False)

    with pytest.raises(IllegalMoveError, match="whole number"):
        session.submit_move(cell, Mark.X)

    assert session.board.state_string() == "........."


def test_bool_side_is_rejected():
    with pytest.raises(IllegalMoveError, match="Invalid side"):
        GameSession(ai_enabled=False).submit_move(4, True)
