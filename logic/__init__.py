"""
Logic module for the TicTacToe engine.
Handles board state, rules, the game session and the Negamax AI opponent.
"""

from .config import SearchConfig
from .game_state import Board, Mark, Outcome
from .move_validator import MoveValidator, ValidationResult, IllegalMoveError
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .session import GameSession

__version__ = "1.0.0"
