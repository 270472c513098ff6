"""
Console front-end for the TicTacToe engine.

This script ties together:
- The game session (board, rules, outcome)
- The Negamax AI opponent
- Keyboard input and board printing

Run this script to play TicTacToe against the AI (or a friend)!
"""

import argparse
from typing import Callable, List, Optional

import numpy as np

from logic.config import SearchConfig
from logic.game_state import Mark, Outcome
from logic.move_validator import IllegalMoveError
from logic.session import GameSession
from logic.analysis import move_value_grid


def format_value_grid(grid: np.ndarray) -> str:
    """Render a move-value grid: +1 win, 0 draw, -1 loss, '.' for taken cells."""
    rows = []
    for row in grid:
        cells = []
        for value in row:
            cells.append("  ." if np.isnan(value) else f"{int(value):+3d}")
        rows.append(" ".join(cells))
    return "\n".join(rows)


class TicTacToeConsole:
    """
    Console controller for a TicTacToe session.

    Game flow:
    1. Human types a cell number (0-8)
    2. The move is validated and committed
    3. If the AI is on and it's its turn, it replies immediately
    4. Repeat until someone wins or it's a draw
    5. Offer a new game (r) or quit (q)

    Commands: 0-8 = move, h = hint, r = reset, q = quit
    """

    def __init__(
        self,
        ai_enabled: bool = True,
        ai_first: bool = False,
        show_hints: bool = False,
        verbose: bool = False,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            ai_enabled: Play against the AI. False = two players on one keyboard.
            ai_first: Let the AI play first (as X).
            show_hints: Print move values before every human move.
            verbose: Let the AI print its search summary.
            input_func: Where moves are read from (input() by default).
        """
        self.session = GameSession(
            ai_enabled=ai_enabled,
            ai_player=Mark.X if ai_first else Mark.O,
            verbose=verbose
        )
        self.show_hints = show_hints
        self.input_func = input_func or input
        self.is_running = False

        print("\n" + "="*40)
        print("   TicTacToe - Ready!")
        if ai_enabled:
            print(f"   Human plays: {self.session.human_player.symbol}")
            print(f"   AI plays:    {self.session.ai_player.symbol}")
        else:
            print("   Two players: X and O")
        print("="*40 + "\n")

    def start(self) -> Outcome:
        """Start the game. Returns the final outcome."""
        print("Type a cell number (0-8) to move, 'h' for a hint, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self._game_loop()
        return self.session.current_outcome()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.session.is_ai_turn():
                self._ai_move()
                continue

            if self.session.current_outcome().is_terminal:
                self._show_game_result()
                if not self._offer_new_game():
                    self.is_running = False
                    break
                continue

            self.session.board.print_board()
            if self.show_hints:
                self._show_hint()

            mark = self.session.mark_to_move()
            try:
                command = self.input_func(f"{mark.symbol} to move> ").strip().lower()
            except EOFError:
                print("\nGame quit (end of input).")
                self.is_running = False
                break

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                self._reset_game()
            elif command == "h":
                self._show_hint()
            elif command.isdigit():
                self._process_human_move(int(command), mark)
            else:
                print(f"Unknown command {command!r}. Type 0-8, h, r or q.")

    def _process_human_move(self, cell: int, mark: Mark):
        """
        Process a human move.

        Args:
            cell: Cell the human picked.
            mark: The mark they are placing.
        """
        try:
            self.session.submit_move(cell, mark)
        except IllegalMoveError as e:
            print(f"Illegal move: {e}")
            return

        print(f"\n>>> {mark.symbol} placed on cell {cell}")

    def _ai_move(self):
        """Let the AI make its move."""
        print("\n>>> AI is thinking...")

        cell, _ = self.session.play_ai_turn()

        if cell is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        print(f">>> AI placed {self.session.ai_player.symbol} on cell {cell}")

    def _show_hint(self):
        """Print the value of every empty cell for the side to move."""
        grid = move_value_grid(self.session.board, ai=self.session.ai)
        print("\nMove values (+1 win, 0 draw, -1 loss):")
        print(format_value_grid(grid))

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        self.session.board.print_board()

        outcome = self.session.current_outcome()
        if outcome == Outcome.DRAW:
            print("\n🤝 It's a draw! Good game!")
        else:
            winner = Mark.X if outcome == Outcome.X_WINS else Mark.O
            line = self.session.winning_line()
            print(f"\n🏆 {winner.symbol} WINS! (line {line})")
            if self.session.ai_enabled and winner == self.session.ai_player:
                print("🤖 AI wins! Better luck next time!")

        print("\n" + "="*40)

    def _offer_new_game(self) -> bool:
        """Ask whether to play again after a game ends. True = board was reset."""
        while True:
            try:
                command = self.input_func("Play again? 'r' to reset, 'q' to quit> ").strip().lower()
            except EOFError:
                print("\nGame quit (end of input).")
                return False

            if command == "r":
                self._reset_game()
                return True
            if command == "q":
                print("\nGame quit by user.")
                return False
            print(f"Unknown command {command!r}. Type r or q.")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.start_new_game()
        print("Game reset!")

    def stop(self):
        self.is_running = False
        self.session.stop_game()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe with a Negamax AI")
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans take turns (no AI)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        default=SearchConfig.AI_PLAYS_FIRST,
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Show the value of every empty cell before each move"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=SearchConfig.VERBOSE,
        help="Print AI search statistics"
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    game = TicTacToeConsole(
        ai_enabled=SearchConfig.AI_ENABLED and not args.two_player,
        ai_first=args.ai_first,
        show_hints=args.hints,
        verbose=args.verbose
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        game.stop()
        print("Goodbye!")


if __name__ == "__main__":
    main()
