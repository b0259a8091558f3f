"""
Main entry point for TicTacToe against the CPU.

This script ties together:
- Engine (board evaluation, CPU move selection, turn state machine)
- UI (Tkinter window) or a console game loop

Run this script to play TicTacToe against the CPU!
"""

import logging
import time
from typing import Optional

from engine import EngineConfig, GameSession, Marker, MoveSelector


def print_board(session: GameSession):
    """Print the board to console, with cell numbers 1-9 on empty cells."""
    board = session.board

    print()
    for row in range(EngineConfig.BOARD_SIZE):
        cells = []
        for col in range(EngineConfig.BOARD_SIZE):
            index = row * EngineConfig.BOARD_SIZE + col
            marker = board[index]
            cells.append(marker.value if marker is not None else str(index + 1))
        print(" " + " | ".join(cells))

        if row < EngineConfig.BOARD_SIZE - 1:
            print("---+---+---")
    print()


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Game flow:
    1. Human types a cell number (1-9)
    2. CPU "thinks" for a moment, then plays
    3. Repeat until someone wins or it's a draw
    """

    def __init__(self, seed: Optional[int] = None):
        self.session = GameSession(MoveSelector(seed=seed))
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print(f"You are {Marker.PLAYER.value}, the CPU is {Marker.OPPONENT.value}.")
        print("Type 1-9 to play, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        print_board(self.session)

        while self.is_running:
            if self.session.is_game_over:
                self._show_game_result()
                self._prompt_new_game()
                continue

            self._human_turn()

            if self.session.is_cpu_thinking:
                self._cpu_turn()

    def _human_turn(self):
        """Read and apply one human move."""
        raw = input(f"{self.session.status_message()} > ").strip().lower()

        if raw == 'q':
            print("\nGame quit by user.")
            self.is_running = False
            return
        if raw == 'r':
            self._reset_game()
            return

        try:
            index = int(raw) - 1
        except ValueError:
            print(f"'{raw}' is not a cell number. Type 1-9.")
            return

        result = self.session.play_human_move(index)
        if not result.is_valid:
            print(f"Invalid move: {result.error_message}")
            return

        print_board(self.session)

    def _cpu_turn(self):
        """Let the CPU move after a short pause."""
        print(self.session.status_message())
        time.sleep(EngineConfig.CPU_THINK_DELAY_MS / 1000)

        move = self.session.play_cpu_move()
        print(f">>> CPU plays {move + 1}")
        print_board(self.session)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)
        print(f"   {self.session.status_message()}")
        print("=" * 40 + "\n")

    def _prompt_new_game(self):
        """Ask whether to play again."""
        raw = input("Play again? [y/N] ").strip().lower()
        if raw == 'y':
            self._reset_game()
        else:
            self.is_running = False

    def _reset_game(self):
        """Reset the game for a new round."""
        self.session.reset()
        print("Game reset!")
        print_board(self.session)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against an easy CPU")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the CPU's random choices for a reproducible game"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every CPU decision"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "=" * 60)
        print("   TicTacToe UI")
        print("=" * 60 + "\n")
        ui = TicTacToeUI(seed=args.seed)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(seed=args.seed)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
