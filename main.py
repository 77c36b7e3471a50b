"""
Main launcher for Tic Tac Toe.

Opens the board window by default, or plays in the terminal with --no-ui.
The computer uses a simple heuristic: win, block, center, then random.
"""

import argparse

from engine.config import GameConfig
from engine.game_state import GameStatus
from engine.session import GameSession, sleep_scheduler


class ConsoleGame:
    """
    Plays Tic Tac Toe in the terminal.

    Cells are entered as 1-9:
    1|2|3
    4|5|6
    7|8|9
    """

    def __init__(self, config: GameConfig):
        self.session = GameSession(config=config, scheduler=sleep_scheduler)
        self.is_running = False

    def start(self):
        """Play games until the user quits."""
        print("Index map:\n1|2|3\n4|5|6\n7|8|9\n")
        print("Type 1-9 to play, 'q' to quit\n")

        self.is_running = True
        self.session.reset_game()

        while self.is_running:
            print(self.session.board.pretty() + "\n")
            self._read_human_move()

            if self.session.status != GameStatus.ONGOING:
                self._show_game_result()

    def _read_human_move(self):
        """Prompt until a legal move is made or the user quits."""
        while self.is_running:
            text = input("Play X at [1-9]: ").strip().lower()
            if text == "q":
                print("\nGame quit by user.")
                self.is_running = False
                return
            try:
                position = int(text) - 1
            except ValueError:
                print("Please type a number 1..9.")
                continue
            if self.session.on_cell_tapped(position):
                return
            print("Illegal move. Try again.")

    def _show_game_result(self):
        """Show the result and offer the next game."""
        alert = self.session.alert

        print("\n" + self.session.board.pretty())
        print("\n" + "="*40)
        print(f"   {alert.title} {alert.message}")
        print(f"   Games played: {self.session.games_played}")
        print("="*40)

        answer = input(f"{alert.button_title}? [Y/n]: ").strip().lower()
        if answer in ("n", "no", "q"):
            self.is_running = False
            return

        print("\nNew game! " + ("You start." if self.session.human_first else "Computer starts."))
        self.session.reset_game()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer open the first game"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.THINK_DELAY_MS,
        help="Computer thinking time in milliseconds"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every move and rejected tap"
    )
    return parser.parse_args(argv)


def build_config(args) -> GameConfig:
    """Build a GameConfig from command line arguments."""
    config = GameConfig()
    config.HUMAN_STARTS_FIRST = not args.computer_first
    config.RANDOM_SEED = args.seed
    config.THINK_DELAY_MS = args.delay
    config.DEBUG_MODE = args.debug
    return config


def main():
    """Main entry point."""
    args = parse_args()
    config = build_config(args)

    print("\n" + "="*60)
    print("   Tic Tac Toe")
    print("="*60)
    print(f"   Mode: {'Console' if args.no_ui else 'Window'}")
    print(f"   First move: {'Human' if config.HUMAN_STARTS_FIRST else 'Computer'}")
    print("="*60 + "\n")

    if not args.no_ui:
        from ui import TicTacToeUI
        TicTacToeUI(game_config=config).run()
        return

    game = ConsoleGame(config)
    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
