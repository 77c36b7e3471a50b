"""
Game session for Tic Tac Toe.

Owns the state a view needs between taps: the current board, the lock
flag held while the computer "thinks", and which player opens the next
game. The view keeps a reference to one session and forwards taps to it.
"""

import random
import time
from typing import Callable, Optional

from .ai_player import AIPlayer
from .alerts import AlertContext, AlertItem
from .config import GameConfig
from .game_state import Board, GameStatus, Player, apply_computer_move, apply_human_move, reset_game
from .move_validator import MoveValidator
from .win_checker import WinChecker


# scheduler(delay_ms, callback) - runs callback once after the delay
Scheduler = Callable[[int, Callable[[], None]], None]


def sleep_scheduler(delay_ms: int, callback: Callable[[], None]):
    """Block for the delay, then run the callback. Used by the console mode."""
    time.sleep(delay_ms / 1000.0)
    callback()


class GameSession:
    """
    A series of games between the human and the computer.

    Game flow:
    1. Human taps an empty cell
    2. Session checks for a win or draw
    3. Board locks, the computer's move is scheduled after a short delay
    4. Computer's move is applied, board unlocks, session checks again
    5. On a finished game the opening player swaps and an alert is raised
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler: Scheduler = sleep_scheduler,
        ai: Optional[AIPlayer] = None,
        on_change: Optional[Callable[["GameSession"], None]] = None,
        on_game_over: Optional[Callable[[AlertItem], None]] = None,
    ):
        """
        Initialize the session. Call reset_game() to start playing.

        Args:
            config: Game settings (default: GameConfig()).
            scheduler: Deferred-execution primitive for the computer's move.
            ai: The computer player (default: one seeded from config).
            on_change: Called after the board or lock flag changes.
            on_game_over: Called with the outcome alert when a game ends.
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler
        self.ai = ai or AIPlayer(Player.COMPUTER, rng=random.Random(self.config.RANDOM_SEED))
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.on_change = on_change
        self.on_game_over = on_game_over

        self.board: Board = reset_game()
        self.status = GameStatus.ONGOING
        self.human_first = self.config.HUMAN_STARTS_FIRST
        self.is_locked = False
        self.alert: Optional[AlertItem] = None
        self.games_played = 0

    def on_cell_tapped(self, position: int) -> bool:
        """
        Handle a tap on a cell.

        Args:
            position: Cell index (0-8).

        Returns:
            True if the human's move was accepted.
        """
        if self.is_locked:
            self._debug(f"Board is locked, ignoring tap on {position}")
            return False

        result = self.validator.validate_move(self.board, position, self.status)
        if not result.is_valid:
            self._debug(result.error_message)
            return False

        self.board = apply_human_move(self.board, position)
        self._debug(f"Human plays {position}")
        self._notify()

        if self._check_game_over(Player.HUMAN):
            return True

        self._start_computer_turn()
        return True

    def reset_game(self) -> bool:
        """
        Start a new game with an empty board.

        If the computer opens this game its move is scheduled right away.

        Returns:
            False if a computer move is still pending and nothing was reset.
        """
        if self.is_locked:
            self._debug("Computer move pending, cannot reset yet")
            return False

        self._debug("Resetting game...")
        self.board = reset_game()
        self.status = GameStatus.ONGOING
        self.alert = None
        self._notify()

        if not self.human_first:
            self._start_computer_turn()
        return True

    @property
    def winning_line(self):
        return self.win_checker.get_winning_line(self.board)

    def _start_computer_turn(self):
        """Lock the board and schedule the computer's move."""
        self.is_locked = True
        self._notify()
        self.scheduler(self.config.THINK_DELAY_MS, self._play_computer_move)

    def _play_computer_move(self):
        """Apply the computer's move and unlock the board."""
        position = self.ai.get_best_move(self.board)
        self.board = apply_computer_move(self.board, position)
        self.is_locked = False
        self._debug(f"Computer plays {position} ({self.ai.last_rule})")
        self._notify()

        self._check_game_over(Player.COMPUTER)

    def _check_game_over(self, mover: Player) -> bool:
        """
        Check if the player who just moved ended the game.

        Args:
            mover: The player who made the last move.

        Returns:
            True if the game is over.
        """
        if self.win_checker.check_win(self.board, mover):
            status = GameStatus.HUMAN_WIN if mover == Player.HUMAN else GameStatus.COMPUTER_WIN
        elif self.win_checker.check_draw(self.board):
            status = GameStatus.DRAW
        else:
            return False

        self.status = status
        self.human_first = not self.human_first
        self.games_played += 1
        self.alert = AlertContext.for_status(status)
        self._debug(f"Game over: {status.value}")
        self._notify()

        if self.on_game_over is not None:
            self.on_game_over(self.alert)
        return True

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self)

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)
