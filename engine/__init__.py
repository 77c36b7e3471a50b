"""
Engine module for Tic Tac Toe.
Handles the board, rules, computer opponent and game session.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Board, GameStatus, Move, Player, apply_human_move, reset_game
from .move_validator import MoveValidator
from .win_checker import WinChecker, check_draw, check_win, evaluate
from .ai_player import AIPlayer, determine_computer_move
from .alerts import AlertContext, AlertItem
from .session import GameSession
