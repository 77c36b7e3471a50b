"""
Move validator for Tic Tac Toe.
Validates that a tapped cell can take the human's move.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, GameStatus


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only mark empty cells
    """

    def validate_move(
        self,
        board: Board,
        position: int,
        status: GameStatus = GameStatus.ONGOING
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            position: Cell index to mark (0-8).
            status: Current game status.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if status.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if position is in valid range
        if not 0 <= position < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if board.is_occupied(position):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied by {board[position].mark}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, status: GameStatus = GameStatus.ONGOING) -> List[int]:
        """
        Get all valid moves.

        Args:
            board: Current board.
            status: Current game status.

        Returns:
            List of cell indexes that can be marked.
        """
        if status.is_terminal:
            return []
        return board.get_empty_cells()
