"""
Board model for Tic Tac Toe.
Tracks which player has marked which cell.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> str:
        """The symbol drawn for this player."""
        return "X" if self == Player.HUMAN else "O"


class GameStatus(Enum):
    """Outcome of a board, derived on demand."""
    ONGOING = "ongoing"
    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.ONGOING


@dataclass(frozen=True)
class Move:
    """
    A single mark on the board.
    """
    player: Player      # Who made the move
    position: int       # Cell index (0-8)

    @property
    def mark(self) -> str:
        return self.player.mark


def to_row_col(position: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    return divmod(position, GameConfig.BOARD_SIZE)


def _check_position(position: int):
    if not 0 <= position < GameConfig.CELL_COUNT:
        raise ValueError(
            f"Invalid position {position}. Must be 0-{GameConfig.CELL_COUNT - 1}."
        )


@dataclass(frozen=True)
class Board:
    """
    The 9 cells of a Tic Tac Toe game.

    The board is immutable - placing a move returns a new board.
    None means an empty cell, otherwise the Move occupying it.
    """

    cells: Tuple[Optional[Move], ...] = field(
        default_factory=lambda: (None,) * GameConfig.CELL_COUNT
    )

    def __post_init__(self):
        if len(self.cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board has {GameConfig.CELL_COUNT} cells, got {len(self.cells)}"
            )

        # Each move must sit at the index it names
        for index, move in enumerate(self.cells):
            if move is not None and move.position != index:
                raise ValueError(
                    f"Move at cell {index} says it is at {move.position}"
                )

    @classmethod
    def from_positions(cls, human=(), computer=()) -> "Board":
        """
        Build a board from the positions each player holds.

        Args:
            human: Positions marked by the human.
            computer: Positions marked by the computer.

        Returns:
            The new Board.
        """
        board = cls()
        for player, positions in ((Player.HUMAN, human), (Player.COMPUTER, computer)):
            for position in positions:
                if board.is_occupied(position):
                    raise ValueError(f"Cell {position} is listed twice")
                board = board.with_move(Move(player, position))
        return board

    def __getitem__(self, position: int) -> Optional[Move]:
        return self.cells[position]

    def is_occupied(self, position: int) -> bool:
        _check_position(position)
        return self.cells[position] is not None

    def with_move(self, move: Move) -> "Board":
        """
        Place a move and return the resulting board.

        Args:
            move: The move to place. Its cell must be empty.

        Returns:
            A new Board with the move recorded.
        """
        if self.is_occupied(move.position):
            raise ValueError(f"Cell {move.position} is already occupied!")

        cells = list(self.cells)
        cells[move.position] = move
        return Board(tuple(cells))

    def positions_of(self, player: Player) -> frozenset:
        """Get the set of cells marked by a player."""
        return frozenset(
            move.position for move in self.cells
            if move is not None and move.player == player
        )

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indexes, in ascending order.
        """
        return [i for i, move in enumerate(self.cells) if move is None]

    @property
    def move_count(self) -> int:
        return sum(1 for move in self.cells if move is not None)

    def is_empty(self) -> bool:
        return self.move_count == 0

    def is_full(self) -> bool:
        return self.move_count == GameConfig.CELL_COUNT

    def pretty(self) -> str:
        """Render the board as text, with 1-9 for empty cells."""
        size = GameConfig.BOARD_SIZE
        symbols = [
            move.mark if move is not None else str(i + 1)
            for i, move in enumerate(self.cells)
        ]
        rows = [" | ".join(symbols[i:i + size]) for i in range(0, len(symbols), size)]
        return "\n---------\n".join(rows)


def reset_game() -> Board:
    """Get an empty board for a new game."""
    return Board()


def apply_human_move(board: Board, position: int) -> Board:
    """
    Record a human move.

    Args:
        board: Current board.
        position: Cell index (0-8).

    Returns:
        The new board, or the same board if the cell is already taken.
    """
    if board.is_occupied(position):
        return board
    return board.with_move(Move(Player.HUMAN, position))


def apply_computer_move(board: Board, position: int) -> Board:
    """Record a computer move. The cell must be empty."""
    return board.with_move(Move(Player.COMPUTER, position))
