"""
Computer player for Tic Tac Toe.
Uses a simple priority heuristic to choose its move.
"""

import random
from typing import Optional

from .config import GameConfig
from .game_state import Board, Player
from .win_checker import WIN_PATTERNS


class AIPlayer:
    """
    A heuristic Tic Tac Toe opponent.

    Rules, in priority order (first applicable rule wins):
    1. Win now - complete a line where it already holds 2 cells
    2. Block - fill the last cell of a line where the human holds 2
    3. Center - take the center, except on an empty board
    4. Random - any empty cell, chosen uniformly

    The center is skipped on an empty board so the computer does not
    open every game the same way.
    """

    def __init__(self, player: Player = Player.COMPUTER, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: COMPUTER)
            rng: Random source for the fallback rule. Pass a seeded
                random.Random to get repeatable games.
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random(GameConfig.RANDOM_SEED)

        # Which rule picked the last move (for debugging)
        self.last_rule: Optional[str] = None

    def get_best_move(self, board: Board) -> int:
        """
        Get the computer's move for the current position.

        Args:
            board: Current board. Not modified.

        Returns:
            Index of the cell to mark.

        Raises:
            ValueError: if the board has no empty cell.
        """
        empty_cells = board.get_empty_cells()

        if not empty_cells:
            raise ValueError("No empty cell left for the computer to play!")

        # 1. Win if possible
        move = self._find_completion(board, self.player)
        if move is not None:
            self.last_rule = "win"
            return move

        # 2. Block the opponent
        move = self._find_completion(board, self.player.opposite())
        if move is not None:
            self.last_rule = "block"
            return move

        # 3. Take the center, but never as the opening move
        center = GameConfig.CENTER_POSITION
        if not board.is_occupied(center) and not board.is_empty():
            self.last_rule = "center"
            return center

        # 4. Anything else
        self.last_rule = "random"
        return self.rng.choice(empty_cells)

    def _find_completion(self, board: Board, player: Player) -> Optional[int]:
        """
        Find the first line where a player holds 2 cells and the 3rd is empty.

        Args:
            board: The game board.
            player: Whose lines to look at.

        Returns:
            The empty cell of that line, or None.
        """
        positions = board.positions_of(player)

        for line in WIN_PATTERNS:
            held = [p for p in line if p in positions]
            free = [p for p in line if not board.is_occupied(p)]
            if len(held) == 2 and len(free) == 1:
                return free[0]

        return None


def determine_computer_move(board: Board, rng: Optional[random.Random] = None) -> int:
    """Pick the computer's next cell. See AIPlayer for the rules."""
    return AIPlayer(Player.COMPUTER, rng=rng).get_best_move(board)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(rng=random.Random(7))

    # Test 1: AI should block a winning move
    board = Board.from_positions(human=[0, 4], computer=[1])
    print(board.pretty())
    print("\nHuman is about to win on the 0-4-8 diagonal!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 8, f"Expected 8, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_positions(human=[3, 4], computer=[0, 1])
    print(board.pretty())
    print("\nAI can win with cell 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
