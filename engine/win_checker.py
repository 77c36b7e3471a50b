"""
Win checker for Tic Tac Toe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .game_state import Board, GameStatus, Player


# All possible winning lines, as cell indexes.
# The order matters: the computer's heuristic takes the first match.
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WIN_PATTERNS

    def check_win(self, board: Board, player: Player) -> bool:
        """
        Check if a player has completed a line.

        Args:
            board: The game board.
            player: The player to check.

        Returns:
            True if any winning line is fully marked by the player.
        """
        positions = board.positions_of(player)
        return any(positions.issuperset(line) for line in self.WINNING_LINES)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is full.

        Only meaningful once check_win has returned False for the player
        who just moved - a full board with a line on it is a win.

        Args:
            board: The game board.

        Returns:
            True if all cells are occupied.
        """
        return board.is_full()

    def evaluate(self, board: Board) -> GameStatus:
        """
        Get the status of a board. Wins are checked before the draw.

        Args:
            board: The game board.

        Returns:
            The GameStatus.
        """
        if self.check_win(board, Player.HUMAN):
            return GameStatus.HUMAN_WIN
        if self.check_win(board, Player.COMPUTER):
            return GameStatus.COMPUTER_WIN
        if self.check_draw(board):
            return GameStatus.DRAW
        return GameStatus.ONGOING

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The game board.

        Returns:
            The winning line as a tuple of cell indexes, or None.
        """
        for player in Player:
            positions = board.positions_of(player)
            for line in self.WINNING_LINES:
                if positions.issuperset(line):
                    return line
        return None


_checker = WinChecker()


def check_win(board: Board, player: Player) -> bool:
    return _checker.check_win(board, player)


def check_draw(board: Board) -> bool:
    return _checker.check_draw(board)


def evaluate(board: Board) -> GameStatus:
    return _checker.evaluate(board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board = Board.from_positions(human=[0, 1, 2], computer=[4, 6])
    print(f"Test 1 (horizontal): status = {checker.evaluate(board)}")
    assert checker.check_win(board, Player.HUMAN)

    # Test 2: Diagonal win
    board = Board.from_positions(human=[1, 3], computer=[2, 4, 6])
    print(f"Test 2 (diagonal): line = {checker.get_winning_line(board)}")
    assert checker.get_winning_line(board) == (2, 4, 6)

    # Test 3: Draw (full board, no winner)
    board = Board.from_positions(human=[0, 2, 4, 5, 7], computer=[1, 3, 6, 8])
    print(f"Test 3 (draw): status = {checker.evaluate(board)}")
    assert checker.evaluate(board) == GameStatus.DRAW

    print("\nWinChecker test done!")
