"""
Game configuration for Tic Tac Toe.
All the settings for the board, the computer's timing and debugging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Override attributes on an instance to change a single game session.
    """

    # ==================== BOARD SETTINGS ====================
    # Tic Tac Toe is a 3x3 grid, indexed 0-8 in row-major order
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # The center cell (row 1, col 1)
    CENTER_POSITION = 4

    # ==================== TURN SETTINGS ====================
    # Who opens the first game. Alternates after every finished game.
    HUMAN_STARTS_FIRST = True

    # Simulated "thinking" time before the computer's move (milliseconds)
    THINK_DELAY_MS = 500

    # Seed for the computer's random fallback move (None = system entropy)
    RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
