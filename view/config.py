"""
View configuration for Tic Tac Toe.
Window, grid and mark settings for the tkinter board.
"""


class ViewConfig:
    """
    Configuration class for view settings.
    Change these values to restyle the board!
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BACKGROUND = '#ffffff'
    PADDING = 15

    # ==================== GRID SETTINGS ====================
    # Size of one cell in pixels
    CELL_SIZE = 120
    CELL_GAP = 6
    CELL_COLOR = '#fff2a8'          # Yellow at half opacity on white
    WIN_CELL_COLOR = '#ffd84d'      # Highlight for the winning line
    LOCKED_CURSOR = 'watch'
    UNLOCKED_CURSOR = 'hand2'

    # ==================== MARK SETTINGS ====================
    # Marks fill 1/1.5 of the cell
    MARK_SIZE = int(CELL_SIZE / 1.5)  # 80 pixels
    MARK_COLOR = (0, 0, 0, 255)       # RGBA
    MARK_LINE_WIDTH = 8

    # ==================== TEXT SETTINGS ====================
    TITLE_FONT = ('Helvetica', 20, 'bold')
    STATUS_FONT = ('Helvetica', 12)
    DIALOG_TITLE_FONT = ('Helvetica', 16, 'bold')
    DIALOG_FONT = ('Helvetica', 12)
