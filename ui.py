"""
Tic Tac Toe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The 3x3 board (X for the human, O for the computer)
- Game status (whose turn, computer thinking)
- An end-of-game dialog that starts the next game
"""

import tkinter as tk
from tkinter import ttk
from PIL import ImageTk
from typing import Optional

from engine.alerts import AlertItem
from engine.config import GameConfig
from engine.game_state import to_row_col
from engine.session import GameSession
from view.config import ViewConfig
from view.marks import render_all


class TicTacToeUI:
    """
    Main UI class for Tic Tac Toe.
    """

    def __init__(self, game_config: Optional[GameConfig] = None, view_config: Optional[ViewConfig] = None):
        """Initialize the UI."""
        self.game_config = game_config or GameConfig()
        self.view_config = view_config or ViewConfig()

        # Create UI
        self._create_ui()

        # Marks must be converted after the Tk root exists
        self.mark_images = {
            player: ImageTk.PhotoImage(image)
            for player, image in render_all(self.view_config).items()
        }

        self.session = GameSession(
            config=self.game_config,
            scheduler=self.root.after,
            on_change=self._refresh,
            on_game_over=self._on_game_over,
        )

    def _create_ui(self):
        """Create the Tkinter UI."""
        config = self.view_config

        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.BACKGROUND)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.configure('TFrame', background=config.BACKGROUND)
        style.configure('Title.TLabel', background=config.BACKGROUND, font=config.TITLE_FONT)
        style.configure('Status.TLabel', background=config.BACKGROUND, font=config.STATUS_FONT)

        main_frame = ttk.Frame(self.root, padding=config.PADDING)
        main_frame.pack(fill=tk.BOTH, expand=True)

        ttk.Label(main_frame, text=config.WINDOW_TITLE, style='Title.TLabel').pack(anchor=tk.W, pady=(0, 10))

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self.board_cells = []
        for position in range(self.game_config.CELL_COUNT):
            row, col = to_row_col(position)
            cell = tk.Label(
                board_frame,
                width=config.CELL_SIZE,
                height=config.CELL_SIZE,
                bg=config.CELL_COLOR,
                cursor=config.UNLOCKED_CURSOR,
            )
            cell.grid(row=row, column=col, padx=config.CELL_GAP // 2, pady=config.CELL_GAP // 2)
            cell.bind("<Button-1>", lambda _event, p=position: self._on_cell_clicked(p))
            self.board_cells.append(cell)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(10, 0))

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_clicked(self, position: int):
        """Forward a click to the session."""
        self.session.on_cell_tapped(position)

    def _refresh(self, session: GameSession):
        """Redraw the board and status (called by the session)."""
        config = self.view_config
        winning_line = session.winning_line or ()
        cursor = config.LOCKED_CURSOR if session.is_locked else config.UNLOCKED_CURSOR

        for position, cell in enumerate(self.board_cells):
            move = session.board[position]
            image = self.mark_images[move.player if move is not None else None]
            bg = config.WIN_CELL_COLOR if position in winning_line else config.CELL_COLOR
            # Label width/height count pixels only when an image is set
            cell.configure(image=image, bg=bg, cursor=cursor)

        if session.status.is_terminal:
            self.status_label.configure(text=session.alert.title)
        elif session.is_locked:
            self.status_label.configure(text="Computer is thinking...")
        else:
            self.status_label.configure(text="Your turn (X)")

    def _on_game_over(self, alert: AlertItem):
        """Show the outcome once the current event has finished."""
        self.root.after(0, lambda: self._show_alert(alert))

    def _show_alert(self, alert: AlertItem):
        """Modal dialog with the outcome. Its button starts the next game."""
        config = self.view_config

        dialog = tk.Toplevel(self.root)
        dialog.title(alert.title)
        dialog.configure(bg=config.BACKGROUND)
        dialog.resizable(False, False)
        dialog.transient(self.root)

        def dismiss():
            dialog.grab_release()
            dialog.destroy()
            self.session.reset_game()

        tk.Label(dialog, text=alert.title, font=config.DIALOG_TITLE_FONT, bg=config.BACKGROUND).pack(
            padx=30, pady=(20, 5)
        )
        tk.Label(dialog, text=alert.message, font=config.DIALOG_FONT, bg=config.BACKGROUND).pack(padx=30)
        ttk.Button(dialog, text=alert.button_title, command=dismiss).pack(pady=20)

        dialog.protocol("WM_DELETE_WINDOW", dismiss)
        dialog.wait_visibility()
        dialog.grab_set()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Start the first game and run the UI main loop."""
        self.session.reset_game()
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
