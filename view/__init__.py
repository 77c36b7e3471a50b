"""
View module for Tic Tac Toe.
Settings and mark images for the board window.
"""

from .config import ViewConfig
from .marks import render_mark, render_blank, render_all
