"""
Mark images for the Tic Tac Toe board.
Draws the X and O glyphs with Pillow so the grid can show them as images.
"""

from typing import Dict, Optional

from PIL import Image, ImageDraw

from engine.game_state import Player
from .config import ViewConfig


def render_mark(player: Player, config: Optional[ViewConfig] = None) -> Image.Image:
    """
    Draw a player's mark on a transparent square.

    Args:
        player: HUMAN gets an X, COMPUTER gets an O.
        config: View settings (size, colour, line width).

    Returns:
        An RGBA PIL Image of MARK_SIZE x MARK_SIZE.
    """
    config = config or ViewConfig()
    size = config.MARK_SIZE
    width = config.MARK_LINE_WIDTH
    inset = width // 2

    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    if player == Player.HUMAN:
        draw.line([(inset, inset), (size - inset, size - inset)], fill=config.MARK_COLOR, width=width)
        draw.line([(inset, size - inset), (size - inset, inset)], fill=config.MARK_COLOR, width=width)
    else:
        draw.ellipse([inset, inset, size - inset, size - inset], outline=config.MARK_COLOR, width=width)

    return image


def render_blank(config: Optional[ViewConfig] = None) -> Image.Image:
    """A fully transparent image the size of a mark, for empty cells."""
    config = config or ViewConfig()
    return Image.new("RGBA", (config.MARK_SIZE, config.MARK_SIZE), (0, 0, 0, 0))


def render_all(config: Optional[ViewConfig] = None) -> Dict[Optional[Player], Image.Image]:
    """Get the image for every cell state, keyed by player (None = empty)."""
    images = {player: render_mark(player, config) for player in Player}
    images[None] = render_blank(config)
    return images
