from engine.game_state import Player
from view.config import ViewConfig
from view.marks import render_all, render_blank, render_mark


def alpha_at(image, x, y):
    return image.getpixel((x, y))[3]


def test_marks_are_square_rgba():
    config = ViewConfig()
    for player in Player:
        image = render_mark(player, config)
        assert image.mode == "RGBA"
        assert image.size == (config.MARK_SIZE, config.MARK_SIZE)


def test_x_crosses_the_center():
    image = render_mark(Player.HUMAN)
    center = image.size[0] // 2
    assert alpha_at(image, center, center) == 255
    # Middle of the top edge is outside both strokes
    assert alpha_at(image, center, 0) == 0


def test_o_is_a_ring():
    image = render_mark(Player.COMPUTER)
    center = image.size[0] // 2
    assert alpha_at(image, center, center) == 0
    # The ring passes through the middle of the top edge
    assert alpha_at(image, center, ViewConfig.MARK_LINE_WIDTH) == 255


def test_blank_is_transparent():
    image = render_blank()
    assert image.getbbox() is None


def test_render_all_covers_every_cell_state():
    images = render_all()
    assert set(images) == {Player.HUMAN, Player.COMPUTER, None}


def test_custom_size():
    class SmallView(ViewConfig):
        MARK_SIZE = 24
        MARK_LINE_WIDTH = 2

    assert render_mark(Player.HUMAN, SmallView()).size == (24, 24)
