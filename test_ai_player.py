import random
from collections import Counter

import pytest

from engine.ai_player import AIPlayer, determine_computer_move
from engine.game_state import Board, Player


def make_ai(seed=0):
    return AIPlayer(Player.COMPUTER, rng=random.Random(seed))


def test_takes_winning_move():
    board = Board.from_positions(human=[3, 7], computer=[0, 1])
    ai = make_ai()
    assert ai.get_best_move(board) == 2
    assert ai.last_rule == "win"


def test_prefers_win_over_block():
    # Human threatens 5, computer can win at 2
    board = Board.from_positions(human=[3, 4], computer=[0, 1])
    assert make_ai().get_best_move(board) == 2


def test_first_winning_line_in_pattern_order():
    # Computer can win on row 0 (cell 2) and column 0 (cell 6)
    board = Board.from_positions(human=[4, 5, 7], computer=[0, 1, 3])
    assert make_ai().get_best_move(board) == 2


def test_blocks_human_line():
    board = Board.from_positions(human=[0, 4], computer=[1])
    ai = make_ai()
    assert ai.get_best_move(board) == 8
    assert ai.last_rule == "block"


def test_ignores_lines_already_blocked():
    # Row 0 has two X but is closed by the O at 2
    board = Board.from_positions(human=[0, 1], computer=[2])
    ai = make_ai()
    assert ai.get_best_move(board) == 4
    assert ai.last_rule == "center"


def test_takes_center_after_one_move():
    board = Board.from_positions(human=[0])
    ai = make_ai()
    assert ai.get_best_move(board) == 4
    assert ai.last_rule == "center"


def test_random_when_center_taken():
    board = Board.from_positions(human=[4])
    ai = make_ai()
    move = ai.get_best_move(board)
    assert move != 4
    assert ai.last_rule == "random"


def test_random_fallback_is_repeatable_with_seed():
    board = Board.from_positions(human=[4])
    assert make_ai(11).get_best_move(board) == make_ai(11).get_best_move(board)


def test_opening_move_is_not_always_center():
    rng = random.Random(1234)
    trials = 9000
    counts = Counter(determine_computer_move(Board(), rng=rng) for _ in range(trials))

    assert set(counts) == set(range(9))
    # Expected 1000 each; sd is about 31
    for position in range(9):
        assert 850 < counts[position] < 1150


def test_never_returns_occupied_cell():
    rng = random.Random(99)
    for _ in range(300):
        # Random legal position: alternate marks on a random prefix
        order = list(range(9))
        rng.shuffle(order)
        n = rng.randint(0, 8)
        board = Board.from_positions(human=order[0:n:2], computer=order[1:n:2])
        move = determine_computer_move(board, rng=rng)
        assert not board.is_occupied(move)


def test_does_not_modify_board():
    board = Board.from_positions(human=[0, 4], computer=[1])
    before = board.cells
    make_ai().get_best_move(board)
    assert board.cells == before


def test_full_board_raises():
    board = Board.from_positions(human=[0, 2, 4, 5, 7], computer=[1, 3, 6, 8])
    with pytest.raises(ValueError):
        make_ai().get_best_move(board)
