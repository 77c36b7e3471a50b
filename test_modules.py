"""
Smoke tests for the Tic Tac Toe modules.
Run with pytest to verify all components work before playing.
"""

import random


def test_game_config():
    """Test game configuration."""
    from engine.config import GameConfig
    config = GameConfig()
    assert config.CELL_COUNT == config.BOARD_SIZE ** 2 == 9
    assert config.CENTER_POSITION == 4
    assert config.THINK_DELAY_MS == 500
    assert config.HUMAN_STARTS_FIRST is True


def test_game_logic():
    """Test game logic components together."""
    from engine.game_state import Board, Player, apply_human_move
    from engine.move_validator import MoveValidator
    from engine.win_checker import WinChecker
    from engine.ai_player import AIPlayer

    board = apply_human_move(Board(), 4)
    assert board[4].player == Player.HUMAN
    assert board[4].mark == "X"

    validator = MoveValidator()
    assert validator.validate_move(board, 0).is_valid
    assert not validator.validate_move(board, 4).is_valid

    checker = WinChecker()
    assert not checker.check_win(board, Player.HUMAN)

    ai = AIPlayer(Player.COMPUTER, rng=random.Random(0))
    move = ai.get_best_move(board)
    assert move in board.get_empty_cells()


def test_engine_exports():
    """Test that the package exposes the engine operations."""
    import engine

    board = engine.reset_game()
    board = engine.apply_human_move(board, 0)
    assert engine.determine_computer_move(board, rng=random.Random(0)) == 4
    assert not engine.check_win(board, engine.Player.HUMAN)
    assert not engine.check_draw(board)
    assert engine.evaluate(board) == engine.GameStatus.ONGOING


def test_view_config():
    """Test view configuration."""
    from view.config import ViewConfig
    config = ViewConfig()
    assert config.MARK_SIZE == 80
    assert config.MARK_SIZE < config.CELL_SIZE


def test_launcher_args():
    """Test command line parsing for the launcher."""
    from main import build_config, parse_args

    config = build_config(parse_args(["--no-ui", "--computer-first", "--seed", "3", "--delay", "0"]))
    assert config.HUMAN_STARTS_FIRST is False
    assert config.RANDOM_SEED == 3
    assert config.THINK_DELAY_MS == 0

    config = build_config(parse_args([]))
    assert config.HUMAN_STARTS_FIRST is True
    assert config.THINK_DELAY_MS == 500
