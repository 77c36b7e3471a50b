import pytest

from main import ConsoleGame, build_config, parse_args


def make_game(monkeypatch, answers):
    """Console game with no think delay and scripted keyboard input."""
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    config = build_config(parse_args(["--no-ui", "--delay", "0", "--seed", "3"]))
    return ConsoleGame(config)


# Human 1 -> O takes the center, human 3 -> O blocks at 2,
# human 7 -> O wins down the middle column (cells 2, 5, 8)
LOSING_GAME = ["1", "3", "7"]


def test_bad_input_is_reprompted(monkeypatch, capsys):
    game = make_game(monkeypatch, ["x", "0", "10", "1", "5", "q"])
    game.start()

    out = capsys.readouterr().out
    assert "Please type a number 1..9." in out
    # "0" and "10" are off the board, "5" is the computer's center
    assert out.count("Illegal move. Try again.") == 3
    assert "Game quit by user." in out
    assert game.session.board.move_count == 2
    assert game.session.games_played == 0


def test_lost_game_then_retry_lets_computer_open(monkeypatch, capsys):
    game = make_game(monkeypatch, LOSING_GAME + ["y", "q"])
    game.start()

    out = capsys.readouterr().out
    assert "You Lost! Better luck next time" in out
    assert "Games played: 1" in out
    assert "Computer starts." in out
    assert game.session.games_played == 1
    assert game.session.human_first is False
    # Next game opened with the computer's move already on the board
    assert game.session.board.move_count == 1


def test_declining_retry_stops(monkeypatch, capsys):
    game = make_game(monkeypatch, LOSING_GAME + ["n"])
    game.start()

    out = capsys.readouterr().out
    assert "New game!" not in out
    assert not game.is_running
    assert game.session.games_played == 1


def test_console_board_shows_moves(monkeypatch, capsys):
    game = make_game(monkeypatch, ["1", "q"])
    game.start()

    out = capsys.readouterr().out
    assert "X | 2 | 3\n---------\n4 | O | 6" in out


@pytest.mark.parametrize("answer", ["q", "Q", " q "])
def test_quit_at_first_prompt(monkeypatch, answer):
    game = make_game(monkeypatch, [answer])
    game.start()
    assert game.session.board.is_empty()
