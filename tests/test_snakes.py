import pytest

from minigames.snakes import (
    JUMPS,
    Jump,
    SnakesGame,
    correct_square,
    play,
    render_board,
    render_scoreboard,
)


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert low <= self.value <= high
        return self.value


@pytest.mark.parametrize(
    "square, expected",
    [(1, 38), (28, 84), (80, 100), (98, 79), (87, 24), (50, 50)],
)
def test_correct_square(square, expected):
    assert correct_square(square) == expected


def test_jumps_stay_on_board():
    for start, end in JUMPS.items():
        assert 1 <= end <= 100
        assert start != end


def test_jump_messages():
    assert Jump(4, 14).message(1) == "\nPlayer 1 has Hit a Ladder!\n"
    assert Jump(17, 7).message(2) == "\nPlayer 2 got Bit a Snake!\n"


def test_take_turn_ladder():
    game = SnakesGame()
    jump = game.take_turn(1, 1)
    assert jump == Jump(1, 38)
    assert jump.is_ladder
    assert game.score1 == 38
    assert game.score2 == 0


def test_take_turn_snake():
    game = SnakesGame(score2=60)
    jump = game.take_turn(2, 2)
    assert jump == Jump(62, 19)
    assert not jump.is_ladder
    assert game.score2 == 19


def test_take_turn_caps_at_hundred():
    game = SnakesGame(score1=97)
    assert game.take_turn(1, 6) is None
    assert game.score1 == 100
    assert game.winner() == 1


def test_take_turn_rejects_bad_player_and_roll():
    game = SnakesGame()
    with pytest.raises(ValueError):
        game.take_turn(3, 2)
    with pytest.raises(ValueError):
        game.take_turn(1, 7)


def test_winner_prefers_player_one():
    assert SnakesGame(100, 100).winner() == 1
    assert SnakesGame(40, 100).winner() == 2
    assert SnakesGame(40, 50).winner() is None


def test_board_pieces():
    assert " [B] " in render_board(55, 55)
    board = render_board(1, 100)
    assert " [O] " in board and " [X] " in board
    assert " 100 " not in board


def test_scoreboard_leader():
    assert "Leader     : Player 1 [O]" in render_scoreboard(10, 5)
    assert "Leader     : Player 2 [X]" in render_scoreboard(5, 10)
    assert "It's a tie right now!" in render_scoreboard(7, 7)


def test_play_runs_to_a_winner():
    out = []
    clears = []
    winner = play(FixedRng(6), lambda: "x", out.append, lambda: clears.append(1))
    text = "".join(out)
    assert winner == 1
    assert text.endswith("\n Player 1 [O] wins!\n")
    assert text.count("\nClick Player 1") == len(clears)
    assert "\nPlayer 1 got Bit a Snake!\n" in text