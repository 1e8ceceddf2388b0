from pingpong.scoreboard import ScoreBoard
from pingpong.settings import PlayerSlot


def test_fresh_board():
    board = ScoreBoard()
    assert (board.player_one_score, board.player_two_score, board.round) == (0, 0, 0)
    assert board.winner is None


def test_winner_player_one():
    board = ScoreBoard(win_score=7)
    for _ in range(7):
        board.add_point(PlayerSlot.ONE)
    assert board.winner == PlayerSlot.ONE


def test_winner_player_two():
    board = ScoreBoard(win_score=3)
    board.add_point(PlayerSlot.ONE)
    for _ in range(3):
        board.add_point(PlayerSlot.TWO)
    assert board.winner == PlayerSlot.TWO
    assert board.score_of(PlayerSlot.ONE) == 1
    assert board.score_of(PlayerSlot.TWO) == 3


def test_reset():
    board = ScoreBoard()
    board.add_point(PlayerSlot.TWO)
    board.round = 4
    board.reset()
    assert (board.player_one_score, board.player_two_score, board.round) == (0, 0, 0)
