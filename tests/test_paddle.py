import pytest

from pingpong.paddle import Paddle
from pingpong.settings import BLUE, RED, PlayerSlot


@pytest.fixture
def paddle(settings):
    return Paddle(12, 176, PlayerSlot.ONE, settings.bounds, settings)


def test_move_up_and_down(paddle):
    paddle.move_up(0.1)
    assert paddle.pos_y == pytest.approx(161)
    paddle.move_down(0.2)
    assert paddle.pos_y == pytest.approx(191)


def test_clamped_to_court(paddle, settings):
    paddle.move_up(10)
    assert paddle.pos_y == settings.bounds.upper
    paddle.move_down(10)
    assert paddle.pos_y + paddle.height == settings.bounds.lower


@pytest.mark.parametrize("start_y", [25, 100, 176, 300, 327])
@pytest.mark.parametrize("dt", [0, 0.001, 1 / 60, 0.5, 3])
def test_box_never_leaves_court(settings, start_y, dt):
    bounds = settings.bounds
    paddle = Paddle(616, start_y, PlayerSlot.TWO, bounds, settings)
    for move in (paddle.move_up, paddle.move_down, paddle.move_down, paddle.move_up):
        move(dt)
        box = paddle.collision_box
        assert bounds.upper <= box.top
        assert box.bottom <= bounds.lower


def test_zero_dt_does_not_move(paddle):
    paddle.move_down(0)
    assert paddle.pos_y == 176


def test_reset(paddle):
    paddle.move_down(1)
    paddle.pos_x = 99
    paddle.reset()
    assert (paddle.pos_x, paddle.pos_y) == (12, 176)


def test_collision_box_and_center(paddle):
    box = paddle.collision_box
    assert (box.x, box.y, box.width, box.height) == (12, 176, 12, 48)
    assert paddle.center_y == 200


def test_render_color_by_slot(settings):
    bounds = settings.bounds
    assert Paddle(0, 100, PlayerSlot.ONE, bounds, settings).render_color == RED
    assert Paddle(0, 100, PlayerSlot.TWO, bounds, settings).render_color == BLUE
