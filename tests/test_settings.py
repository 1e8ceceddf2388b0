import pytest

from pingpong.settings import BLUE, DEFAULT_SETTINGS, RED, Bounds, PlayerSlot, Settings


def test_default_bounds():
    assert DEFAULT_SETTINGS.bounds == Bounds(upper=25, lower=375, left=0, right=640)


def test_slot_colors():
    assert DEFAULT_SETTINGS.color_for(PlayerSlot.ONE) == RED
    assert DEFAULT_SETTINGS.color_for(PlayerSlot.TWO) == BLUE


def test_with_overrides_returns_new_instance():
    s = DEFAULT_SETTINGS.with_overrides(win_score=3, width=800)
    assert s.win_score == 3
    assert s.bounds.right == 800
    assert DEFAULT_SETTINGS.win_score == 7


@pytest.mark.parametrize("changes", [
    {"min_ball_speed": 400},
    {"win_score": 0},
    {"target_fps": 0},
    {"height": 80},
    {"width": 30},
    {"width": 0},
    {"width": -100},
    {"prediction_distance_max": 0},
])
def test_invalid_settings_rejected(changes):
    with pytest.raises(ValueError):
        Settings(**changes)
