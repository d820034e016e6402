import pytest

from hockeysim.movement import GoalieMovement, SkatingStats, SkatingType


def test_skating_type_random_is_member():
    seen = {SkatingType.random() for _ in range(200)}
    assert seen <= set(SkatingType)
    assert len(seen) > 1


def test_skating_apply_delta_zero_keeps_values():
    stats = SkatingStats(50, 60, 70, SkatingType.QUICK)
    stats.apply_delta(0, 0, 0, 99)
    assert (stats.speed, stats.edges, stats.acceleration) == (50, 60, 70)
    assert stats.skate_type is SkatingType.QUICK


def test_skating_apply_delta_clamps_to_max():
    stats = SkatingStats(95, 90, 10, SkatingType.SLOW)
    stats.apply_delta(20, 20, 20, 80)
    assert stats.speed == 80
    assert stats.edges == 80
    assert stats.acceleration == 30


def test_skating_apply_delta_clamps_to_one():
    stats = SkatingStats(5, 3, 2, SkatingType.NIMBLE)
    stats.apply_delta(-10, -10, -10, 99)
    assert (stats.speed, stats.edges, stats.acceleration) == (1, 1, 1)


def test_goalie_apply_delta_bounds():
    movement = GoalieMovement(50, 2, 98)
    movement.apply_delta(-60, 0, 5, 99)
    assert movement.side == 1
    assert movement.up_down == 2
    assert movement.push == 99


@pytest.mark.parametrize("delta", [-100, -3, 0, 4, 100])
def test_goalie_ratings_stay_in_range(delta):
    movement = GoalieMovement(40, 60, 80)
    movement.apply_delta(delta, delta, delta, 75)
    for value in (movement.side, movement.up_down, movement.push):
        assert 1 <= value <= 75


def test_invalid_max_rating_raises():
    stats = SkatingStats(50, 50, 50, SkatingType.STRONG)
    with pytest.raises(ValueError):
        stats.apply_delta(1, 1, 1, 0)