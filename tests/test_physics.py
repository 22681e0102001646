"""Unit tests for pac_physics: jump integration.

Run with:
    pytest tests/test_physics.py -v
"""

import pytest

from pac_entities import Player
from pac_physics import integrate_vertical, try_jump


DT = 1.0 / 60.0
GRAVITY = -12.0
IMPULSE = 6.0


def test_grounded_player_stays_on_floor():
    height, velocity = 0.0, 0.0
    for _ in range(10):
        height, velocity = integrate_vertical(height, velocity, GRAVITY, DT)
        assert (height, velocity) == (0.0, 0.0)


def test_single_step_is_trapezoidal():
    height, velocity = integrate_vertical(0.0, IMPULSE, GRAVITY, DT)
    assert velocity == pytest.approx(IMPULSE + GRAVITY * DT)
    assert height == pytest.approx((IMPULSE + velocity) / 2 * DT)


def test_projectile_round_trip():
    height, velocity = 0.0, IMPULSE
    peak = 0.0
    ticks = 0
    while True:
        height, velocity = integrate_vertical(height, velocity, GRAVITY, DT)
        ticks += 1
        peak = max(peak, height)
        if height <= 0.0:
            break
        assert ticks < 200
    assert height == 0.0
    assert velocity == 0.0
    # flight time 2 * v0 / |g| = 1s, apex v0^2 / (2|g|) = 1.5
    assert 59 <= ticks <= 61
    assert peak == pytest.approx(1.5, rel=1e-2)


def test_jump_only_from_the_ground():
    player = Player(1, 1)
    assert try_jump(player, IMPULSE)
    assert player.vertical_velocity == IMPULSE

    player.height, player.vertical_velocity = integrate_vertical(0.0, IMPULSE, GRAVITY, DT)
    velocity = player.vertical_velocity
    assert not try_jump(player, IMPULSE)
    assert player.vertical_velocity == velocity
