import pytest

from pelican_run.config import GROUND_REST, JUMP_IMPULSE
from pelican_run.physics import PlayerBody


def ticks_until_landed(body, limit=200):
    positions = []
    for tick in range(1, limit + 1):
        body.integrate()
        if not body.is_airborne:
            return tick, positions
        positions.append(body.vertical_position)
    raise AssertionError("never landed")


def test_starts_at_rest():
    body = PlayerBody()
    assert body.vertical_position == GROUND_REST
    assert body.vertical_velocity == 0
    assert not body.is_airborne


def test_integrate_is_noop_on_ground():
    body = PlayerBody()
    body.integrate()
    assert body.vertical_position == GROUND_REST
    assert body.vertical_velocity == 0


def test_jump_applies_impulse_once():
    body = PlayerBody()
    assert body.jump()
    assert body.is_airborne
    assert body.vertical_velocity == JUMP_IMPULSE

    body.integrate()
    velocity = body.vertical_velocity
    assert not body.jump()
    assert body.vertical_velocity == velocity


def test_jump_lands_on_closed_form_tick():
    # y_n = 150 - 15n + 0.4n(n+1) first reaches 150 at n = 37
    body = PlayerBody()
    body.jump()
    landed_at, positions = ticks_until_landed(body)

    assert landed_at == 37
    assert body.vertical_position == GROUND_REST
    assert body.vertical_velocity == 0
    assert not body.is_airborne

    apex = min(positions)
    assert apex == pytest.approx(16.8)
    assert positions.index(apex) == 17  # tick 18
    assert all(apex <= y < GROUND_REST for y in positions)


def test_stays_grounded_after_landing():
    body = PlayerBody()
    body.jump()
    ticks_until_landed(body)
    for _ in range(10):
        body.integrate()
        assert body.vertical_position == GROUND_REST
        assert not body.is_airborne


def test_reset_returns_to_rest_mid_air():
    body = PlayerBody()
    body.jump()
    body.integrate()
    body.reset()
    assert body.vertical_position == GROUND_REST
    assert body.vertical_velocity == 0
    assert not body.is_airborne
