import pytest

from conftest import ScriptedRng
from pelican_run.config import SPAWN_X
from pelican_run.obstacles import ObstacleKind, ObstacleManager


def test_advance_scrolls_left_by_speed():
    manager = ObstacleManager(ScriptedRng())
    obs = manager.spawn(0, x=500)
    manager.advance(4.5, 10)
    assert obs.horizontal_position == 495.5


def test_drops_obstacles_fully_off_screen():
    manager = ObstacleManager(ScriptedRng())
    gone = manager.spawn(0, x=-26)
    kept = manager.spawn(0, x=-25)
    manager.advance(4, 10)

    assert gone not in manager.obstacles
    assert kept in manager.obstacles
    assert kept.horizontal_position == -29


def test_spawns_only_after_gap_exceeded():
    manager = ObstacleManager(ScriptedRng(uniforms=[0, 0]))
    manager.advance(4, 1500)
    assert manager.obstacles == []

    manager.advance(4, 1501)
    assert len(manager.obstacles) == 1
    obs = manager.obstacles[0]
    assert obs.horizontal_position == SPAWN_X
    assert obs.id == 0
    assert manager.last_spawn_ms == 1501


def test_at_most_one_spawn_per_tick():
    manager = ObstacleManager(ScriptedRng())
    manager.advance(4, 100000)
    assert len(manager.obstacles) == 1


@pytest.mark.parametrize("draw, kind", [
    (0.9, ObstacleKind.LOW_BARRIER),
    (0.5, ObstacleKind.TALL_BARRIER),
    (0.1, ObstacleKind.TALL_BARRIER),
])
def test_kind_comes_from_rng(draw, kind):
    manager = ObstacleManager(ScriptedRng(randoms=[draw]))
    assert manager.spawn(0).kind == kind


def test_ids_are_monotonic_and_unique():
    manager = ObstacleManager(ScriptedRng(uniforms=[0] * 10))
    for t in range(1, 6):
        manager.advance(1, t * 2000)
    ids = [obs.id for obs in manager.obstacles]
    assert ids == [0, 1, 2, 3, 4]
    manager.check_invariants()


def test_clear_resets_counter_and_timer():
    manager = ObstacleManager(ScriptedRng())
    manager.spawn(3000)
    manager.clear()
    assert manager.obstacles == []
    assert manager.last_spawn_ms == 0
    assert manager.spawn(0).id == 0


def test_spawn_timer_regression_fails_loudly():
    manager = ObstacleManager(ScriptedRng())
    manager.spawn(3000)
    with pytest.raises(AssertionError):
        manager.spawn(2000)


def test_default_rng_is_numpy_generator():
    manager = ObstacleManager()
    manager.advance(4, 10000)
    assert len(manager.obstacles) == 1
    assert isinstance(manager.obstacles[0].kind, ObstacleKind)
