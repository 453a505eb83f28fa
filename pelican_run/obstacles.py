from __future__ import annotations

import enum
from typing import List, Optional

import numpy as np

from .config import OBSTACLE_WIDTH, SPAWN_GAP_MS, SPAWN_JITTER_MS, SPAWN_X
from .log import get_logger

logger = get_logger("obstacles")


class ObstacleKind(enum.Enum):
    LOW_BARRIER = "driftwood"
    TALL_BARRIER = "rock"


class Obstacle:
    def __init__(self, obstacle_id, x, kind):
        self.id = obstacle_id
        self.horizontal_position = float(x)
        self.kind = kind

    def __repr__(self):
        return f"Obstacle(id={self.id}, x={self.horizontal_position:.1f}, kind={self.kind.value})"


class ObstacleManager:
    """
    Owns the live obstacles of a run.

    Each tick every obstacle scrolls left by the current speed, anything
    fully past the left edge is dropped, and at most one new obstacle is
    spawned once the randomized gap since the last spawn has elapsed.

    `rng` must provide `uniform(low, high)` and `random()`, which is what a
    numpy Generator (and the gym env's `np_random`) offers.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.obstacles: List[Obstacle] = []
        self.next_id = 0
        self.last_spawn_ms = 0.0

    def clear(self):
        self.obstacles = []
        self.next_id = 0
        self.last_spawn_ms = 0.0

    def advance(self, speed: float, now_ms: float):
        for obs in self.obstacles:
            obs.horizontal_position -= speed

        self.obstacles = [obs for obs in self.obstacles if obs.horizontal_position > -OBSTACLE_WIDTH]

        # Gap is redrawn every tick
        gap = SPAWN_GAP_MS + self.rng.uniform(0, SPAWN_JITTER_MS)
        if now_ms - self.last_spawn_ms > gap:
            self.spawn(now_ms)

    def spawn(self, now_ms: float, x: float = SPAWN_X, kind: Optional[ObstacleKind] = None) -> Obstacle:
        assert now_ms >= self.last_spawn_ms, f"spawn timer went backwards: {now_ms} < {self.last_spawn_ms}"

        if kind is None:
            kind = ObstacleKind.LOW_BARRIER if self.rng.random() > 0.5 else ObstacleKind.TALL_BARRIER

        obstacle = Obstacle(self.next_id, x, kind)
        self.next_id += 1
        self.obstacles.append(obstacle)
        self.last_spawn_ms = now_ms
        logger.debug("spawned %r", obstacle)
        return obstacle

    def check_invariants(self):
        ids = [obs.id for obs in self.obstacles]
        assert len(ids) == len(set(ids)), f"duplicate obstacle ids: {ids}"
        assert all(obs.horizontal_position > -OBSTACLE_WIDTH for obs in self.obstacles)
