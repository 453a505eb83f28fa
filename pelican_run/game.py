"""Run state and the game state machine.

`PelicanRunner` is the only writer of run state. Hosts drive it through
three entry points: `start()`, `jump()` and the scheduled `tick(dt_ms)`.
After each start and each tick, subscribers get an immutable
`RunSnapshot` to draw from.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .collision import find_collision
from .config import GROUND_REST, INITIAL_SPEED, SCORE_DIVISOR, SPEED_CAP, SPEED_INCREMENT
from .log import get_logger
from .obstacles import ObstacleKind, ObstacleManager
from .physics import PlayerBody
from .scheduler import ManualScheduler, TickScheduler

logger = get_logger("game")


class Phase(enum.Enum):
    READY = "ready"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class PlayerView:
    vertical_position: float
    is_airborne: bool


@dataclass(frozen=True)
class ObstacleView:
    id: int
    horizontal_position: float
    kind: ObstacleKind


@dataclass(frozen=True)
class RunSnapshot:
    phase: Phase
    score: int
    display_score: int
    speed: float
    player: PlayerView
    obstacles: Tuple[ObstacleView, ...]


class RunState:
    """Everything that belongs to one run."""

    def __init__(self, rng=None):
        self.phase = Phase.READY
        self.score = 0
        self.speed = INITIAL_SPEED
        self.elapsed_ms = 0.0
        self.player = PlayerBody()
        self.obstacle_manager = ObstacleManager(rng)

    @property
    def obstacles(self):
        return self.obstacle_manager.obstacles

    def reset(self):
        self.score = 0
        self.speed = INITIAL_SPEED
        self.elapsed_ms = 0.0
        self.player.reset()
        self.obstacle_manager.clear()


Listener = Callable[[RunSnapshot], None]


class PelicanRunner:
    def __init__(self, scheduler: Optional[TickScheduler] = None, rng=None, score_divisor: int = SCORE_DIVISOR):
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.state = RunState(rng)
        self.score_divisor = score_divisor
        self._listeners: List[Listener] = []

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def display_score(self) -> int:
        return self.state.score // self.score_divisor

    # --- Commands ---

    def start(self):
        if self.state.phase == Phase.PLAYING:
            return

        self.state.reset()
        self.state.phase = Phase.PLAYING
        self.scheduler.schedule(self.tick)
        logger.info("run started")
        self._notify()

    def jump(self):
        if self.state.phase != Phase.PLAYING:
            return
        if self.state.player.jump():
            logger.debug("jump at score=%d", self.state.score)

    def stop(self):
        """Drop the pending tick, e.g. when the owning view goes away."""
        self.scheduler.cancel()

    # --- Loop ---

    def tick(self, dt_ms: float):
        state = self.state
        if state.phase != Phase.PLAYING:
            return

        assert dt_ms >= 0, f"negative frame time: {dt_ms}"
        state.elapsed_ms += dt_ms

        # 1. Physics
        state.player.integrate()

        # 2. Obstacles
        state.obstacle_manager.advance(state.speed, state.elapsed_ms)

        # 3. Collision
        hit = find_collision(state.player.vertical_position, state.obstacles)
        if hit is not None:
            state.phase = Phase.GAME_OVER
            self.scheduler.cancel()

        # 4. Score and speed, terminal tick included
        state.score += 1
        state.speed = min(state.speed + SPEED_INCREMENT, SPEED_CAP)

        if hit is not None:
            logger.info("game over: hit %r, final score %d", hit, self.display_score)

        self._check_invariants()
        self._notify()

    def _check_invariants(self):
        state = self.state
        assert INITIAL_SPEED <= state.speed <= SPEED_CAP, f"speed out of range: {state.speed}"
        assert state.player.vertical_position <= GROUND_REST, "player below ground"
        state.obstacle_manager.check_invariants()

    # --- Observers ---

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> RunSnapshot:
        state = self.state
        return RunSnapshot(
            phase=state.phase,
            score=state.score,
            display_score=self.display_score,
            speed=state.speed,
            player=PlayerView(state.player.vertical_position, state.player.is_airborne),
            obstacles=tuple(
                ObstacleView(obs.id, obs.horizontal_position, obs.kind) for obs in state.obstacles
            ),
        )

    def _notify(self):
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
