"""Repeating tick sources.

A scheduler holds at most one registered callback, the "next frame" request
of the game loop. Hosts decide when frames happen: tests and the gym env
advance by hand, the window loop pumps a pygame clock.
"""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from .config import FPS, FRAME_MS

TickCallback = Callable[[float], None]


class TickScheduler:
    """Cancellable repeating-tick registration."""

    def __init__(self, frame_ms: float = FRAME_MS):
        self.frame_ms = frame_ms
        self._callback: Optional[TickCallback] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def schedule(self, callback: TickCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def _fire(self, dt_ms: float) -> bool:
        callback = self._callback
        if callback is None:
            return False
        callback(dt_ms)
        return True


class ManualScheduler(TickScheduler):
    """Ticks only when told to."""

    def advance(self, ticks: int = 1, dt_ms: Optional[float] = None) -> int:
        """Run up to `ticks` frames, stopping early once cancelled."""
        dt = self.frame_ms if dt_ms is None else dt_ms
        ran = 0
        for _ in range(ticks):
            if not self._fire(dt):
                break
            ran += 1
        return ran


class FrameScheduler(TickScheduler):
    """Ticks at display rate off a pygame clock."""

    def __init__(self, fps: int = FPS, fixed_step: bool = False):
        super().__init__(frame_ms=1000.0 / fps)
        self.fps = fps
        self.fixed_step = fixed_step
        self.clock = pygame.time.Clock()

    def pump(self) -> bool:
        """Wait for the next frame; returns True if a tick ran."""
        elapsed = self.clock.tick(self.fps)
        dt = self.frame_ms if self.fixed_step else float(elapsed)
        return self._fire(dt)
