import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pelican_run.game import PelicanRunner
from pelican_run.scheduler import ManualScheduler


class ScriptedRng:
    """Replays fixed values; `uniform` keeps the spawn gap at its maximum by default."""

    def __init__(self, uniforms=None, randoms=None, jitter=None):
        self.uniforms = list(uniforms or [])
        self.randoms = list(randoms or [])
        self.jitter = jitter

    def uniform(self, low, high):
        if self.uniforms:
            return self.uniforms.pop(0)
        return high if self.jitter is None else self.jitter

    def random(self):
        if self.randoms:
            return self.randoms.pop(0)
        return 0.9


@pytest.fixture
def rng():
    return ScriptedRng()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def game(scheduler, rng):
    return PelicanRunner(scheduler=scheduler, rng=rng)


@pytest.fixture
def playing(game):
    game.start()
    return game
