import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from .config import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .game import PelicanRunner, Phase
from .renderer import Renderer
from .scheduler import ManualScheduler


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": FPS}

    # Must be a short, user-facing control string:
    user_guide = "Controls: Press ↑ or space to jump over the driftwood and rocks."

    # Must be a short, user-facing description of the game:
    game_description = (
        "A beach endless runner. Jump the pelican over driftwood and rocks "
        "while the shore scrolls faster and faster."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    MAX_STEPS = 10000
    SURVIVE_REWARD = 0.1
    CRASH_PENALTY = -10.0

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        # EXACT spaces:
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(SCREEN_HEIGHT, SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # Pygame setup
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.renderer = Renderer(self.screen)

        # Initialize state variables to be set in reset()
        self.scheduler = None
        self.game = None
        self.steps = 0
        self.game_over = False

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.scheduler = ManualScheduler()
        self.game = PelicanRunner(scheduler=self.scheduler, rng=self.np_random)
        self.game.start()

        self.steps = 0
        self.game_over = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game_over:
            return self._get_observation(), 0, True, False, self._get_info()

        # Unpack factorized action
        movement = action[0]  # 0-4: none/up/down/left/right
        space_held = action[1] == 1

        if movement == 1 or space_held:
            self.game.jump()

        self.scheduler.advance(1)
        self.steps += 1

        reward = self.SURVIVE_REWARD
        if self.game.phase == Phase.GAME_OVER:
            reward = self.CRASH_PENALTY
            self.game_over = True
        elif self.steps >= self.MAX_STEPS:
            self.game.stop()
            self.game_over = True

        return (
            self._get_observation(),
            reward,
            self.game_over,
            False,  # truncated always False
            self._get_info()
        )

    def _get_observation(self):
        self.renderer.draw(self.game.snapshot())

        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.game.display_score,
            "steps": self.steps,
            "speed": self.game.state.speed,
            "phase": self.game.phase.value,
        }

    def render(self):
        return self._get_observation()

    def close(self):
        if self.game is not None:
            self.game.stop()
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this after __init__ to verify implementation:
        '''
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (SCREEN_HEIGHT, SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (SCREEN_HEIGHT, SCREEN_WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (SCREEN_HEIGHT, SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)
