"""Play Pelican Run in a window.

Usage:
    python -m pelican_run                  # SPACE / click to jump
    python -m pelican_run --autopilot      # let the scripted policy play
"""

from __future__ import annotations

import argparse
from types import SimpleNamespace

import numpy as np
import pygame

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, check_fps, check_log_level, load_config
from .game import PelicanRunner, Phase
from .input import InputAdapter
from .log import get_logger, setup_logging
from .policy import policy
from .renderer import Renderer
from .scheduler import FrameScheduler

logger = get_logger("main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="pelican_run", description="Endless beach runner.")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle spawning")
    parser.add_argument("--fps", type=int, default=None, help="display refresh rate")
    parser.add_argument("--autopilot", action="store_true", help="let the scripted policy jump")
    parser.add_argument("--log-level", default=None, help="debug, info, warning, ...")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = load_config()
    if args.log_level is not None:
        check_log_level("--log-level", args.log_level)
    if args.fps is not None:
        check_fps("--fps", args.fps)
    setup_logging(args.log_level or config.log_level)

    fps = args.fps if args.fps is not None else config.fps
    seed = args.seed if args.seed is not None else config.seed

    pygame.init()
    pygame.display.set_caption("Pelican Run")
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))

    scheduler = FrameScheduler(fps=fps, fixed_step=config.fixed_step)
    game = PelicanRunner(scheduler=scheduler, rng=np.random.default_rng(seed), score_divisor=config.score_divisor)
    renderer = Renderer(screen)
    game.subscribe(renderer)
    controls = InputAdapter(game)

    logger.info("window %dx%d at %d fps, seed=%s", SCREEN_WIDTH, SCREEN_HEIGHT, fps, seed)
    renderer.draw(game.snapshot())
    pygame.display.flip()

    # policy() reads env.game, so hand it a stand-in env
    pilot_env = SimpleNamespace(game=game)

    running = True
    while running:
        for event in pygame.event.get():
            if controls.handle(event) == "quit":
                running = False

        if args.autopilot:
            if game.phase == Phase.READY:
                game.start()
            elif game.phase == Phase.PLAYING and policy(pilot_env)[0] == 1:
                game.jump()

        # Ticks redraw through the subscription; idle frames still need a flip
        if not scheduler.pump():
            renderer.draw(game.snapshot())
        pygame.display.flip()

    game.stop()
    game.unsubscribe(renderer)
    pygame.quit()


if __name__ == "__main__":
    main()
