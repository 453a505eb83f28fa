from __future__ import annotations

import pygame

from .game import Phase


class InputAdapter:
    """Maps pygame events onto start/jump commands."""

    def __init__(self, game, jump_keys=(pygame.K_SPACE, pygame.K_UP)):
        self.game = game
        self.jump_keys = tuple(jump_keys)

    def _press(self):
        # Same button restarts after a crash
        if self.game.phase == Phase.PLAYING:
            self.game.jump()
            return "jump"
        self.game.start()
        return "start"

    def handle(self, event):
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "quit"
            if event.key in self.jump_keys:
                return self._press()
            if event.key == pygame.K_RETURN and self.game.phase != Phase.PLAYING:
                self.game.start()
                return "start"
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._press()
        return None
