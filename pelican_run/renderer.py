from __future__ import annotations

import pygame
import pygame.gfxdraw

from .config import GROUND_Y, OBSTACLE_HEIGHT, OBSTACLE_WIDTH, PLAYER_LEFT, PLAYER_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH
from .game import Phase, RunSnapshot
from .obstacles import ObstacleKind


class Renderer:
    """Draws a RunSnapshot; reads state, never changes it."""

    # Colors
    COLOR_SKY_TOP = (125, 211, 252)
    COLOR_SKY_BOTTOM = (253, 230, 138)
    COLOR_SAND = (252, 211, 77)
    COLOR_SAND_EDGE = (217, 119, 6)
    COLOR_OUTLINE = (30, 41, 59)
    COLOR_PELICAN = (255, 255, 255)
    COLOR_WING = (209, 213, 219)
    COLOR_BEAK = (251, 146, 60)
    COLOR_DRIFTWOOD = (146, 64, 14)
    COLOR_DRIFTWOOD_GRAIN = (180, 83, 9)
    COLOR_ROCK = (75, 85, 99)
    COLOR_ROCK_SPOT = (107, 114, 128)
    COLOR_TEXT = (30, 41, 59)
    COLOR_TEXT_MUTED = (71, 85, 105)
    COLOR_PANEL = (255, 255, 255, 220)
    COLOR_DIM = (0, 0, 0, 76)

    def __init__(self, surface: pygame.Surface):
        pygame.font.init()
        self.surface = surface
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 32)
        self.font_small = pygame.font.Font(None, 24)
        self._background = self._build_background()

    def __call__(self, snapshot: RunSnapshot):
        self.draw(snapshot)

    def _build_background(self):
        bg = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        for y in range(GROUND_Y):
            t = y / GROUND_Y
            color = [int(a + (b - a) * t) for a, b in zip(self.COLOR_SKY_TOP, self.COLOR_SKY_BOTTOM)]
            pygame.draw.line(bg, color, (0, y), (SCREEN_WIDTH, y))
        pygame.draw.rect(bg, self.COLOR_SAND, (0, GROUND_Y, SCREEN_WIDTH, SCREEN_HEIGHT - GROUND_Y))
        pygame.draw.line(bg, self.COLOR_SAND_EDGE, (0, GROUND_Y), (SCREEN_WIDTH, GROUND_Y), 4)
        # Ground pattern
        for x in range(20, SCREEN_WIDTH, 22):
            pygame.draw.line(bg, self.COLOR_SAND_EDGE, (x, GROUND_Y + 4), (x, SCREEN_HEIGHT), 1)
        return bg

    def draw(self, snapshot: RunSnapshot):
        self.surface.blit(self._background, (0, 0))
        self._render_game(snapshot)
        self._render_ui(snapshot)

    def _render_game(self, snapshot):
        for obs in snapshot.obstacles:
            self._draw_obstacle(obs)
        self._draw_pelican(snapshot.player)

    def _draw_obstacle(self, obs):
        x = int(obs.horizontal_position)
        top = GROUND_Y - OBSTACLE_HEIGHT
        if obs.kind == ObstacleKind.LOW_BARRIER:
            rect = pygame.Rect(x, top, OBSTACLE_WIDTH, OBSTACLE_HEIGHT)
            pygame.draw.rect(self.surface, self.COLOR_DRIFTWOOD, rect, border_radius=2)
            for i in (1, 2):
                pygame.draw.rect(self.surface, self.COLOR_DRIFTWOOD_GRAIN, (x, top + i * 12, OBSTACLE_WIDTH, 5))
            pygame.draw.rect(self.surface, self.COLOR_OUTLINE, rect, 2, border_radius=2)
        else:
            rect = pygame.Rect(x + 1, top, OBSTACLE_WIDTH - 2, OBSTACLE_HEIGHT)
            pygame.draw.rect(self.surface, self.COLOR_ROCK, rect, border_top_left_radius=14,
                             border_top_right_radius=14, border_bottom_left_radius=3, border_bottom_right_radius=3)
            pygame.gfxdraw.filled_circle(self.surface, x + 9, top + 10, 5, self.COLOR_ROCK_SPOT)

    def _draw_pelican(self, player):
        sprite = pygame.Surface((PLAYER_SIZE + 16, PLAYER_SIZE + 8), pygame.SRCALPHA)
        body = pygame.Rect(0, 8, PLAYER_SIZE, 32)
        pygame.draw.ellipse(sprite, self.COLOR_PELICAN, body)
        pygame.draw.ellipse(sprite, self.COLOR_OUTLINE, body, 2)
        wing = pygame.Rect(PLAYER_SIZE - 28, 4, 24, 16)
        pygame.draw.ellipse(sprite, self.COLOR_WING, wing)
        pygame.draw.ellipse(sprite, self.COLOR_OUTLINE, wing, 1)
        pygame.gfxdraw.filled_circle(sprite, PLAYER_SIZE - 10, 14, 3, (0, 0, 0))
        beak = pygame.Rect(PLAYER_SIZE - 8, 16, 22, 10)
        pygame.draw.rect(sprite, self.COLOR_BEAK, beak, border_top_right_radius=6, border_bottom_right_radius=6)
        pygame.draw.rect(sprite, self.COLOR_OUTLINE, beak, 1, border_top_right_radius=6, border_bottom_right_radius=6)
        for leg_x in (8, 16):
            pygame.draw.line(sprite, self.COLOR_BEAK, (leg_x, 38), (leg_x, PLAYER_SIZE + 6), 3)

        rect = sprite.get_rect(topleft=(PLAYER_LEFT, int(player.vertical_position) - 4))
        if player.is_airborne:
            # Rotation grows the surface; keep it centred on the upright sprite
            sprite = pygame.transform.rotate(sprite, 10)
            rect = sprite.get_rect(center=rect.center)
        self.surface.blit(sprite, rect)

    def _render_ui(self, snapshot):
        score_surf = self.font_medium.render(f"Score: {snapshot.display_score}", True, self.COLOR_TEXT)
        score_rect = score_surf.get_rect(topright=(SCREEN_WIDTH - 20, 16))
        self._panel(score_rect.inflate(20, 12))
        self.surface.blit(score_surf, score_rect)

        if snapshot.phase == Phase.READY:
            self._overlay([
                (self.font_large, "Pelican Run", self.COLOR_TEXT),
                (self.font_small, "Press SPACE or CLICK to jump!", self.COLOR_TEXT_MUTED),
                (self.font_small, "Avoid the driftwood and rocks to keep running!", self.COLOR_TEXT_MUTED),
            ])
        elif snapshot.phase == Phase.GAME_OVER:
            self._overlay([
                (self.font_large, "Game Over!", self.COLOR_TEXT),
                (self.font_medium, f"Final Score: {snapshot.display_score}", self.COLOR_TEXT_MUTED),
                (self.font_small, "The pelican hit an obstacle!", self.COLOR_TEXT_MUTED),
                (self.font_small, "Press SPACE to play again", self.COLOR_TEXT_MUTED),
            ])

    def _panel(self, rect):
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, self.COLOR_PANEL, panel.get_rect(), border_radius=8)
        self.surface.blit(panel, rect.topleft)

    def _overlay(self, lines):
        dim = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        dim.fill(self.COLOR_DIM)
        self.surface.blit(dim, (0, 0))

        surfs = [font.render(text, True, color) for font, text, color in lines]
        width = max(s.get_width() for s in surfs) + 60
        height = sum(s.get_height() + 10 for s in surfs) + 40
        box = pygame.Rect(0, 0, width, height)
        box.center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
        self._panel(box)

        y = box.top + 20
        for s in surfs:
            self.surface.blit(s, s.get_rect(midtop=(SCREEN_WIDTH // 2, y)))
            y += s.get_height() + 10
