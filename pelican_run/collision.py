from __future__ import annotations

from collections import namedtuple
from typing import Iterable, Optional

from .config import GROUND_Y, OBSTACLE_HEIGHT, OBSTACLE_WIDTH, PLAYER_LEFT, PLAYER_SIZE

Box = namedtuple("Box", ["left", "top", "right", "bottom"])


def player_box(vertical_position: float) -> Box:
    return Box(PLAYER_LEFT, vertical_position, PLAYER_LEFT + PLAYER_SIZE, vertical_position + PLAYER_SIZE)


def obstacle_box(horizontal_position: float) -> Box:
    # Every kind shares the same hitbox
    return Box(horizontal_position, GROUND_Y - OBSTACLE_HEIGHT, horizontal_position + OBSTACLE_WIDTH, GROUND_Y)


def overlaps(a: Box, b: Box) -> bool:
    """Strict AABB overlap; touching edges do not count."""
    return a.left < b.right and a.right > b.left and a.top < b.bottom and a.bottom > b.top


def find_collision(vertical_position: float, obstacles: Iterable) -> Optional[object]:
    """First obstacle, in spawn order, that overlaps the player, or None."""
    player = player_box(vertical_position)
    for obs in obstacles:
        if overlaps(obstacle_box(obs.horizontal_position), player):
            return obs
    return None
