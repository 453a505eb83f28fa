from __future__ import annotations

from .config import GRAVITY, GROUND_REST, JUMP_IMPULSE


class PlayerBody:
    """Vertical state of the pelican. Smaller positions are higher up."""

    def __init__(self):
        self.vertical_position = float(GROUND_REST)
        self.vertical_velocity = 0.0
        self.is_airborne = False

    def reset(self):
        self.vertical_position = float(GROUND_REST)
        self.vertical_velocity = 0.0
        self.is_airborne = False

    def jump(self) -> bool:
        if self.is_airborne:
            return False
        self.is_airborne = True
        self.vertical_velocity = float(JUMP_IMPULSE)
        return True

    def integrate(self):
        if not self.is_airborne:
            return

        self.vertical_velocity += GRAVITY
        self.vertical_position += self.vertical_velocity

        # Landed
        if self.vertical_position >= GROUND_REST:
            self.vertical_position = float(GROUND_REST)
            self.vertical_velocity = 0.0
            self.is_airborne = False
