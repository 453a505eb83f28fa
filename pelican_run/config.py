"""Game constants and runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

# --- Screen ---
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 320
FPS = 60
FRAME_MS = 1000.0 / FPS

# --- Player physics (units per tick) ---
GROUND_REST = 150
GRAVITY = 0.8
JUMP_IMPULSE = -15
PLAYER_LEFT = 100
PLAYER_SIZE = 40

# --- Obstacles ---
GROUND_Y = 200
OBSTACLE_WIDTH = 30
OBSTACLE_HEIGHT = 40
SPAWN_X = SCREEN_WIDTH
SPAWN_GAP_MS = 1500
SPAWN_JITTER_MS = 1000

# --- Difficulty ---
INITIAL_SPEED = 4.0
SPEED_INCREMENT = 0.005
SPEED_CAP = 8.0

# Internal score ticks per displayed point
SCORE_DIVISOR = 10


@dataclass(frozen=True)
class AppConfig:
    fps: int
    seed: int | None
    log_level: str
    score_divisor: int
    fixed_step: bool


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def check_fps(name: str, fps: int) -> int:
    if fps <= 0:
        raise ValueError(f"{name} must be positive, got {fps}")
    return fps


def check_log_level(name: str, level: str) -> str:
    if level.lower() not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level.lower()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be true or false, got {raw!r}")


def load_config() -> AppConfig:
    """Load runtime settings from .env and environment variables."""
    load_dotenv(find_dotenv(usecwd=True))

    fps = check_fps("PELICAN_FPS", _env_int("PELICAN_FPS", FPS))

    score_divisor = _env_int("PELICAN_SCORE_DIVISOR", SCORE_DIVISOR)
    if score_divisor <= 0:
        raise ValueError(f"PELICAN_SCORE_DIVISOR must be positive, got {score_divisor}")

    raw_seed = os.environ.get("PELICAN_SEED")
    seed = _env_int("PELICAN_SEED", 0) if raw_seed else None

    return AppConfig(
        fps=fps,
        seed=seed,
        log_level=check_log_level("PELICAN_LOG_LEVEL", os.environ.get("PELICAN_LOG_LEVEL", "info")),
        score_divisor=score_divisor,
        fixed_step=_env_bool("PELICAN_FIXED_STEP", False),
    )
