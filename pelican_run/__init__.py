from .game import PelicanRunner, Phase, RunSnapshot, RunState
from .obstacles import Obstacle, ObstacleKind, ObstacleManager
from .physics import PlayerBody
from .scheduler import FrameScheduler, ManualScheduler, TickScheduler

__all__ = [
    "FrameScheduler",
    "ManualScheduler",
    "Obstacle",
    "ObstacleKind",
    "ObstacleManager",
    "PelicanRunner",
    "Phase",
    "PlayerBody",
    "RunSnapshot",
    "RunState",
    "TickScheduler",
]
