"""Application layer - use cases and orchestration."""

from .commands import ConstructWallsCommand
from .dtos import ProjectOutput, WallOutput

__all__ = [
    "ConstructWallsCommand",
    "ProjectOutput",
    "WallOutput",
]
