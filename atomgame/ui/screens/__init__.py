"""UI Screens."""

from .home import HomeScreen
from .builder import BuilderScreen
from .levels import LevelSelectScreen
from .challenge import ChallengeScreen

__all__ = ["HomeScreen", "BuilderScreen", "LevelSelectScreen", "ChallengeScreen"]
