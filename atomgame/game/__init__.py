"""Game engine: levels, challenge generation and session control."""

from .config import GameConfig
from .engine import GameEngine
from .events import EventBus, GameEvent
from .generator import ChallengeGenerator, ChallengeSpec, FixedChallengeSource
from .levels import DEFAULT_LEVELS, LevelDefinition
from .session import GamePhase, GameSession, LevelOutcome, LevelResult

__all__ = [
    # Config
    "GameConfig",
    "LevelDefinition",
    "DEFAULT_LEVELS",
    # Generation
    "ChallengeGenerator",
    "ChallengeSpec",
    "FixedChallengeSource",
    # Engine
    "GameEngine",
    "GamePhase",
    "GameSession",
    "LevelOutcome",
    "LevelResult",
    # Events
    "EventBus",
    "GameEvent",
]
