"""Game session state owned by the engine."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..challenges.challenge import Challenge


class GamePhase(str, Enum):
    """Where the game as a whole is."""

    CHOOSING_LEVEL = "choosingLevel"
    PLAYING = "playing"
    LEVEL_COMPLETED = "levelCompleted"


class LevelOutcome(str, Enum):
    NORMAL = "normal"
    PERFECT = "perfect"


class GameSession(BaseModel):
    """Progress through one play of a level."""

    level_id: str
    level_index: int = Field(ge=0)
    challenges: list[Challenge] = Field(min_length=1)
    challenge_index: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0)
    elapsed_time: float = Field(default=0.0, ge=0.0, description="Seconds")
    timer_enabled: bool = False
    best_times: dict[str, float] = Field(default_factory=dict)

    @property
    def active_challenge(self) -> Optional[Challenge]:
        if self.is_complete:
            return None
        return self.challenges[self.challenge_index]

    @property
    def is_complete(self) -> bool:
        return self.challenge_index >= len(self.challenges)

    @property
    def max_score(self) -> int:
        """Score for solving every challenge on the first attempt."""
        return sum(c.scoring.points_for_first_attempt for c in self.challenges)

    def unreleased_challenges(self) -> list[Challenge]:
        return [c for c in self.challenges if not c.released]


class LevelResult(BaseModel):
    """Outcome of a completed level."""

    model_config = ConfigDict(frozen=True)

    level_id: str
    score: int
    max_score: int
    outcome: LevelOutcome
    elapsed_time: float
    timer_enabled: bool
    best_time: Optional[float] = None
    is_new_best_time: bool = False

    @property
    def is_perfect(self) -> bool:
        return self.outcome == LevelOutcome.PERFECT
