"""
Configuration consumed by the game engine.

Every field has a default matching the classic game (five challenges per
level, two attempts worth 2 and 1 points, four levels), so tests and the
TUI can construct ``GameConfig()`` without arguments and override only what
they need. Configurations can also be loaded from a JSON file.
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from ..challenges.types import ChallengeType, ScoringPolicy
from ..errors import InvalidLevelError
from .levels import DEFAULT_LEVELS, LevelDefinition


class GameConfig(BaseModel):
    """Top level configuration for the game engine.

    Attributes:
        challenges_per_level: Number of challenges generated for each level
        scoring: Attempts allowed and points per attempt
        timer_enabled: Whether elapsed time is tracked while playing
        seed: Random seed for challenge generation, None for fresh randomness
        levels: Available levels, in display order
        allowed_types_by_level: Per-level overrides of allowed challenge types
    """

    challenges_per_level: int = Field(default=5, ge=1)
    scoring: ScoringPolicy = Field(default_factory=ScoringPolicy)
    timer_enabled: bool = Field(default=False)
    seed: Optional[int] = Field(default=None)
    levels: list[LevelDefinition] = Field(default_factory=lambda: list(DEFAULT_LEVELS))
    allowed_types_by_level: dict[str, list[ChallengeType]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_levels(self) -> "GameConfig":
        if not self.levels:
            raise ValueError("at least one level is required")
        ids = [level.id for level in self.levels]
        duplicates = sorted({level_id for level_id in ids if ids.count(level_id) > 1})
        if duplicates:
            raise ValueError(f"duplicate level ids: {duplicates}")
        for level_id, types in self.allowed_types_by_level.items():
            if level_id not in ids:
                raise ValueError(f"allowed_types_by_level names unknown level: {level_id!r}")
            if not types:
                raise ValueError(f"allowed_types_by_level[{level_id!r}] must not be empty")
        return self

    @property
    def level_ids(self) -> list[str]:
        return [level.id for level in self.levels]

    @property
    def max_points_per_level(self) -> int:
        return self.challenges_per_level * self.scoring.points_for_first_attempt

    def get_level(self, level_id: str) -> LevelDefinition:
        """Look up a level by id.

        Raises:
            InvalidLevelError: If no level has this id
        """
        for level in self.levels:
            if level.id == level_id:
                return level
        raise InvalidLevelError(
            f"Unknown level: {level_id!r}. Known levels: {self.level_ids}"
        )

    def level_index(self, level_id: str) -> int:
        return self.level_ids.index(self.get_level(level_id).id)

    def allowed_types_for(self, level_id: str) -> tuple[ChallengeType, ...]:
        """Allowed challenge types for a level, including overrides."""
        level = self.get_level(level_id)
        override = self.allowed_types_by_level.get(level_id)
        return tuple(override) if override else level.allowed_types

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "GameConfig":
        """Load a configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
