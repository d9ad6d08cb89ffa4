"""Challenge type definitions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ChallengeType(str, Enum):
    """Types of challenges."""

    SCHEMATIC_TO_ELEMENT = "schematic-to-element"
    COUNTS_TO_ELEMENT = "counts-to-element"
    COUNTS_TO_CHARGE = "counts-to-charge"
    COUNTS_TO_MASS = "counts-to-mass"
    SCHEMATIC_TO_CHARGE = "schematic-to-charge"
    SCHEMATIC_TO_MASS = "schematic-to-mass"
    COUNTS_TO_SYMBOL_CHARGE = "counts-to-symbol-charge"
    COUNTS_TO_SYMBOL_MASS = "counts-to-symbol-mass"
    COUNTS_TO_SYMBOL_ALL = "counts-to-symbol-all"
    SCHEMATIC_TO_SYMBOL_CHARGE = "schematic-to-symbol-charge"
    SCHEMATIC_TO_SYMBOL_MASS_NUMBER = "schematic-to-symbol-mass-number"
    SCHEMATIC_TO_SYMBOL_PROTON_COUNT = "schematic-to-symbol-proton-count"
    SCHEMATIC_TO_SYMBOL_ALL = "schematic-to-symbol-all"
    SYMBOL_TO_COUNTS = "symbol-to-counts"
    SYMBOL_TO_SCHEMATIC = "symbol-to-schematic"

    @property
    def is_to_element(self) -> bool:
        """Check if the player must find the element on the periodic table."""
        return self.value.endswith("-to-element")

    @property
    def is_symbol_entry(self) -> bool:
        """Check if the player answers by filling in a chemical symbol."""
        return "-to-symbol-" in self.value

    @property
    def is_schematic(self) -> bool:
        """Check if an atom schematic is shown or has to be built."""
        return "schematic" in self.value

    @property
    def asks_for_charge(self) -> bool:
        return self in (ChallengeType.COUNTS_TO_CHARGE, ChallengeType.SCHEMATIC_TO_CHARGE)

    @property
    def asks_for_mass(self) -> bool:
        return self in (ChallengeType.COUNTS_TO_MASS, ChallengeType.SCHEMATIC_TO_MASS)

    @property
    def configurable_proton_count(self) -> bool:
        return self in (
            ChallengeType.SCHEMATIC_TO_SYMBOL_PROTON_COUNT,
            ChallengeType.SCHEMATIC_TO_SYMBOL_ALL,
            ChallengeType.COUNTS_TO_SYMBOL_ALL,
        )

    @property
    def configurable_mass_number(self) -> bool:
        return self in (
            ChallengeType.SCHEMATIC_TO_SYMBOL_MASS_NUMBER,
            ChallengeType.COUNTS_TO_SYMBOL_MASS,
            ChallengeType.SCHEMATIC_TO_SYMBOL_ALL,
            ChallengeType.COUNTS_TO_SYMBOL_ALL,
        )

    @property
    def configurable_charge(self) -> bool:
        return self in (
            ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE,
            ChallengeType.COUNTS_TO_SYMBOL_CHARGE,
            ChallengeType.SCHEMATIC_TO_SYMBOL_ALL,
            ChallengeType.COUNTS_TO_SYMBOL_ALL,
        )


class ScoringPolicy(BaseModel):
    """How many attempts a challenge allows and what each one is worth."""

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=2, ge=1, description="Attempts allowed per challenge")
    points_per_attempt: tuple[int, ...] = Field(
        default=(2, 1),
        description="Points for solving on attempt 1, 2, ...",
    )

    @model_validator(mode="after")
    def _check_points(self) -> "ScoringPolicy":
        points = self.points_per_attempt
        if len(points) != self.max_attempts:
            raise ValueError(
                f"points_per_attempt needs {self.max_attempts} entries, got {len(points)}"
            )
        if any(p < 0 for p in points):
            raise ValueError(f"points_per_attempt must be non-negative: {points}")
        if any(later > earlier for earlier, later in zip(points, points[1:])):
            raise ValueError(f"points_per_attempt must not increase: {points}")
        return self

    @property
    def points_for_first_attempt(self) -> int:
        return self.points_per_attempt[0]

    def points_for(self, attempts_made: int) -> int:
        """Points for a challenge solved on the given attempt."""
        if not 1 <= attempts_made <= self.max_attempts:
            return 0
        return self.points_per_attempt[attempts_made - 1]
