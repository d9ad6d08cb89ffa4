"""Game level definitions."""

from pydantic import BaseModel, ConfigDict, Field

from ..atom.elements import MAX_PROTON_COUNT
from ..challenges.types import ChallengeType


class LevelDefinition(BaseModel):
    """A named level with its own challenge types and atom range."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = Field(default="")
    allowed_types: tuple[ChallengeType, ...] = Field(min_length=1)
    max_proton_count: int = Field(
        default=10, ge=1, le=MAX_PROTON_COUNT, description="Heaviest element used"
    )
    max_charge: int = Field(default=3, ge=0, description="Largest |charge| of answer atoms")


# Pre-built levels
DEFAULT_LEVELS = [
    LevelDefinition(
        id="periodic-table-game",
        name="Periodic Table",
        description="Find the element and decide whether it is a neutral atom or an ion",
        allowed_types=(
            ChallengeType.SCHEMATIC_TO_ELEMENT,
            ChallengeType.COUNTS_TO_ELEMENT,
        ),
        max_proton_count=10,
        max_charge=1,
    ),
    LevelDefinition(
        id="mass-and-charge-game",
        name="Mass and Charge",
        description="Work out the mass number and net charge",
        allowed_types=(
            ChallengeType.COUNTS_TO_CHARGE,
            ChallengeType.COUNTS_TO_MASS,
            ChallengeType.SCHEMATIC_TO_CHARGE,
            ChallengeType.SCHEMATIC_TO_MASS,
        ),
        max_proton_count=10,
        max_charge=2,
    ),
    LevelDefinition(
        id="symbol-game",
        name="Symbol",
        description="Fill in one number of the chemical symbol",
        allowed_types=(
            ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE,
            ChallengeType.SCHEMATIC_TO_SYMBOL_MASS_NUMBER,
            ChallengeType.SCHEMATIC_TO_SYMBOL_PROTON_COUNT,
            ChallengeType.COUNTS_TO_SYMBOL_CHARGE,
            ChallengeType.COUNTS_TO_SYMBOL_MASS,
        ),
        max_proton_count=18,
        max_charge=3,
    ),
    LevelDefinition(
        id="advanced-symbol-game",
        name="Advanced Symbol",
        description="Translate between full symbols, counts and schematics",
        allowed_types=(
            ChallengeType.SCHEMATIC_TO_SYMBOL_ALL,
            ChallengeType.SYMBOL_TO_SCHEMATIC,
            ChallengeType.SYMBOL_TO_COUNTS,
            ChallengeType.COUNTS_TO_SYMBOL_ALL,
        ),
        max_proton_count=20,
        max_charge=3,
    ),
]
