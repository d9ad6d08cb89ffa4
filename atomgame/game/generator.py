"""Challenge pool generation."""

import logging
import random
from typing import Iterable, Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict

from ..atom import builder
from ..atom.elements import stable_neutron_counts
from ..atom.models import NumberAtom
from ..challenges.challenge import Challenge
from ..challenges.types import ChallengeType, ScoringPolicy
from ..errors import GenerationExhaustedError
from .levels import LevelDefinition

logger = logging.getLogger(__name__)


class ChallengeSpec(BaseModel):
    """An explicit challenge: a type and its answer."""

    model_config = ConfigDict(frozen=True)

    challenge_type: ChallengeType
    answer_atom: NumberAtom


class ChallengeSource(Protocol):
    """Anything that can supply the challenges for a level."""

    def generate_challenges(
        self,
        level: LevelDefinition,
        allowed_types: Sequence[ChallengeType],
        count: int,
    ) -> list[Challenge]:
        ...


def candidate_atoms(challenge_type: ChallengeType, level: LevelDefinition) -> list[NumberAtom]:
    """All answer atoms a challenge of this type may use on this level.

    Nuclei come from the stable isotopes table and the charge stays within
    the level's limit. Schematic challenges are also limited to what fits
    in the particle buckets, since the player may have to build the atom.
    """
    schematic = challenge_type.is_schematic
    max_protons = level.max_proton_count
    if schematic:
        max_protons = min(max_protons, builder.MAX_PROTONS)

    atoms = []
    for protons in range(1, max_protons + 1):
        for neutrons in stable_neutron_counts(protons):
            if schematic and neutrons > builder.MAX_NEUTRONS:
                continue
            low = max(0, protons - level.max_charge)
            high = protons + level.max_charge
            if schematic:
                high = min(high, builder.MAX_ELECTRONS)
            for electrons in range(low, high + 1):
                atoms.append(
                    NumberAtom(
                        proton_count=protons,
                        neutron_count=neutrons,
                        electron_count=electrons,
                    )
                )
    return atoms


class ChallengeGenerator:
    """Generates a randomized set of challenges for a level."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        scoring: Optional[ScoringPolicy] = None,
    ):
        """Initialize the generator.

        Args:
            rng: Random source to draw from. If not provided, one is
                 created from ``seed``.
            seed: Seed for a new random source; None for fresh randomness
            scoring: Scoring policy given to every generated challenge
        """
        self._rng = rng or random.Random(seed)
        self.scoring = scoring or ScoringPolicy()

    def generate_challenges(
        self,
        level: LevelDefinition,
        allowed_types: Sequence[ChallengeType],
        count: int,
    ) -> list[Challenge]:
        """Generate the challenges for one play-through of a level.

        Args:
            level: The level being started
            allowed_types: Challenge types that may appear
            count: Number of challenges to generate

        Returns:
            Exactly ``count`` fresh challenges

        Raises:
            GenerationExhaustedError: If no allowed type has any valid answer atom
        """
        if count < 1:
            raise ValueError(f"count must be positive: {count}")
        allowed = list(dict.fromkeys(allowed_types))
        if not allowed:
            raise GenerationExhaustedError(f"No challenge types allowed for level {level.id}")

        candidates = {challenge_type: candidate_atoms(challenge_type, level) for challenge_type in allowed}
        usable = [challenge_type for challenge_type in allowed if candidates[challenge_type]]
        for challenge_type in allowed:
            if not candidates[challenge_type]:
                logger.warning(
                    "No valid atoms for %s on level %s; type skipped",
                    challenge_type.value,
                    level.id,
                )
        if not usable:
            raise GenerationExhaustedError(
                f"No valid atoms for any allowed type on level {level.id}"
            )

        used: set[NumberAtom] = set()
        type_bag: list[ChallengeType] = []
        challenges = []
        for index in range(count):
            if not type_bag:
                type_bag = list(usable)
                self._rng.shuffle(type_bag)
            challenge_type = type_bag.pop()
            atom = self._pick_atom(candidates[challenge_type], used, challenge_type, level)
            used.add(atom)
            challenges.append(
                Challenge(
                    id=f"{level.id}-{index + 1}",
                    challenge_type=challenge_type,
                    answer_atom=atom,
                    scoring=self.scoring,
                )
            )

        logger.debug(
            "Generated %d challenges for %s: %s",
            count,
            level.id,
            ", ".join(c.challenge_type.value for c in challenges),
        )
        return challenges

    def _pick_atom(
        self,
        candidates: list[NumberAtom],
        used: Iterable[NumberAtom],
        challenge_type: ChallengeType,
        level: LevelDefinition,
    ) -> NumberAtom:
        """Pick an unused atom, falling back to a duplicate when none is left."""
        used = set(used)
        fresh = [atom for atom in candidates if atom not in used]
        if not fresh:
            logger.warning(
                "All %d atoms for %s on level %s already used; allowing a duplicate",
                len(candidates),
                challenge_type.value,
                level.id,
            )
            fresh = candidates
        return self._rng.choice(fresh)


class FixedChallengeSource:
    """Replays an explicit list of challenges instead of generating them.

    Each call returns fresh Challenge objects, so a level can be restarted
    with the same content.
    """

    def __init__(self, specs: Sequence[ChallengeSpec], scoring: Optional[ScoringPolicy] = None):
        if not specs:
            raise ValueError("at least one challenge spec is required")
        self.specs = tuple(specs)
        self.scoring = scoring or ScoringPolicy()

    def generate_challenges(
        self,
        level: LevelDefinition,
        allowed_types: Sequence[ChallengeType],
        count: int,
    ) -> list[Challenge]:
        # Explicit lists bypass the allowed types and the per-level count
        return [
            Challenge(
                id=f"{level.id}-{index}",
                challenge_type=spec.challenge_type,
                answer_atom=spec.answer_atom,
                scoring=self.scoring,
            )
            for index, spec in enumerate(self.specs, start=1)
        ]
