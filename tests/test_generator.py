"""
Unit tests for game.generator module.

Tests for the random challenge pool and explicit challenge lists.
"""

import random

import pytest

from atomgame.atom import builder
from atomgame.atom.elements import is_stable
from atomgame.atom.models import NumberAtom
from atomgame.challenges.state import ChallengeState
from atomgame.challenges.types import ChallengeType, ScoringPolicy
from atomgame.errors import GenerationExhaustedError
from atomgame.game.generator import (
    ChallengeGenerator,
    ChallengeSpec,
    FixedChallengeSource,
    candidate_atoms,
)
from atomgame.game.levels import DEFAULT_LEVELS, LevelDefinition


@pytest.fixture
def symbol_level() -> LevelDefinition:
    return DEFAULT_LEVELS[2]


@pytest.fixture
def hydrogen_level() -> LevelDefinition:
    """A tiny level with only neutral hydrogen isotopes."""
    return LevelDefinition(
        id="hydrogen",
        name="Hydrogen",
        allowed_types=(ChallengeType.COUNTS_TO_MASS,),
        max_proton_count=1,
        max_charge=0,
    )


class TestCandidateAtoms:
    """Tests for candidate_atoms()."""

    def test_candidate_atoms_when_level_limits_then_respected(self, symbol_level):
        # Act
        atoms = candidate_atoms(ChallengeType.COUNTS_TO_SYMBOL_CHARGE, symbol_level)

        # Assert
        assert atoms
        for atom in atoms:
            assert 1 <= atom.proton_count <= symbol_level.max_proton_count
            assert abs(atom.charge) <= symbol_level.max_charge
            assert is_stable(atom.proton_count, atom.neutron_count)

    def test_candidate_atoms_when_schematic_then_fits_buckets(self, symbol_level):
        atoms = candidate_atoms(ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE, symbol_level)

        assert atoms
        for atom in atoms:
            assert atom.proton_count <= builder.MAX_PROTONS
            assert atom.neutron_count <= builder.MAX_NEUTRONS
            assert atom.electron_count <= builder.MAX_ELECTRONS

    def test_candidate_atoms_when_no_charge_allowed_then_all_neutral(self, hydrogen_level):
        atoms = candidate_atoms(ChallengeType.COUNTS_TO_MASS, hydrogen_level)

        assert atoms == [
            NumberAtom(proton_count=1, neutron_count=0, electron_count=1),
            NumberAtom(proton_count=1, neutron_count=1, electron_count=1),
        ]


class TestChallengeGenerator:
    """Tests for ChallengeGenerator.generate_challenges()."""

    def test_generate_when_count_requested_then_exact_count_of_allowed_types(
        self, symbol_level
    ):
        # Arrange
        generator = ChallengeGenerator(seed=7)
        allowed = [ChallengeType.COUNTS_TO_SYMBOL_MASS, ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE]

        # Act
        challenges = generator.generate_challenges(symbol_level, allowed, 6)

        # Assert
        assert len(challenges) == 6
        assert {c.challenge_type for c in challenges} == set(allowed)
        assert all(c.state == ChallengeState.PRESENTING_CHALLENGE for c in challenges)
        assert [c.id for c in challenges] == [f"symbol-game-{i}" for i in range(1, 7)]

    def test_generate_when_enough_candidates_then_no_duplicate_answers(self, symbol_level):
        generator = ChallengeGenerator(seed=3)

        challenges = generator.generate_challenges(
            symbol_level, symbol_level.allowed_types, 10
        )

        answers = [c.answer_atom for c in challenges]
        assert len(set(answers)) == len(answers)

    def test_generate_when_same_seed_then_same_challenges(self, symbol_level):
        # Act
        first = ChallengeGenerator(seed=42).generate_challenges(
            symbol_level, symbol_level.allowed_types, 5
        )
        second = ChallengeGenerator(rng=random.Random(42)).generate_challenges(
            symbol_level, symbol_level.allowed_types, 5
        )

        # Assert
        assert [(c.challenge_type, c.answer_atom) for c in first] == [
            (c.challenge_type, c.answer_atom) for c in second
        ]

    def test_generate_when_pool_smaller_than_count_then_duplicates_allowed(
        self, hydrogen_level, caplog
    ):
        # Arrange
        generator = ChallengeGenerator(seed=1)

        # Act
        challenges = generator.generate_challenges(
            hydrogen_level, hydrogen_level.allowed_types, 5
        )

        # Assert
        assert len(challenges) == 5
        assert {c.answer_atom.neutron_count for c in challenges} <= {0, 1}
        assert "allowing a duplicate" in caplog.text

    def test_generate_when_type_has_no_candidates_then_skipped(
        self, symbol_level, monkeypatch, caplog
    ):
        """A type whose pool is empty is dropped and the others fill the level."""
        # Arrange
        monkeypatch.setattr(builder, "MAX_NEUTRONS", -1)
        generator = ChallengeGenerator(seed=5)
        allowed = [ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE, ChallengeType.COUNTS_TO_SYMBOL_MASS]

        # Act
        challenges = generator.generate_challenges(symbol_level, allowed, 3)

        # Assert
        assert len(challenges) == 3
        assert all(c.challenge_type == ChallengeType.COUNTS_TO_SYMBOL_MASS for c in challenges)
        assert "type skipped" in caplog.text

    def test_generate_when_no_type_usable_then_exhausted(self, symbol_level, monkeypatch):
        # Arrange
        monkeypatch.setattr(builder, "MAX_NEUTRONS", -1)
        generator = ChallengeGenerator(seed=1)

        # Act / Assert
        with pytest.raises(GenerationExhaustedError):
            generator.generate_challenges(
                symbol_level, [ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE], 2
            )

    def test_generate_when_no_types_then_exhausted(self, symbol_level):
        generator = ChallengeGenerator(seed=1)

        with pytest.raises(GenerationExhaustedError):
            generator.generate_challenges(symbol_level, [], 3)

    def test_generate_when_count_not_positive_then_value_error(self, symbol_level):
        generator = ChallengeGenerator(seed=1)

        with pytest.raises(ValueError):
            generator.generate_challenges(symbol_level, symbol_level.allowed_types, 0)

    def test_generate_when_duplicate_types_given_then_deduplicated(self, symbol_level):
        # Arrange
        generator = ChallengeGenerator(seed=9)
        allowed = [ChallengeType.COUNTS_TO_SYMBOL_MASS] * 3 + [ChallengeType.COUNTS_TO_SYMBOL_CHARGE]

        # Act
        challenges = generator.generate_challenges(symbol_level, allowed, 4)

        # Assert
        types = [c.challenge_type for c in challenges]
        assert types.count(ChallengeType.COUNTS_TO_SYMBOL_MASS) == 2
        assert types.count(ChallengeType.COUNTS_TO_SYMBOL_CHARGE) == 2

    def test_generate_when_scoring_given_then_applied(self, symbol_level):
        scoring = ScoringPolicy(max_attempts=1, points_per_attempt=(5,))
        generator = ChallengeGenerator(seed=1, scoring=scoring)

        challenges = generator.generate_challenges(symbol_level, symbol_level.allowed_types, 2)

        assert all(c.scoring == scoring for c in challenges)


class TestFixedChallengeSource:
    """Tests for FixedChallengeSource."""

    def test_fixed_source_when_called_twice_then_fresh_challenges(self, carbon, symbol_level):
        # Arrange
        source = FixedChallengeSource(
            [ChallengeSpec(challenge_type=ChallengeType.SYMBOL_TO_COUNTS, answer_atom=carbon)]
        )
        first = source.generate_challenges(symbol_level, symbol_level.allowed_types, 5)
        first[0].check_answer(carbon)

        # Act
        second = source.generate_challenges(symbol_level, symbol_level.allowed_types, 5)

        # Assert
        assert len(second) == 1
        assert second[0].state == ChallengeState.PRESENTING_CHALLENGE
        assert second[0].answer_atom == carbon

    def test_fixed_source_when_empty_then_value_error(self):
        with pytest.raises(ValueError):
            FixedChallengeSource([])
