"""
Answer evaluation strategies, one per kind of answer a challenge expects.

Registry format:
    {
        ChallengeType: evaluator instance,
        ...
    }

Every challenge type maps to exactly one evaluator. An evaluator knows the
submission shape it accepts, how to judge a submission against the answer
atom, and how to turn the answer atom back into a submission of its shape
(used to display the correct answer and to build fixtures).

Rules:
    - to-element: protons must match; when the player also declared
      neutral/ion, neutrons and the declaration must match too
    - counts: protons, neutrons and electrons must all match
    - symbol: the symbol numbers are converted to counts, then as counts
"""

from typing import Any

from pydantic import BaseModel

from ..atom.models import NumberAtom
from ..errors import ShapeMismatchError
from .answers import AnswerCheck, ElementAnswer, NeutralOrIon, SymbolAnswer
from .types import ChallengeType


class AnswerEvaluator:
    """Base evaluator: accepts one submission shape and judges it."""

    shape: type[BaseModel] = NumberAtom

    def coerce(self, submitted: Any) -> BaseModel:
        """Return the submission in this evaluator's shape.

        Raises:
            ShapeMismatchError: If the submission has another shape
        """
        if isinstance(submitted, self.shape):
            return submitted
        raise ShapeMismatchError(
            f"{type(self).__name__} expects {self.shape.__name__}, "
            f"got {type(submitted).__name__}"
        )

    def evaluate(self, answer_atom: NumberAtom, submitted: Any) -> AnswerCheck:
        raise NotImplementedError

    def shape_answer(self, answer_atom: NumberAtom) -> BaseModel:
        raise NotImplementedError


class CountsEvaluator(AnswerEvaluator):
    """All three particle counts must match."""

    shape = NumberAtom

    def evaluate(self, answer_atom: NumberAtom, submitted: Any) -> AnswerCheck:
        atom = self.coerce(submitted)
        return AnswerCheck(
            is_correct=atom.is_equivalent(answer_atom),
            submitted_atom=atom,
        )

    def shape_answer(self, answer_atom: NumberAtom) -> NumberAtom:
        return answer_atom


class SymbolEvaluator(AnswerEvaluator):
    """Symbol numbers are converted to counts, then all three counts must match."""

    shape = SymbolAnswer

    def evaluate(self, answer_atom: NumberAtom, submitted: Any) -> AnswerCheck:
        atom = self.coerce(submitted).to_atom()
        return AnswerCheck(
            is_correct=atom.is_equivalent(answer_atom),
            submitted_atom=atom,
        )

    def shape_answer(self, answer_atom: NumberAtom) -> SymbolAnswer:
        return SymbolAnswer.from_atom(answer_atom)


class ToElementEvaluator(AnswerEvaluator):
    """Element identity, plus neutral/ion classification when one was declared."""

    shape = ElementAnswer

    def coerce(self, submitted: Any) -> ElementAnswer:
        # A bare atom is a periodic-table pick with no classification
        if isinstance(submitted, NumberAtom):
            return ElementAnswer(atom=submitted)
        return super().coerce(submitted)

    def evaluate(self, answer_atom: NumberAtom, submitted: Any) -> AnswerCheck:
        element = self.coerce(submitted)
        atom = element.atom
        correct_charge = NeutralOrIon.for_charge(answer_atom.charge)
        is_correct = atom.proton_count == answer_atom.proton_count
        if element.neutral_or_ion is not None:
            is_correct = (
                is_correct
                and atom.neutron_count == answer_atom.neutron_count
                and element.neutral_or_ion == correct_charge
            )
        return AnswerCheck(
            is_correct=is_correct,
            submitted_atom=atom,
            correct_charge=correct_charge,
            submitted_charge=element.neutral_or_ion,
        )

    def shape_answer(self, answer_atom: NumberAtom) -> ElementAnswer:
        return ElementAnswer(
            atom=answer_atom,
            neutral_or_ion=NeutralOrIon.for_charge(answer_atom.charge),
        )


_COUNTS = CountsEvaluator()
_SYMBOL = SymbolEvaluator()
_TO_ELEMENT = ToElementEvaluator()

# ── Registry ──────────────────────────────────────────────────────────────────
EVALUATORS: dict[ChallengeType, AnswerEvaluator] = {
    ChallengeType.SCHEMATIC_TO_ELEMENT: _TO_ELEMENT,
    ChallengeType.COUNTS_TO_ELEMENT: _TO_ELEMENT,
    ChallengeType.COUNTS_TO_CHARGE: _COUNTS,
    ChallengeType.COUNTS_TO_MASS: _COUNTS,
    ChallengeType.SCHEMATIC_TO_CHARGE: _COUNTS,
    ChallengeType.SCHEMATIC_TO_MASS: _COUNTS,
    ChallengeType.COUNTS_TO_SYMBOL_CHARGE: _SYMBOL,
    ChallengeType.COUNTS_TO_SYMBOL_MASS: _SYMBOL,
    ChallengeType.COUNTS_TO_SYMBOL_ALL: _SYMBOL,
    ChallengeType.SCHEMATIC_TO_SYMBOL_CHARGE: _SYMBOL,
    ChallengeType.SCHEMATIC_TO_SYMBOL_MASS_NUMBER: _SYMBOL,
    ChallengeType.SCHEMATIC_TO_SYMBOL_PROTON_COUNT: _SYMBOL,
    ChallengeType.SCHEMATIC_TO_SYMBOL_ALL: _SYMBOL,
    ChallengeType.SYMBOL_TO_COUNTS: _COUNTS,
    ChallengeType.SYMBOL_TO_SCHEMATIC: _COUNTS,
}


def evaluator_for(challenge_type: ChallengeType) -> AnswerEvaluator:
    """Look up the evaluator for a challenge type."""
    return EVALUATORS[challenge_type]
