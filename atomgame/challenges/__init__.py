"""Challenge system for the atom game."""

from .answers import AnswerCheck, ElementAnswer, NeutralOrIon, SymbolAnswer
from .challenge import Challenge
from .evaluation import evaluator_for
from .state import ChallengeState
from .types import ChallengeType, ScoringPolicy

__all__ = [
    "AnswerCheck",
    "Challenge",
    "ChallengeState",
    "ChallengeType",
    "ElementAnswer",
    "NeutralOrIon",
    "ScoringPolicy",
    "SymbolAnswer",
    "evaluator_for",
]
