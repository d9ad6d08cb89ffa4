"""A single quiz item and its life cycle."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..atom.models import NumberAtom
from ..errors import InvalidStateError
from .answers import AnswerCheck
from .evaluation import AnswerEvaluator, evaluator_for
from .state import ChallengeState, next_state_after_attempt, validate_transition
from .types import ChallengeType, ScoringPolicy

logger = logging.getLogger(__name__)


class Challenge(BaseModel):
    """A game challenge.

    The answer and type are frozen. State, attempt count and the released
    flag are private and only change through ``check_answer``,
    ``acknowledge`` and ``release``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    challenge_type: ChallengeType
    answer_atom: NumberAtom
    scoring: ScoringPolicy = Field(default_factory=ScoringPolicy)

    _state: ChallengeState = PrivateAttr(default=ChallengeState.PRESENTING_CHALLENGE)
    _attempts_made: int = PrivateAttr(default=0)
    _released: bool = PrivateAttr(default=False)

    @property
    def state(self) -> ChallengeState:
        return self._state

    @property
    def attempts_made(self) -> int:
        return self._attempts_made

    @property
    def released(self) -> bool:
        return self._released

    @property
    def evaluator(self) -> AnswerEvaluator:
        return evaluator_for(self.challenge_type)

    @property
    def point_value(self) -> int:
        """Points earned so far; zero unless solved."""
        if self._state != ChallengeState.CHALLENGE_SOLVED_CORRECTLY:
            return 0
        return self.scoring.points_for(self._attempts_made)

    def evaluate(self, submitted: Any) -> AnswerCheck:
        """Judge a submission without changing any state.

        Raises:
            ShapeMismatchError: If the submission has the wrong shape for this type
        """
        return self.evaluator.evaluate(self.answer_atom, submitted)

    def correct_submission(self) -> BaseModel:
        """The answer atom expressed in this challenge's submission shape."""
        return self.evaluator.shape_answer(self.answer_atom)

    def check_answer(self, submitted: Any) -> AnswerCheck:
        """Submit an attempt and advance the state machine.

        Args:
            submitted: Value in the shape the challenge type expects

        Returns:
            The evaluation of the attempt

        Raises:
            InvalidStateError: If the challenge does not accept answers now
            ShapeMismatchError: If the submission has the wrong shape
        """
        self._ensure_not_released("check_answer")
        if not self._state.accepts_answers:
            raise InvalidStateError(
                f"Challenge {self.id} cannot accept an answer in state '{self._state.value}'"
            )

        result = self.evaluate(submitted)
        attempts_made = self._attempts_made + 1
        target = next_state_after_attempt(
            result.is_correct, attempts_made, self.scoring.max_attempts
        )
        validate_transition(self._state, target)

        self._attempts_made = attempts_made
        self._state = target
        logger.debug(
            "Challenge %s attempt %d: %s -> %s",
            self.id,
            attempts_made,
            "correct" if result.is_correct else "incorrect",
            target.value,
        )
        return result

    def acknowledge(self) -> None:
        """Acknowledge exhausted attempts and show the correct answer.

        Raises:
            InvalidStateError: If attempts are not exhausted
        """
        self._ensure_not_released("acknowledge")
        validate_transition(self._state, ChallengeState.DISPLAYING_CORRECT_ANSWER)
        self._state = ChallengeState.DISPLAYING_CORRECT_ANSWER

    def release(self) -> bool:
        """Mark the challenge as discarded.

        Returns:
            True if this call released it, False if it was already released
        """
        if self._released:
            return False
        self._released = True
        return True

    def _ensure_not_released(self, operation: str) -> None:
        if self._released:
            raise InvalidStateError(f"Cannot {operation} on released challenge {self.id}")
