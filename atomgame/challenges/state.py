"""Challenge life cycle state machine.

States: presenting → solved
                   → try again → solved | (try again) | exhausted
                   → exhausted → displaying correct answer

Solved and displaying-correct-answer are terminal for a challenge; the
game engine moves on to the next challenge from either of them.
"""

from enum import Enum

from ..errors import InvalidStateError


class ChallengeState(str, Enum):
    """States a single challenge moves through."""

    PRESENTING_CHALLENGE = "presentingChallenge"
    CHALLENGE_SOLVED_CORRECTLY = "challengeSolvedCorrectly"
    PRESENTING_TRY_AGAIN = "presentingTryAgain"
    ATTEMPTS_EXHAUSTED = "attemptsExhausted"
    DISPLAYING_CORRECT_ANSWER = "displayingCorrectAnswer"

    @property
    def accepts_answers(self) -> bool:
        """Whether an answer may be submitted in this state."""
        return self in (
            ChallengeState.PRESENTING_CHALLENGE,
            ChallengeState.PRESENTING_TRY_AGAIN,
        )

    @property
    def is_terminal(self) -> bool:
        return not VALID_TRANSITIONS[self]


VALID_TRANSITIONS: dict[ChallengeState, list[ChallengeState]] = {
    ChallengeState.PRESENTING_CHALLENGE: [
        ChallengeState.CHALLENGE_SOLVED_CORRECTLY,
        ChallengeState.PRESENTING_TRY_AGAIN,
        ChallengeState.ATTEMPTS_EXHAUSTED,
    ],
    ChallengeState.PRESENTING_TRY_AGAIN: [
        ChallengeState.CHALLENGE_SOLVED_CORRECTLY,
        ChallengeState.PRESENTING_TRY_AGAIN,
        ChallengeState.ATTEMPTS_EXHAUSTED,
    ],
    ChallengeState.ATTEMPTS_EXHAUSTED: [ChallengeState.DISPLAYING_CORRECT_ANSWER],
    ChallengeState.CHALLENGE_SOLVED_CORRECTLY: [],  # terminal
    ChallengeState.DISPLAYING_CORRECT_ANSWER: [],  # terminal
}

# States from which the engine may advance to the next challenge
ADVANCEABLE_STATES = frozenset(
    {
        ChallengeState.CHALLENGE_SOLVED_CORRECTLY,
        ChallengeState.DISPLAYING_CORRECT_ANSWER,
    }
)


def can_transition(current: ChallengeState, target: ChallengeState) -> bool:
    """Check if a challenge state transition is valid."""
    return target in VALID_TRANSITIONS.get(current, [])


def validate_transition(current: ChallengeState, target: ChallengeState) -> None:
    """Validate a challenge state transition, raising InvalidStateError if invalid."""
    if not can_transition(current, target):
        allowed = [state.value for state in VALID_TRANSITIONS.get(current, [])]
        raise InvalidStateError(
            f"Cannot transition challenge from '{current.value}' to '{target.value}'. "
            f"Allowed from '{current.value}': {allowed}"
        )


def next_state_after_attempt(
    is_correct: bool,
    attempts_made: int,
    max_attempts: int,
) -> ChallengeState:
    """Decide where a challenge goes after an evaluated attempt.

    Args:
        is_correct: Whether the attempt was correct
        attempts_made: Attempts made including this one
        max_attempts: Attempts allowed per challenge

    Returns:
        The state to move to
    """
    if is_correct:
        return ChallengeState.CHALLENGE_SOLVED_CORRECTLY
    if attempts_made < max_attempts:
        return ChallengeState.PRESENTING_TRY_AGAIN
    return ChallengeState.ATTEMPTS_EXHAUSTED
