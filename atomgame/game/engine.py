"""Game engine: levels, challenge sequencing, score and time."""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..challenges.answers import AnswerCheck
from ..challenges.challenge import Challenge
from ..challenges.state import ADVANCEABLE_STATES, ChallengeState
from ..challenges.types import ChallengeType
from ..errors import InvalidStateError
from .config import GameConfig
from .events import (
    ActiveChallengeChanged,
    AnswerChecked,
    BestTimesChanged,
    ChallengeReleased,
    ChallengeStateChanged,
    ElapsedTimeChanged,
    EventBus,
    GameEvent,
    GamePhaseChanged,
    LevelCompleted,
    ScoreChanged,
)
from .generator import ChallengeGenerator, ChallengeSource, ChallengeSpec, FixedChallengeSource
from .session import GamePhase, GameSession, LevelOutcome, LevelResult

logger = logging.getLogger(__name__)


class GameEngine:
    """Engine for playing levels of atom challenges.

    The engine owns the current GameSession. Callers drive it through
    ``start_level``, ``submit_answer``, ``acknowledge_exhausted``,
    ``advance_to_next_challenge``, ``tick`` and ``new_game``; changes are
    published on ``events`` once each operation has finished. A failed
    operation raises and leaves the engine as it was.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        generator: Optional[ChallengeSource] = None,
        events: Optional[EventBus] = None,
    ):
        """Initialize the game engine.

        Args:
            config: Game configuration; defaults to the classic four levels
            generator: Source of challenges; defaults to a random generator
                       seeded from the config
            events: Event bus to publish on; a new one is created if omitted
        """
        self.config = config or GameConfig()
        self.generator = generator or ChallengeGenerator(
            seed=self.config.seed,
            scoring=self.config.scoring,
        )
        self.events = events or EventBus()
        self._fixed_source: Optional[FixedChallengeSource] = None
        self._session: Optional[GameSession] = None
        self._phase = GamePhase.CHOOSING_LEVEL
        self._timer_enabled = self.config.timer_enabled
        self._best_times: dict[str, float] = {}
        self._last_result: Optional[LevelResult] = None

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def active_challenge(self) -> Optional[Challenge]:
        if self._session is None or self._phase != GamePhase.PLAYING:
            return None
        return self._session.active_challenge

    @property
    def score(self) -> int:
        return self._session.score if self._session else 0

    @property
    def elapsed_time(self) -> float:
        return self._session.elapsed_time if self._session else 0.0

    @property
    def timer_enabled(self) -> bool:
        return self._timer_enabled

    @property
    def best_times(self) -> dict[str, float]:
        """Snapshot of the best time per level, perfect scores only."""
        return dict(self._best_times)

    @property
    def last_result(self) -> Optional[LevelResult]:
        return self._last_result

    def start_level(self, level_id: str) -> GameSession:
        """Start (or restart) a level with a fresh set of challenges.

        Args:
            level_id: Id of the level to play

        Returns:
            The new session

        Raises:
            InvalidLevelError: If the level is unknown
            GenerationExhaustedError: If no challenges can be generated
        """
        level = self.config.get_level(level_id)
        allowed_types = self.config.allowed_types_for(level.id)
        source = self._fixed_source or self.generator
        challenges = source.generate_challenges(
            level, allowed_types, self.config.challenges_per_level
        )
        session = GameSession(
            level_id=level.id,
            level_index=self.config.level_index(level.id),
            challenges=challenges,
            timer_enabled=self._timer_enabled,
            best_times=dict(self._best_times),
        )

        events: list[GameEvent] = self._release_session()
        previous_phase = self._phase
        self._session = session
        self._phase = GamePhase.PLAYING
        self._last_result = None
        logger.info("Started level %s with %d challenges", level.id, len(challenges))

        if previous_phase != GamePhase.PLAYING:
            events.append(GamePhaseChanged(phase=GamePhase.PLAYING, previous=previous_phase))
        events.extend(
            [
                ScoreChanged(score=0),
                ElapsedTimeChanged(elapsed_time=0.0),
                self._active_challenge_event(),
            ]
        )
        self.events.emit_all(events)
        return session

    def submit_answer(self, value: Any) -> AnswerCheck:
        """Submit an answer to the active challenge.

        Args:
            value: Answer in the shape the active challenge expects

        Returns:
            The evaluation of the answer

        Raises:
            InvalidStateError: If no challenge is active or it takes no answers now
            ShapeMismatchError: If the answer has the wrong shape
        """
        challenge = self._require_active_challenge()
        previous_state = challenge.state
        result = challenge.check_answer(value)

        points = challenge.point_value
        events: list[GameEvent] = [
            ChallengeStateChanged(
                challenge_id=challenge.id,
                state=challenge.state,
                previous=previous_state,
                attempts_made=challenge.attempts_made,
            ),
            AnswerChecked(challenge_id=challenge.id, result=result, points_awarded=points),
        ]
        if points:
            self._session.score += points
            events.append(ScoreChanged(score=self._session.score))
        self.events.emit_all(events)
        return result

    def acknowledge_exhausted(self) -> None:
        """Move an exhausted challenge on to displaying its correct answer.

        Raises:
            InvalidStateError: If the active challenge's attempts are not exhausted
        """
        challenge = self._require_active_challenge()
        if challenge.state != ChallengeState.ATTEMPTS_EXHAUSTED:
            raise InvalidStateError(
                f"Cannot acknowledge challenge {challenge.id} in state '{challenge.state.value}'"
            )
        previous_state = challenge.state
        challenge.acknowledge()
        self.events.emit(
            ChallengeStateChanged(
                challenge_id=challenge.id,
                state=challenge.state,
                previous=previous_state,
                attempts_made=challenge.attempts_made,
            )
        )

    def advance_to_next_challenge(self) -> Optional[LevelResult]:
        """Leave a finished challenge and present the next one.

        Returns:
            The LevelResult if that was the last challenge, None otherwise

        Raises:
            InvalidStateError: If the active challenge is not finished
        """
        challenge = self._require_active_challenge()
        if challenge.state not in ADVANCEABLE_STATES:
            raise InvalidStateError(
                f"Cannot advance past challenge {challenge.id} in state '{challenge.state.value}'"
            )

        challenge.release()
        self._session.challenge_index += 1
        events: list[GameEvent] = [ChallengeReleased(challenge_id=challenge.id)]

        if not self._session.is_complete:
            events.append(self._active_challenge_event())
            self.events.emit_all(events)
            return None

        result = self._complete_level(events)
        self.events.emit_all(events)
        return result

    def tick(self, elapsed: float) -> None:
        """Advance the level timer.

        Time only counts while the active challenge is waiting on the player:
        presenting, asking to try again, or showing attempts exhausted.

        Args:
            elapsed: Seconds since the previous tick
        """
        if elapsed < 0:
            raise ValueError(f"elapsed must be non-negative: {elapsed}")
        challenge = self.active_challenge
        if not self._timer_enabled or challenge is None:
            return
        if not (
            challenge.state.accepts_answers
            or challenge.state == ChallengeState.ATTEMPTS_EXHAUSTED
        ):
            return
        self._session.elapsed_time += elapsed
        self.events.emit(ElapsedTimeChanged(elapsed_time=self._session.elapsed_time))

    def new_game(self) -> None:
        """Abandon the current session and return to level selection."""
        events: list[GameEvent] = self._release_session()
        had_session = self._session is not None
        previous_phase = self._phase
        self._session = None
        self._phase = GamePhase.CHOOSING_LEVEL
        self._last_result = None

        if had_session:
            events.append(ActiveChallengeChanged(challenge=None, challenge_index=0, challenge_count=0))
        if previous_phase != GamePhase.CHOOSING_LEVEL:
            events.append(GamePhaseChanged(phase=GamePhase.CHOOSING_LEVEL, previous=previous_phase))
        self.events.emit_all(events)

    def set_challenges(
        self,
        specs: Optional[Sequence[Union[ChallengeSpec, Mapping[str, Any]]]],
    ) -> None:
        """Use an explicit list of challenges for the levels started from now on.

        Args:
            specs: Challenge specs (or dicts of them); None or empty to go
                   back to random generation
        """
        if not specs:
            self._fixed_source = None
            return
        parsed = [
            spec if isinstance(spec, ChallengeSpec) else ChallengeSpec.model_validate(spec)
            for spec in specs
        ]
        self._fixed_source = FixedChallengeSource(parsed, scoring=self.config.scoring)

    def set_allowed_challenge_types_by_level(
        self,
        allowed: Mapping[str, Sequence[Union[ChallengeType, str]]],
    ) -> None:
        """Override which challenge types may appear on each level.

        Raises:
            InvalidLevelError: If a level id is unknown
            ValueError: If a type list is empty or names an unknown type
        """
        overrides: dict[str, list[ChallengeType]] = {}
        for level_id, types in allowed.items():
            self.config.get_level(level_id)
            converted = [ChallengeType(t) for t in types]
            if not converted:
                raise ValueError(f"allowed types for {level_id!r} must not be empty")
            overrides[level_id] = converted

        merged = {**self.config.allowed_types_by_level, **overrides}
        self.config = self.config.model_copy(update={"allowed_types_by_level": merged})

    def set_timer_enabled(self, enabled: bool) -> None:
        self._timer_enabled = enabled
        if self._session is not None:
            self._session.timer_enabled = enabled

    def _require_active_challenge(self) -> Challenge:
        challenge = self.active_challenge
        if challenge is None:
            raise InvalidStateError(f"No active challenge (game phase '{self._phase.value}')")
        return challenge

    def _active_challenge_event(self) -> ActiveChallengeChanged:
        session = self._session
        return ActiveChallengeChanged(
            challenge=session.active_challenge,
            challenge_index=session.challenge_index,
            challenge_count=len(session.challenges),
        )

    def _release_session(self) -> list[GameEvent]:
        """Release every in-flight challenge of the current session."""
        if self._session is None:
            return []
        return [
            ChallengeReleased(challenge_id=challenge.id)
            for challenge in self._session.unreleased_challenges()
            if challenge.release()
        ]

    def _complete_level(self, events: list[GameEvent]) -> LevelResult:
        session = self._session
        max_score = session.max_score
        perfect = session.score == max_score
        best_time = self._best_times.get(session.level_id)
        is_new_best_time = False

        if perfect and session.timer_enabled and (
            best_time is None or session.elapsed_time < best_time
        ):
            best_time = session.elapsed_time
            is_new_best_time = True
            self._best_times[session.level_id] = best_time
            session.best_times = dict(self._best_times)
            logger.info("New best time for %s: %.1fs", session.level_id, best_time)

        result = LevelResult(
            level_id=session.level_id,
            score=session.score,
            max_score=max_score,
            outcome=LevelOutcome.PERFECT if perfect else LevelOutcome.NORMAL,
            elapsed_time=session.elapsed_time,
            timer_enabled=session.timer_enabled,
            best_time=best_time,
            is_new_best_time=is_new_best_time,
        )
        self._phase = GamePhase.LEVEL_COMPLETED
        self._last_result = result
        logger.info(
            "Completed level %s: %d/%d (%s)",
            session.level_id,
            session.score,
            max_score,
            result.outcome.value,
        )

        events.append(self._active_challenge_event())
        events.append(GamePhaseChanged(phase=GamePhase.LEVEL_COMPLETED, previous=GamePhase.PLAYING))
        if is_new_best_time:
            events.append(BestTimesChanged(best_times=dict(self._best_times)))
        events.append(LevelCompleted(result=result))
        return result
