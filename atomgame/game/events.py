"""Change events pushed from the engine to the presentation layer."""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from ..challenges.answers import AnswerCheck
from ..challenges.challenge import Challenge
from ..challenges.state import ChallengeState
from .session import GamePhase, LevelResult


class GameEvent(BaseModel):
    """Base class for engine events."""

    model_config = ConfigDict(frozen=True)


class GamePhaseChanged(GameEvent):
    phase: GamePhase
    previous: GamePhase


class ActiveChallengeChanged(GameEvent):
    """A new challenge is being presented, or None when no challenge is active."""

    challenge: Optional[Challenge]
    challenge_index: int
    challenge_count: int


class ChallengeStateChanged(GameEvent):
    challenge_id: str
    state: ChallengeState
    previous: ChallengeState
    attempts_made: int


class AnswerChecked(GameEvent):
    challenge_id: str
    result: AnswerCheck
    points_awarded: int


class ScoreChanged(GameEvent):
    score: int


class ElapsedTimeChanged(GameEvent):
    elapsed_time: float


class LevelCompleted(GameEvent):
    result: LevelResult


class BestTimesChanged(GameEvent):
    best_times: dict[str, float]


class ChallengeReleased(GameEvent):
    """A challenge was discarded; views built for it should be disposed."""

    challenge_id: str


Handler = Callable[[GameEvent], None]


class EventBus:
    """Synchronous publish/subscribe for game events."""

    def __init__(self):
        self._subscriptions: list[tuple[type[GameEvent], Handler]] = []

    def subscribe(
        self,
        handler: Handler,
        event_type: type[GameEvent] = GameEvent,
    ) -> Callable[[], None]:
        """Register a handler for an event type and its subclasses.

        Args:
            handler: Called with each matching event
            event_type: Event class to listen for

        Returns:
            A function that removes the subscription
        """
        entry = (event_type, handler)
        self._subscriptions.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscriptions:
                self._subscriptions.remove(entry)

        return unsubscribe

    def emit(self, event: GameEvent) -> None:
        """Deliver an event to matching handlers in subscription order."""
        for event_type, handler in list(self._subscriptions):
            if isinstance(event, event_type):
                handler(event)

    def emit_all(self, events: list[GameEvent]) -> None:
        for event in events:
            self.emit(event)
