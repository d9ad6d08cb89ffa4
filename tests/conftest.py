import pytest

from atomgame.atom.models import NumberAtom
from atomgame.challenges.challenge import Challenge
from atomgame.challenges.types import ChallengeType
from atomgame.game.config import GameConfig
from atomgame.game.engine import GameEngine
from atomgame.game.events import GameEvent
from atomgame.game.generator import ChallengeSpec


# Common test fixtures
@pytest.fixture
def carbon() -> NumberAtom:
    """Neutral carbon-12."""
    return NumberAtom(proton_count=6, neutron_count=6, electron_count=6)


@pytest.fixture
def magnesium_ion() -> NumberAtom:
    """Mg-24 with a 2+ charge."""
    return NumberAtom(proton_count=12, neutron_count=12, electron_count=10)


@pytest.fixture
def make_challenge():
    """Factory for a fresh challenge of a given type and answer."""

    def _make(challenge_type: ChallengeType, answer_atom: NumberAtom, **kwargs) -> Challenge:
        return Challenge(
            id=kwargs.pop("id", "test-1"),
            challenge_type=challenge_type,
            answer_atom=answer_atom,
            **kwargs,
        )

    return _make


@pytest.fixture
def engine() -> GameEngine:
    """Engine with a fixed seed and the default levels."""
    return GameEngine(GameConfig(seed=1234))


@pytest.fixture
def carbon_engine(engine, carbon) -> GameEngine:
    """Engine whose levels consist of one counts-to-element challenge for carbon."""
    engine.set_challenges(
        [ChallengeSpec(challenge_type=ChallengeType.COUNTS_TO_ELEMENT, answer_atom=carbon)]
    )
    return engine


@pytest.fixture
def recorded_events(engine) -> list[GameEvent]:
    """Every event the engine emits, in order."""
    events: list[GameEvent] = []
    engine.events.subscribe(events.append)
    return events
