"""
Pytest fixtures for Numguess tests.
"""

import pytest

from ..engine_core.random_source import seed_process_rng
from ..engine_core.state import GameSession, new_session
from ..session import GameLoop


class FixedRandom:
    """Random source that returns queued secrets in order, repeating the last one."""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture
def fixed_rng() -> FixedRandom:
    """Secret is 70, then 25 after a restart."""
    return FixedRandom(70, 25)


@pytest.fixture
def session(fixed_rng: FixedRandom) -> GameSession:
    """A fresh session awaiting a name."""
    return new_session(rng=fixed_rng)


@pytest.fixture
def playing_session(session: GameSession) -> GameSession:
    """A session where Rae is playing against secret 70."""
    session.submit_name("Rae")
    return session


@pytest.fixture
def won_session(playing_session: GameSession) -> GameSession:
    """A session won on the first guess."""
    playing_session.submit_guess("70")
    return playing_session


@pytest.fixture
def loop(session: GameSession) -> GameLoop:
    """A game loop on a fresh session."""
    return GameLoop(session)


@pytest.fixture
def reseed_process_rng():
    """Reseed the shared process RNG from entropy after a test that pins it."""
    yield
    seed_process_rng(None)
