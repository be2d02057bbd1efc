"""
Game State - The session state machine.

Phases:
    AWAITING_NAME --submit_name--> PLAYING --correct guess--> WON
                                      ^                        |
                                      +-------restart----------+

Design principles:
- The session is owned by the caller; there is no module-level game state
- Rejected input leaves the session untouched
- The secret lives in a GameRound that is replaced wholesale on restart
- No rendering concepts: operations return outcome data only
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import uuid

from ..exceptions import GuessOverflowError, GuessParseError, InvalidPhaseError
from .guess import parse_guess, in_range
from .outcome import (
    Accepted,
    NameResult,
    GuessOutcome,
    GuessError,
    GuessResult,
)
from .random_source import RandomSource, process_rng, draw_secret
from .rating import RatingTable, REFERENCE_TABLE

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Coarse stage of a session. Gates which operations are valid."""
    AWAITING_NAME = "awaiting_name"
    PLAYING = "playing"
    WON = "won"


@dataclass
class GameRound:
    """One secret number and the guesses made against it."""
    secret_number: int = field(repr=False)
    guess_count: int = 0


@dataclass
class GameSession:
    """
    One player's play session.

    Usage:
        session = new_session()
        session.submit_name("Ada")
        result = session.submit_guess("50")
        if result.success and result.outcome.is_correct:
            session.restart()
    """
    rng: RandomSource = field(default_factory=process_rng, repr=False)
    rating_table: RatingTable = field(default=REFERENCE_TABLE, repr=False)
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    phase: GamePhase = GamePhase.AWAITING_NAME
    player_name: str | None = None
    rating: str | None = None  # Set on win, cleared on restart

    _round: GameRound | None = field(default=None, repr=False)

    @property
    def guess_count(self) -> int:
        """Valid guesses made in the current round."""
        return self._round.guess_count if self._round else 0

    def submit_name(self, name: str) -> NameResult:
        """
        Submit the player name.

        A blank or whitespace-only name is rejected with NAME_EMPTY.
        On acceptance, stores the trimmed name and starts the first round.
        """
        self._require_phase("submit_name", GamePhase.AWAITING_NAME)

        trimmed = name.strip()
        if not trimmed:
            return NameResult.name_empty()

        self.player_name = trimmed
        self._start_round()
        logger.debug("Session %s: name accepted, playing", self.session_id)
        return NameResult.accepted(trimmed)

    def submit_guess(self, raw: str) -> GuessResult:
        """
        Submit guess text.

        Invalid and out-of-range guesses are returned as errors and not
        counted. Valid guesses increment the counter; a correct guess
        computes the rating and moves to WON.
        """
        self._require_phase("submit_guess", GamePhase.PLAYING)

        try:
            value = parse_guess(raw)
        except GuessOverflowError:
            return GuessResult.rejected(GuessError.out_of_range(raw, None))
        except GuessParseError:
            return GuessResult.rejected(GuessError.not_a_number(raw))

        if not in_range(value):
            return GuessResult.rejected(GuessError.out_of_range(raw, value))

        current = self._round
        current.guess_count += 1

        if value < current.secret_number:
            return GuessResult.counted(GuessOutcome.too_low(value, current.guess_count))
        if value > current.secret_number:
            return GuessResult.counted(GuessOutcome.too_high(value, current.guess_count))

        self.rating = self.rating_table.rate(current.guess_count)
        self.phase = GamePhase.WON
        logger.debug(
            "Session %s: won in %d guess(es)", self.session_id, current.guess_count
        )
        return GuessResult.counted(
            GuessOutcome.correct(value, current.guess_count, self.rating)
        )

    def restart(self) -> Accepted:
        """
        Start a new round for the same player.

        Only valid from WON. Always draws a fresh secret number.
        """
        self._require_phase("restart", GamePhase.WON)
        self._start_round()
        logger.debug("Session %s: restarted", self.session_id)
        return Accepted(phase=self.phase)

    def _start_round(self):
        """Replace the round with a fresh draw and enter PLAYING."""
        self._round = GameRound(secret_number=draw_secret(self.rng))
        self.rating = None
        self.phase = GamePhase.PLAYING

    def _require_phase(self, operation: str, phase: GamePhase):
        if self.phase != phase:
            raise InvalidPhaseError(operation, self.phase)


def new_session(
    rng: RandomSource | None = None,
    rating_table: RatingTable | None = None,
) -> GameSession:
    """
    Create a session awaiting the player's name.

    Args:
        rng: Random source with randint(a, b); defaults to the process RNG
        rating_table: Threshold table; defaults to REFERENCE_TABLE
    """
    return GameSession(
        rng=rng if rng is not None else process_rng(),
        rating_table=rating_table or REFERENCE_TABLE,
    )
