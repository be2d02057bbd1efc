"""
Engine Core - The game session state machine.

The engine:
1. Accepts a player name
2. Draws a secret number in [1, 100]
3. Validates and counts guesses, reporting direction
4. Rates the final guess count on a win
5. Restarts with a fresh draw
"""

from .state import GamePhase, GameRound, GameSession, new_session
from .outcome import (
    Accepted,
    NameResult,
    NameErrorKind,
    GuessOutcome,
    OutcomeKind,
    GuessError,
    GuessErrorKind,
    GuessResult,
)
from .guess import GUESS_MIN, GUESS_MAX, parse_guess, in_range
from .rating import RatingBand, RatingTable, REFERENCE_TABLE, performance_rating
from .random_source import process_rng, seed_process_rng, draw_secret

__all__ = [
    "GamePhase",
    "GameRound",
    "GameSession",
    "new_session",
    "Accepted",
    "NameResult",
    "NameErrorKind",
    "GuessOutcome",
    "OutcomeKind",
    "GuessError",
    "GuessErrorKind",
    "GuessResult",
    "GUESS_MIN",
    "GUESS_MAX",
    "parse_guess",
    "in_range",
    "RatingBand",
    "RatingTable",
    "REFERENCE_TABLE",
    "performance_rating",
    "process_rng",
    "seed_process_rng",
    "draw_secret",
]
