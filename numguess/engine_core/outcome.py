"""
Outcomes - Plain data returned by the session operations.

Outcomes describe WHAT happened, never how to say it:
- NameResult: name accepted, or rejected as empty
- GuessResult: a GuessOutcome (too low / too high / correct)
  or a GuessError (not a number / out of range)
- Accepted: a transition that cannot fail (restart)

Message text is composed by the presentation layer from these values.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GamePhase


class NameErrorKind(Enum):
    """Why a name was rejected."""
    NAME_EMPTY = "name_empty"


class OutcomeKind(Enum):
    """Result of a counted guess."""
    TOO_LOW = "too_low"  # Guess below the secret - player should go higher
    TOO_HIGH = "too_high"
    CORRECT = "correct"


class GuessErrorKind(Enum):
    """Why a guess was rejected (not counted)."""
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class Accepted:
    """A transition that always succeeds."""
    phase: GamePhase


@dataclass(frozen=True)
class NameResult:
    """Result of submitting a player name."""
    player_name: str | None = None
    error: NameErrorKind | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def accepted(cls, player_name: str) -> NameResult:
        return cls(player_name=player_name)

    @classmethod
    def name_empty(cls) -> NameResult:
        return cls(error=NameErrorKind.NAME_EMPTY)


@dataclass(frozen=True)
class GuessOutcome:
    """
    A counted guess.

    guess_count is the counter AFTER this guess.
    rating is only set for CORRECT.
    """
    kind: OutcomeKind
    guess: int
    guess_count: int
    rating: str | None = None

    @property
    def is_correct(self) -> bool:
        return self.kind == OutcomeKind.CORRECT

    @classmethod
    def too_low(cls, guess: int, guess_count: int) -> GuessOutcome:
        return cls(kind=OutcomeKind.TOO_LOW, guess=guess, guess_count=guess_count)

    @classmethod
    def too_high(cls, guess: int, guess_count: int) -> GuessOutcome:
        return cls(kind=OutcomeKind.TOO_HIGH, guess=guess, guess_count=guess_count)

    @classmethod
    def correct(cls, guess: int, guess_count: int, rating: str) -> GuessOutcome:
        return cls(
            kind=OutcomeKind.CORRECT,
            guess=guess,
            guess_count=guess_count,
            rating=rating,
        )


@dataclass(frozen=True)
class GuessError:
    """
    A rejected guess. Not counted.

    raw is the text as submitted; value is set for OUT_OF_RANGE, or None
    when the number has too many digits to convert.
    """
    kind: GuessErrorKind
    raw: str
    value: int | None = None

    @classmethod
    def not_a_number(cls, raw: str) -> GuessError:
        return cls(kind=GuessErrorKind.NOT_A_NUMBER, raw=raw)

    @classmethod
    def out_of_range(cls, raw: str, value: int | None) -> GuessError:
        return cls(kind=GuessErrorKind.OUT_OF_RANGE, raw=raw, value=value)


@dataclass(frozen=True)
class GuessResult:
    """Either an outcome or an error, never both."""
    outcome: GuessOutcome | None = None
    error: GuessError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def counted(cls, outcome: GuessOutcome) -> GuessResult:
        return cls(outcome=outcome)

    @classmethod
    def rejected(cls, error: GuessError) -> GuessResult:
        return cls(error=error)
