"""
Messages - All user-facing text, composed from outcome data.

The engine returns enums and numbers; this module turns them into copy.
"""

from __future__ import annotations

from ..engine_core.guess import GUESS_MIN, GUESS_MAX
from ..engine_core.outcome import (
    GuessOutcome,
    GuessError,
    GuessErrorKind,
    GuessResult,
    OutcomeKind,
)
from .schemas import FeedbackView, Tone

TITLE = "Number Guessing Game"
NAME_PROMPT = "Your name: "
GUESS_PROMPT = "Your guess: "
NAME_EMPTY = "NAME CANNOT BE EMPTY. ENTER YOUR NAME:"
YOUR_TURN = "It's your turn..."
PLAY_AGAIN = "Play Again?"


def welcome(player_name: str) -> str:
    return (
        f"Hello {player_name}! I've picked a number ({GUESS_MIN}-{GUESS_MAX}). "
        "Try to guess it!"
    )


def outcome_feedback(outcome: GuessOutcome) -> FeedbackView:
    """Feedback for a counted guess."""
    if outcome.kind == OutcomeKind.TOO_LOW:
        return FeedbackView(
            text=f"Too low! Try a higher number than {outcome.guess}.",
            tone=Tone.WARNING,
        )
    if outcome.kind == OutcomeKind.TOO_HIGH:
        return FeedbackView(
            text=f"Too high! Try a lower number than {outcome.guess}.",
            tone=Tone.WARNING,
        )
    return FeedbackView(
        text=(
            "Congratulations!!\n"
            f"You guessed the number {outcome.guess} in {outcome.guess_count} guesses.\n"
            f"Your performance is: {outcome.rating}"
        ),
        tone=Tone.SUCCESS,
    )


def error_feedback(error: GuessError) -> FeedbackView:
    """Feedback for a rejected guess."""
    hint = f"Please enter a number from {GUESS_MIN} to {GUESS_MAX}."
    problem = "not a number" if error.kind == GuessErrorKind.NOT_A_NUMBER else "invalid"
    return FeedbackView(
        text=f"You entered {error.raw.strip()}. This is {problem}!\n{hint}",
        tone=Tone.ERROR,
    )


def guess_feedback(result: GuessResult) -> FeedbackView:
    """Feedback for any guess result."""
    if result.success:
        return outcome_feedback(result.outcome)
    return error_feedback(result.error)
