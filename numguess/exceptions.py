"""
Exceptions raised by the numguess engine.

User mistakes (blank names, bad guesses) are NOT exceptions - they are
returned as data in NameResult / GuessResult. Exceptions here signal
caller bugs or malformed configuration.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine_core.state import GamePhase


class NumguessError(Exception):
    """Base class for all numguess errors."""


class InvalidPhaseError(NumguessError):
    """Raised when an operation is invoked in a phase that does not accept it."""

    def __init__(self, operation: str, phase: GamePhase):
        self.operation = operation
        self.phase = phase
        super().__init__(f"{operation}() is not valid in phase {phase.value}")


class GuessParseError(NumguessError, ValueError):
    """Raised when guess text is not a base-10 integer."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Not an integer: {raw!r}")


class GuessOverflowError(NumguessError):
    """Raised when guess text is an integer too long to convert."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Integer too long: {len(raw.strip())} characters")
