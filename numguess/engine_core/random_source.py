"""
Random Source - The process-wide generator used to draw secret numbers.

The generator is created once at import with OS entropy. It may be
reseeded once at process start (CLI startup, tests) but never per
session, so quick restarts do not replay the same sequence.

Sessions accept any object with a randint(a, b) method, which lets
tests inject a fixed source.
"""

from __future__ import annotations
import logging
import random
from typing import Protocol

from .guess import GUESS_MIN, GUESS_MAX

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


_process_rng = random.Random()


def process_rng() -> random.Random:
    """Get the shared process-wide generator."""
    return _process_rng


def seed_process_rng(seed: int | None) -> None:
    """
    Reseed the process-wide generator.

    Call once at process start. None reseeds from OS entropy.
    """
    _process_rng.seed(seed)
    if seed is None:
        logger.debug("Process RNG seeded from OS entropy")
    else:
        logger.debug("Process RNG seeded with deterministic seed=%s", seed)


def draw_secret(rng: RandomSource) -> int:
    """Draw a secret number uniformly from [GUESS_MIN, GUESS_MAX]."""
    return rng.randint(GUESS_MIN, GUESS_MAX)
