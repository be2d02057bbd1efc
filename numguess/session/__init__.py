"""
Session Module - Tracks sessions and drives them from user events.

A session represents one player at the table:
- Created when the front-end starts a new game
- Holds the GameSession state machine
- Survives restarts after a win
- Dropped when the player quits

Sessions are EPHEMERAL: in-memory only, no persistence.
"""

from .manager import SessionManager
from .game_loop import GameLoop

__all__ = [
    "SessionManager",
    "GameLoop",
]
