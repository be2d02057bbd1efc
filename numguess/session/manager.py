"""
Session Manager - Creates and tracks game sessions.

LIFECYCLE:
1. Front-end requests a new game -> create_session() (AWAITING_NAME)
2. Player plays; restarts after a win stay inside the same session
3. Player quits mid-game or closes the app -> end_session()

PERSISTENCE RULES:
- Sessions are in-memory only
- Nothing survives end_session() or process exit
"""

from __future__ import annotations
import logging
import time

from ..engine_core.random_source import RandomSource
from ..engine_core.rating import RatingTable
from ..engine_core.state import GamePhase, GameSession, new_session

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions
    - Track active sessions
    - Clean up abandoned or stale sessions
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}
        self._created_at: dict[str, float] = {}

    def create_session(
        self,
        rng: RandomSource | None = None,
        rating_table: RatingTable | None = None,
    ) -> GameSession:
        """
        Create a new game session.

        Args:
            rng: Optional random source (defaults to the process RNG)
            rating_table: Optional threshold table

        Returns:
            New GameSession awaiting the player's name
        """
        session = new_session(rng=rng, rating_table=rating_table)
        self._sessions[session.session_id] = session
        self._created_at[session.session_id] = time.time()
        logger.debug("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it.

        Returns True if the session existed.
        """
        session = self._sessions.pop(session_id, None)
        self._created_at.pop(session_id, None)
        if session is None:
            return False
        logger.debug(
            "Ended session %s (%s) in phase %s", session_id, reason, session.phase.value
        )
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions that have a player in them."""
        return [
            sid for sid, session in self._sessions.items()
            if session.phase != GamePhase.AWAITING_NAME
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Drop sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            sid for sid, created in self._created_at.items()
            if current_time - created > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
