"""
Game Loop - Adapter between a front-end and a GameSession.

The loop:
1. Front-end forwards a user event (name, guess, play again)
2. The loop calls the matching session operation
3. The outcome is turned into a ScreenView
4. Front-end draws the view

On a win the guess form is hidden and "Play Again?" is shown.
Events the current screen cannot produce (a guess after a win, a second
name) are front-end bugs; InvalidPhaseError propagates unchanged.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.state import GamePhase
from ..presentation import messages
from ..presentation.schemas import FeedbackView, Screen, ScreenView

if TYPE_CHECKING:
    from ..engine_core.state import GameSession


class GameLoop:
    """
    The event-to-view driver for one session.

    Usage:
        loop = GameLoop(session)
        view = loop.submit_name("Ada")
        view = loop.submit_guess("50")
        if view.play_again_visible:
            view = loop.play_again()
    """

    def __init__(self, session: GameSession):
        self.session = session
        self._name_error: str | None = None
        self._feedback: FeedbackView | None = None

    def view(self) -> ScreenView:
        """Snapshot of the current screen."""
        session = self.session
        if session.phase == GamePhase.AWAITING_NAME:
            return ScreenView(
                screen=Screen.NAME,
                phase=session.phase.value,
                title=messages.TITLE,
                name_error=self._name_error,
            )

        playing = session.phase == GamePhase.PLAYING
        return ScreenView(
            screen=Screen.GAME,
            phase=session.phase.value,
            title=messages.TITLE,
            player_name=session.player_name,
            welcome_text=messages.welcome(session.player_name),
            feedback=self._feedback,
            guess_count=session.guess_count,
            guess_form_visible=playing,
            play_again_visible=not playing,
        )

    def submit_name(self, name: str) -> ScreenView:
        """Handle the Start Game event."""
        result = self.session.submit_name(name)
        if result.success:
            self._name_error = None
            self._reset_feedback()
        else:
            self._name_error = messages.NAME_EMPTY
        return self.view()

    def submit_guess(self, raw: str) -> ScreenView:
        """Handle the Guess event."""
        result = self.session.submit_guess(raw)
        self._feedback = messages.guess_feedback(result)
        return self.view()

    def play_again(self) -> ScreenView:
        """Handle the Play Again event."""
        self.session.restart()
        self._reset_feedback()
        return self.view()

    def _reset_feedback(self):
        self._feedback = FeedbackView(text=messages.YOUR_TURN)
