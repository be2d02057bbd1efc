"""
Pydantic Schemas for Presentation - What a front-end needs to draw a screen.

A ScreenView is a complete snapshot of one screen. Front-ends (console,
GUI, web) render it as-is; they never inspect the engine state directly.
Views never carry the secret number.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class Screen(str, Enum):
    """Which screen is visible."""
    NAME = "name"
    GAME = "game"


class Tone(str, Enum):
    """Styling hint for feedback text."""
    NEUTRAL = "neutral"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


# =============================================================================
# Views
# =============================================================================

class FeedbackView(BaseModel):
    """Feedback line shown under the guess form."""
    text: str
    tone: Tone = Tone.NEUTRAL


class ScreenView(BaseModel):
    """Full snapshot of what to display."""
    screen: Screen
    phase: str = Field(description="awaiting_name, playing, won")
    title: str

    # Name screen
    name_error: Optional[str] = None

    # Game screen
    player_name: Optional[str] = None
    welcome_text: Optional[str] = None
    feedback: Optional[FeedbackView] = None
    guess_count: int = 0
    guess_form_visible: bool = False
    play_again_visible: bool = False
