"""
Presentation - View schemas and message copy.

Everything a front-end shows is built here from engine outcome data.
"""

from .schemas import Screen, Tone, FeedbackView, ScreenView
from . import messages

__all__ = [
    "Screen",
    "Tone",
    "FeedbackView",
    "ScreenView",
    "messages",
]
