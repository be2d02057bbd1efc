"""
Numguess - Number Guessing Game Engine

A small, deterministic state machine for a number-guessing game.
The engine provides:
- Session state (player name, secret number, guess counter, phase)
- Guess validation and directional feedback
- Performance ratings from a swappable threshold table
- A presentation adapter that renders outcomes as screen views
"""

__version__ = "0.1.0"
