"""
Numguess CLI - Command-line interface for the game.

Usage:
    numguess play [--seed N]     Play in the terminal
    numguess rating <count>      Show the rating for a guess count
    numguess ratings             Show the rating table

Type "quit" at any prompt to leave the game.
"""

import argparse
import logging
import sys

from .config import ConfigError, configure_logging, load_settings
from .engine_core.random_source import seed_process_rng
from .engine_core.rating import REFERENCE_TABLE, performance_rating
from .presentation import messages
from .presentation.schemas import Screen
from .session import GameLoop, SessionManager

logger = logging.getLogger(__name__)

QUIT_WORD = "quit"


def main(argv=None, input_fn=input, output=print):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Numguess - Number Guessing Game",
        prog="numguess",
    )
    parser.add_argument("--log-level", help="Logging level (overrides NUMGUESS_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, help="Seed for the random number generator")

    # Rating command
    rating_parser = subparsers.add_parser("rating", help="Show the rating for a guess count")
    rating_parser.add_argument("count", type=int, help="Number of guesses")

    # Ratings table
    subparsers.add_parser("ratings", help="Show the rating table")

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        output(f"Error: {e}")
        sys.exit(2)

    configure_logging(args.log_level or settings.log_level)

    if args.command == "play":
        seed = args.seed if args.seed is not None else settings.seed
        if seed is not None:
            seed_process_rng(seed)
        cmd_play(args, input_fn=input_fn, output=output)
    elif args.command == "rating":
        cmd_rating(args, output=output)
    elif args.command == "ratings":
        cmd_ratings(args, output=output)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, input_fn=input, output=print):
    """Run one interactive session until the player quits."""
    manager = SessionManager()
    session = manager.create_session()
    loop = GameLoop(session)

    output(messages.TITLE)
    view = loop.view()
    reason = "abandoned"

    while True:
        if view.screen == Screen.NAME:
            if view.name_error:
                output(view.name_error)
            raw = _ask(input_fn, messages.NAME_PROMPT)
            if raw is None:
                break
            view = loop.submit_name(raw)
            if view.screen == Screen.GAME:
                output(view.welcome_text)
                output(view.feedback.text)
            continue

        if view.guess_form_visible:
            raw = _ask(input_fn, messages.GUESS_PROMPT)
            if raw is None:
                break
            view = loop.submit_guess(raw)
            output(view.feedback.text)
            continue

        answer = _ask(input_fn, f"{messages.PLAY_AGAIN} [y/n]: ")
        if answer is None or not answer.strip().lower().startswith("y"):
            reason = "completed"
            break
        view = loop.play_again()
        output(view.feedback.text)

    manager.end_session(session.session_id, reason=reason)
    output("Goodbye!")


def cmd_rating(args, output=print):
    """Print the rating for a guess count."""
    output(performance_rating(args.count))


def cmd_ratings(args, output=print):
    """Print the rating table."""
    for low, high, label in REFERENCE_TABLE.rows():
        span = f"{low}+" if high is None else f"{low}-{high}"
        output(f"{span:>6}  {label}")


def _ask(input_fn, prompt):
    """Read a line. None means the player wants out."""
    try:
        text = input_fn(prompt)
    except EOFError:
        return None
    if text.strip().lower() == QUIT_WORD:
        return None
    return text


if __name__ == "__main__":
    main()
