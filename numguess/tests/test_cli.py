"""
Tests for configuration and the command-line interface.
"""

import pytest

from ..cli import main
from ..config import ConfigError, Settings, load_settings


class ScriptedInput:
    """Feeds canned answers to input(); EOF when exhausted."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("NUMGUESS_ENV", "NUMGUESS_SEED", "NUMGUESS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        settings = load_settings({})

        assert settings == Settings(env="development", seed=None, log_level="WARNING")

    def test_reads_environment(self):
        settings = load_settings({
            "NUMGUESS_ENV": "production",
            "NUMGUESS_SEED": "42",
            "NUMGUESS_LOG_LEVEL": "debug",
        })

        assert settings.env == "production"
        assert settings.seed == 42
        assert settings.log_level == "DEBUG"

    def test_bad_seed(self):
        with pytest.raises(ConfigError) as exc_info:
            load_settings({"NUMGUESS_SEED": "lots"})
        assert "seed" in str(exc_info.value)

    def test_bad_log_level(self):
        with pytest.raises(ConfigError):
            load_settings({"NUMGUESS_LOG_LEVEL": "LOUD"})


class TestRatingCommands:
    """Tests for rating and ratings."""

    def test_rating(self, clean_env):
        lines = []
        main(["rating", "4"], output=lines.append)
        assert lines == ["Excellent!"]

    def test_ratings_table(self, clean_env):
        lines = []
        main(["ratings"], output=lines.append)

        assert len(lines) == 6
        assert lines[0].split() == ["1-3", "Outstanding!"]
        assert lines[-1].split() == ["16+", "Bad!"]

    def test_no_command_exits(self, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main([], output=lambda *_: None)
        assert exc_info.value.code == 1

    def test_bad_environment_exits(self, monkeypatch):
        monkeypatch.setenv("NUMGUESS_SEED", "nope")
        lines = []
        with pytest.raises(SystemExit) as exc_info:
            main(["ratings"], output=lines.append)

        assert exc_info.value.code == 2
        assert lines[0].startswith("Error:")


@pytest.mark.usefixtures("reseed_process_rng")
class TestPlayCommand:
    """Tests for interactive play."""

    def _secret_for_seed(self, seed):
        from ..engine_core.random_source import draw_secret, seed_process_rng, process_rng
        seed_process_rng(seed)
        return draw_secret(process_rng())

    def test_full_game(self, clean_env):
        """Blank name, bad guess, win, decline replay."""
        secret = self._secret_for_seed(11)
        wrong = 1 if secret != 1 else 2
        answers = ScriptedInput("", "Rae", "abc", str(wrong), str(secret), "n")
        lines = []

        main(["play", "--seed", "11"], input_fn=answers, output=lines.append)

        assert lines[0] == "Number Guessing Game"
        assert "NAME CANNOT BE EMPTY. ENTER YOUR NAME:" in lines
        assert "Hello Rae! I've picked a number (1-100). Try to guess it!" in lines
        assert any("This is not a number!" in line for line in lines)
        assert any(line.startswith("Too ") for line in lines)
        assert any("in 2 guesses" in line for line in lines)
        assert lines[-1] == "Goodbye!"
        assert answers.prompts[-1] == "Play Again? [y/n]: "

    def test_play_again(self, clean_env):
        """Accepting replay starts a new round."""
        secret = self._secret_for_seed(5)
        answers = ScriptedInput("Ada", str(secret), "y", "quit")
        lines = []

        main(["play", "--seed", "5"], input_fn=answers, output=lines.append)

        assert lines.count("It's your turn...") == 2
        assert lines[-1] == "Goodbye!"

    def test_prompts_come_from_message_copy(self, clean_env):
        """Name and guess prompts use the presentation constants."""
        from ..presentation import messages
        answers = ScriptedInput("Ada", "9" * 5000)
        lines = []

        main(["play"], input_fn=answers, output=lines.append)

        assert answers.prompts[:2] == [messages.NAME_PROMPT, messages.GUESS_PROMPT]
        assert any("This is invalid!" in line for line in lines)
        assert lines[-1] == "Goodbye!"

    def test_quit_on_name_screen(self, clean_env):
        lines = []
        main(["play"], input_fn=ScriptedInput("quit"), output=lines.append)
        assert lines == ["Number Guessing Game", "Goodbye!"]

    def test_eof_mid_game(self, clean_env):
        """End of input abandons the game cleanly."""
        lines = []
        main(["play"], input_fn=ScriptedInput("Ada", "50"), output=lines.append)
        assert lines[-1] == "Goodbye!"
