"""
Configuration - Environment settings and logging setup.

Environment variables:
    NUMGUESS_ENV         development | production (default: development)
    NUMGUESS_SEED        Integer seed for the process RNG (default: unset)
    NUMGUESS_LOG_LEVEL   Logging level name (default: WARNING)

Settings are read once at process start. CLI flags override them.
"""

from __future__ import annotations
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .exceptions import NumguessError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(NumguessError):
    """Raised when environment settings are invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid configuration: " + "; ".join(errors))


class Settings(BaseModel):
    """Process-wide settings."""
    env: str = "development"
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read settings from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Raises:
        ConfigError: if a value does not validate
    """
    environ = os.environ if environ is None else environ
    raw = {
        "env": environ.get("NUMGUESS_ENV", "development"),
        "seed": environ.get("NUMGUESS_SEED") or None,
        "log_level": environ.get("NUMGUESS_LOG_LEVEL", "WARNING"),
    }
    try:
        return Settings(**raw)
    except ValidationError as e:
        raise ConfigError(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
