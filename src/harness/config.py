from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError


# Environment variable names
ENV_SESSION_FILE = "AOC_SESSION_FILE"
ENV_CACHE_DIR = "AOC_CACHE_DIR"
ENV_BASE_URL = "AOC_BASE_URL"
ENV_TIMEOUT = "AOC_TIMEOUT"
ENV_USER_AGENT = "AOC_USER_AGENT"
ENV_LOG_LEVEL = "AOC_LOG_LEVEL"

DEFAULT_SESSION_FILE = ".aoc-session"
DEFAULT_CACHE_DIR = Path(".cache") / "aoc"
DEFAULT_BASE_URL = "https://adventofcode.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "aoc2020-harness (+https://github.com/aoc2020/aoc2020)"
DEFAULT_LOG_LEVEL = "WARNING"

_FIELD_ENV = {
    "session_file": ENV_SESSION_FILE,
    "cache_dir": ENV_CACHE_DIR,
    "base_url": ENV_BASE_URL,
    "timeout": ENV_TIMEOUT,
    "user_agent": ENV_USER_AGENT,
}


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else default


class Settings(BaseModel):
    """
    Harness configuration.

    Paths are relative to the current working directory unless absolute,
    matching where the puzzle programs are launched from.
    """

    session_file: Path = Field(default=Path(DEFAULT_SESSION_FILE))
    cache_dir: Path = Field(default=DEFAULT_CACHE_DIR)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from AOC_* variables.

        Raises ConfigError naming the offending variable when a value does
        not validate (e.g. a non-numeric or non-positive AOC_TIMEOUT).
        """
        raw = {
            "session_file": _getenv(ENV_SESSION_FILE, DEFAULT_SESSION_FILE),
            "cache_dir": _getenv(ENV_CACHE_DIR) or DEFAULT_CACHE_DIR,
            "base_url": _getenv(ENV_BASE_URL, DEFAULT_BASE_URL),
            "timeout": _getenv(ENV_TIMEOUT, str(DEFAULT_TIMEOUT)),
            "user_agent": _getenv(ENV_USER_AGENT, DEFAULT_USER_AGENT),
        }
        try:
            return cls.model_validate(raw)
        except ValidationError as ve:
            problems = []
            for err in ve.errors():
                field = str(err["loc"][0]) if err.get("loc") else "?"
                env_name = _FIELD_ENV.get(field, field)
                problems.append(f"{env_name}={raw.get(field)!r}: {err['msg']}")
            raise ConfigError("Invalid configuration: " + "; ".join(problems)) from ve


def log_level_from_env() -> str:
    return _getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


__all__ = ["Settings", "log_level_from_env"]
