"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from jpbizday.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "jpbizday" / "config.ini"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"Invalid boolean for {name}: {value!r}"
    raise ConfigError(msg)


@dataclass
class Config:
    """Previous business day lookup configuration."""

    per_candidate_year: bool = False

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        per_candidate_year = os.environ.get("JPBIZDAY_PER_CANDIDATE_YEAR")
        if per_candidate_year is None:
            return None

        return cls(
            per_candidate_year=_parse_bool(per_candidate_year, "JPBIZDAY_PER_CANDIDATE_YEAR")
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            msg = f"Could not read config file {path}: {e}"
            raise ConfigError(msg) from e
        if not config.has_section("jpbizday"):
            return None

        section = config["jpbizday"]
        return cls(
            per_candidate_year=_parse_bool(
                section.get("perCandidateYear", "false"), "perCandidateYear"
            ),
        )

    @classmethod
    def resolve(cls, path: Path | None = None) -> "Config":
        """Get configuration from the environment, then the file, then defaults."""
        return cls.from_env() or cls.load(path or DEFAULT_CONFIG_PATH) or cls()
