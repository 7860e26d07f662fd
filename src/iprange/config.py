"""
Configuration management for iprange.

Loads settings from environment variables or a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


ENV_LOCATIONS = [
    Path.home() / ".iprange" / ".env",
    Path.home() / ".config" / "iprange" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found in the usual locations."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class Settings:
    """Runtime settings for the iprange command line."""

    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            log_level=os.getenv("IPRANGE_LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("IPRANGE_LOG_FILE") or None,
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        load_env_file()
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Set (or with None, reset) the global settings instance."""
    global _settings
    _settings = settings
