"""
Configuration helpers for the guestbook backend.

Settings are read from environment variables. A ``.env`` file in the working
directory (or any parent) is loaded first, without overriding variables that
are already set.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

DEFAULT_PORT = 4000


class ConfigurationError(RuntimeError):
    """Raised when a setting required at startup is missing."""


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    database_url: str
    host: str
    port: int
    log_level: str
    log_file: str

    def require_database_url(self) -> str:
        url = (self.database_url or "").strip()
        if not url:
            raise ConfigurationError(
                "No database URL specified in environment variables. "
                "Have you set DATABASE_URL (or a .env file)?"
            )
        return url


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    load_dotenv()

    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        database_url=os.getenv("DATABASE_URL", "").strip(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
    )
