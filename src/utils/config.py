"""Application settings read from environment variables.

Values come from the process environment, populated from a ``.env`` file by
``load_dotenv()`` at application start.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    """Runtime configuration for the account service."""

    mongo_url: str | None = field(default_factory=lambda: os.getenv("MONGO_URL"))
    database_name: str = field(default_factory=lambda: os.getenv("MONGODB_DATABASE", "accounts"))
    port: int = field(default_factory=lambda: _int_env("PORT", 8000))
    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))
    bcrypt_rounds: int = field(default_factory=lambda: _int_env("BCRYPT_ROUNDS", 10))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def cors_origin_list(self) -> list[str] | str:
        """Return "*" or the explicit origin list."""
        if self.cors_origins.strip() == "*":
            return "*"
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
