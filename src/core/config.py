"""Runtime settings, read from the environment (or a .env file)."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = field(
        default_factory=lambda: os.getenv(
            "CHECKERS_DATABASE_URL", "sqlite:///checkers.db"
        )
    )
    database_echo: bool = field(
        default_factory=lambda: _env_flag("CHECKERS_DATABASE_ECHO")
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("CHECKERS_LOG_LEVEL", "INFO").upper()
    )


def get_settings() -> Settings:
    return Settings()
