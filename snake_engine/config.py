"""
Environment configuration.

Values come from the process environment, optionally seeded from a
`.env` file via python-dotenv.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = "INFO"
    db_path: Optional[str] = None
    sound_enabled: bool = True


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VALUES


def get_settings(load_env: bool = True) -> Settings:
    """
    Build Settings from SNAKE_LOG_LEVEL, SNAKE_DB_PATH and SNAKE_SOUND_ENABLED.

    The database location itself is resolved by
    data_access.database.get_database_path, which also honours SNAKE_DATA_DIR.
    """
    if load_env:
        load_dotenv()
    return Settings(
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
        db_path=os.getenv("SNAKE_DB_PATH") or None,
        sound_enabled=_env_flag("SNAKE_SOUND_ENABLED", True),
    )
