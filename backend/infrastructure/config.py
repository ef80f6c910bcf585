"""Configuration utilities for infrastructure layer.

Settings come from environment variables; a ``.env`` file next to the
backend (or an explicit path) is loaded first without overriding values
already set in the environment.

Example .env:
    LOG_LEVEL=DEBUG
    LOG_FORMAT=json
    REPOSITORY_BACKEND=inmemory
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"

LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        log_level: Root log level name (DEBUG, INFO, ...)
        log_format: ``console`` for dev output, ``json`` for log shipping
        repository_backend: Profile repository backend (``inmemory``)
    """

    log_level: str = "INFO"
    log_format: str = "console"
    repository_backend: str = "inmemory"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional .env path (defaults to backend/.env if present)

    Returns:
        Settings with unknown LOG_FORMAT values reset to ``console``
    """
    path = env_file or DEFAULT_ENV_FILE
    if path.exists():
        load_dotenv(path)

    log_format = os.getenv("LOG_FORMAT", "console").lower()
    if log_format not in LOG_FORMATS:
        log_format = "console"

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=log_format,
        repository_backend=os.getenv("REPOSITORY_BACKEND", "inmemory").lower(),
    )
