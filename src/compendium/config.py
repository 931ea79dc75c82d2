"""Runtime configuration read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_PREFERENCES_PATH = Path.home() / ".cp-compendium" / "preferences.json"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_path(value: str | None) -> Path | None:
    """Unset means the default file, an empty value disables the file."""
    if value is None:
        return DEFAULT_PREFERENCES_PATH
    if not value.strip():
        return None
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 15.0
    # None keeps preferences in memory only
    preferences_path: Path | None = DEFAULT_PREFERENCES_PATH
    schedule_on_create: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    """Build settings from ``COMPENDIUM_*`` environment variables."""
    load_dotenv()

    timeout = os.getenv("COMPENDIUM_REQUEST_TIMEOUT")
    port = os.getenv("COMPENDIUM_PORT")
    schedule = os.getenv("COMPENDIUM_SCHEDULE_ON_CREATE")
    preferences_path = os.getenv("COMPENDIUM_PREFERENCES_PATH")

    return Settings(
        api_base_url=os.getenv("COMPENDIUM_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        request_timeout=float(timeout) if timeout else 15.0,
        preferences_path=_parse_path(preferences_path),
        schedule_on_create=(
            _parse_bool("COMPENDIUM_SCHEDULE_ON_CREATE", schedule) if schedule else True
        ),
        log_level=os.getenv("COMPENDIUM_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("COMPENDIUM_HOST", "127.0.0.1"),
        port=int(port) if port else 8000,
    )
