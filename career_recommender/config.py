import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from shared.database import DEFAULT_DATABASE_URL

RESOLUTION_MODES = ("name", "slug")


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    path_resolution_mode: str = "name"   # "name" | "slug"
    profile_service_url: str = "http://profile-service:8002"
    profile_sync_enabled: bool = True
    interest_min_level: int = 20
    log_level: str = "INFO"
    port: int = 8005

    def __post_init__(self):
        if self.path_resolution_mode not in RESOLUTION_MODES:
            raise ValueError(
                f"Unsupported PATH_RESOLUTION_MODE: {self.path_resolution_mode!r}. "
                f"Expected one of {RESOLUTION_MODES}"
            )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from the environment (after loading a .env file if present).
    """
    load_dotenv(env_file)

    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip(),
        path_resolution_mode=os.getenv("PATH_RESOLUTION_MODE", "name").strip().lower(),
        profile_service_url=os.getenv("PROFILE_SERVICE_URL", "http://profile-service:8002").strip().rstrip("/"),
        profile_sync_enabled=_get_bool("PROFILE_SYNC_ENABLED", True),
        interest_min_level=_get_int("INTEREST_MIN_LEVEL", 20),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        port=_get_int("PORT", 8005),
    )
