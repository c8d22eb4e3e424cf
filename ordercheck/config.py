"""Shared runtime settings for server/CLI adapters.

This module owns environment-backed application settings. The core engine
never reads them; adapters resolve a catalog snapshot from these settings
and pass it to the core explicitly.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    app_name: str
    debug: bool
    log_verbosity: str
    catalog_path: str | None
    cors_allow_origins: tuple[str, ...]


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_optional(name: str) -> str | None:
    val = os.getenv(name)
    if val is None:
        return None
    return val.strip() or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = tuple(
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    )
    return Settings(
        app_name=os.getenv("APP_NAME", "OrderCheck"),
        debug=_env_bool("DEBUG", default=False),
        log_verbosity=_env_choice(
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high"},
        ),
        catalog_path=_env_optional("CATALOG_PATH"),
        cors_allow_origins=origins or ("*",),
    )


__all__ = ["Settings", "get_settings"]
