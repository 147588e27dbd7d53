"""Configuration helpers for the scoring engine and its HTTP surface."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    strict_stroke_index: bool = Field(
        default=False, alias="TOURSCORE_STRICT_STROKE_INDEX"
    )
    log_level: str = Field(default="INFO", alias="TOURSCORE_LOG_LEVEL")
    require_api_key: bool = Field(default=False, alias="REQUIRE_API_KEY")
    api_keys: str = Field(default="", alias="TOURSCORE_API_KEYS")
    cors_allow_origins: str = Field(
        default="http://localhost,http://127.0.0.1", alias="CORS_ALLOW_ORIGINS"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allowed_api_keys(self) -> set[str]:
        return {key.strip() for key in self.api_keys.split(",") if key.strip()}

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


STABLEFORD_MAX_POINTS: int = 6

MOMENTUM_WINDOW: int = _int_env("TOURSCORE_MOMENTUM_WINDOW", 3)
MOMENTUM_THRESHOLD: float = _float_env("TOURSCORE_MOMENTUM_THRESHOLD", 2.0)
BEST_PERFORMERS_LIMIT: int = _int_env("TOURSCORE_BEST_PERFORMERS", 3)

__all__ = [
    "BEST_PERFORMERS_LIMIT",
    "MOMENTUM_THRESHOLD",
    "MOMENTUM_WINDOW",
    "STABLEFORD_MAX_POINTS",
    "get_settings",
    "reset_settings_cache",
]
