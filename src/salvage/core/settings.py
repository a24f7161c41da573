"""Environment-driven settings for salvage.

``SalvageSettings`` gathers the few knobs the library has: logging level and
format, the default seed for new seed ledgers, and the first iteration index
used by the recovery loop.

Features:
    - **Pydantic validation:** ``iteration_start`` must be non-negative
    - **env_prefix:** every field reads from ``SALVAGE_<FIELD>``
    - **.env file support:** automatic loading via pydantic-settings
    - **Extra ignore:** unknown env vars don't cause startup failures

Examples:
    >>> from salvage.core.settings import get_settings
    >>> get_settings().iteration_start
    1

Tags:
    settings, configuration, pydantic, environment, salvage
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SalvageSettings(BaseSettings):
    """Settings shared by every salvage entry point.

    Fields
    ──────
    log_level        : structlog log level
    json_logs        : JSON rendering (None = auto-detect from TTY)
    seed             : default seed for ledgers created without a generator
    iteration_start  : index of the first iteration in the recovery loop
    """

    model_config = SettingsConfigDict(
        env_prefix="SALVAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Replay ───────────────────────────────────────────────────
    seed: int | None = Field(
        default=None,
        description="Seed for generators created by SeedLedger when none is supplied",
    )

    # ── Recovery loop ────────────────────────────────────────────
    iteration_start: int = Field(default=1, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> SalvageSettings:
    """Return the process-wide settings instance."""
    return SalvageSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["SalvageSettings", "get_settings", "reset_settings"]
