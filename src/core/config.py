"""Core configuration.

Environment variables (prefix ``WOL_``) and ``.env`` files are read through
pydantic-settings so the CLI and adapters share one typed contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "wol"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "wol"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "wol"
    return Path.home() / ".config" / "wol"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="WOL_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_port: int = Field(
        default=9,
        ge=1,
        le=65535,
        description="UDP port used when the caller does not pass one.",
    )
    send_timeout_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Upper bound for the blocking UDP send (seconds).",
    )
    color: bool | None = Field(
        default=None,
        description="Force colored output on/off; None detects the terminal.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root logging level for the CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level
