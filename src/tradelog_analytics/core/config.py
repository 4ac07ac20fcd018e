"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class AnalyticsConfig(BaseModel):
    page_size: int = Field(default=20, ge=1)  # Rows per trade listing page
    report_timezone: str = "UTC"  # IANA zone used for hour-of-day buckets

    @field_validator("report_timezone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.report_timezone)


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "TRADELOG_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: The file is not valid TOML.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                try:
                    data = tomli.load(f)
                except tomli.TOMLDecodeError as exc:
                    raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    return Settings(**data)
