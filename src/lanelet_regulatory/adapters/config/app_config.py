"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_log_level(value: str) -> str:
    if value.upper() not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
    return value.upper()


def _require_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"TOML config '{key}' must be a boolean, got {value!r}")
    return value


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Map loading
    map_file: str | None = Field(
        default=None, description="Lanelet2 OSM map file used when no map is given on the CLI"
    )
    strict_loading: bool = Field(
        default=False,
        description="Abort loading on the first malformed regulatory element",
    )
    fallback_to_generic: bool = Field(
        default=True,
        description="Load regulatory elements of unknown subtype as generic regulatory elements",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    # Optional TOML file with [map] and [logging] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding map and logging settings",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        return _normalize_log_level(v)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating map and logging settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        map_section = toml_data.get("map", {})
        if not isinstance(map_section, dict):
            raise ValueError("TOML config 'map' must be a table")
        if "file" in map_section:
            self.map_file = str(map_section["file"])
        if "strict" in map_section:
            self.strict_loading = _require_bool(map_section["strict"], "map.strict")
        if "fallback_to_generic" in map_section:
            self.fallback_to_generic = _require_bool(
                map_section["fallback_to_generic"], "map.fallback_to_generic"
            )

        logging_section = toml_data.get("logging", {})
        if isinstance(logging_section, dict) and "level" in logging_section:
            self.log_level = _normalize_log_level(str(logging_section["level"]))

        return toml_data

    def apply_config_file(self) -> "AppConfig":
        """Apply overrides from ``config_file`` if one is set.

        Returns:
            This config, for chaining.
        """
        if self.config_file:
            self._load_toml_data()
        return self
