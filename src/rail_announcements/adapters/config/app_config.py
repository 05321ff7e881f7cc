"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_CLIP_EXTENSIONS = ("mp3", "wav", "ogg", "flac")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level, e.g. 'INFO' or 'DEBUG'")

    # TOML config file path with operators, presets and the clip catalogue
    # If not set, built-in tables and presets are used
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for operators, presets and available clips",
    )

    # Audio assets
    audio_asset_dir: str = Field(
        default="audio", description="Directory containing the recorded clips"
    )
    audio_base_url: str | None = Field(
        default=None,
        description="Base URL to download clips from instead of audio_asset_dir",
    )
    file_prefix: str = Field(
        default="station/ketech/phil",
        description="Path of the voice's clips below the asset directory or base URL",
    )
    clip_extension: str = Field(default="mp3", description="File extension of the clips")
    http_timeout_seconds: int = Field(
        default=10, description="Timeout for clip downloads in seconds"
    )

    # Output
    output_dir: str = Field(
        default="downloads", description="Directory for downloaded announcements"
    )
    validate_clips: bool = Field(
        default=False,
        description="Check every clip against the [clips] catalogue before playback",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @field_validator("clip_extension")
    @classmethod
    def validate_clip_extension(cls, v: str) -> str:
        """Validate the clip extension is a supported audio format."""
        ext = v.lower().lstrip(".")
        if ext not in SUPPORTED_CLIP_EXTENSIONS:
            raise ValueError(
                f"clip_extension must be one of {', '.join(SUPPORTED_CLIP_EXTENSIONS)}"
            )
        return ext

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, or return an empty dict when none is configured."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_operators_config(self) -> dict[str, list[str]]:
        """Return the [operators] table, empty when not configured.

        Raises ValueError if an operator list is not a list of strings.
        """
        operators = self._load_toml_data().get("operators", {})
        if not isinstance(operators, dict):
            raise ValueError("TOML config 'operators' must be a table")

        result: dict[str, list[str]] = {}
        for key in ("standalone_only", "with_service_to_from"):
            if key not in operators:
                continue
            names = operators[key]
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                raise ValueError(f"TOML config 'operators.{key}' must be a list of strings")
            result[key] = names
        return result

    def get_presets_config(self) -> dict[str, list[dict[str, Any]]]:
        """Return the [presets] table as lists of raw presets per announcement type."""
        presets = self._load_toml_data().get("presets", {})
        if not isinstance(presets, dict):
            raise ValueError("TOML config 'presets' must be a table")

        result: dict[str, list[dict[str, Any]]] = {}
        for announcement_type, entries in presets.items():
            if not isinstance(entries, list):
                raise ValueError(f"TOML config 'presets.{announcement_type}' must be a list")
            result[announcement_type] = [e for e in entries if isinstance(e, dict)]
        return result

    def get_available_clips(self) -> list[str] | None:
        """Return the clip catalogue from [clips] available, or None when not configured."""
        clips = self._load_toml_data().get("clips", {})
        available = clips.get("available") if isinstance(clips, dict) else None
        if available is None:
            return None
        if not isinstance(available, list):
            raise ValueError("TOML config 'clips.available' must be a list")
        return [str(c) for c in available]
