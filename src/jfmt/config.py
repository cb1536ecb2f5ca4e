"""Configuration for jfmt: per-run format options and user settings."""

from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormatOptions(BaseModel):
    """Options derived from command-line flags, fixed for one invocation."""

    model_config = ConfigDict(frozen=True)

    compact: bool = False
    sort_keys: bool = False
    copy_to_clipboard: bool = False
    attempt_repair: bool = False
    monochrome: bool = False
    show_help: bool = False


class ColorTheme(BaseModel):
    """256-color palette codes used by the colorizer."""

    key: int = Field(default=75, ge=0, le=255)
    string: int = Field(default=114, ge=0, le=255)
    number: int = Field(default=209, ge=0, le=255)
    boolean: int = Field(default=170, ge=0, le=255)
    null: int = Field(default=245, ge=0, le=255)
    brace: int = Field(default=248, ge=0, le=255)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class JfmtSettings(BaseSettings):
    """User settings read from the environment and an optional YAML file."""

    model_config = SettingsConfigDict(
        env_prefix="JFMT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    indent: int = Field(default=2, ge=0, le=8)
    http_timeout: float | None = None

    # NO_COLOR convention: any non-empty value disables color
    no_color: str | None = Field(default=None, validation_alias="NO_COLOR")

    theme: ColorTheme = Field(default_factory=ColorTheme)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def force_monochrome(self) -> bool:
        return bool(self.no_color)

    @classmethod
    def load_from_yaml(cls, yaml_path: str | Path) -> "JfmtSettings":
        """Load settings from a YAML file, falling back to defaults for missing keys."""
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}

            if not isinstance(yaml_data, dict):
                raise ValueError(f"Configuration file must contain a mapping: {yaml_path}")

            config_dict: Dict[str, Any] = {}
            for key in ("indent", "http_timeout", "theme", "logging"):
                if key in yaml_data:
                    config_dict[key] = yaml_data[key]

            return cls(**config_dict)
        except Exception as e:
            logger.debug(f"Error loading YAML configuration: {e}")
            raise


def load_settings(config_file: str | None = None) -> JfmtSettings:
    """Load settings from file or environment."""
    if config_file:
        logger.debug(f"Loading configuration from: {config_file}")
        return JfmtSettings.load_from_yaml(config_file)
    return JfmtSettings()
