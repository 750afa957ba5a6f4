"""Configuration management for the soak test engine.

This module provides centralized configuration management using
pydantic-settings, supporting environment variables, .env files, and
runtime configuration overrides.

Example:
    >>> from soakflow.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.soak.knockdown_threshold
    10

Environment Variables:
    SOAKFLOW_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SOAKFLOW_DICE_HIT_THRESHOLD: Lowest die face counted as a hit
    SOAKFLOW_DICE_SEED: Optional seed for reproducible pools
    SOAKFLOW_SOAK_KNOCKDOWN_THRESHOLD: Damage that always knocks down
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from soakflow.core import constants
from soakflow.core.exceptions import ConfigurationError


class DiceSettings(BaseSettings):
    """Configuration for dice pool resolution.

    Attributes:
        hit_threshold: Lowest d6 face that counts as a hit.
        seed: Optional random seed for reproducible pools.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOAKFLOW_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hit_threshold: int = Field(
        default=constants.HIT_THRESHOLD,
        ge=2,
        le=6,
        description="Lowest d6 face counted as a hit",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible pools",
    )


class SoakSettings(BaseSettings):
    """Configuration for soak test resolution.

    Attributes:
        knockdown_threshold: Damage value that knocks down regardless of limit.
        gel_rounds_penalty: Physical limit modifier for gel rounds damage.
        impact_dispersion_penalty: Physical limit modifier for impact
            dispersion damage.
        title_key: Translation key for the soak test title.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOAKFLOW_SOAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    knockdown_threshold: int = Field(
        default=constants.KNOCKDOWN_DAMAGE_THRESHOLD,
        ge=1,
        description="Damage that always causes knockdown",
    )
    gel_rounds_penalty: int = Field(
        default=constants.GEL_ROUNDS_LIMIT_MODIFIER,
        le=0,
        description="Physical limit modifier for gel rounds",
    )
    impact_dispersion_penalty: int = Field(
        default=constants.IMPACT_DISPERSION_LIMIT_MODIFIER,
        le=0,
        description="Physical limit modifier for impact dispersion",
    )
    title_key: str = Field(
        default=constants.LABEL_SOAK_TEST,
        min_length=1,
        description="Translation key for the soak test title",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines instead of console output.
        log_file: Optional log file path.
        dice: Dice pool settings.
        soak: Soak test settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOAKFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="soakflow", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    log_file: Path | None = Field(default=None, description="Optional log file")

    dice: DiceSettings = Field(default_factory=DiceSettings)
    soak: SoakSettings = Field(default_factory=SoakSettings)

    @model_validator(mode="after")
    def validate_log_file_parent(self) -> "Settings":
        """Ensure a configured log file can be created.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the log file's directory does not exist.
        """
        if self.log_file is not None and not self.log_file.parent.exists():
            raise ConfigurationError(
                f"Log file directory does not exist: {self.log_file.parent}",
                config_key="log_file",
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DiceSettings",
    "SoakSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
