"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        SoakFlowError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from soakflow.core.config import (
    DiceSettings,
    Settings,
    SoakSettings,
    clear_settings_cache,
    get_settings,
)
from soakflow.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    GameEngineError,
    InvalidGameStateError,
    SoakFlowError,
)
from soakflow.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    unbind_context,
)


__all__ = [
    # Exceptions
    "SoakFlowError",
    "GameEngineError",
    "InvalidGameStateError",
    "DiceRollError",
    "ConfigurationError",
    # Configuration
    "Settings",
    "DiceSettings",
    "SoakSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
