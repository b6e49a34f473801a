"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels,
  configuration keys)
- Centralizing reusable enums and global values
- Providing the structured logging setup

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import (
    CAPABILITIES_PREFIX,
    EMBEDDED_CONFIG_KEY,
    ZONE_PRESETS_CONFIG_KEY,
    EnumConfigBackend,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "CAPABILITIES_PREFIX",
    "EMBEDDED_CONFIG_KEY",
    "ZONE_PRESETS_CONFIG_KEY",
    "EnumConfigBackend",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
