"""
Configuration Module
====================

Centralized configuration management using Pydantic Settings.
Loads from environment variables with type validation and defaults.

Usage:
    from applicant_registry.config import settings

    print(settings.environment)
    print(settings.chain.start_block_height)
"""

from applicant_registry.config.settings import (
    ChainSettings,
    Environment,
    LogLevel,
    RegistrySettings,
    Settings,
    get_settings,
)


# Global settings instance (singleton)
settings = get_settings()

__all__ = [
    "Settings",
    "RegistrySettings",
    "ChainSettings",
    "get_settings",
    "settings",
    "Environment",
    "LogLevel",
]
