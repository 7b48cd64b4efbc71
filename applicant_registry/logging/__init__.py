"""
Logging Module
==============

Structured logging using structlog with JSON output for production
and colored console output for development.

Usage:
    from applicant_registry.logging import configure_logging, get_logger

    # Setup at application start (reads LOG_LEVEL / JSON_LOGS)
    configure_logging()

    # Get logger for a module
    logger = get_logger(__name__)

    # Log with context
    logger.info("applicant_verified", applicant="ST2CY5...", verified_at=1001)
"""

from applicant_registry.logging.logger import (
    bind_context,
    censor_secrets,
    clear_context,
    configure_logging,
    get_logger,
    setup_logging,
)


__all__ = [
    "get_logger",
    "setup_logging",
    "configure_logging",
    "bind_context",
    "clear_context",
    "censor_secrets",
]
