"""
Applicant Verification Registry
===============================

In-memory model of an admin-gated applicant verification contract,
used to exercise contract behaviour without a chain.

Modules:
    - config: Configuration management with Pydantic Settings
    - logging: Structured logging with structlog
    - blockchain: Block height sources (mock/fixed)
    - verification: Registry, details model, results and error codes

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Applicant Registry Team"

from applicant_registry.config import settings
from applicant_registry.logging import configure_logging, get_logger, setup_logging
from applicant_registry.verification import (
    ApplicantDetails,
    ApplicantRegistry,
    Err,
    ErrorKind,
    Ok,
    create_registry,
)

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "configure_logging",
    "ApplicantRegistry",
    "ApplicantDetails",
    "ErrorKind",
    "Ok",
    "Err",
    "create_registry",
    "__version__",
]
