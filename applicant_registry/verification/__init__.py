"""
Verification Module
===================

Admin-gated registry of verified applicants.

Features:
- Verify / revoke applicants (admin only)
- Query verification status and details (anyone)
- Contract-compatible error codes and `{type, value}` results

Usage:
    from applicant_registry.verification import ApplicantRegistry, ErrorKind

    registry = ApplicantRegistry(admin="ST1PQH...")

    result = registry.verify(
        caller="ST1PQH...",
        applicant="ST2CY5...",
        name="John Doe",
        organization="Nonprofit Org",
        tax_id="123456789",
    )
    if result.is_err():
        print(result.kind)   # ErrorKind.NOT_AUTHORIZED, ...

    details = registry.get_details("ST2CY5...")
"""

from applicant_registry.verification.errors import ErrorKind, RegistryError
from applicant_registry.verification.models import ApplicantDetails
from applicant_registry.verification.registry import ApplicantRegistry, create_registry
from applicant_registry.verification.result import Err, Ok, Result

__all__ = [
    # Registry
    "ApplicantRegistry",
    "create_registry",
    # Models
    "ApplicantDetails",
    # Results
    "Result",
    "Ok",
    "Err",
    # Errors
    "ErrorKind",
    "RegistryError",
]
