"""
Applicant Verification Registry
===============================

In-memory model of the single-admin applicant verification contract.

The admin is fixed at construction. Only the admin may verify or revoke
applicants; anyone may query. Authorization is always checked before the
applicant's current state, so a non-admin caller learns nothing about
whether an applicant is verified from the error it receives.

Version: 0.1.0
"""

from __future__ import annotations

import threading
from typing import Any

from applicant_registry.blockchain import BlockClock, MockBlockClock
from applicant_registry.config import settings
from applicant_registry.logging import get_logger
from applicant_registry.verification.errors import ErrorKind
from applicant_registry.verification.models import ApplicantDetails
from applicant_registry.verification.result import Err, Ok, Result

logger = get_logger(__name__)


class ApplicantRegistry:
    """
    Admin-gated registry of verified applicants.

    `verified` and `details` always hold the same set of identities.
    Every public method holds a single lock for its whole body.
    """

    def __init__(self, admin: str, clock: BlockClock | None = None) -> None:
        if not admin:
            raise ValueError("Registry admin identity must be a non-empty string")

        self._admin = admin
        self._clock: BlockClock = clock if clock is not None else MockBlockClock()
        self._lock = threading.RLock()

        self._verified: set[str] = set()
        self._details: dict[str, ApplicantDetails] = {}

        logger.debug(
            "registry_initialized",
            admin=admin,
            block_height=self._clock.current_height(),
        )

    @property
    def admin(self) -> str:
        return self._admin

    @property
    def clock(self) -> BlockClock:
        return self._clock

    # =========================================================================
    # Queries
    # =========================================================================

    def is_verified(self, applicant: str) -> bool:
        """Check whether an applicant is currently verified."""
        with self._lock:
            return applicant in self._verified

    def get_details(self, applicant: str) -> ApplicantDetails | None:
        """Get verification details, or None if the applicant is not verified."""
        with self._lock:
            return self._details.get(applicant)

    def verified_applicants(self) -> list[str]:
        """List verified applicants in the order they were verified."""
        with self._lock:
            return list(self._details)

    # =========================================================================
    # Admin operations
    # =========================================================================

    def verify(
        self,
        caller: str,
        applicant: str,
        name: str,
        organization: str,
        tax_id: str,
    ) -> Result[bool]:
        """
        Verify an applicant.

        Args:
            caller: Identity submitting the call
            applicant: Identity being verified
            name: Applicant's name
            organization: Applicant's organization
            tax_id: Applicant's tax identification number

        Returns:
            Ok(True) on success, Err(NOT_AUTHORIZED) if the caller is not
            the admin, Err(ALREADY_VERIFIED) if the applicant is already
            verified
        """
        with self._lock:
            if caller != self._admin:
                return self._reject("verification_rejected", ErrorKind.NOT_AUTHORIZED, caller, applicant)

            if applicant in self._verified:
                return self._reject("verification_rejected", ErrorKind.ALREADY_VERIFIED, caller, applicant)

            details = ApplicantDetails(
                name=name,
                organization=organization,
                tax_id=tax_id,
                verified_at=self._clock.current_height(),
            )

            self._verified.add(applicant)
            self._details[applicant] = details

            logger.info(
                "applicant_verified",
                applicant=applicant,
                organization=organization,
                verified_at=details.verified_at,
            )

            return Ok(True)

    def revoke(self, caller: str, applicant: str) -> Result[bool]:
        """
        Revoke an applicant's verification.

        Args:
            caller: Identity submitting the call
            applicant: Identity whose verification is revoked

        Returns:
            Ok(True) on success, Err(NOT_AUTHORIZED) if the caller is not
            the admin, Err(NOT_FOUND) if the applicant is not verified
        """
        with self._lock:
            if caller != self._admin:
                return self._reject("revocation_rejected", ErrorKind.NOT_AUTHORIZED, caller, applicant)

            if applicant not in self._verified:
                return self._reject("revocation_rejected", ErrorKind.NOT_FOUND, caller, applicant)

            self._verified.discard(applicant)
            del self._details[applicant]

            logger.info(
                "verification_revoked",
                applicant=applicant,
                block_height=self._clock.current_height(),
            )

            return Ok(True)

    def _reject(self, event: str, kind: ErrorKind, caller: str, applicant: str) -> Err:
        logger.warning(
            event,
            caller=caller,
            applicant=applicant,
            reason=kind.name.lower(),
            code=kind.code,
        )
        return Err(kind)

    # =========================================================================
    # Test Utilities
    # =========================================================================

    def health_check(self) -> dict[str, Any]:
        """Check registry health."""
        with self._lock:
            return {
                "status": "healthy",
                "admin": self._admin,
                "verified": len(self._verified),
                "block_height": self._clock.current_height(),
            }

    def get_stats(self) -> dict[str, int]:
        """Get storage statistics."""
        with self._lock:
            return {
                "verified": len(self._verified),
                "block_height": self._clock.current_height(),
            }

    def clear_all(self) -> None:
        """Clear all verifications (for testing). The admin is kept."""
        with self._lock:
            self._verified.clear()
            self._details.clear()
        logger.debug("registry_cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._verified)

    def __contains__(self, applicant: object) -> bool:
        with self._lock:
            return applicant in self._verified


def create_registry(
    admin: str | None = None,
    clock: BlockClock | None = None,
) -> ApplicantRegistry:
    """
    Build a registry, taking the admin from settings when not given.

    Args:
        admin: Admin identity (defaults to REGISTRY_ADMIN when None)
        clock: Block height source (defaults to a MockBlockClock)

    Returns:
        A new, empty ApplicantRegistry

    Raises:
        ValueError: If the resulting admin is empty
    """
    if admin is None:
        admin = settings.registry.admin
    if not admin:
        raise ValueError(
            "No registry admin configured. "
            "Pass admin= or set REGISTRY_ADMIN."
        )
    return ApplicantRegistry(admin=admin, clock=clock)
