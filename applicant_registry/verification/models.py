"""
Verification Models
===================

Records stored by the registry.

Version: 0.1.0
"""

from pydantic import BaseModel, ConfigDict, Field


class ApplicantDetails(BaseModel):
    """Verification details attached to a verified applicant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Applicant's legal name")
    organization: str = Field(..., description="Organization the applicant represents")
    tax_id: str = Field(..., alias="taxId", description="Tax identification number")
    verified_at: int = Field(
        ...,
        alias="verifiedAt",
        description="Block height at which the applicant was verified",
    )
