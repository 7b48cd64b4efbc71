"""
Test Configuration
==================

Pytest fixtures for applicant registry tests.
"""

import os

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["CHAIN_START_BLOCK_HEIGHT"] = "1000"

from applicant_registry.blockchain import FixedBlockClock, MockBlockClock  # noqa: E402
from applicant_registry.verification import ApplicantRegistry  # noqa: E402

ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
APPLICANT = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
NON_ADMIN = "ST3PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"

# Block height pinned by the contract test harness
MOCK_BLOCK_HEIGHT = 123


@pytest.fixture
def admin() -> str:
    """Admin identity the registry is created with."""
    return ADMIN


@pytest.fixture
def applicant() -> str:
    """Applicant identity used across tests."""
    return APPLICANT


@pytest.fixture
def non_admin() -> str:
    """An identity that is not the admin."""
    return NON_ADMIN


@pytest.fixture
def clock() -> FixedBlockClock:
    """Clock pinned to the harness block height."""
    return FixedBlockClock(MOCK_BLOCK_HEIGHT)


@pytest.fixture
def mock_clock() -> MockBlockClock:
    """Advancing clock starting at block 1000."""
    return MockBlockClock(start_height=1000)


@pytest.fixture
def registry(admin: str, clock: FixedBlockClock) -> ApplicantRegistry:
    """Create a fresh registry for each test."""
    return ApplicantRegistry(admin=admin, clock=clock)


@pytest.fixture
def sample_applicant_data() -> dict[str, str]:
    """Sample applicant details for verify calls."""
    return {
        "name": "John Doe",
        "organization": "Nonprofit Org",
        "tax_id": "123456789",
    }
