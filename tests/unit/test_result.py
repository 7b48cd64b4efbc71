"""
Unit tests for registry results and error kinds.
"""

import pytest

from applicant_registry.verification import Err, ErrorKind, Ok, RegistryError


class TestErrorKind:
    """Tests for contract error codes."""

    def test_codes(self) -> None:
        """Test that error codes match the contract."""
        assert ErrorKind.NOT_AUTHORIZED.code == 100
        assert ErrorKind.ALREADY_VERIFIED.code == 101
        assert ErrorKind.NOT_FOUND.code == 102

    def test_lookup_by_code(self) -> None:
        """Test mapping a raw contract code back to a kind."""
        assert ErrorKind(102) is ErrorKind.NOT_FOUND


class TestOk:
    """Tests for successful results."""

    def test_ok_accessors(self) -> None:
        """Test Ok helpers."""
        result = Ok(True)

        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.unwrap() is True
        assert result.unwrap_or(False) is True


class TestErr:
    """Tests for failed results."""

    def test_err_accessors(self) -> None:
        """Test Err helpers."""
        result = Err(ErrorKind.ALREADY_VERIFIED)

        assert result.is_ok() is False
        assert result.is_err() is True
        assert result.code == 101
        assert result.unwrap_or(False) is False

    def test_unwrap_raises(self) -> None:
        """Test that unwrapping an error raises with the kind attached."""
        with pytest.raises(RegistryError) as exc_info:
            Err(ErrorKind.NOT_AUTHORIZED).unwrap()

        assert exc_info.value.kind is ErrorKind.NOT_AUTHORIZED
        assert exc_info.value.code == 100
        assert "NOT_AUTHORIZED" in str(exc_info.value)

