"""
Operation Results
=================

Tagged results returned by registry mutations. Failures are values, not
exceptions: callers check `is_ok()` before trusting `value`.

Version: 0.1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from applicant_registry.verification.errors import ErrorKind, RegistryError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def as_tagged(self) -> dict[str, Any]:
        """Render in the contract's `{type, value}` response shape."""
        return {"type": "ok", "value": self.value}


@dataclass(frozen=True)
class Err:
    """Failed result carrying the contract error kind."""

    kind: ErrorKind

    @property
    def code(self) -> int:
        return self.kind.code

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """
        Raises:
            RegistryError: always, carrying this result's error kind
        """
        raise RegistryError(self.kind)

    def unwrap_or(self, default: T) -> T:
        return default

    def as_tagged(self) -> dict[str, Any]:
        """Render in the contract's `{type, value}` response shape."""
        return {"type": "err", "value": self.code}


Result = Union[Ok[T], Err]
