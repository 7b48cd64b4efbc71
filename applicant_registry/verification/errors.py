"""
Registry error kinds.

Error codes match the deployed contract so results can be compared
against on-chain responses directly.
"""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Contract error codes."""

    NOT_AUTHORIZED = 100
    ALREADY_VERIFIED = 101
    NOT_FOUND = 102

    @property
    def code(self) -> int:
        return int(self)


class RegistryError(Exception):
    """Raised when an error result is unwrapped as if it were a success."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = kind
        super().__init__(f"{kind.name} (code {kind.code})")

    @property
    def code(self) -> int:
        return self.kind.code
