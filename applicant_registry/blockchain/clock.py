"""
Block Clock
===========

Logical-timestamp sources for the registry. On a real chain the
timestamp is the current block height supplied by the host; here it is
simulated in memory.

Version: 0.1.0
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from applicant_registry.config import settings
from applicant_registry.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class BlockClock(Protocol):
    """Protocol for a block height source."""

    def current_height(self) -> int:
        """Return the current block height."""
        ...


class MockBlockClock:
    """
    In-memory block height that only moves forward.

    Starts at the configured chain height unless given one explicitly.
    """

    def __init__(self, start_height: int | None = None) -> None:
        if start_height is None:
            start_height = settings.chain.start_block_height
        if start_height < 0:
            raise ValueError(f"start_height must be >= 0, got {start_height}")

        self._start_height = start_height
        self._block_number = start_height

        logger.debug("mock_block_clock_initialized", block_height=start_height)

    def current_height(self) -> int:
        return self._block_number

    def advance(self, blocks: int = 1) -> int:
        """
        Mine `blocks` empty blocks.

        Args:
            blocks: Number of blocks to move forward

        Returns:
            The new block height
        """
        if blocks < 0:
            raise ValueError(f"Cannot advance by a negative number of blocks: {blocks}")

        self._block_number += blocks
        return self._block_number

    def reset(self) -> None:
        """Return to the starting height (for testing)."""
        self._block_number = self._start_height


class FixedBlockClock:
    """Block height pinned to a single value."""

    def __init__(self, height: int) -> None:
        if height < 0:
            raise ValueError(f"height must be >= 0, got {height}")
        self._height = height

    def current_height(self) -> int:
        return self._height
