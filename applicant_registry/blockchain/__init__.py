"""
Blockchain Module
=================

Host chain simulation for the registry.

The registry never computes timestamps itself; it reads the current
block height from a `BlockClock` supplied by the caller.

Usage:
    from applicant_registry.blockchain import MockBlockClock

    clock = MockBlockClock(start_height=100)
    clock.advance()          # 101
    clock.current_height()   # 101
"""

from applicant_registry.blockchain.clock import (
    BlockClock,
    FixedBlockClock,
    MockBlockClock,
)

__all__ = [
    "BlockClock",
    "MockBlockClock",
    "FixedBlockClock",
]
