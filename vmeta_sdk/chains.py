from __future__ import annotations

from enum import IntEnum


class Chain(IntEnum):
    """L1 chain ids the SDK knows about."""

    MAINNET = 1
    ROPSTEN = 3
    GOERLI = 5
    KOVAN = 42
    HARDHAT_LOCAL = 31337
