from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from web3 import Web3


@runtime_checkable
class CrossChainMessenger(Protocol):
    """What bridge adapters need from the messenger that owns them."""

    l1_chain_id: int
    l1_signer_or_provider: Web3 | None
    l2_signer_or_provider: Web3 | None


@dataclass
class StaticMessenger:
    l1_chain_id: int
    l1_signer_or_provider: Web3 | None = field(default=None, repr=False)
    l2_signer_or_provider: Web3 | None = field(default=None, repr=False)
