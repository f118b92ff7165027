from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .adapters import BridgeAdapter, BridgeAdapterKind, create_bridge_adapter
from .chains import Chain
from .coercion import to_address
from .contract_names import L1ContractName
from .deployments import CONTRACT_ADDRESSES
from .errors import ContractResolutionError, InvalidOverridesError
from .interfaces import InterfaceRegistry
from .messenger import CrossChainMessenger
from .predeploys import PREDEPLOYS

LOGGER = logging.getLogger('vmeta.sdk.bridges')


class BridgeAdapterSpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    kind: BridgeAdapterKind
    l1_bridge: str
    l2_bridge: str

    @field_validator('l1_bridge', 'l2_bridge', mode='before')
    @classmethod
    def _checksum(cls, value: Any) -> str:
        try:
            return to_address(value)
        except ContractResolutionError as exc:
            raise ValueError(exc.detail) from exc


BridgeAdapterData = Mapping[str, BridgeAdapterSpec]


def _standard_bridges(l1_chain_id: int) -> BridgeAdapterData:
    l1_bridge = CONTRACT_ADDRESSES[l1_chain_id].l1[L1ContractName.L1_STANDARD_BRIDGE]
    l2_bridge = PREDEPLOYS['L2StandardBridge']
    return MappingProxyType(
        {
            'Standard': BridgeAdapterSpec(kind=BridgeAdapterKind.STANDARD, l1_bridge=l1_bridge, l2_bridge=l2_bridge),
            'ETH': BridgeAdapterSpec(kind=BridgeAdapterKind.ETH, l1_bridge=l1_bridge, l2_bridge=l2_bridge),
        }
    )


# TODO: pull custom bridges (DAI, SNX) from the token list once it is published per network.
BRIDGE_ADAPTER_DATA: Mapping[int, BridgeAdapterData] = MappingProxyType(
    {
        Chain.ROPSTEN: _standard_bridges(Chain.ROPSTEN),
        Chain.GOERLI: _standard_bridges(Chain.GOERLI),
        Chain.KOVAN: _standard_bridges(Chain.KOVAN),
        Chain.HARDHAT_LOCAL: _standard_bridges(Chain.HARDHAT_LOCAL),
    }
)


class BridgeRegistry:
    """Read-only mapping of L1 chain id to the bridges deployed for that network."""

    def __init__(self, entries: Mapping[int, BridgeAdapterData]) -> None:
        self._entries = MappingProxyType(
            {int(network_id): MappingProxyType(dict(specs)) for network_id, specs in entries.items()}
        )

    def lookup(self, network_id: int) -> BridgeAdapterData:
        return self._entries.get(int(network_id), MappingProxyType({}))

    def network_ids(self) -> list[int]:
        return sorted(self._entries)


BRIDGES = BridgeRegistry(BRIDGE_ADAPTER_DATA)


def coerce_bridge_overrides(overrides: Mapping[str, Any] | None) -> dict[str, BridgeAdapterSpec]:
    checked: dict[str, BridgeAdapterSpec] = {}
    for label, spec in (overrides or {}).items():
        if isinstance(spec, BridgeAdapterSpec):
            checked[str(label)] = spec
            continue
        try:
            checked[str(label)] = BridgeAdapterSpec.model_validate(spec)
        except ValidationError as exc:
            raise InvalidOverridesError(f'invalid bridge override {label}: {exc}') from exc
    return checked


class BridgeAdapterFactory:
    def __init__(self, bridges: BridgeRegistry = BRIDGES, interfaces: InterfaceRegistry | None = None) -> None:
        self.bridges = bridges
        self.interfaces = interfaces

    def resolve_bridges(
        self,
        network_id: int,
        messenger: CrossChainMessenger,
        overrides: Mapping[str, Any] | None = None
    ) -> Mapping[str, BridgeAdapter]:
        """Instantiate one adapter per bridge label; overrides replace built-in labels wholesale."""
        merged = dict(self.bridges.lookup(network_id))
        merged.update(coerce_bridge_overrides(overrides))
        if not merged:
            LOGGER.info('no bridges configured for L1 chain id %s', network_id)

        adapters: dict[str, BridgeAdapter] = {}
        for label, spec in merged.items():
            adapters[label] = create_bridge_adapter(
                spec.kind,
                messenger=messenger,
                l1_bridge=spec.l1_bridge,
                l2_bridge=spec.l2_bridge,
                interfaces=self.interfaces
            )
        return MappingProxyType(adapters)


def get_bridge_adapters(
    network_id: int,
    messenger: CrossChainMessenger,
    overrides: Mapping[str, Any] | None = None
) -> Mapping[str, BridgeAdapter]:
    return BridgeAdapterFactory().resolve_bridges(network_id, messenger, overrides=overrides)
