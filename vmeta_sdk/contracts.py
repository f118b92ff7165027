from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from web3 import Web3

from .binder import BoundContract, bind_contract
from .contract_names import NATIVE_VALUE_TOKEN, L1ContractName, L2ContractName, parse_contract_name
from .deployments import DEPLOYMENTS, DeploymentEntry, DeploymentRegistry
from .errors import UnknownNetworkError
from .interfaces import InterfaceRegistry, default_interface_registry
from .overrides import DeploymentOverrides, coerce_overrides

LOGGER = logging.getLogger('vmeta.sdk.contracts')


@dataclass(frozen=True)
class ResolvedContracts:
    l1: Mapping[L1ContractName, BoundContract]
    l2: Mapping[L2ContractName, BoundContract]

    def as_addresses(self) -> dict[str, dict[str, str]]:
        return {
            'l1': {name.value: contract.address for name, contract in self.l1.items()},
            'l2': {name.value: contract.address for name, contract in self.l2.items()},
        }


def _bindable_l1_roles() -> list[L1ContractName]:
    return [name for name in L1ContractName if name is not NATIVE_VALUE_TOKEN]


class ContractResolver:
    """Resolves and binds the contracts of a deployment, applying caller overrides."""

    def __init__(
        self,
        registry: DeploymentRegistry = DEPLOYMENTS,
        interfaces: InterfaceRegistry | None = None
    ) -> None:
        self.registry = registry
        self._interfaces = interfaces

    @property
    def interfaces(self) -> InterfaceRegistry:
        return self._interfaces if self._interfaces is not None else default_interface_registry()

    def get_contract(
        self,
        contract_name: L1ContractName | L2ContractName | str,
        network_id: int,
        address: Any = None,
        transport: Web3 | None = None
    ) -> BoundContract:
        """Bind a single contract.

        If the network is unknown the caller must pass ``address``. The registry
        lookup only consults the table of the contract's own layer.
        """
        name = parse_contract_name(contract_name)
        entry = self.registry.lookup(network_id)
        if entry is None and address is None:
            raise UnknownNetworkError(
                network_id,
                f'cannot get contract {name.value} for unknown L1 chain id {network_id}, you must provide an address'
            )

        if address is None:
            table = entry.l1 if isinstance(name, L1ContractName) else entry.l2
            address = table.get(name)
        return bind_contract(name, address, self.interfaces, transport)

    def resolve_all(
        self,
        network_id: int,
        l1_transport: Web3 | None = None,
        l2_transport: Web3 | None = None,
        overrides: DeploymentOverrides | Mapping[str, Any] | None = None
    ) -> ResolvedContracts:
        """Bind every L1 and L2 contract of ``network_id``.

        If the network is unknown, overrides must cover every L1 role except the
        native value token. Any failure aborts the whole resolution.
        """
        checked = coerce_overrides(overrides) or DeploymentOverrides()
        entry = self.registry.lookup(network_id)
        if entry is None:
            if overrides is None:
                raise UnknownNetworkError(network_id)
            entry = DeploymentEntry.unresolved()
            missing = [name.value for name in _bindable_l1_roles() if name not in checked.l1]
            if missing:
                raise UnknownNetworkError(network_id, missing=missing)
            LOGGER.info('resolving contracts for unknown L1 chain id %s from overrides', network_id)

        l1_contracts: dict[L1ContractName, BoundContract] = {}
        for name in _bindable_l1_roles():
            address = checked.l1_address(name) or entry.l1.get(name)
            l1_contracts[name] = self.get_contract(name, network_id, address=address, transport=l1_transport)

        l2_contracts: dict[L2ContractName, BoundContract] = {}
        for name, default_address in entry.l2.items():
            address = checked.l2_address(name) or default_address
            l2_contracts[name] = self.get_contract(name, network_id, address=address, transport=l2_transport)

        LOGGER.debug(
            'resolved contracts chain_id=%s l1_count=%s l2_count=%s overridden=%s',
            network_id,
            len(l1_contracts),
            len(l2_contracts),
            len(checked.l1) + len(checked.l2)
        )
        return ResolvedContracts(l1=MappingProxyType(l1_contracts), l2=MappingProxyType(l2_contracts))

    def native_token_address(
        self,
        network_id: int,
        overrides: DeploymentOverrides | Mapping[str, Any] | None = None
    ) -> str | None:
        checked = coerce_overrides(overrides)
        if checked is not None and NATIVE_VALUE_TOKEN in checked.l1:
            return checked.l1[NATIVE_VALUE_TOKEN]
        entry = self.registry.lookup(network_id)
        if entry is None:
            return None
        return entry.l1.get(NATIVE_VALUE_TOKEN)


def get_contract(
    contract_name: L1ContractName | L2ContractName | str,
    network_id: int,
    address: Any = None,
    transport: Web3 | None = None
) -> BoundContract:
    return ContractResolver().get_contract(contract_name, network_id, address=address, transport=transport)


def get_all_contracts(
    network_id: int,
    l1_transport: Web3 | None = None,
    l2_transport: Web3 | None = None,
    overrides: DeploymentOverrides | Mapping[str, Any] | None = None
) -> ResolvedContracts:
    return ContractResolver().resolve_all(
        network_id,
        l1_transport=l1_transport,
        l2_transport=l2_transport,
        overrides=overrides
    )
