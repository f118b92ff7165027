from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from web3 import Web3

from .chains import Chain
from .contract_names import L1ContractName, L2ContractName
from .predeploys import PREDEPLOYS

L1 = L1ContractName
L2 = L2ContractName

# Full list of default L2 contract addresses.
DEFAULT_L2_CONTRACT_ADDRESSES: Mapping[L2ContractName, str] = MappingProxyType(
    {
        L2.L2_CROSS_DOMAIN_MESSENGER: PREDEPLOYS['L2CrossDomainMessenger'],
        L2.L2_STANDARD_BRIDGE: PREDEPLOYS['L2StandardBridge'],
        L2.OVM_L1_BLOCK_NUMBER: PREDEPLOYS['OVM_L1BlockNumber'],
        L2.OVM_L2_TO_L1_MESSAGE_PASSER: PREDEPLOYS['OVM_L2ToL1MessagePasser'],
        L2.OVM_DEPLOYER_WHITELIST: PREDEPLOYS['OVM_DeployerWhitelist'],
        L2.OVM_ETH: PREDEPLOYS['OVM_ETH'],
        L2.OVM_GAS_PRICE_ORACLE: PREDEPLOYS['OVM_GasPriceOracle'],
        L2.OVM_SEQUENCER_FEE_VAULT: PREDEPLOYS['OVM_SequencerFeeVault'],
        L2.WETH: PREDEPLOYS['WETH9'],
    }
)


def _freeze(addresses: Mapping, layer: type) -> Mapping:
    frozen = {}
    for name, address in addresses.items():
        frozen[layer(name)] = Web3.to_checksum_address(address) if address is not None else None
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class DeploymentEntry:
    """Contract addresses of one deployment, split per layer.

    L1 values may be ``None`` for roles that are unknown (synthesized entries for
    networks missing from the registry).
    """

    l1: Mapping[L1ContractName, str | None] = field(default_factory=lambda: MappingProxyType({}))
    l2: Mapping[L2ContractName, str] = field(default_factory=lambda: DEFAULT_L2_CONTRACT_ADDRESSES)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'l1', _freeze(self.l1, L1ContractName))
        object.__setattr__(self, 'l2', _freeze(self.l2, L2ContractName))

    @classmethod
    def unresolved(cls) -> DeploymentEntry:
        """Entry for a network with no known deployment: every L1 role unset, default predeploys."""
        return cls(l1={name: None for name in L1ContractName}, l2=DEFAULT_L2_CONTRACT_ADDRESSES)


class DeploymentRegistry:
    """Read-only mapping of L1 chain id to the deployment on that network."""

    def __init__(self, entries: Mapping[int, DeploymentEntry]) -> None:
        self._entries = MappingProxyType({int(network_id): entry for network_id, entry in entries.items()})

    def lookup(self, network_id: int) -> DeploymentEntry | None:
        return self._entries.get(int(network_id))

    def network_ids(self) -> list[int]:
        return sorted(self._entries)

    def __contains__(self, network_id: object) -> bool:
        return isinstance(network_id, int) and network_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


CONTRACT_ADDRESSES: Mapping[int, DeploymentEntry] = MappingProxyType(
    {
        Chain.ROPSTEN: DeploymentEntry(
            l1={
                L1.ADDRESS_MANAGER: '0xDF460AcBFD9eF9643F63bCAF59dc9430eE69eCDA',
                L1.L1_CROSS_DOMAIN_MESSENGER: '0x63C9250c8d38e26E50fEe408f508dc512444604e',
                L1.L1_STANDARD_BRIDGE: '0x97f93753460Da366A6ac5Cb93B2C7808b817F2d6',
                L1.STATE_COMMITMENT_CHAIN: '0xe4320c2717D97882bB4B50a3A4e663034Dc4B2C2',
                L1.CANONICAL_TRANSACTION_CHAIN: '0x1dB520BcB2D5CA8fd4d32F49b72e69121c7696AF',
                L1.BOND_MANAGER: '0x0dA8C6aC3072E15908e12B69a33aaD3cc647ACbA',
                L1.VMT: '0xda3870B989b4b1bF94cA79075A57145E1BBdaEFa',
            }
        ),
        Chain.GOERLI: DeploymentEntry(
            l1={
                L1.ADDRESS_MANAGER: '0xCa15BF465451e558E61A01982d19c16009CcE073',
                L1.L1_CROSS_DOMAIN_MESSENGER: '0x8F11C69B4b0bc46075F35fAd0F59DE273C7C99F2',
                L1.L1_STANDARD_BRIDGE: '0xcCE335A319e91c1DDd349a5DAA276D9956C52a24',
                L1.STATE_COMMITMENT_CHAIN: '0x20D8Fcfba4d9B55DD0ccAde19D26BB9e989b49ee',
                L1.CANONICAL_TRANSACTION_CHAIN: '0xa8146C03Da4a661e7DeF468faEc64497E404f4Dd',
                L1.BOND_MANAGER: '0xf3023Ae28B2dED81f2bA19b26cA8121A1d93BD85',
                L1.VMT: '0x7DcC8302D602613CdF8a82bD22d710266441fc23',
            }
        ),
        Chain.KOVAN: DeploymentEntry(
            l1={
                L1.ADDRESS_MANAGER: '0xDF460AcBFD9eF9643F63bCAF59dc9430eE69eCDA',
                L1.L1_CROSS_DOMAIN_MESSENGER: '0x63C9250c8d38e26E50fEe408f508dc512444604e',
                L1.L1_STANDARD_BRIDGE: '0x97f93753460Da366A6ac5Cb93B2C7808b817F2d6',
                L1.STATE_COMMITMENT_CHAIN: '0xe4320c2717D97882bB4B50a3A4e663034Dc4B2C2',
                L1.CANONICAL_TRANSACTION_CHAIN: '0x1dB520BcB2D5CA8fd4d32F49b72e69121c7696AF',
                L1.BOND_MANAGER: '0x0dA8C6aC3072E15908e12B69a33aaD3cc647ACbA',
                L1.VMT: '0x7A73Be9ADDeF779F83d77A642B07c65f4a94f2b7',
            }
        ),
        Chain.HARDHAT_LOCAL: DeploymentEntry(
            l1={
                L1.ADDRESS_MANAGER: '0x5FbDB2315678afecb367f032d93F642f64180aa3',
                L1.L1_CROSS_DOMAIN_MESSENGER: '0x8A791620dd6260079BF849Dc5567aDC3F2FdC318',
                L1.L1_STANDARD_BRIDGE: '0x610178dA211FEF7D417bC0e6FeD39F05609AD788',
                L1.STATE_COMMITMENT_CHAIN: '0xDc64a140Aa3E981100a9becA4E685f962f0cF6C9',
                L1.CANONICAL_TRANSACTION_CHAIN: '0xCf7Ed3AccA5a467e9e704C703E8D87F634fB0Fc9',
                L1.BOND_MANAGER: '0x5FC8d32690cc91D4c39d9d3abcBD16989F875707',
                # Local deployments have no value token contract.
                L1.VMT: '0x0000000000000000000000000000000000000000',
            }
        ),
    }
)

DEPLOYMENTS = DeploymentRegistry(CONTRACT_ADDRESSES)
