from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class L1ContractName(str, Enum):
    ADDRESS_MANAGER = 'AddressManager'
    L1_CROSS_DOMAIN_MESSENGER = 'L1CrossDomainMessenger'
    L1_STANDARD_BRIDGE = 'L1StandardBridge'
    STATE_COMMITMENT_CHAIN = 'StateCommitmentChain'
    CANONICAL_TRANSACTION_CHAIN = 'CanonicalTransactionChain'
    BOND_MANAGER = 'BondManager'
    # Native value token of the L2. Listed with the deployment but never bound.
    VMT = 'VMT'


class L2ContractName(str, Enum):
    L2_CROSS_DOMAIN_MESSENGER = 'L2CrossDomainMessenger'
    L2_STANDARD_BRIDGE = 'L2StandardBridge'
    OVM_L1_BLOCK_NUMBER = 'OVM_L1BlockNumber'
    OVM_L2_TO_L1_MESSAGE_PASSER = 'OVM_L2ToL1MessagePasser'
    OVM_DEPLOYER_WHITELIST = 'OVM_DeployerWhitelist'
    OVM_ETH = 'OVM_ETH'
    OVM_GAS_PRICE_ORACLE = 'OVM_GasPriceOracle'
    OVM_SEQUENCER_FEE_VAULT = 'OVM_SequencerFeeVault'
    WETH = 'WETH'


NATIVE_VALUE_TOKEN = L1ContractName.VMT

# Some roles use friendlier names than the compiled contracts they point at.
NAME_REMAPPING = MappingProxyType(
    {
        L1ContractName.ADDRESS_MANAGER.value: 'Lib_AddressManager',
        L2ContractName.OVM_L1_BLOCK_NUMBER.value: 'iOVM_L1BlockNumber',
        L2ContractName.WETH.value: 'WETH9',
    }
)


def normalize_contract_name(name: str) -> str:
    """Return the interface registry name for a caller-facing contract name."""
    key = name.value if isinstance(name, Enum) else str(name)
    return NAME_REMAPPING.get(key, key)


def parse_contract_name(name: str) -> L1ContractName | L2ContractName:
    if isinstance(name, (L1ContractName, L2ContractName)):
        return name
    for enum_type in (L1ContractName, L2ContractName):
        try:
            return enum_type(name)
        except ValueError:
            continue
    raise ValueError(f'unknown contract name: {name!r}')
