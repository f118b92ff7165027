from __future__ import annotations

from types import MappingProxyType

from web3 import Web3

_PREDEPLOY_ADDRESSES = {
    'OVM_L2ToL1MessagePasser': '0x4200000000000000000000000000000000000000',
    'OVM_DeployerWhitelist': '0x4200000000000000000000000000000000000002',
    'L2CrossDomainMessenger': '0x4200000000000000000000000000000000000007',
    'OVM_GasPriceOracle': '0x420000000000000000000000000000000000000f',
    'L2StandardBridge': '0x4200000000000000000000000000000000000010',
    'OVM_SequencerFeeVault': '0x4200000000000000000000000000000000000011',
    'L2StandardTokenFactory': '0x4200000000000000000000000000000000000012',
    'OVM_L1BlockNumber': '0x4200000000000000000000000000000000000013',
    'OVM_ETH': '0xdeaddeaddeaddeaddeaddeaddeaddeaddead0000',
    'WETH9': '0x4200000000000000000000000000000000000006',
}

# Fixed L2 addresses, identical on every L2 network. Stored checksummed.
PREDEPLOYS = MappingProxyType(
    {name: Web3.to_checksum_address(address) for name, address in _PREDEPLOY_ADDRESSES.items()}
)
