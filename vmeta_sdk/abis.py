from __future__ import annotations

from typing import Any


def _fn(
    name: str,
    inputs: list[tuple[str, str]] | None = None,
    outputs: list[str] | None = None,
    mutability: str = 'view'
) -> dict[str, Any]:
    return {
        'inputs': [{'internalType': kind, 'name': arg, 'type': kind} for arg, kind in (inputs or [])],
        'name': name,
        'outputs': [{'internalType': kind, 'name': '', 'type': kind} for kind in (outputs or [])],
        'stateMutability': mutability,
        'type': 'function'
    }


ERC20_ABI = [
    _fn('name', outputs=['string']),
    _fn('symbol', outputs=['string']),
    _fn('decimals', outputs=['uint8']),
    _fn('totalSupply', outputs=['uint256']),
    _fn('balanceOf', [('account', 'address')], ['uint256']),
    _fn('allowance', [('owner', 'address'), ('spender', 'address')], ['uint256']),
    _fn('approve', [('spender', 'address'), ('amount', 'uint256')], ['bool'], 'nonpayable'),
    _fn('transfer', [('recipient', 'address'), ('amount', 'uint256')], ['bool'], 'nonpayable'),
]

L1_BRIDGE_ABI = [
    _fn('l2TokenBridge', outputs=['address']),
    _fn('messenger', outputs=['address']),
    _fn('deposits', [('l1Token', 'address'), ('l2Token', 'address')], ['uint256']),
    _fn('depositETH', [('_l2Gas', 'uint32'), ('_data', 'bytes')], mutability='payable'),
    _fn('depositETHTo', [('_to', 'address'), ('_l2Gas', 'uint32'), ('_data', 'bytes')], mutability='payable'),
    _fn(
        'depositERC20',
        [
            ('_l1Token', 'address'),
            ('_l2Token', 'address'),
            ('_amount', 'uint256'),
            ('_l2Gas', 'uint32'),
            ('_data', 'bytes')
        ],
        mutability='nonpayable'
    ),
    _fn(
        'depositERC20To',
        [
            ('_l1Token', 'address'),
            ('_l2Token', 'address'),
            ('_to', 'address'),
            ('_amount', 'uint256'),
            ('_l2Gas', 'uint32'),
            ('_data', 'bytes')
        ],
        mutability='nonpayable'
    ),
]

L2_BRIDGE_ABI = [
    _fn('l1TokenBridge', outputs=['address']),
    _fn('messenger', outputs=['address']),
    _fn(
        'withdraw',
        [('_l2Token', 'address'), ('_amount', 'uint256'), ('_l1Gas', 'uint32'), ('_data', 'bytes')],
        mutability='nonpayable'
    ),
    _fn(
        'withdrawTo',
        [
            ('_l2Token', 'address'),
            ('_to', 'address'),
            ('_amount', 'uint256'),
            ('_l1Gas', 'uint32'),
            ('_data', 'bytes')
        ],
        mutability='nonpayable'
    ),
]

CROSS_DOMAIN_MESSENGER_ABI = [
    _fn('xDomainMessageSender', outputs=['address']),
    _fn('messageNonce', outputs=['uint256']),
    _fn('successfulMessages', [('messageHash', 'bytes32')], ['bool']),
    _fn(
        'sendMessage',
        [('_target', 'address'), ('_message', 'bytes'), ('_gasLimit', 'uint32')],
        mutability='nonpayable'
    ),
]

BUILTIN_INTERFACES: dict[str, list[dict[str, Any]]] = {
    'Lib_AddressManager': [
        _fn('owner', outputs=['address']),
        _fn('getAddress', [('_name', 'string')], ['address']),
        _fn('setAddress', [('_name', 'string'), ('_address', 'address')], mutability='nonpayable'),
    ],
    'L1CrossDomainMessenger': CROSS_DOMAIN_MESSENGER_ABI + [
        _fn('libAddressManager', outputs=['address']),
        _fn('paused', outputs=['bool']),
    ],
    'L1StandardBridge': L1_BRIDGE_ABI,
    'L1DAITokenBridge': L1_BRIDGE_ABI + [
        _fn('l1Token', outputs=['address']),
        _fn('l2Token', outputs=['address']),
        _fn('isOpen', outputs=['uint256']),
    ],
    'StateCommitmentChain': [
        _fn('getTotalElements', outputs=['uint256']),
        _fn('getTotalBatches', outputs=['uint256']),
        _fn('getLastSequencerTimestamp', outputs=['uint256']),
        _fn('FRAUD_PROOF_WINDOW', outputs=['uint256']),
    ],
    'CanonicalTransactionChain': [
        _fn('getTotalElements', outputs=['uint256']),
        _fn('getTotalBatches', outputs=['uint256']),
        _fn('getQueueLength', outputs=['uint40']),
        _fn('getNextQueueIndex', outputs=['uint40']),
        _fn('enqueueGasCost', outputs=['uint256']),
    ],
    'BondManager': [
        _fn('isCollateralized', [('_who', 'address')], ['bool']),
    ],
    'VMT': ERC20_ABI,
    'L2CrossDomainMessenger': CROSS_DOMAIN_MESSENGER_ABI + [
        _fn('l1CrossDomainMessenger', outputs=['address']),
    ],
    'L2StandardBridge': L2_BRIDGE_ABI,
    'L2DAITokenBridge': L2_BRIDGE_ABI + [
        _fn('l1Token', outputs=['address']),
        _fn('l2Token', outputs=['address']),
    ],
    'iOVM_L1BlockNumber': [
        _fn('getL1BlockNumber', outputs=['uint256']),
    ],
    'OVM_L2ToL1MessagePasser': [
        _fn('sentMessages', [('messageHash', 'bytes32')], ['bool']),
        _fn('passMessageToL1', [('_message', 'bytes')], mutability='nonpayable'),
    ],
    'OVM_DeployerWhitelist': [
        _fn('owner', outputs=['address']),
        _fn('whitelist', [('deployer', 'address')], ['bool']),
        _fn('isDeployerAllowed', [('_deployer', 'address')], ['bool']),
    ],
    'OVM_ETH': ERC20_ABI + [
        _fn('l1Token', outputs=['address']),
        _fn('l2Bridge', outputs=['address']),
    ],
    'OVM_GasPriceOracle': [
        _fn('gasPrice', outputs=['uint256']),
        _fn('l1BaseFee', outputs=['uint256']),
        _fn('overhead', outputs=['uint256']),
        _fn('scalar', outputs=['uint256']),
        _fn('decimals', outputs=['uint256']),
        _fn('getL1Fee', [('_data', 'bytes')], ['uint256']),
        _fn('getL1GasUsed', [('_data', 'bytes')], ['uint256']),
    ],
    'OVM_SequencerFeeVault': [
        _fn('l1FeeWallet', outputs=['address']),
        _fn('MIN_WITHDRAWAL_AMOUNT', outputs=['uint256']),
        _fn('withdraw', mutability='nonpayable'),
    ],
    'WETH9': ERC20_ABI + [
        _fn('deposit', mutability='payable'),
        _fn('withdraw', [('wad', 'uint256')], mutability='nonpayable'),
    ],
    'L2StandardERC20': ERC20_ABI + [
        _fn('l1Token', outputs=['address']),
        _fn('l2Bridge', outputs=['address']),
    ],
}
