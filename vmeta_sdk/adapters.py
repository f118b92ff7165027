from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .binder import bind_contract
from .coercion import ZERO_ADDRESS, addresses_equal, to_address
from .errors import BridgeAdapterError
from .interfaces import InterfaceRegistry, default_interface_registry
from .messenger import CrossChainMessenger
from .predeploys import PREDEPLOYS

LOGGER = logging.getLogger('vmeta.sdk.adapters')

DEFAULT_L2_GAS_LIMIT = 200_000


class BridgeAdapterKind(str, Enum):
    STANDARD = 'standard'
    ETH = 'eth'
    DAI = 'dai'


@dataclass(frozen=True)
class BridgeCall:
    """Unsigned call produced by an adapter; the caller signs and sends it."""

    to: str
    data: str
    value: int = 0


class StandardBridgeAdapter:
    """Bridge for tokens minted and burned by the standard L2 token contract."""

    kind = BridgeAdapterKind.STANDARD
    l1_bridge_interface = 'L1StandardBridge'
    l2_bridge_interface = 'L2StandardBridge'

    def __init__(
        self,
        *,
        messenger: CrossChainMessenger,
        l1_bridge: Any,
        l2_bridge: Any,
        interfaces: InterfaceRegistry | None = None
    ) -> None:
        self.messenger = messenger
        self.interfaces = interfaces if interfaces is not None else default_interface_registry()
        self.l1_bridge = bind_contract(
            self.l1_bridge_interface,
            l1_bridge,
            self.interfaces,
            messenger.l1_signer_or_provider
        )
        self.l2_bridge = bind_contract(
            self.l2_bridge_interface,
            l2_bridge,
            self.interfaces,
            messenger.l2_signer_or_provider
        )

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(l1_bridge={self.l1_bridge.address}, '
            f'l2_bridge={self.l2_bridge.address})'
        )

    def supports_token_bridge(self, l1_token: Any, l2_token: Any) -> bool:
        if _is_eth_pair(l1_token, l2_token):
            return False

        token = bind_contract(
            'L2StandardERC20',
            l2_token,
            self.interfaces,
            self.messenger.l2_signer_or_provider
        )
        remote_l1_token = token.call('l1Token')
        if not addresses_equal(remote_l1_token, l1_token):
            return False
        return addresses_equal(token.call('l2Bridge'), self.l2_bridge)

    def populate_deposit(
        self,
        l1_token: Any,
        l2_token: Any,
        amount: int,
        recipient: Any = None,
        l2_gas: int = DEFAULT_L2_GAS_LIMIT,
        data: bytes = b''
    ) -> BridgeCall:
        self._check_pair(l1_token, l2_token)
        if recipient is None:
            calldata = self.l1_bridge.encode_call(
                'depositERC20', to_address(l1_token), to_address(l2_token), amount, l2_gas, data
            )
        else:
            calldata = self.l1_bridge.encode_call(
                'depositERC20To',
                to_address(l1_token),
                to_address(l2_token),
                to_address(recipient),
                amount,
                l2_gas,
                data
            )
        return BridgeCall(to=self.l1_bridge.address, data=calldata)

    def populate_withdraw(
        self,
        l1_token: Any,
        l2_token: Any,
        amount: int,
        recipient: Any = None,
        data: bytes = b''
    ) -> BridgeCall:
        self._check_pair(l1_token, l2_token)
        return self._withdraw_call(to_address(l2_token), amount, recipient, data)

    def _withdraw_call(self, l2_token: str, amount: int, recipient: Any, data: bytes) -> BridgeCall:
        # The L1 gas argument is ignored by the L2 bridge.
        if recipient is None:
            calldata = self.l2_bridge.encode_call('withdraw', l2_token, amount, 0, data)
        else:
            calldata = self.l2_bridge.encode_call('withdrawTo', l2_token, to_address(recipient), amount, 0, data)
        return BridgeCall(to=self.l2_bridge.address, data=calldata)

    def _check_pair(self, l1_token: Any, l2_token: Any) -> None:
        if _is_eth_pair(l1_token, l2_token):
            raise BridgeAdapterError(f'{type(self).__name__} does not bridge ETH')


class ETHBridgeAdapter(StandardBridgeAdapter):
    """Moves the L1 native asset, represented on L2 by the OVM_ETH predeploy."""

    kind = BridgeAdapterKind.ETH

    def supports_token_bridge(self, l1_token: Any, l2_token: Any) -> bool:
        return _is_eth_pair(l1_token, l2_token)

    def populate_deposit(
        self,
        l1_token: Any,
        l2_token: Any,
        amount: int,
        recipient: Any = None,
        l2_gas: int = DEFAULT_L2_GAS_LIMIT,
        data: bytes = b''
    ) -> BridgeCall:
        self._check_pair(l1_token, l2_token)
        if recipient is None:
            calldata = self.l1_bridge.encode_call('depositETH', l2_gas, data)
        else:
            calldata = self.l1_bridge.encode_call('depositETHTo', to_address(recipient), l2_gas, data)
        return BridgeCall(to=self.l1_bridge.address, data=calldata, value=amount)

    def populate_withdraw(
        self,
        l1_token: Any,
        l2_token: Any,
        amount: int,
        recipient: Any = None,
        data: bytes = b''
    ) -> BridgeCall:
        self._check_pair(l1_token, l2_token)
        return self._withdraw_call(to_address(PREDEPLOYS['OVM_ETH']), amount, recipient, data)

    def _check_pair(self, l1_token: Any, l2_token: Any) -> None:
        if not _is_eth_pair(l1_token, l2_token):
            raise BridgeAdapterError('ETHBridgeAdapter only bridges ETH')


class DAIBridgeAdapter(StandardBridgeAdapter):
    """Bridge dedicated to a single token pair, configured on the bridge contracts themselves."""

    kind = BridgeAdapterKind.DAI
    l1_bridge_interface = 'L1DAITokenBridge'
    l2_bridge_interface = 'L2DAITokenBridge'

    def supports_token_bridge(self, l1_token: Any, l2_token: Any) -> bool:
        if not addresses_equal(self.l1_bridge.call('l1Token'), l1_token):
            return False
        return addresses_equal(self.l1_bridge.call('l2Token'), l2_token)


BridgeAdapter = StandardBridgeAdapter


def create_bridge_adapter(
    kind: BridgeAdapterKind | str,
    *,
    messenger: CrossChainMessenger,
    l1_bridge: Any,
    l2_bridge: Any,
    interfaces: InterfaceRegistry | None = None
) -> BridgeAdapter:
    try:
        kind = BridgeAdapterKind(kind)
    except ValueError as exc:
        raise BridgeAdapterError(f'unsupported bridge adapter kind: {kind!r}') from exc

    if kind is BridgeAdapterKind.STANDARD:
        adapter_type: type[StandardBridgeAdapter] = StandardBridgeAdapter
    elif kind is BridgeAdapterKind.ETH:
        adapter_type = ETHBridgeAdapter
    elif kind is BridgeAdapterKind.DAI:
        adapter_type = DAIBridgeAdapter
    else:  # pragma: no cover - exhaustive over BridgeAdapterKind
        raise BridgeAdapterError(f'unsupported bridge adapter kind: {kind}')

    LOGGER.debug('creating %s bridge adapter l1_bridge=%s l2_bridge=%s', kind.value, l1_bridge, l2_bridge)
    return adapter_type(messenger=messenger, l1_bridge=l1_bridge, l2_bridge=l2_bridge, interfaces=interfaces)


def _is_eth_pair(l1_token: Any, l2_token: Any) -> bool:
    return addresses_equal(l1_token, ZERO_ADDRESS) and addresses_equal(l2_token, PREDEPLOYS['OVM_ETH'])
