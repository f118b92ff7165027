from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from eth_abi import encode
from web3 import Web3

from .coercion import to_address
from .contract_names import normalize_contract_name
from .errors import ContractNotConnectedError, InvalidAddressError
from .interfaces import InterfaceRegistry


def _canonical_type(param: dict[str, Any]) -> str:
    kind = str(param.get('type', ''))
    if kind.startswith('tuple'):
        inner = ','.join(_canonical_type(component) for component in param.get('components', []))
        return f'({inner}){kind[len("tuple"):]}'
    return kind


@dataclass(frozen=True)
class BoundContract:
    """Contract address paired with its ABI and, optionally, the transport used to reach it.

    The transport is a ``web3.Web3`` instance owned by the caller.
    """

    name: str
    address: str
    abi: list[dict[str, Any]] = field(repr=False, compare=False)
    transport: Web3 | None = field(default=None, repr=False, compare=False)

    def connect(self, transport: Web3 | None) -> BoundContract:
        return replace(self, transport=transport)

    @property
    def contract(self) -> Any:
        if self.transport is None:
            raise ContractNotConnectedError(f'{self.name} at {self.address} is not connected to a provider')
        return self.transport.eth.contract(address=self.address, abi=self.abi)

    @property
    def functions(self) -> Any:
        return self.contract.functions

    def call(self, fn_name: str, *args: Any) -> Any:
        return getattr(self.functions, fn_name)(*args).call()

    def function_abi(self, fn_name: str, arg_count: int | None = None) -> dict[str, Any]:
        for item in self.abi:
            if item.get('type') != 'function' or item.get('name') != fn_name:
                continue
            if arg_count is not None and len(item.get('inputs', [])) != arg_count:
                continue
            return item
        raise ValueError(f'{self.name} has no function {fn_name} taking {arg_count} arguments')

    def encode_call(self, fn_name: str, *args: Any) -> str:
        item = self.function_abi(fn_name, len(args))
        types = [_canonical_type(param) for param in item.get('inputs', [])]
        selector = Web3.keccak(text=f'{fn_name}({",".join(types)})')[:4]
        return '0x' + (bytes(selector) + encode(types, list(args))).hex()


def bind_contract(
    name: str,
    address: Any,
    interfaces: InterfaceRegistry,
    transport: Web3 | None = None
) -> BoundContract:
    """Attach ``name``'s ABI to ``address``. Performs no network call."""
    display_name = getattr(name, 'value', name)
    if address is None or address == '':
        raise InvalidAddressError(f'no address resolved for contract {display_name}')
    try:
        checksummed = to_address(address)
    except InvalidAddressError as exc:
        raise InvalidAddressError(f'contract {display_name}: {exc.detail}') from exc

    abi = interfaces.get_interface(normalize_contract_name(name))
    return BoundContract(name=str(display_name), address=checksummed, abi=abi, transport=transport)
