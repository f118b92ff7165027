from __future__ import annotations

from typing import Any

from web3 import Web3

from .errors import InvalidAddressError

ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'


def to_address(value: Any) -> str:
    """Coerce a hex string or anything carrying an ``address`` attribute to a checksummed address."""
    if value is None:
        raise InvalidAddressError('address is missing')

    if not isinstance(value, str):
        nested = getattr(value, 'address', None)
        if nested is None:
            raise InvalidAddressError(f'cannot coerce {type(value).__name__} to an address')
        value = nested

    candidate = str(value).strip()
    if not Web3.is_address(candidate):
        raise InvalidAddressError(f'invalid address: {candidate!r}')
    return Web3.to_checksum_address(candidate)


def addresses_equal(left: Any, right: Any) -> bool:
    return to_address(left).lower() == to_address(right).lower()
