from __future__ import annotations

from typing import Iterable


class ContractResolutionError(Exception):
    """Base class for every configuration error raised while resolving contracts."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class UnknownNetworkError(ContractResolutionError):
    def __init__(self, network_id: int, detail: str | None = None, missing: Iterable[str] = ()) -> None:
        self.network_id = network_id
        self.missing = tuple(missing)
        if detail is None:
            detail = f'no known deployment for L1 chain id {network_id}'
            if self.missing:
                detail += f', overrides required for: {", ".join(self.missing)}'
        super().__init__(detail)


class InvalidAddressError(ContractResolutionError):
    pass


class UnknownInterfaceError(ContractResolutionError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'no contract interface registered for {name}')


class InvalidOverridesError(ContractResolutionError):
    pass


class ContractNotConnectedError(ContractResolutionError):
    pass


class BridgeAdapterError(ContractResolutionError):
    pass
