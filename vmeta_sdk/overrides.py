from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .coercion import to_address
from .contract_names import L1ContractName, L2ContractName
from .errors import ContractResolutionError, InvalidOverridesError


def _checksum_map(value: Mapping[Any, Any]) -> dict[Any, str]:
    checked: dict[Any, str] = {}
    for name, address in value.items():
        try:
            checked[name] = to_address(address)
        except ContractResolutionError as exc:
            raise ValueError(f'{getattr(name, "value", name)}: {exc.detail}') from exc
    return checked


class DeploymentOverrides(BaseModel):
    """Caller supplied contract addresses, keyed by caller-facing contract name."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    l1: dict[L1ContractName, str] = Field(default_factory=dict)
    l2: dict[L2ContractName, str] = Field(default_factory=dict)

    # Values may be bound contracts as well as strings, so coerce before type checks.
    @field_validator('l1', 'l2', mode='before')
    @classmethod
    def _validate_addresses(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return _checksum_map(value)

    def l1_address(self, name: L1ContractName) -> str | None:
        return self.l1.get(name)

    def l2_address(self, name: L2ContractName) -> str | None:
        return self.l2.get(name)


def coerce_overrides(overrides: DeploymentOverrides | Mapping[str, Any] | None) -> DeploymentOverrides | None:
    if overrides is None or isinstance(overrides, DeploymentOverrides):
        return overrides
    try:
        return DeploymentOverrides.model_validate(overrides)
    except ValidationError as exc:
        raise InvalidOverridesError(f'invalid contract overrides: {exc}') from exc
