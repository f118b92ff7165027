from __future__ import annotations

import copy
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from .abis import BUILTIN_INTERFACES
from .config import get_settings
from .errors import UnknownInterfaceError

LOGGER = logging.getLogger('vmeta.sdk.interfaces')


@lru_cache(maxsize=256)
def _load_artifact_cached(path_value: str) -> list[dict[str, Any]] | None:
    path = Path(path_value)
    try:
        payload = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError:
        LOGGER.warning('ignoring unreadable contract artifact path=%s', path)
        return None

    # Hardhat artifacts wrap the ABI, plain ABI dumps are a bare list.
    if isinstance(payload, dict):
        payload = payload.get('abi')
    if not isinstance(payload, list):
        LOGGER.warning('contract artifact has no abi path=%s', path)
        return None
    return payload


def load_artifact(path: Path) -> list[dict[str, Any]] | None:
    # Missing files are not cached so artifacts added later are picked up.
    if not path.exists():
        return None
    cached = _load_artifact_cached(str(path))
    return copy.deepcopy(cached) if cached is not None else None


load_artifact.cache_clear = _load_artifact_cached.cache_clear  # type: ignore[attr-defined]


class InterfaceRegistry:
    """Looks up contract ABIs by registry name.

    Artifacts found in ``artifacts_dir`` (``<name>.json``) take precedence over
    the explicitly supplied ``interfaces`` which take precedence over the ABIs
    bundled with the SDK.
    """

    def __init__(
        self,
        interfaces: Mapping[str, list[dict[str, Any]]] | None = None,
        artifacts_dir: Path | str | None = None,
        include_builtin: bool = True
    ) -> None:
        merged: dict[str, list[dict[str, Any]]] = {}
        if include_builtin:
            merged.update(BUILTIN_INTERFACES)
        if interfaces:
            merged.update(interfaces)
        self._interfaces = merged
        self.artifacts_dir = Path(artifacts_dir) if artifacts_dir else None

    def has_interface(self, name: str) -> bool:
        try:
            self.get_interface(name)
        except UnknownInterfaceError:
            return False
        return True

    def get_interface(self, name: str) -> list[dict[str, Any]]:
        if self.artifacts_dir is not None:
            abi = load_artifact(self.artifacts_dir / f'{name}.json')
            if abi is not None:
                return abi

        abi = self._interfaces.get(name)
        if abi is None:
            raise UnknownInterfaceError(name)
        return copy.deepcopy(abi)


@lru_cache(maxsize=1)
def default_interface_registry() -> InterfaceRegistry:
    settings = get_settings()
    artifacts_dir = Path(settings.artifacts_dir) if settings.artifacts_dir else None
    if artifacts_dir is not None and not artifacts_dir.is_dir():
        if settings.strict_interfaces:
            raise FileNotFoundError(f'VMETA_ARTIFACTS_DIR does not exist: {artifacts_dir}')
        LOGGER.warning('artifact directory not found path=%s; using bundled interfaces only', artifacts_dir)
        artifacts_dir = None
    return InterfaceRegistry(artifacts_dir=artifacts_dir)
