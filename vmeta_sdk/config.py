from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'y', 'on'}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, '').strip()
    if not value:
        return default
    try:
        return int(value, 0)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    environment: Literal['dev', 'prod', 'test']
    artifacts_dir: str
    strict_interfaces: bool
    l1_chain_id: int
    l1_rpc_url: str
    l2_rpc_url: str
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    environment = os.getenv('VMETA_ENVIRONMENT', 'dev').strip().lower()
    if environment not in {'dev', 'prod', 'test'}:
        environment = 'dev'

    return Settings(
        environment=environment,  # type: ignore[arg-type]
        artifacts_dir=os.getenv('VMETA_ARTIFACTS_DIR', '').strip(),
        strict_interfaces=_env_bool('VMETA_STRICT_INTERFACES', False),
        l1_chain_id=_env_int('VMETA_L1_CHAIN_ID', 5),
        l1_rpc_url=os.getenv('VMETA_L1_RPC_URL', '').strip(),
        l2_rpc_url=os.getenv('VMETA_L2_RPC_URL', '').strip(),
        log_level=os.getenv('LOG_LEVEL', 'INFO').strip().upper() or 'INFO'
    )
