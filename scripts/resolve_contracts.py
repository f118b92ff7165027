#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from web3 import Web3

from vmeta_sdk.bridges import get_bridge_adapters
from vmeta_sdk.config import get_settings
from vmeta_sdk.contracts import get_all_contracts
from vmeta_sdk.errors import ContractResolutionError
from vmeta_sdk.messenger import StaticMessenger

LOGGER = logging.getLogger('vmeta.sdk.resolve')


def _load_overrides(path_value: str) -> dict[str, Any]:
    if not path_value:
        return {}
    payload = json.loads(Path(path_value).read_text(encoding='utf-8'))
    if not isinstance(payload, dict):
        raise SystemExit(f'overrides file must contain a JSON object: {path_value}')
    return payload


def _provider(rpc_url: str) -> Web3 | None:
    if not rpc_url:
        return None
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={'timeout': 10}))


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    parser = argparse.ArgumentParser(description='Print the contract and bridge addresses used for an L1 chain')
    parser.add_argument('--chain-id', type=int, default=settings.l1_chain_id, help='L1 chain id')
    parser.add_argument('--overrides', default='', help='JSON file with "l1", "l2" and "bridges" overrides')
    parser.add_argument('--bridges', action='store_true', help='Also list bridge adapters')
    args = parser.parse_args()

    overrides = _load_overrides(args.overrides)
    bridge_overrides = overrides.pop('bridges', None)
    l1_provider = _provider(settings.l1_rpc_url)
    l2_provider = _provider(settings.l2_rpc_url)

    try:
        contracts = get_all_contracts(
            args.chain_id,
            l1_transport=l1_provider,
            l2_transport=l2_provider,
            overrides=overrides or None
        )
        output: dict[str, Any] = {'chain_id': args.chain_id, **contracts.as_addresses()}

        if args.bridges:
            messenger = StaticMessenger(
                l1_chain_id=args.chain_id,
                l1_signer_or_provider=l1_provider,
                l2_signer_or_provider=l2_provider
            )
            adapters = get_bridge_adapters(args.chain_id, messenger, overrides=bridge_overrides)
            output['bridges'] = {
                label: {
                    'kind': adapter.kind.value,
                    'l1_bridge': adapter.l1_bridge.address,
                    'l2_bridge': adapter.l2_bridge.address
                }
                for label, adapter in adapters.items()
            }
    except ContractResolutionError as exc:
        LOGGER.error('resolution failed chain_id=%s: %s', args.chain_id, exc.detail)
        sys.exit(1)

    print(json.dumps(output, indent=2))


if __name__ == '__main__':
    main()
