import unittest
from unittest.mock import MagicMock

from vmeta_sdk.chains import Chain
from vmeta_sdk.coercion import to_address
from vmeta_sdk.contract_names import L1ContractName, L2ContractName
from vmeta_sdk.contracts import ContractResolver, get_all_contracts, get_contract
from vmeta_sdk.deployments import DEFAULT_L2_CONTRACT_ADDRESSES, DEPLOYMENTS, DeploymentEntry, DeploymentRegistry
from vmeta_sdk.errors import InvalidAddressError, InvalidOverridesError, UnknownNetworkError
from vmeta_sdk.interfaces import InterfaceRegistry

UNKNOWN_CHAIN_ID = 999999
OVERRIDE = '0x1111111111111111111111111111111111111111'


def _full_l1_overrides() -> dict[str, str]:
    return {
        'AddressManager': '0x0000000000000000000000000000000000000001',
        'L1CrossDomainMessenger': '0x0000000000000000000000000000000000000002',
        'L1StandardBridge': '0x0000000000000000000000000000000000000003',
        'StateCommitmentChain': '0x0000000000000000000000000000000000000004',
        'CanonicalTransactionChain': '0x0000000000000000000000000000000000000005',
        'BondManager': '0x0000000000000000000000000000000000000006',
    }


class ResolveAllTests(unittest.TestCase):
    def test_known_networks_bind_every_role(self) -> None:
        for network_id in DEPLOYMENTS.network_ids():
            entry = DEPLOYMENTS.lookup(network_id)
            contracts = get_all_contracts(network_id)

            self.assertEqual(set(contracts.l1), set(L1ContractName) - {L1ContractName.VMT})
            self.assertEqual(set(contracts.l2), set(L2ContractName))
            for name, contract in contracts.l1.items():
                self.assertEqual(contract.address, entry.l1[name])
            for name, contract in contracts.l2.items():
                self.assertEqual(contract.address, entry.l2[name])

    def test_native_value_token_is_skipped_by_role(self) -> None:
        # Hardhat stores the zero address for the value token; Goerli stores a real one.
        for network_id in (Chain.HARDHAT_LOCAL, Chain.GOERLI):
            contracts = get_all_contracts(network_id)
            self.assertNotIn(L1ContractName.VMT, contracts.l1)

    def test_override_wins_over_registry(self) -> None:
        contracts = get_all_contracts(
            Chain.GOERLI,
            overrides={'l1': {'L1StandardBridge': OVERRIDE}, 'l2': {'WETH': OVERRIDE}}
        )
        self.assertEqual(contracts.l1[L1ContractName.L1_STANDARD_BRIDGE].address, to_address(OVERRIDE))
        self.assertEqual(contracts.l2[L2ContractName.WETH].address, to_address(OVERRIDE))
        self.assertEqual(
            contracts.l1[L1ContractName.BOND_MANAGER].address,
            DEPLOYMENTS.lookup(Chain.GOERLI).l1[L1ContractName.BOND_MANAGER]
        )

    def test_registry_is_not_mutated_by_overrides(self) -> None:
        before = dict(DEPLOYMENTS.lookup(Chain.KOVAN).l1)
        get_all_contracts(Chain.KOVAN, overrides={'l1': {'BondManager': OVERRIDE}})
        self.assertEqual(dict(DEPLOYMENTS.lookup(Chain.KOVAN).l1), before)

    def test_unknown_network_without_overrides(self) -> None:
        with self.assertRaises(UnknownNetworkError) as ctx:
            get_all_contracts(UNKNOWN_CHAIN_ID)
        self.assertEqual(ctx.exception.network_id, UNKNOWN_CHAIN_ID)

    def test_unknown_network_with_partial_overrides(self) -> None:
        overrides = _full_l1_overrides()
        del overrides['BondManager']
        with self.assertRaises(UnknownNetworkError) as ctx:
            get_all_contracts(UNKNOWN_CHAIN_ID, overrides={'l1': overrides})
        self.assertEqual(ctx.exception.missing, ('BondManager',))

    def test_unknown_network_with_complete_overrides(self) -> None:
        overrides = _full_l1_overrides()
        contracts = get_all_contracts(UNKNOWN_CHAIN_ID, overrides={'l1': overrides})

        self.assertEqual(
            contracts.as_addresses()['l1'],
            {name: to_address(address) for name, address in overrides.items()}
        )
        for name, contract in contracts.l2.items():
            self.assertEqual(contract.address, DEFAULT_L2_CONTRACT_ADDRESSES[name])

    def test_transports_are_layer_specific(self) -> None:
        l1_transport = MagicMock(name='l1')
        l2_transport = MagicMock(name='l2')
        contracts = get_all_contracts(Chain.GOERLI, l1_transport=l1_transport, l2_transport=l2_transport)

        self.assertTrue(all(contract.transport is l1_transport for contract in contracts.l1.values()))
        self.assertTrue(all(contract.transport is l2_transport for contract in contracts.l2.values()))

    def test_invalid_override_address(self) -> None:
        with self.assertRaises(InvalidOverridesError):
            get_all_contracts(Chain.GOERLI, overrides={'l1': {'BondManager': 'not-an-address'}})

    def test_misspelled_override_name(self) -> None:
        with self.assertRaises(InvalidOverridesError):
            get_all_contracts(Chain.GOERLI, overrides={'l1': {'L1StandardBrige': OVERRIDE}})

    def test_missing_registry_value_fails_whole_resolution(self) -> None:
        registry = DeploymentRegistry(
            {
                7: DeploymentEntry(
                    l1={
                        L1ContractName.L1_STANDARD_BRIDGE: OVERRIDE,
                        L1ContractName.BOND_MANAGER: None,
                    }
                )
            }
        )
        resolver = ContractResolver(registry=registry, interfaces=InterfaceRegistry())
        with self.assertRaises(InvalidAddressError):
            resolver.resolve_all(7)

        # Roles left out of the entry are unresolved too, not silently skipped.
        with self.assertRaises(InvalidAddressError):
            resolver.resolve_all(7, overrides={'l1': {'BondManager': OVERRIDE}})

        overrides = _full_l1_overrides()
        del overrides['L1StandardBridge']
        contracts = resolver.resolve_all(7, overrides={'l1': overrides})
        self.assertEqual(set(contracts.l1), set(L1ContractName) - {L1ContractName.VMT})
        self.assertEqual(contracts.l1[L1ContractName.L1_STANDARD_BRIDGE].address, to_address(OVERRIDE))

    def test_bound_contract_as_override(self) -> None:
        bound = get_contract(L1ContractName.BOND_MANAGER, UNKNOWN_CHAIN_ID, address=OVERRIDE)
        contracts = get_all_contracts(Chain.GOERLI, overrides={'l1': {'BondManager': bound}})
        self.assertEqual(contracts.l1[L1ContractName.BOND_MANAGER].address, bound.address)

    def test_native_token_address(self) -> None:
        resolver = ContractResolver()
        self.assertEqual(
            resolver.native_token_address(Chain.GOERLI),
            DEPLOYMENTS.lookup(Chain.GOERLI).l1[L1ContractName.VMT]
        )
        self.assertIsNone(resolver.native_token_address(UNKNOWN_CHAIN_ID))
        self.assertEqual(
            resolver.native_token_address(UNKNOWN_CHAIN_ID, overrides={'l1': {'VMT': OVERRIDE}}),
            to_address(OVERRIDE)
        )


class GetContractTests(unittest.TestCase):
    def test_uses_own_layer_table(self) -> None:
        bridge = get_contract('L1StandardBridge', Chain.ROPSTEN)
        self.assertEqual(
            bridge.address,
            DEPLOYMENTS.lookup(Chain.ROPSTEN).l1[L1ContractName.L1_STANDARD_BRIDGE]
        )
        self.assertEqual(
            get_contract(L2ContractName.L2_STANDARD_BRIDGE, Chain.ROPSTEN).address,
            '0x4200000000000000000000000000000000000010'
        )

    def test_explicit_address_wins(self) -> None:
        bridge = get_contract(L1ContractName.L1_STANDARD_BRIDGE, Chain.ROPSTEN, address=OVERRIDE)
        self.assertEqual(bridge.address, to_address(OVERRIDE))

    def test_unknown_network_requires_address(self) -> None:
        with self.assertRaises(UnknownNetworkError):
            get_contract(L1ContractName.BOND_MANAGER, UNKNOWN_CHAIN_ID)

        bond_manager = get_contract(L1ContractName.BOND_MANAGER, UNKNOWN_CHAIN_ID, address=OVERRIDE)
        self.assertEqual(bond_manager.address, to_address(OVERRIDE))

    def test_rejects_unknown_name(self) -> None:
        with self.assertRaises(ValueError):
            get_contract('Nope', Chain.GOERLI)
