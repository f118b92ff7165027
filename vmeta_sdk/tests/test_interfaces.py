import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from vmeta_sdk.abis import BUILTIN_INTERFACES
from vmeta_sdk.config import get_settings
from vmeta_sdk.contract_names import L1ContractName, L2ContractName, normalize_contract_name
from vmeta_sdk.errors import UnknownInterfaceError
from vmeta_sdk.interfaces import InterfaceRegistry, default_interface_registry, load_artifact

CUSTOM_ABI = [
    {
        'inputs': [],
        'name': 'version',
        'outputs': [{'internalType': 'string', 'name': '', 'type': 'string'}],
        'stateMutability': 'view',
        'type': 'function'
    }
]


class InterfaceRegistryTests(unittest.TestCase):
    def tearDown(self) -> None:
        get_settings.cache_clear()
        default_interface_registry.cache_clear()
        load_artifact.cache_clear()

    def test_builtin_covers_every_contract_role(self) -> None:
        for name in list(L1ContractName) + list(L2ContractName):
            self.assertIn(normalize_contract_name(name), BUILTIN_INTERFACES)

    def test_unknown_name(self) -> None:
        with self.assertRaises(UnknownInterfaceError):
            InterfaceRegistry().get_interface('NotAContract')

    def test_returns_copies(self) -> None:
        registry = InterfaceRegistry()
        abi = registry.get_interface('L1StandardBridge')
        abi.clear()
        self.assertTrue(registry.get_interface('L1StandardBridge'))

    def test_explicit_interfaces_override_builtin(self) -> None:
        registry = InterfaceRegistry(interfaces={'BondManager': CUSTOM_ABI})
        self.assertEqual(registry.get_interface('BondManager'), CUSTOM_ABI)
        self.assertTrue(registry.has_interface('L1StandardBridge'))
        self.assertFalse(InterfaceRegistry(include_builtin=False).has_interface('L1StandardBridge'))

    def test_artifacts_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, 'Lib_AddressManager.json').write_text(json.dumps({'abi': CUSTOM_ABI}), encoding='utf-8')
            Path(tmp, 'BondManager.json').write_text(json.dumps(CUSTOM_ABI), encoding='utf-8')
            Path(tmp, 'StateCommitmentChain.json').write_text('{not json', encoding='utf-8')

            with patch.dict('os.environ', {'VMETA_ARTIFACTS_DIR': tmp}, clear=False):
                get_settings.cache_clear()
                default_interface_registry.cache_clear()
                registry = default_interface_registry()

                self.assertEqual(registry.get_interface('Lib_AddressManager'), CUSTOM_ABI)
                self.assertEqual(registry.get_interface('BondManager'), CUSTOM_ABI)
                self.assertEqual(
                    registry.get_interface('StateCommitmentChain'),
                    BUILTIN_INTERFACES['StateCommitmentChain']
                )

    def test_artifact_added_after_first_lookup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            registry = InterfaceRegistry(artifacts_dir=tmp)
            self.assertEqual(registry.get_interface('BondManager'), BUILTIN_INTERFACES['BondManager'])

            Path(tmp, 'BondManager.json').write_text(json.dumps({'abi': CUSTOM_ABI}), encoding='utf-8')
            self.assertEqual(registry.get_interface('BondManager'), CUSTOM_ABI)

    def test_missing_artifact_directory(self) -> None:
        with patch.dict(
            'os.environ',
            {'VMETA_ARTIFACTS_DIR': '/nonexistent/vmeta-artifacts', 'VMETA_STRICT_INTERFACES': 'false'},
            clear=False
        ):
            get_settings.cache_clear()
            default_interface_registry.cache_clear()
            self.assertIsNone(default_interface_registry().artifacts_dir)

        with patch.dict(
            'os.environ',
            {'VMETA_ARTIFACTS_DIR': '/nonexistent/vmeta-artifacts', 'VMETA_STRICT_INTERFACES': 'true'},
            clear=False
        ):
            get_settings.cache_clear()
            default_interface_registry.cache_clear()
            with self.assertRaises(FileNotFoundError):
                default_interface_registry()


class SettingsTests(unittest.TestCase):
    def tearDown(self) -> None:
        get_settings.cache_clear()

    def test_defaults_and_parsing(self) -> None:
        with patch.dict(
            'os.environ',
            {'VMETA_ENVIRONMENT': 'staging', 'VMETA_L1_CHAIN_ID': '0x2a', 'LOG_LEVEL': 'debug'},
            clear=False
        ):
            get_settings.cache_clear()
            settings = get_settings()

        self.assertEqual(settings.environment, 'dev')
        self.assertEqual(settings.l1_chain_id, 42)
        self.assertEqual(settings.log_level, 'DEBUG')

    def test_invalid_chain_id_falls_back(self) -> None:
        with patch.dict('os.environ', {'VMETA_L1_CHAIN_ID': 'goerli'}, clear=False):
            get_settings.cache_clear()
            self.assertEqual(get_settings().l1_chain_id, 5)
