"""Unit tests for encoding validated configurations."""

import json
from typing import Any, Callable, Dict

from eth_network_config.encoding import dumps, encode
from eth_network_config.types import (
    Configuration,
    ContractConfig,
    NativeCurrencyConfig,
    NetworkConfig,
    RelationsConfig,
    RpcConfig,
)
from eth_network_config.validator import validate

Factory = Callable[[], Dict[str, Any]]


def _encode_contract(contract: ContractConfig) -> Dict[str, Any]:
    config = Configuration(
        version="0.1.0",
        timestamp="2024-01-01T00:00:00Z",
        summary="Built in code",
        abi_root=None,
        networks={
            "1": NetworkConfig(
                name="Ethereum",
                testnet=False,
                native_currency=NativeCurrencyConfig("Ether", "ETH", 18),
                relations=RelationsConfig(None, None),
                rpcs={},
                contracts={"Registry": contract},
            )
        },
    )
    return encode(config)["networks"]["1"]["contracts"]["Registry"]


class TestEncode:
    """Test the encode function."""

    def test_uses_json_field_names(self, minimal_document: Factory):
        """Test that attributes are written back under their JSON names."""
        encoded = encode(validate(minimal_document()).configuration)

        assert encoded["abiRoot"] is None
        network = encoded["networks"]["1"]
        assert network["nativeCurrency"] == {"name": "Ether", "symbol": "ETH", "decimals": 18}
        assert network["relations"] == {"mainnetChainId": None, "parentChainId": None}
        assert network["contracts"]["Registry"]["blockCreated"] == 1234567

    def test_omits_absent_description_and_explorers(self, minimal_document: Factory):
        """Test that unset description and explorers are left out."""
        encoded = encode(validate(minimal_document()).configuration)

        assert "description" not in encoded
        assert "explorers" not in encoded["networks"]["1"]

    def test_writes_explicit_null_optional_fields(self, sample_config_json: Dict[str, Any]):
        """Test that abiUrl and explorer templates given as null are written back as null."""
        encoded = encode(validate(sample_config_json).configuration)

        owner_wallet = encoded["networks"]["1"]["contracts"]["OwnerWallet"]
        assert "abiUrl" in owner_wallet
        assert owner_wallet["abiUrl"] is None
        etherscan = encoded["networks"]["11155111"]["explorers"]["etherscan"]
        assert "nft" in etherscan
        assert etherscan["nft"] is None

    def test_writes_explicit_null_explorers(self, minimal_document: Factory):
        """Test that explorers given as null stay present as null."""
        doc = minimal_document()
        doc["networks"]["1"]["explorers"] = None

        encoded = encode(validate(doc).configuration)

        assert "explorers" in encoded["networks"]["1"]
        assert encoded["networks"]["1"]["explorers"] is None

    def test_constructed_null_keys_are_written(self):
        """Test that null_keys set in code marks which optional fields to write as null."""
        contract = ContractConfig("0x01", 1, null_keys={"abiUrl"})
        bare = ContractConfig("0x01", 1)

        assert contract.null_keys == frozenset({"abiUrl"})
        assert contract != bare
        assert _encode_contract(contract) == {"address": "0x01", "abiUrl": None, "blockCreated": 1}
        assert _encode_contract(bare) == {"address": "0x01", "blockCreated": 1}

    def test_writes_null_for_required_nullable_fields(self, minimal_document: Factory):
        """Test that abiRoot and relation chain IDs stay present as null."""
        encoded = encode(validate(minimal_document()).configuration)

        assert "abiRoot" in encoded
        assert encoded["networks"]["1"]["relations"]["parentChainId"] is None

    def test_keeps_null_mapping_entries(self, sample_config_json: Dict[str, Any]):
        """Test that known-absent entries are written as null, not dropped."""
        encoded = encode(validate(sample_config_json).configuration)

        assert encoded["networks"]["11155111"]["contracts"]["OwnerWallet"] is None
        assert encoded["networks"]["1"]["rpcs"]["archive"] is None

    def test_merges_extensions(self, minimal_document: Factory):
        """Test that extension maps are merged back next to standard fields."""
        doc = minimal_document()
        doc["networks"]["1"]["rpcs"]["public"]["apiKey"] = "abc123"
        doc["x-owner"] = "registry-team"

        encoded = encode(validate(doc).configuration)

        assert encoded["x-owner"] == "registry-team"
        assert encoded["networks"]["1"]["rpcs"]["public"] == {
            "url": "https://eth.example.org",
            "apiKey": "abc123",
        }

    def test_encodes_constructed_configuration(self):
        """Test encoding a configuration built in code."""
        config = Configuration(
            version="0.1.0",
            timestamp="2024-01-01T00:00:00Z",
            summary="Built in code",
            abi_root=None,
            networks={
                "100": NetworkConfig(
                    name="Gnosis",
                    testnet=False,
                    native_currency=NativeCurrencyConfig("xDAI", "XDAI", 18),
                    relations=RelationsConfig(None, None),
                    rpcs={"public": RpcConfig("https://rpc.gnosischain.com")},
                    contracts={"Registry": ContractConfig("0x01", 25527075)},
                )
            },
        )

        encoded = encode(config)

        assert encoded["networks"]["100"]["rpcs"]["public"] == {"url": "https://rpc.gnosischain.com"}
        assert validate(encoded).configuration == config


class TestDumps:
    """Test the dumps function."""

    def test_produces_json_text(self, sample_config_json: Dict[str, Any]):
        """Test that dumps output parses back to the encoded value."""
        config = validate(sample_config_json).configuration

        text = dumps(config)

        assert json.loads(text) == encode(config)
        assert text.startswith("{\n  ")
