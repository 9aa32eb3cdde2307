"""Integration tests for the decode/validate/encode round trip."""

import json
from pathlib import Path

import pytest

from eth_network_config import decode, dumps, encode, validate
from eth_network_config.decoding import plain


def _round_trip(text: str):
    first = validate(decode(text))
    assert first.ok, first.errors
    second = validate(decode(dumps(first.configuration)))
    assert second.ok, second.errors
    return first.configuration, second.configuration


class TestRoundTrip:
    """Test that valid documents survive re-encoding."""

    @pytest.mark.parametrize("fixture", ["sample_networks.json", "extended_networks.json"])
    def test_revalidated_configuration_is_equal(self, fixtures_dir: Path, fixture: str):
        """Test that validate(encode(validate(doc))) equals validate(doc)."""
        first, second = _round_trip((fixtures_dir / fixture).read_text())
        assert first == second

    @pytest.mark.parametrize("fixture", ["sample_networks.json", "extended_networks.json"])
    def test_encoded_document_matches_source(self, fixtures_dir: Path, fixture: str):
        """Test that encode(validate(decode(text))) reproduces the source up to key order."""
        text = (fixtures_dir / fixture).read_text()
        config = validate(decode(text)).configuration

        assert encode(config) == json.loads(text)

    def test_extensions_survive_at_every_layer(self, minimal_document):
        """Test arbitrary extension payloads at all seven layers."""
        doc = minimal_document()
        payload = {"nested": {"list": [1, "two", None, {"three": 3.0}]}, "flag": False}
        network = doc["networks"]["1"]
        doc["x-doc"] = payload
        network["x-network"] = payload
        network["nativeCurrency"]["x-currency"] = payload
        network["relations"]["x-relations"] = payload
        network["rpcs"]["public"]["x-rpc"] = payload
        network["explorers"] = {"main": {"root": "https://etherscan.io", "x-explorer": payload}}
        network["contracts"]["Registry"]["x-contract"] = payload

        first, second = _round_trip(json.dumps(doc))

        assert first == second
        assert plain(second.networks["1"].explorers["main"].extensions) == {"x-explorer": payload}
        reencoded = encode(second)
        assert reencoded["networks"]["1"]["relations"]["x-relations"] == payload
        assert reencoded["networks"]["1"]["contracts"]["Registry"]["x-contract"] == payload

    def test_extension_named_like_field_of_other_layer(self, minimal_document):
        """Test that a standard key of one layer is a free extension on another."""
        doc = minimal_document()
        doc["networks"]["1"]["rpcs"]["public"]["address"] = "0x01"
        doc["networks"]["1"]["nativeCurrency"]["url"] = "https://ethereum.org"

        first, second = _round_trip(json.dumps(doc))

        assert second.networks["1"].rpcs["public"].extensions == {"address": "0x01"}
        assert second.networks["1"].native_currency.extensions == {"url": "https://ethereum.org"}

    def test_explicit_null_optional_fields_are_reproduced(self, minimal_document):
        """Test that abiUrl and explorers given as null are written back as null."""
        doc = minimal_document()
        doc["networks"]["1"]["contracts"]["Registry"]["abiUrl"] = None
        doc["networks"]["1"]["explorers"] = None

        config = validate(decode(json.dumps(doc))).configuration

        assert encode(config) == doc

    def test_explicit_null_explorer_templates_are_reproduced(self, minimal_document):
        """Test that every explorer template given as null survives re-encoding."""
        doc = minimal_document()
        doc["networks"]["1"]["explorers"] = {
            "main": {"root": "https://etherscan.io", "block": None, "address": None, "tx": None, "nft": None}
        }

        config = validate(decode(json.dumps(doc))).configuration

        assert encode(config) == doc

    def test_explicit_null_differs_from_omission(self, minimal_document):
        """Test that an optional key given as null is not conflated with an absent one."""
        omitted = minimal_document()
        explicit = minimal_document()
        explicit["networks"]["1"]["contracts"]["Registry"]["abiUrl"] = None

        first = validate(omitted).configuration
        second = validate(explicit).configuration

        assert first.networks["1"].contracts["Registry"].abi_url is None
        assert second.networks["1"].contracts["Registry"].abi_url is None
        assert first != second
        assert "abiUrl" not in encode(first)["networks"]["1"]["contracts"]["Registry"]
        assert "abiUrl" in encode(second)["networks"]["1"]["contracts"]["Registry"]
