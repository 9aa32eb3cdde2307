"""Shared pytest fixtures for eth-network-config tests."""

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample_networks.json fixture."""
    with open(fixtures_dir / "sample_networks.json") as f:
        return json.load(f)


@pytest.fixture
def extended_config_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the extended_networks.json fixture (extensions at every layer)."""
    with open(fixtures_dir / "extended_networks.json") as f:
        return json.load(f)


@pytest.fixture
def minimal_document() -> Callable[[], Dict[str, Any]]:
    """Return a factory producing a fresh minimal valid document."""
    document = {
        "version": "1.0.0",
        "timestamp": "2024-01-01T00:00:00Z",
        "summary": "Minimal configuration",
        "abiRoot": None,
        "networks": {
            "1": {
                "name": "Ethereum Mainnet",
                "testnet": False,
                "nativeCurrency": {"name": "Ether", "symbol": "ETH", "decimals": 18},
                "relations": {"mainnetChainId": None, "parentChainId": None},
                "rpcs": {"public": {"url": "https://eth.example.org"}},
                "contracts": {
                    "Registry": {
                        "address": "0x5FbDB2315678afecb367f032d93F642f64180aa3",
                        "blockCreated": 1234567,
                    }
                },
            }
        },
    }
    return lambda: copy.deepcopy(document)


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for configuration documents."""
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@pytest.fixture
def temp_config_file(temp_config_dir: Path, sample_config_json: Dict[str, Any]) -> Path:
    """Create a temporary networks.json file with sample data."""
    config_path = temp_config_dir / "networks.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_json, f, indent=2)
    return config_path
