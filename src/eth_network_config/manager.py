"""Main API for eth-network-config library."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import ContractNotFoundError, ExplorerNotFoundError, NetworkNotFoundError
from .explorers import explorer_url, resolve_abi_url
from .loader import load_configuration
from .paths import get_config_path
from .timestamps import parse_timestamp
from .types import Configuration, ContractConfig, ExplorerConfig, NetworkConfig

ChainId = Union[int, str]


class NetworkConfigManager:
    """Read-only access to a validated network configuration document."""

    def __init__(self, config_path: Optional[Union[Path, str]] = None):
        """
        Load and validate a network configuration document.

        Args:
            config_path: Path to the document
                         If None, uses $NETWORK_CONFIG_PATH or ./networks.json

        Raises:
            ConfigurationNotFoundError: If the document is not found
            InvalidConfigurationError: If the document fails validation
        """
        self._config = load_configuration(get_config_path(config_path))

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> "NetworkConfigManager":
        """Wrap an already validated Configuration."""
        manager = cls.__new__(cls)
        manager._config = configuration
        return manager

    @property
    def configuration(self) -> Configuration:
        return self._config

    def has_network(self, chain_id: ChainId) -> bool:
        """
        Check if a chain is configured.

        Args:
            chain_id: Chain ID as int or decimal string

        Returns:
            True if the chain is in the document, False otherwise
        """
        return str(chain_id) in self._config.networks

    def chain_ids(self) -> List[int]:
        """Get configured chain IDs in ascending order."""
        return sorted(int(chain_id) for chain_id in self._config.networks)

    def network(self, chain_id: ChainId) -> NetworkConfig:
        """
        Get the configuration of one chain.

        Raises:
            NetworkNotFoundError: If chain not in document
        """
        try:
            return self._config.networks[str(chain_id)]
        except KeyError:
            raise NetworkNotFoundError(f"Chain ID '{chain_id}' not found in configuration") from None

    def testnets(self, mainnet_chain_id: ChainId) -> List[int]:
        """
        Get chains that declare the given chain as their mainnet.

        Args:
            mainnet_chain_id: Chain ID of a production network

        Returns:
            Chain IDs of related testnets in ascending order
        """
        target = int(mainnet_chain_id)
        return sorted(
            int(chain_id)
            for chain_id, network in self._config.networks.items()
            if network.testnet and network.relations.mainnet_chain_id == target
        )

    def contract_names(self) -> List[str]:
        """
        Get contract names declared by the document.

        Every network declares the same names, so they are read from any one.

        Returns:
            Contract names in document order (empty if no networks)
        """
        for network in self._config.networks.values():
            return list(network.contracts.keys())
        return []

    def has_contract(self, contract_name: str, chain_id: ChainId) -> bool:
        """
        Check if a contract is deployed on a chain.

        A contract declared as null is known to be absent and yields False.
        """
        if not self.has_network(chain_id):
            return False
        return self.network(chain_id).contracts.get(contract_name) is not None

    def contract(self, contract_name: str, chain_id: ChainId) -> ContractConfig:
        """
        Get deployment information for a contract on a chain.

        Args:
            contract_name: Name of contract (e.g. "Registry")
            chain_id: Chain ID as int or decimal string

        Returns:
            ContractConfig of the deployment

        Raises:
            NetworkNotFoundError: If chain not in document
            ContractNotFoundError: If contract undeclared or null on that chain
        """
        network = self.network(chain_id)
        if contract_name not in network.contracts:
            raise ContractNotFoundError(
                f"Contract '{contract_name}' not declared in configuration"
            )

        deployment = network.contracts[contract_name]
        if deployment is None:
            raise ContractNotFoundError(
                f"Contract '{contract_name}' is not deployed on chain '{chain_id}'"
            )
        return deployment

    def deployments(self, contract_name: str) -> Dict[int, ContractConfig]:
        """
        Get every deployment of a contract across chains.

        Chains declaring the contract as null are skipped.

        Returns:
            Mapping of chain ID -> ContractConfig, ordered by chain ID
        """
        result: Dict[int, ContractConfig] = {}
        for chain_id in self.chain_ids():
            deployment = self.network(chain_id).contracts.get(contract_name)
            if deployment is not None:
                result[chain_id] = deployment
        return result

    def abi_url(self, contract_name: str, chain_id: ChainId) -> Optional[str]:
        """
        Get the ABI location of a deployed contract.

        Relative ABI URLs are resolved against the document's abiRoot.

        Raises:
            NetworkNotFoundError: If chain not in document
            ContractNotFoundError: If contract not deployed on that chain
        """
        deployment = self.contract(contract_name, chain_id)
        return resolve_abi_url(self._config.abi_root, deployment.abi_url)

    def rpc_urls(self, chain_id: ChainId) -> Dict[str, str]:
        """
        Get RPC endpoints of a chain, skipping entries declared as null.

        Returns:
            Mapping of RPC name -> URL, in document order

        Raises:
            NetworkNotFoundError: If chain not in document
        """
        return {
            name: rpc.url
            for name, rpc in self.network(chain_id).rpcs.items()
            if rpc is not None
        }

    def explorer(self, chain_id: ChainId, name: Optional[str] = None) -> ExplorerConfig:
        """
        Get a block explorer of a chain.

        Args:
            chain_id: Chain ID as int or decimal string
            name: Explorer name (defaults to the first non-null explorer)

        Raises:
            NetworkNotFoundError: If chain not in document
            ExplorerNotFoundError: If no such explorer is configured
        """
        explorers = self.network(chain_id).explorers or {}

        if name is None:
            for candidate in explorers.values():
                if candidate is not None:
                    return candidate
            raise ExplorerNotFoundError(f"No block explorer configured for chain '{chain_id}'")

        found = explorers.get(name)
        if found is None:
            raise ExplorerNotFoundError(
                f"Explorer '{name}' not configured for chain '{chain_id}'"
            )
        return found

    def explorer_url(
        self,
        chain_id: ChainId,
        kind: str,
        explorer_name: Optional[str] = None,
        **values: Any,
    ) -> Optional[str]:
        """
        Build a block explorer link for a chain.

        Args:
            chain_id: Chain ID as int or decimal string
            kind: "block", "address", "tx" or "nft"
            explorer_name: Explorer to use (defaults to the first configured)
            **values: Placeholder values (block=, address=, tx=, token=)

        Returns:
            Absolute URL, or None if the explorer has no template of that kind
        """
        return explorer_url(self.explorer(chain_id, explorer_name), kind, **values)

    def metadata(self) -> Dict[str, Any]:
        """
        Get document metadata (version, generation time, summary, chains).

        Returns:
            Metadata dictionary, timestamp parsed to a datetime

        Raises:
            ValueError: If the document timestamp is not ISO-8601
        """
        return {
            "version": self._config.version,
            "timestamp": parse_timestamp(self._config.timestamp),
            "summary": self._config.summary,
            "description": self._config.description,
            "abi_root": self._config.abi_root,
            "chain_ids": self.chain_ids(),
        }
