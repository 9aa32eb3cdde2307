"""Configuration constants for eth-network-config library."""

# Default file name of a network configuration document
DEFAULT_CONFIG_FILENAME = "networks.json"

# Environment variable overriding the default document location
CONFIG_PATH_ENV = "NETWORK_CONFIG_PATH"

# Explorer template field -> placeholder token it must carry
# e.g. "/tx/:tx" becomes "/tx/0xabc..." once substituted
EXPLORER_PLACEHOLDERS = {
    "block": ":block",
    "address": ":address",
    "tx": ":tx",
    "nft": ":token",
}

# Placeholder token -> keyword accepted by explorer_url()
PLACEHOLDER_ARGUMENTS = {
    ":block": "block",
    ":address": "address",
    ":tx": "tx",
    ":token": "token",
}

# Path reported for errors on the document itself
ROOT_PATH = "$"
