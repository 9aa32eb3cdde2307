"""Explorer link building and ABI location helpers."""

import re
from typing import Optional, Union
from urllib.parse import urljoin, urlparse

from .constants import EXPLORER_PLACEHOLDERS, PLACEHOLDER_ARGUMENTS
from .types import ExplorerConfig

_PLACEHOLDER_PATTERN = re.compile(r":(?:block|address|tx|token)\b")


def explorer_url(
    explorer: ExplorerConfig,
    kind: str,
    *,
    block: Optional[Union[int, str]] = None,
    address: Optional[str] = None,
    tx: Optional[str] = None,
    token: Optional[Union[int, str]] = None,
) -> Optional[str]:
    """
    Build a block explorer link from one of the explorer's templates.

    Args:
        explorer: Explorer configuration
        kind: Template to use ("block", "address", "tx" or "nft")
        block: Value for ":block"
        address: Value for ":address"
        tx: Value for ":tx"
        token: Value for ":token"

    Returns:
        Absolute URL, or None if the explorer has no template of that kind

    Raises:
        ValueError: If kind is unknown or a placeholder in the template has no value
    """
    if kind not in EXPLORER_PLACEHOLDERS:
        raise ValueError(
            f"Unknown explorer link kind '{kind}', expected one of: "
            f"{', '.join(EXPLORER_PLACEHOLDERS)}"
        )

    template = getattr(explorer, kind)
    if template is None:
        return None

    values = {"block": block, "address": address, "tx": tx, "token": token}

    def substitute(match: "re.Match[str]") -> str:
        argument = PLACEHOLDER_ARGUMENTS[match.group(0)]
        value = values[argument]
        if value is None:
            raise ValueError(
                f"Explorer template {template!r} needs a value for '{match.group(0)}' "
                f"(pass {argument}=...)"
            )
        return str(value)

    path = _PLACEHOLDER_PATTERN.sub(substitute, template)
    return f"{explorer.root.rstrip('/')}/{path.lstrip('/')}"


def resolve_abi_url(abi_root: Optional[str], abi_url: Optional[str]) -> Optional[str]:
    """
    Resolve a contract's ABI URL against the document's ABI root.

    Args:
        abi_root: Configuration.abi_root
        abi_url: ContractConfig.abi_url

    Returns:
        Absolute URL when it can be resolved, abi_url unchanged when it is
        already absolute or there is no root, None when abi_url is None
    """
    if abi_url is None:
        return None
    if urlparse(abi_url).scheme or abi_root is None:
        return abi_url

    # Treat the root as a directory so its last path segment is kept
    if not abi_root.endswith("/"):
        abi_root += "/"
    return urljoin(abi_root, abi_url)
