"""Main API for vinuchain-networks library."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Union

from .credentials import load_credential
from .exceptions import DuplicateNetworkNameError
from .parsers import DescriptorLike, coerce_descriptor
from .paths import get_secret_path
from .providers import Connector, WalletProviderFactory
from .types import Credential, NetworkProfile

logger = logging.getLogger(__name__)


class ConfigRegistry(Mapping):
    """Read-only mapping from network name to NetworkProfile."""

    def __init__(self, profiles: Iterable[NetworkProfile]):
        """
        Initialize the registry.

        Args:
            profiles: Network profiles with unique names

        Raises:
            DuplicateNetworkNameError: If two profiles share a name
        """
        entries: Dict[str, NetworkProfile] = {}
        for profile in profiles:
            if profile.name in entries:
                raise DuplicateNetworkNameError(
                    f"Network '{profile.name}' is defined more than once"
                )
            entries[profile.name] = profile
        self._profiles = entries

    def __getitem__(self, name: str) -> NetworkProfile:
        return self._profiles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __repr__(self) -> str:
        return f"ConfigRegistry({list(self._profiles)!r})"

    def to_truffle_config(self) -> Dict[str, Any]:
        """
        Render the registry in the shape a Truffle-style deployment tool expects.

        Returns:
            {"networks": {name: {"provider": callable, "network_id": int}}}
        """
        return {
            "networks": {
                name: {
                    "provider": profile.provider_factory.connect,
                    "network_id": profile.network_id,
                }
                for name, profile in self._profiles.items()
            }
        }


def build_registry(
    credential: Credential,
    descriptors: Iterable[DescriptorLike],
    connector: Optional[Connector] = None,
) -> ConfigRegistry:
    """
    Validate descriptors and build an immutable registry of network profiles.

    Provider factories are created but never invoked, so no connection is
    opened while the registry is built.

    Args:
        credential: Wallet credential bound into every provider factory
        descriptors: NetworkDescriptor instances or descriptor mappings
        connector: Optional callable (secret, rpc_url) -> provider used by connect()

    Returns:
        ConfigRegistry keyed by network name

    Raises:
        DuplicateNetworkNameError: If two descriptors share a name
        InvalidNetworkIdError: If a network id is not a positive integer
        InvalidEndpointURLError: If an RPC endpoint is not an absolute URL
        InvalidNetworkNameError: If a network name is missing or blank
    """
    profiles = []
    for raw in descriptors:
        descriptor = coerce_descriptor(raw)
        profiles.append(
            NetworkProfile(
                name=descriptor.name,
                rpc_endpoint_url=descriptor.rpc_endpoint_url,
                network_id=descriptor.network_id,
                provider_factory=WalletProviderFactory(
                    credential, descriptor.rpc_endpoint_url, connector
                ),
            )
        )

    return ConfigRegistry(profiles)


def resolve(
    secret_path: Optional[Union[Path, str]],
    descriptors: Iterable[DescriptorLike],
    connector: Optional[Connector] = None,
) -> ConfigRegistry:
    """
    Load the credential and build the network registry in one step.

    Args:
        secret_path: Secret file (None for ./.secret)
        descriptors: NetworkDescriptor instances or descriptor mappings
        connector: Optional callable (secret, rpc_url) -> provider used by connect()

    Returns:
        ConfigRegistry keyed by network name

    Raises:
        CredentialNotFoundError: If the secret file does not exist
        CredentialEmptyError: If the secret file is empty
        CredentialDecodeError: If the secret file is not valid UTF-8
        DuplicateNetworkNameError: If two descriptors share a name
        InvalidNetworkIdError: If a network id is not a positive integer
        InvalidEndpointURLError: If an RPC endpoint is not an absolute URL
    """
    path = get_secret_path(secret_path)
    credential = load_credential(path)
    registry = build_registry(credential, descriptors, connector)

    logger.info(
        "Resolved %d network(s): %s",
        len(registry),
        ", ".join(f"{name} ({profile.network_id})" for name, profile in registry.items()),
    )
    return registry
