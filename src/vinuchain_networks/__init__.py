"""
vinuchain-networks: validated network configuration for Vinuchain deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .credentials import load_credential
from .exceptions import (
    CredentialDecodeError,
    CredentialEmptyError,
    CredentialNotFoundError,
    DuplicateNetworkNameError,
    InvalidEndpointURLError,
    InvalidNetworkIdError,
    InvalidNetworkNameError,
    NetworkConfigError,
    NetworkProbeError,
)
from .parsers import load_descriptors
from .probe import fetch_network_id, verify_profile
from .providers import ProviderFactory, WalletProviderFactory
from .registry import ConfigRegistry, build_registry, resolve
from .types import Credential, NetworkDescriptor, NetworkProfile, ProviderHandle

try:
    __version__ = version("vinuchain-networks")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "resolve",
    "build_registry",
    "load_credential",
    "load_descriptors",
    "fetch_network_id",
    "verify_profile",
    "ConfigRegistry",
    "Credential",
    "NetworkDescriptor",
    "NetworkProfile",
    "ProviderFactory",
    "ProviderHandle",
    "WalletProviderFactory",
    "NetworkConfigError",
    "CredentialNotFoundError",
    "CredentialEmptyError",
    "CredentialDecodeError",
    "DuplicateNetworkNameError",
    "InvalidNetworkIdError",
    "InvalidEndpointURLError",
    "InvalidNetworkNameError",
    "NetworkProbeError",
]
