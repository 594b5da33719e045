"""Network descriptor parsers and validators for vinuchain-networks library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union
from urllib.parse import urlparse

from .constants import ALLOWED_URL_SCHEMES
from .exceptions import (
    DuplicateNetworkNameError,
    InvalidEndpointURLError,
    InvalidNetworkIdError,
    InvalidNetworkNameError,
    NetworkConfigError,
)
from .types import NetworkDescriptor

# Accepted spellings for descriptor fields, canonical name first
URL_KEYS = ("rpc_endpoint_url", "rpcEndpointURL", "url")
NETWORK_ID_KEYS = ("network_id", "networkId")

DescriptorLike = Union[NetworkDescriptor, Mapping[str, Any]]


def validate_network_name(name: Any) -> str:
    """
    Check that a network name is a non-empty string.

    Raises:
        InvalidNetworkNameError: If name is not a non-empty string
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidNetworkNameError(f"Invalid network name: {name!r}")
    return name


def validate_network_id(network_id: Any, name: str) -> int:
    """
    Check that a network id is a positive integer.

    Booleans are rejected even though they are ints.

    Raises:
        InvalidNetworkIdError: If network_id is not an integer greater than zero
    """
    if isinstance(network_id, bool) or not isinstance(network_id, int):
        raise InvalidNetworkIdError(
            f"Network id for '{name}' must be an integer, got {network_id!r}"
        )
    if network_id <= 0:
        raise InvalidNetworkIdError(
            f"Network id for '{name}' must be positive, got {network_id}"
        )
    return network_id


def validate_endpoint_url(url: Any, name: str) -> str:
    """
    Check that an RPC endpoint is a well-formed absolute URL.

    The URL needs a supported scheme (http, https, ws, wss), a host, a valid
    port if one is given, and no whitespace.

    Raises:
        InvalidEndpointURLError: If url is malformed or relative
    """
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        raise InvalidEndpointURLError(f"Invalid RPC endpoint for '{name}': {url!r}")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidEndpointURLError(
            f"RPC endpoint for '{name}' is malformed: {url!r}"
        ) from e

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.hostname:
        raise InvalidEndpointURLError(
            f"RPC endpoint for '{name}' is not an absolute URL: {url!r}"
        )

    try:
        parsed.port
    except ValueError as e:
        raise InvalidEndpointURLError(
            f"RPC endpoint for '{name}' has an invalid port: {url!r}"
        ) from e

    return url


def _first_present(raw: Mapping[str, Any], keys: tuple) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def coerce_descriptor(raw: DescriptorLike) -> NetworkDescriptor:
    """
    Validate a descriptor and return it as a NetworkDescriptor.

    Args:
        raw: NetworkDescriptor, or mapping with name, rpc_endpoint_url
             (or rpcEndpointURL / url) and network_id (or networkId)

    Returns:
        Validated NetworkDescriptor

    Raises:
        InvalidNetworkNameError: If the name is missing or blank
        InvalidEndpointURLError: If the URL is missing or malformed
        InvalidNetworkIdError: If the network id is missing or not positive
    """
    if isinstance(raw, NetworkDescriptor):
        name, url, network_id = raw.name, raw.rpc_endpoint_url, raw.network_id
    elif isinstance(raw, Mapping):
        name = raw.get("name")
        url = _first_present(raw, URL_KEYS)
        network_id = _first_present(raw, NETWORK_ID_KEYS)
    else:
        raise NetworkConfigError(f"Unsupported network descriptor: {type(raw).__name__}")

    name = validate_network_name(name)
    return NetworkDescriptor(
        name=name,
        rpc_endpoint_url=validate_endpoint_url(url, name),
        network_id=validate_network_id(network_id, name),
    )


class _KeyedObject(dict):
    """JSON object that remembers which keys appeared more than once."""

    duplicates: List[str]


def _track_duplicate_keys(pairs: List[tuple]) -> _KeyedObject:
    obj = _KeyedObject()
    obj.duplicates = []
    for key, value in pairs:
        if key in obj:
            obj.duplicates.append(key)
        obj[key] = value
    return obj


def parse_descriptors(data: Any) -> List[Dict[str, Any]]:
    """
    Normalize decoded descriptor data into a list of descriptor dicts.

    Two shapes are accepted:
    - a list of descriptor objects
    - a Truffle-style object: {"networks": {name: {"url": ..., "network_id": ...}}}

    Args:
        data: Decoded JSON data

    Returns:
        List of descriptor dicts (unvalidated)

    Raises:
        DuplicateNetworkNameError: If a network name appears twice in "networks"
        NetworkConfigError: If the data has neither shape
    """
    if isinstance(data, list):
        if not all(isinstance(item, Mapping) for item in data):
            raise NetworkConfigError("Every network descriptor must be an object")
        return [dict(item) for item in data]

    if isinstance(data, Mapping) and isinstance(data.get("networks"), Mapping):
        networks = data["networks"]
        duplicates = getattr(networks, "duplicates", [])
        if duplicates:
            raise DuplicateNetworkNameError(
                f"Network '{duplicates[0]}' is defined more than once"
            )
        if not all(isinstance(settings, Mapping) for settings in networks.values()):
            raise NetworkConfigError("Every entry in 'networks' must be an object")
        return [{**settings, "name": name} for name, settings in networks.items()]

    raise NetworkConfigError(
        "Descriptor data must be a list or an object with a 'networks' mapping"
    )


def load_descriptors(file_path: Union[Path, str]) -> List[Dict[str, Any]]:
    """
    Load network descriptors from a JSON file.

    Args:
        file_path: Path to descriptor JSON file

    Returns:
        List of descriptor dicts (unvalidated; pass to build_registry)

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        DuplicateNetworkNameError: If a network name appears twice
    """
    with open(file_path) as f:
        data = json.load(f, object_pairs_hook=_track_duplicate_keys)
    return parse_descriptors(data)
