"""Network id checks against live RPC endpoints for vinuchain-networks library."""

import logging

import requests

from .exceptions import NetworkProbeError
from .types import NetworkProfile

logger = logging.getLogger(__name__)


def fetch_network_id(rpc_url: str, timeout: int = 30) -> int:
    """
    Ask an RPC endpoint which network it serves.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Network id reported by net_version

    Raises:
        NetworkProbeError: If the request fails, the response is not a JSON
                           object, the RPC returns an error, or the result
                           is not a number
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "net_version",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NetworkProbeError(f"Network error while probing {rpc_url}: {e}") from e

    if response.status_code != 200:
        raise NetworkProbeError(
            f"Probe of {rpc_url} failed with status {response.status_code}"
        )

    try:
        result = response.json()
    except ValueError as e:
        raise NetworkProbeError(f"Probe of {rpc_url} returned invalid JSON") from e

    if not isinstance(result, dict):
        raise NetworkProbeError(f"Probe of {rpc_url} returned a non-object response")

    if "error" in result:
        raise NetworkProbeError(f"RPC error from {rpc_url}: {result['error']}")

    # net_version is normally decimal, some nodes answer in hex
    value = str(result.get("result", ""))
    try:
        return int(value, 16) if value.lower().startswith("0x") else int(value)
    except ValueError as e:
        raise NetworkProbeError(
            f"Probe of {rpc_url} returned a non-numeric network id: {value!r}"
        ) from e


def verify_profile(profile: NetworkProfile, timeout: int = 30) -> bool:
    """
    Check that a profile's network id matches the chain served at its endpoint.

    Args:
        profile: Network profile to check
        timeout: Request timeout in seconds

    Returns:
        True if the endpoint reports the configured network id

    Raises:
        NetworkProbeError: If the endpoint cannot be probed
    """
    served_id = fetch_network_id(profile.rpc_endpoint_url, timeout=timeout)
    if served_id != profile.network_id:
        logger.warning(
            "Network '%s' is configured with id %d but %s serves %d",
            profile.name,
            profile.network_id,
            profile.rpc_endpoint_url,
            served_id,
        )
        return False
    return True
