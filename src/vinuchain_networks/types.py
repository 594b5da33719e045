"""Data types and dataclasses for vinuchain-networks library."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .providers import ProviderFactory

REDACTED = "<redacted>"


class Credential:
    """
    Wallet credential (e.g. a hex-encoded private key).

    The secret is only reachable through reveal(); repr() and str() mask it.
    Not a dataclass, so dataclasses.asdict() on a holder keeps it opaque.
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str):
        object.__setattr__(self, "_secret", secret)

    def reveal(self) -> str:
        """Return the secret value."""
        return self._secret

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Credential is immutable")

    def __copy__(self) -> "Credential":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Credential":
        return self

    def __repr__(self) -> str:
        return f"Credential({REDACTED})"

    def __str__(self) -> str:
        return REDACTED


@dataclass(frozen=True)
class NetworkDescriptor:
    """Unvalidated network definition as supplied by the caller."""

    name: str
    rpc_endpoint_url: str
    network_id: int


@dataclass(frozen=True)
class NetworkProfile:
    """Validated connection parameters for one network."""

    name: str  # Unique registry key, e.g. "testnet"
    rpc_endpoint_url: str  # Absolute RPC URL
    network_id: int  # Positive chain/network id
    provider_factory: "ProviderFactory" = field(compare=False)


@dataclass(frozen=True)
class ProviderHandle:
    """Connection parameters handed to the deployment tool's wallet provider."""

    rpc_endpoint_url: str
    credential: Credential
