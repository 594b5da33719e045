"""Provider factories for vinuchain-networks library."""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .types import REDACTED, Credential, ProviderHandle

# Builds a real wallet provider from (secret, rpc_endpoint_url)
Connector = Callable[[str, str], Any]


@runtime_checkable
class ProviderFactory(Protocol):
    """Capability that builds a connection provider on demand."""

    def connect(self) -> Any:
        ...


class WalletProviderFactory:
    """
    Deferred wallet provider bound to a credential and an RPC endpoint.

    Nothing is built until connect() is called. With a connector, connect()
    returns whatever the connector builds; otherwise it returns a
    ProviderHandle for the deployment tool to consume.
    """

    def __init__(
        self,
        credential: Credential,
        rpc_endpoint_url: str,
        connector: Optional[Connector] = None,
    ):
        self._credential = credential
        self.rpc_endpoint_url = rpc_endpoint_url
        self._connector = connector

    def connect(self) -> Any:
        """
        Build the connection provider.

        Returns:
            Connector result, or ProviderHandle when no connector is set
        """
        if self._connector is not None:
            return self._connector(self._credential.reveal(), self.rpc_endpoint_url)
        return ProviderHandle(
            rpc_endpoint_url=self.rpc_endpoint_url, credential=self._credential
        )

    def __repr__(self) -> str:
        return (
            f"WalletProviderFactory(credential={REDACTED}, "
            f"rpc_endpoint_url={self.rpc_endpoint_url!r})"
        )
