"""Custom exception classes for vinuchain-networks library."""


class NetworkConfigError(Exception):
    """Base exception for network configuration errors."""

    pass


class CredentialNotFoundError(NetworkConfigError, FileNotFoundError):
    """Raised when the secret file holding the credential is not found."""

    pass


class CredentialEmptyError(NetworkConfigError, ValueError):
    """Raised when the secret file is empty after trimming whitespace."""

    pass


class CredentialDecodeError(NetworkConfigError, ValueError):
    """Raised when the secret file is not valid UTF-8 text."""

    pass


class DuplicateNetworkNameError(NetworkConfigError, ValueError):
    """Raised when two network descriptors share a name."""

    pass


class InvalidNetworkIdError(NetworkConfigError, ValueError):
    """Raised when a network id is not a positive integer."""

    pass


class InvalidEndpointURLError(NetworkConfigError, ValueError):
    """Raised when an RPC endpoint is not a well-formed absolute URL."""

    pass


class InvalidNetworkNameError(NetworkConfigError, ValueError):
    """Raised when a network name is missing or not a non-empty string."""

    pass


class NetworkProbeError(NetworkConfigError, RuntimeError):
    """Raised when an RPC endpoint cannot be probed for its network id."""

    pass
