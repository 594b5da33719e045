"""Credential loading for vinuchain-networks library."""

import logging
from pathlib import Path
from typing import Union

from .exceptions import CredentialDecodeError, CredentialEmptyError, CredentialNotFoundError
from .types import Credential

logger = logging.getLogger(__name__)


def load_credential(path: Union[Path, str]) -> Credential:
    """
    Read a credential from a local secret file.

    Args:
        path: Path to the secret file

    Returns:
        Credential holding the file contents with surrounding whitespace removed

    Raises:
        CredentialNotFoundError: If the file does not exist
        CredentialEmptyError: If the file holds only whitespace
        CredentialDecodeError: If the file is not valid UTF-8
    """
    secret_path = Path(path)
    if not secret_path.is_file():
        raise CredentialNotFoundError(f"Secret file not found at {secret_path}")

    # Decode errors carry the raw bytes; raise outside the handler so they are not chained
    try:
        secret = secret_path.read_text(encoding="utf-8").strip()
    except UnicodeDecodeError:
        secret = None
    if secret is None:
        raise CredentialDecodeError(f"Secret file at {secret_path} is not valid UTF-8")
    if not secret:
        raise CredentialEmptyError(f"Secret file at {secret_path} is empty")

    logger.debug("Loaded credential from %s", secret_path)
    return Credential(secret)
