"""Path management utilities for vinuchain-networks library."""

from pathlib import Path
from typing import Optional, Union

from .constants import SECRET_FILENAME


def get_default_secret_path() -> Path:
    """
    Get default secret file path (current working directory).

    Returns:
        Path to ./.secret
    """
    return Path.cwd() / SECRET_FILENAME


def get_secret_path(secret_path: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the secret file path.

    Args:
        secret_path: Custom secret file (defaults to ./.secret)

    Returns:
        Absolute path to the secret file
    """
    if secret_path is None:
        return get_default_secret_path()
    return Path(secret_path).absolute()
