"""Shared pytest fixtures for vinuchain-networks tests."""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from vinuchain_networks.types import Credential

SECRET = "abc123"


@pytest.fixture
def secret_value() -> str:
    """Return the plain secret used across tests."""
    return SECRET


@pytest.fixture
def credential() -> Credential:
    """Return a credential wrapping the test secret."""
    return Credential(SECRET)


@pytest.fixture
def secret_file(tmp_path: Path) -> Path:
    """Create a secret file with surrounding whitespace."""
    path = tmp_path / ".secret"
    path.write_text(f"  {SECRET}  \n")
    return path


@pytest.fixture
def descriptors() -> List[Dict[str, Any]]:
    """Return two valid, distinctly named descriptors."""
    return [
        {
            "name": "testnet",
            "rpc_endpoint_url": "https://for-test.vinuchain-rpc.com",
            "network_id": 207207,
        },
        {
            "name": "mainnet",
            "rpc_endpoint_url": "https://vinufoundation-rpc.com",
            "network_id": 206,
        },
    ]


@pytest.fixture
def truffle_descriptor_file(tmp_path: Path) -> Path:
    """Create a Truffle-style descriptor JSON file."""
    path = tmp_path / "networks.json"
    path.write_text(
        json.dumps(
            {
                "networks": {
                    "testnet": {
                        "url": "https://for-test.vinuchain-rpc.com",
                        "network_id": 207207,
                    },
                    "mainnet": {
                        "url": "https://vinufoundation-rpc.com",
                        "network_id": 206,
                    },
                }
            },
            indent=2,
        )
    )
    return path
