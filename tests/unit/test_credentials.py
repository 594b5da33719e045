"""Unit tests for credential loading and masking."""

import copy
import logging
from dataclasses import asdict
from pathlib import Path

import pytest

from vinuchain_networks.credentials import load_credential
from vinuchain_networks.exceptions import (
    CredentialDecodeError,
    CredentialEmptyError,
    CredentialNotFoundError,
)
from vinuchain_networks.types import Credential, ProviderHandle


class TestLoadCredential:
    """Test the load_credential function."""

    def test_strips_surrounding_whitespace(self, secret_file: Path, secret_value: str):
        """Test that leading and trailing whitespace is removed."""
        credential = load_credential(secret_file)
        assert credential.reveal() == secret_value

    @pytest.mark.parametrize(
        "content",
        ["0xdeadbeef", "0xdeadbeef\n", "\t0xdeadbeef\r\n", "\n\n  0xdeadbeef \t\n"],
    )
    def test_returns_trimmed_inner_content(self, tmp_path: Path, content: str):
        """Test that any whitespace padding yields the same credential."""
        path = tmp_path / ".secret"
        path.write_text(content)

        assert load_credential(path).reveal() == "0xdeadbeef"

    def test_keeps_inner_whitespace(self, tmp_path: Path):
        """Test that only surrounding whitespace is trimmed."""
        path = tmp_path / ".secret"
        path.write_text("  word one word two \n")

        assert load_credential(path).reveal() == "word one word two"

    def test_accepts_string_path(self, secret_file: Path, secret_value: str):
        """Test that the path can be given as a string."""
        assert load_credential(str(secret_file)).reveal() == secret_value

    def test_missing_file_raises_not_found(self, tmp_path: Path):
        """Test that a missing file raises CredentialNotFoundError."""
        with pytest.raises(CredentialNotFoundError):
            load_credential(tmp_path / "does_not_exist")

    def test_directory_raises_not_found(self, tmp_path: Path):
        """Test that a directory is not accepted as a secret file."""
        with pytest.raises(CredentialNotFoundError):
            load_credential(tmp_path)

    @pytest.mark.parametrize("content", ["", " ", "\n", " \t\r\n  "])
    def test_whitespace_only_raises_empty(self, tmp_path: Path, content: str):
        """Test that whitespace-only content raises CredentialEmptyError."""
        path = tmp_path / ".secret"
        path.write_text(content)

        with pytest.raises(CredentialEmptyError):
            load_credential(path)

    def test_invalid_utf8_raises_decode_error(self, tmp_path: Path, secret_value: str):
        """Test that undecodable bytes raise CredentialDecodeError without the raw bytes."""
        path = tmp_path / ".secret"
        path.write_bytes(b"\xff" + secret_value.encode() + b"\n")

        with pytest.raises(CredentialDecodeError) as exc_info:
            load_credential(path)

        assert exc_info.value.__cause__ is None
        assert exc_info.value.__context__ is None
        assert secret_value not in str(exc_info.value)

    def test_secret_not_logged(self, secret_file: Path, secret_value: str, caplog):
        """Test that loading never writes the secret to the log."""
        with caplog.at_level(logging.DEBUG, logger="vinuchain_networks"):
            load_credential(secret_file)

        assert secret_value not in caplog.text


class TestCredentialMasking:
    """Test that Credential never renders its secret."""

    def test_repr_masks_secret(self, credential: Credential, secret_value: str):
        """Test that repr() hides the secret."""
        assert secret_value not in repr(credential)

    def test_str_masks_secret(self, credential: Credential, secret_value: str):
        """Test that str() and formatting hide the secret."""
        assert secret_value not in str(credential)
        assert secret_value not in f"{credential}"

    def test_is_immutable(self, credential: Credential):
        """Test that a credential cannot be modified."""
        with pytest.raises(AttributeError):
            credential._secret = "other"  # type: ignore[misc]

    def test_asdict_on_holder_keeps_secret_opaque(
        self, credential: Credential, secret_value: str
    ):
        """Test that serializing a ProviderHandle does not expand the credential."""
        handle = ProviderHandle(rpc_endpoint_url="https://x.example", credential=credential)

        data = asdict(handle)

        assert data["credential"] is credential
        assert secret_value not in repr(data)
        assert secret_value not in str(data)

    def test_copies_are_the_same_credential(self, credential: Credential):
        """Test that copying returns the original immutable object."""
        assert copy.copy(credential) is credential
        assert copy.deepcopy(credential) is credential
