"""
Key Material and Lifecycle
==========================

Typed key material for each algorithm family, and the KeyManager that
generates, loads and validates it.

    MacKey           32-byte BLAKE3 key, signs and verifies
    Ed25519Signer    32-byte private scalar, signs
    Ed25519Verifier  32-byte public point, verifies
    AeadSecret       32-byte key + 12-byte nonce for ChaCha20-Poly1305

All key material is immutable and meant to be used for one operation
and then dropped. Nothing here caches keys or writes them to disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Final, Optional, Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from nacl import bindings

from rcli.core.config import CryptoConfig, MAC_KEY_SIZE, ToolkitConfig
from rcli.core.errors import (
    InvalidKeyEncodingError,
    InvalidKeyLengthError,
    UnsupportedAlgorithmError,
)
from rcli.core.crypto.formats import SignFormat
from rcli.utils.genpass import generate_password
from rcli.utils.sources import read_input, read_message

ED25519_KEY_SIZE: Final[int] = 32
AEAD_KEY_SIZE: Final[int] = 32
AEAD_NONCE_SIZE: Final[int] = 12

KeySource = Union[bytes, bytearray, memoryview, str, Path, BinaryIO]

_log = logging.getLogger("rcli.keys")


@dataclass(frozen=True, slots=True)
class MacKey:
    """Symmetric BLAKE3 key; the same secret signs and verifies."""

    key: bytes

    def __post_init__(self) -> None:
        if len(self.key) != MAC_KEY_SIZE:
            raise InvalidKeyLengthError(f"MAC key must be exactly {MAC_KEY_SIZE} bytes")

    @classmethod
    def try_new(cls, data: bytes) -> MacKey:
        """
        Build a key from at least 32 bytes, using the first 32.

        Raises:
            InvalidKeyLengthError: If fewer than 32 bytes are given
        """
        if len(data) < MAC_KEY_SIZE:
            raise InvalidKeyLengthError(
                f"MAC key needs at least {MAC_KEY_SIZE} bytes, got {len(data)}"
            )
        if len(data) > MAC_KEY_SIZE:
            _log.warning(
                "MAC key source holds %d bytes; only the first %d are used",
                len(data), MAC_KEY_SIZE,
            )
        return cls(bytes(data[:MAC_KEY_SIZE]))

    def __repr__(self) -> str:
        return "MacKey(<redacted>)"


@dataclass(frozen=True, slots=True)
class Ed25519Signer:
    """Private half of an Ed25519 keypair."""

    key: Ed25519PrivateKey

    @classmethod
    def try_new(cls, data: bytes) -> Ed25519Signer:
        """
        Build a signer from a raw 32-byte private key.

        Raises:
            InvalidKeyLengthError: If data is not exactly 32 bytes
            InvalidKeyEncodingError: If the bytes are rejected as a key
        """
        _check_exact_length(data, ED25519_KEY_SIZE, "Ed25519 private key")
        try:
            return cls(Ed25519PrivateKey.from_private_bytes(bytes(data)))
        except ValueError as e:
            raise InvalidKeyEncodingError("Invalid Ed25519 private key") from e

    def verifier(self) -> Ed25519Verifier:
        """Derive the matching public half."""
        return Ed25519Verifier(self.key.public_key())

    def to_bytes(self) -> bytes:
        return self.key.private_bytes_raw()

    def __repr__(self) -> str:
        return "Ed25519Signer(<redacted>)"


@dataclass(frozen=True, slots=True)
class Ed25519Verifier:
    """Public half of an Ed25519 keypair; never needs the private half."""

    key: Ed25519PublicKey

    @classmethod
    def try_new(cls, data: bytes) -> Ed25519Verifier:
        """
        Build a verifier from a raw 32-byte public key.

        Raises:
            InvalidKeyLengthError: If data is not exactly 32 bytes
            InvalidKeyEncodingError: If the bytes are not a valid point
        """
        _check_exact_length(data, ED25519_KEY_SIZE, "Ed25519 public key")
        data = bytes(data)
        # from_public_bytes does not decompress the point
        if not bindings.crypto_core_ed25519_is_valid_point(data):
            raise InvalidKeyEncodingError("Invalid Ed25519 public key: not a valid curve point")
        try:
            return cls(Ed25519PublicKey.from_public_bytes(data))
        except ValueError as e:
            raise InvalidKeyEncodingError("Invalid Ed25519 public key") from e

    def to_bytes(self) -> bytes:
        return self.key.public_bytes_raw()

    def __repr__(self) -> str:
        return f"Ed25519Verifier({self.to_bytes().hex()[:16]}...)"


@dataclass(frozen=True, slots=True)
class AeadSecret:
    """
    Key and nonce for one ChaCha20-Poly1305 message.

    WARNING:
        Encrypting two different plaintexts under the same (key, nonce)
        pair breaks both confidentiality and integrity. Choosing a fresh
        nonce is the caller's job.
    """

    key: bytes
    nonce: bytes

    def __post_init__(self) -> None:
        _check_exact_length(self.key, AEAD_KEY_SIZE, "AEAD key")
        _check_exact_length(self.nonce, AEAD_NONCE_SIZE, "AEAD nonce")

    @classmethod
    def from_bytes(cls, key: bytes, nonce: bytes) -> AeadSecret:
        """
        Build a secret from exact-length raw material.

        Raises:
            InvalidKeyLengthError: If key is not 32 bytes or nonce not 12 bytes
        """
        return cls(bytes(key), bytes(nonce))

    @classmethod
    def from_strings(cls, key: str, nonce: str) -> AeadSecret:
        """
        Build a secret from arbitrary strings.

        Both strings are UTF-8 encoded, then cut or zero-padded to
        32 and 12 bytes. This is a convenience for command-line use and
        is not a key derivation: short or low-entropy strings give weak
        keys. Prefer from_bytes with random material.
        """
        return cls(
            _fit(key.encode("utf-8"), AEAD_KEY_SIZE),
            _fit(nonce.encode("utf-8"), AEAD_NONCE_SIZE),
        )

    def __repr__(self) -> str:
        return "AeadSecret(<redacted>)"


SigningKeyMaterial = Union[MacKey, Ed25519Signer]
VerifyingKeyMaterial = Union[MacKey, Ed25519Verifier]


def _fit(data: bytes, size: int) -> bytes:
    return data[:size].ljust(size, b"\x00")


def _check_exact_length(data: bytes, size: int, what: str) -> None:
    if len(data) != size:
        raise InvalidKeyLengthError(f"{what} must be exactly {size} bytes, got {len(data)}")


def read_key_source(source: KeySource, chunk_size: Optional[int] = None) -> bytes:
    """
    Resolve a key source to raw bytes.

    Args:
        source: Raw bytes, a file path, or a binary stream

    Raises:
        InputNotFoundError: If a path cannot be opened
    """
    if isinstance(source, (str, Path)):
        return read_input(source, chunk_size)
    return read_message(source)


class KeyManager:
    """
    Generates and loads key material for the signing families.

    Usage:
        manager = KeyManager()

        sk_bytes, pk_bytes = manager.generate(SignFormat.ED25519)
        signer = manager.load_signer(SignFormat.ED25519, sk_bytes)
        verifier = manager.load_verifier(SignFormat.ED25519, Path("ed25519.pk"))
    """

    __slots__ = ("_config",)

    def __init__(self, config: Optional[CryptoConfig] = None) -> None:
        self._config = config or ToolkitConfig.get_instance().crypto

    def generate(self, format: SignFormat | str) -> list[bytes]:
        """
        Generate fresh key material.

        Returns:
            BLAKE3: [key]; Ed25519: [private_key, public_key]
        """
        format = SignFormat.parse(format)

        if format is SignFormat.BLAKE3:
            password = generate_password(self._config.genpass_length)
            blobs = [password.encode("ascii")]
        elif format is SignFormat.ED25519:
            private_key = Ed25519PrivateKey.generate()
            blobs = [
                private_key.private_bytes_raw(),
                private_key.public_key().public_bytes_raw(),
            ]
        else:
            raise UnsupportedAlgorithmError(f"Cannot generate keys for {format}")

        _log.info("Generated %s key material (%d blob(s))", format, len(blobs))
        return blobs

    def load_signer(self, format: SignFormat | str, source: KeySource) -> SigningKeyMaterial:
        """
        Load key material able to sign.

        Raises:
            InvalidKeyLengthError: If the key has the wrong size
            InvalidKeyEncodingError: If the key bytes are invalid
            InputNotFoundError: If a key path cannot be opened
        """
        format = SignFormat.parse(format)
        data = read_key_source(source, self._config.read_chunk_size)

        if format is SignFormat.BLAKE3:
            return MacKey.try_new(data)
        if format is SignFormat.ED25519:
            return Ed25519Signer.try_new(data)
        raise UnsupportedAlgorithmError(f"Cannot load signing key for {format}")

    def load_verifier(self, format: SignFormat | str, source: KeySource) -> VerifyingKeyMaterial:
        """
        Load key material able to verify.

        Raises:
            InvalidKeyLengthError: If the key has the wrong size
            InvalidKeyEncodingError: If the key bytes are invalid
            InputNotFoundError: If a key path cannot be opened
        """
        format = SignFormat.parse(format)
        data = read_key_source(source, self._config.read_chunk_size)

        if format is SignFormat.BLAKE3:
            return MacKey.try_new(data)
        if format is SignFormat.ED25519:
            return Ed25519Verifier.try_new(data)
        raise UnsupportedAlgorithmError(f"Cannot load verifying key for {format}")
