"""
Text Signing
============

Sign and verify byte streams with one of two algorithm families:

    blake3   BLAKE3 keyed hash, 32-byte MAC, same key both ways
    ed25519  Ed25519 signature, 64 bytes, private key signs,
             public key verifies

The family is picked by the type of the key material handed in. A
signature from one family never verifies under the other.

The whole input is read into memory before hashing or signing.
"""

from __future__ import annotations

import hmac
import logging
from typing import Final

import blake3
from cryptography.exceptions import InvalidSignature

from rcli.core.crypto.keys import (
    Ed25519Signer,
    Ed25519Verifier,
    MacKey,
    SigningKeyMaterial,
    VerifyingKeyMaterial,
)
from rcli.core.errors import InvalidSignatureEncodingError, UnsupportedAlgorithmError
from rcli.utils.sources import Message, read_message

BLAKE3_MAC_SIZE: Final[int] = 32
ED25519_SIGNATURE_SIZE: Final[int] = 64

_log = logging.getLogger("rcli.signing")


def _blake3_mac(key: MacKey, data: bytes) -> bytes:
    return blake3.blake3(data, key=key.key).digest(length=BLAKE3_MAC_SIZE)


def sign(key: SigningKeyMaterial, message: Message) -> bytes:
    """
    Sign a message.

    Args:
        key: MacKey or Ed25519Signer
        message: Bytes or a binary stream, read to the end

    Returns:
        32-byte MAC (blake3) or 64-byte signature (ed25519)

    Raises:
        UnsupportedAlgorithmError: If the key cannot sign
    """
    data = read_message(message)

    if isinstance(key, MacKey):
        signature = _blake3_mac(key, data)
    elif isinstance(key, Ed25519Signer):
        signature = key.key.sign(data)
    else:
        raise UnsupportedAlgorithmError(
            f"{type(key).__name__} cannot be used for signing"
        )

    _log.debug("Signed %d bytes with %s", len(data), type(key).__name__)
    return signature


def verify(key: VerifyingKeyMaterial, message: Message, signature: bytes) -> bool:
    """
    Verify a signature over a message.

    A well-formed signature that does not match returns False; that is
    a normal outcome, not an error.

    Args:
        key: MacKey, Ed25519Verifier, or Ed25519Signer (its public half is used)
        message: Bytes or a binary stream, read to the end
        signature: Raw signature bytes

    Returns:
        True if the signature matches the message

    Raises:
        InvalidSignatureEncodingError: If an Ed25519 signature is not 64 bytes
        UnsupportedAlgorithmError: If the key cannot verify
    """
    data = read_message(message)

    if isinstance(key, Ed25519Signer):
        key = key.verifier()

    if isinstance(key, MacKey):
        # Full-length constant-time comparison
        valid = hmac.compare_digest(_blake3_mac(key, data), bytes(signature))
    elif isinstance(key, Ed25519Verifier):
        if len(signature) != ED25519_SIGNATURE_SIZE:
            raise InvalidSignatureEncodingError(
                f"Ed25519 signature must be {ED25519_SIGNATURE_SIZE} bytes, got {len(signature)}"
            )
        try:
            key.key.verify(bytes(signature), data)
            valid = True
        except InvalidSignature:
            valid = False
    else:
        raise UnsupportedAlgorithmError(
            f"{type(key).__name__} cannot be used for verification"
        )

    _log.debug("Verified %d bytes with %s: %s", len(data), type(key).__name__, valid)
    return valid
