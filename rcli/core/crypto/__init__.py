"""
rcli Cryptographic Core
=======================

Signing, encryption and key material behind one interface per capability.

Algorithms:
    1. BLAKE3 keyed hash: symmetric text signing
    2. Ed25519: public-key text signing
    3. ChaCha20-Poly1305: authenticated encryption

Properties:
    - Constant-time MAC comparison
    - Fail-closed decryption
    - OS CSPRNG for all generated key material
    - Binary output crosses a URL-safe base64 codec

WARNING: Nonce reuse under one ChaCha20-Poly1305 key is not detected.
"""

from rcli.core.crypto.formats import CryptFormat, SignFormat
from rcli.core.crypto.keys import (
    AeadSecret,
    Ed25519Signer,
    Ed25519Verifier,
    KeyManager,
    MacKey,
)
from rcli.core.crypto.signing import sign, verify
from rcli.core.crypto.chacha20 import ChaCha20Cipher, get_cipher

__all__ = [
    "AeadSecret",
    "ChaCha20Cipher",
    "CryptFormat",
    "Ed25519Signer",
    "Ed25519Verifier",
    "KeyManager",
    "MacKey",
    "SignFormat",
    "get_cipher",
    "sign",
    "verify",
]
