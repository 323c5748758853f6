"""
Text Operations
===============

Entry points for the ``text`` commands: sign, verify, generate,
encrypt and decrypt. Each takes an input designator ("-" for stdin or a
file path), resolves key material, runs the engine and returns
text-safe output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rcli.core.config import ToolkitConfig
from rcli.core.crypto import codec
from rcli.core.crypto.chacha20 import get_cipher
from rcli.core.crypto.formats import CryptFormat, SignFormat
from rcli.core.crypto.keys import AeadSecret, KeyManager, KeySource
from rcli.core.crypto.signing import sign, verify
from rcli.utils.sources import read_input, read_input_text

_log = logging.getLogger("rcli.text")


def process_text_sign(
    input: str | Path,
    key: KeySource,
    format: SignFormat | str = SignFormat.BLAKE3,
    config: Optional[ToolkitConfig] = None,
) -> str:
    """
    Sign an input source.

    Args:
        input: "-" or a file path
        key: Key file path or raw key bytes
        format: Signing family

    Returns:
        URL-safe base64 signature
    """
    config = config or ToolkitConfig.get_instance()
    format = SignFormat.parse(format)

    signer = KeyManager(config.crypto).load_signer(format, key)
    data = read_input(input, config.crypto.read_chunk_size)

    _log.info("Signing %d bytes with %s", len(data), format)
    return codec.encode(sign(signer, data))


def process_text_verify(
    input: str | Path,
    key: KeySource,
    format: SignFormat | str,
    sig: str,
    config: Optional[ToolkitConfig] = None,
) -> bool:
    """
    Verify an encoded signature over an input source.

    Args:
        input: "-" or a file path
        key: Key file path or raw key bytes (public key for ed25519)
        format: Signing family
        sig: URL-safe base64 signature

    Returns:
        True if the signature matches

    Raises:
        InvalidEncodingError: If sig is not valid URL-safe base64
        InvalidSignatureEncodingError: If sig has the wrong shape
    """
    config = config or ToolkitConfig.get_instance()
    format = SignFormat.parse(format)

    signature = codec.decode(sig)
    verifier = KeyManager(config.crypto).load_verifier(format, key)
    data = read_input(input, config.crypto.read_chunk_size)

    valid = verify(verifier, data, signature)
    _log.info("Verified %d bytes with %s: %s", len(data), format, valid)
    return valid


def process_generate_key(
    format: SignFormat | str,
    config: Optional[ToolkitConfig] = None,
) -> list[bytes]:
    """Generate key blobs for a signing family; see KeyManager.generate."""
    config = config or ToolkitConfig.get_instance()
    return KeyManager(config.crypto).generate(format)


def process_encrypt(
    input: str | Path,
    key: str,
    nonce: Optional[str] = None,
    format: CryptFormat | str = CryptFormat.CHACHA20POLY1305,
    config: Optional[ToolkitConfig] = None,
) -> str:
    """
    Encrypt an input source.

    Key and nonce strings are fitted to the cipher's sizes with
    AeadSecret.from_strings.

    Returns:
        URL-safe base64 ciphertext
    """
    config = config or ToolkitConfig.get_instance()
    cipher = get_cipher(format)
    secret = AeadSecret.from_strings(key, nonce if nonce is not None else config.crypto.default_nonce)

    data = read_input(input, config.crypto.read_chunk_size)
    _log.info("Encrypting %d bytes with %s", len(data), cipher.format)
    return cipher.encrypt_text(secret, data)


def process_decrypt(
    input: str | Path,
    key: str,
    nonce: Optional[str] = None,
    format: CryptFormat | str = CryptFormat.CHACHA20POLY1305,
    config: Optional[ToolkitConfig] = None,
) -> bytes:
    """
    Decrypt an input source holding URL-safe base64 ciphertext.

    Returns:
        Raw plaintext bytes; the caller decides how to interpret them

    Raises:
        InvalidEncodingError: If the input is not valid encoding
        AuthenticationFailedError: If the key, nonce or ciphertext is wrong
    """
    config = config or ToolkitConfig.get_instance()
    cipher = get_cipher(format)
    secret = AeadSecret.from_strings(key, nonce if nonce is not None else config.crypto.default_nonce)

    text = read_input_text(input, config.crypto.read_chunk_size)
    _log.info("Decrypting with %s", cipher.format)
    return cipher.decrypt_text(secret, text)
