"""
ChaCha20-Poly1305 Authenticated Encryption
==========================================

Encrypts and decrypts whole messages under a caller-supplied key and
nonce (RFC 8439).

Security Properties:
    - 256-bit key
    - 96-bit nonce
    - 128-bit Poly1305 authentication tag appended to the ciphertext

WARNING:
    - Never reuse (key, nonce) pairs
    - Decryption fails closed: a bad tag raises, no plaintext is returned
"""

from __future__ import annotations

import logging
from typing import Final

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from rcli.core.crypto import codec
from rcli.core.crypto.formats import CryptFormat
from rcli.core.crypto.keys import AeadSecret
from rcli.utils.sources import Message, read_message
from rcli.core.errors import AuthenticationFailedError, UnsupportedAlgorithmError

CHACHA_TAG_SIZE: Final[int] = 16

_log = logging.getLogger("rcli.chacha20")


class ChaCha20Cipher:
    """
    ChaCha20-Poly1305 AEAD cipher.

    Usage:
        cipher = ChaCha20Cipher()
        secret = AeadSecret.from_bytes(key, nonce)

        ciphertext = cipher.encrypt(secret, b"secret message")
        plaintext = cipher.decrypt(secret, ciphertext)

        # Text-safe form
        token = cipher.encrypt_text(secret, b"secret message")
        plaintext = cipher.decrypt_text(secret, token)
    """

    __slots__ = ()

    format: Final = CryptFormat.CHACHA20POLY1305

    def encrypt(self, secret: AeadSecret, message: Message) -> bytes:
        """
        Encrypt a whole message.

        Args:
            secret: Key and nonce
            message: Bytes or a binary stream, read to the end

        Returns:
            Ciphertext with the 16-byte tag appended
        """
        plaintext = read_message(message)
        ciphertext = ChaCha20Poly1305(secret.key).encrypt(secret.nonce, plaintext, None)
        _log.debug("Encrypted %d bytes", len(plaintext))
        return ciphertext

    def decrypt(self, secret: AeadSecret, message: Message) -> bytes:
        """
        Decrypt and authenticate a whole message.

        Args:
            secret: Key and nonce used for encryption
            message: Ciphertext bytes or a binary stream

        Returns:
            Plaintext bytes, only after the tag has verified

        Raises:
            AuthenticationFailedError: On a wrong key, wrong nonce,
                truncated or tampered ciphertext
        """
        ciphertext = read_message(message)
        if len(ciphertext) < CHACHA_TAG_SIZE:
            raise AuthenticationFailedError("Ciphertext too short (missing authentication tag)")

        try:
            plaintext = ChaCha20Poly1305(secret.key).decrypt(secret.nonce, ciphertext, None)
        except InvalidTag as e:
            _log.warning("Authentication failed for %d byte ciphertext", len(ciphertext))
            raise AuthenticationFailedError("Decryption failed: authentication tag mismatch") from e

        _log.debug("Decrypted %d bytes", len(plaintext))
        return plaintext

    def encrypt_text(self, secret: AeadSecret, message: Message) -> str:
        """Encrypt and return the ciphertext as URL-safe base64 text."""
        return codec.encode(self.encrypt(secret, message))

    def decrypt_text(self, secret: AeadSecret, text: str | bytes) -> bytes:
        """
        Decode URL-safe base64 ciphertext and decrypt it.

        Raises:
            InvalidEncodingError: If the text is not valid encoding
            AuthenticationFailedError: If the tag does not verify
        """
        return self.decrypt(secret, codec.decode(text))


_CIPHERS: Final[dict[CryptFormat, type[ChaCha20Cipher]]] = {
    CryptFormat.CHACHA20POLY1305: ChaCha20Cipher,
}


def get_cipher(format: CryptFormat | str) -> ChaCha20Cipher:
    """
    Return the AEAD implementation for an encryption family.

    Raises:
        UnsupportedAlgorithmError: If no cipher is registered for it
    """
    format = CryptFormat.parse(format)
    try:
        return _CIPHERS[format]()
    except KeyError:
        raise UnsupportedAlgorithmError(f"No cipher registered for {format}") from None
