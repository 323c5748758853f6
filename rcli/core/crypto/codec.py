"""
Text-Safe Binary Codec
======================

URL-safe base64 without padding (RFC 4648 section 5).

Signatures, MACs and ciphertext cross this codec whenever they leave or
enter the engine, so they can be printed, pasted on a command line or
put in a URL unescaped.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Final

from rcli.core.errors import InvalidEncodingError

_ALPHABET: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]*")


def encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64 text."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(text: str | bytes) -> bytes:
    """
    Decode unpadded URL-safe base64 text.

    Surrounding whitespace (such as a trailing newline from a file or
    stdin) is ignored.

    Raises:
        InvalidEncodingError: On characters outside the alphabet,
            padding, a length no encoder can produce, or non-zero
            trailing bits
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError("Encoded text must be ASCII") from e

    text = text.strip()

    if not _ALPHABET.fullmatch(text):
        raise InvalidEncodingError("Invalid character in URL-safe base64 text")
    if len(text) % 4 == 1:
        raise InvalidEncodingError(f"Invalid URL-safe base64 length: {len(text)}")

    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise InvalidEncodingError(f"Malformed URL-safe base64 text: {e}") from e

    # Unused trailing bits must be zero, so each byte string has one encoding
    if encode(data) != text:
        raise InvalidEncodingError("Non-canonical URL-safe base64 text")

    return data
