"""
Toolkit Errors
==============

Exception hierarchy shared by the signing, encryption and key modules.

Every failure the engine can report has its own type so callers can
tell a malformed input apart from a failed authentication. Messages
never include key material.
"""

from __future__ import annotations


class ToolkitError(Exception):
    """Base class for all errors raised by rcli."""
    pass


class InputNotFoundError(ToolkitError, FileNotFoundError):
    """Raised when an input source or key file cannot be opened."""
    pass


class InvalidEncodingError(ToolkitError, ValueError):
    """Raised when text is not valid URL-safe unpadded base64."""
    pass


class KeyMaterialError(ToolkitError, ValueError):
    """Raised when key material has the wrong shape."""
    pass


class InvalidKeyLengthError(KeyMaterialError):
    """Raised when key material is shorter or longer than required."""
    pass


class InvalidKeyEncodingError(KeyMaterialError):
    """Raised when key bytes have the right length but are not a valid key."""
    pass


class InvalidSignatureEncodingError(ToolkitError, ValueError):
    """Raised when signature bytes cannot be a signature of the selected algorithm."""
    pass


class AuthenticationFailedError(ToolkitError):
    """
    Raised when AEAD tag verification fails on decrypt.

    Causes are not distinguished: tampered ciphertext, wrong key and
    wrong nonce all look the same. No plaintext is ever returned.
    """
    pass


class UnsupportedAlgorithmError(ToolkitError, ValueError):
    """Raised when an algorithm selector is outside the supported set."""
    pass
