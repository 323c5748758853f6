"""
Algorithm Selectors
===================

Closed sets of algorithms, one enum per capability axis.

    SignFormat   blake3 (keyed hash), ed25519 (public-key signature)
    CryptFormat  chacha20poly1305 (AEAD)
"""

from __future__ import annotations

from enum import Enum

from rcli.core.errors import UnsupportedAlgorithmError


class _Format(Enum):
    """Enum whose members parse from and print as their textual name."""

    @classmethod
    def parse(cls, value: "str | _Format"):
        """
        Resolve a selector from its textual name.

        Args:
            value: Member of this enum, or its name in any case

        Raises:
            UnsupportedAlgorithmError: If the value names no member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(member.value for member in cls)
        raise UnsupportedAlgorithmError(
            f"Unsupported {cls.__name__} {value!r} (expected one of: {choices})"
        )

    def __str__(self) -> str:
        return self.value


class SignFormat(_Format):
    """Signing family."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"


class CryptFormat(_Format):
    """Encryption family."""

    CHACHA20POLY1305 = "chacha20poly1305"
