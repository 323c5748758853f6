"""
Password Generation
===================

Random passwords drawn from up to four character classes.

Every included class contributes at least one character, the remainder
is drawn from the union of included classes, and the result is shuffled.
All randomness comes from the OS CSPRNG via ``secrets``.
"""

from __future__ import annotations

import secrets
from typing import Final

from rcli.utils.validators import ValidationError, validate_length

UPPER: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER: Final[str] = "abcdefghijklmnopqrstuvwxyz"
DIGITS: Final[str] = "1234567890"
SYMBOLS: Final[str] = "!@#$%^&*~,.;"

MAX_PASSWORD_LENGTH: Final[int] = 255

_rng = secrets.SystemRandom()


def generate_password(
    length: int,
    exclude_upper: bool = False,
    exclude_lower: bool = False,
    exclude_digits: bool = False,
    exclude_symbols: bool = False,
) -> str:
    """
    Generate a random password.

    Args:
        length: Number of characters (0-255)
        exclude_upper: Leave out A-Z
        exclude_lower: Leave out a-z
        exclude_digits: Leave out 0-9
        exclude_symbols: Leave out the symbol set

    Returns:
        Password of exactly ``length`` characters

    Raises:
        ValidationError: If length is out of range, no class is included,
            or length is smaller than the number of included classes
    """
    validate_length(length, 0, MAX_PASSWORD_LENGTH)

    classes = [
        charset
        for charset, excluded in (
            (UPPER, exclude_upper),
            (LOWER, exclude_lower),
            (DIGITS, exclude_digits),
            (SYMBOLS, exclude_symbols),
        )
        if not excluded
    ]

    if not classes:
        raise ValidationError("At least one character class must be included")
    if length < len(classes):
        raise ValidationError(
            f"length must be at least {len(classes)} to include every selected class"
        )

    # One seed per class guarantees coverage
    password = [secrets.choice(charset) for charset in classes]
    pool = "".join(classes)
    password.extend(secrets.choice(pool) for _ in range(length - len(password)))

    _rng.shuffle(password)
    return "".join(password)
