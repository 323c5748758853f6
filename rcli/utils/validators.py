"""
Validation Utilities
====================

Argument checks the command layer runs before handing work to the engine.
"""

from __future__ import annotations

from pathlib import Path

STDIN_DESIGNATOR = "-"


class ValidationError(ValueError):
    """Raised when validation fails."""
    pass


def validate_input_file(designator: str) -> str:
    """
    Validate an input designator.

    Args:
        designator: "-" for standard input, otherwise a file path

    Returns:
        The designator, unchanged

    Raises:
        ValidationError: If the designator names a file that does not exist
    """
    if designator == STDIN_DESIGNATOR or Path(designator).is_file():
        return designator
    raise ValidationError(f"File does not exist: {designator}")


def validate_output_dir(path: str | Path) -> Path:
    """
    Validate that a path is an existing directory.

    Args:
        path: Directory the caller wants to write into

    Returns:
        Resolved Path object

    Raises:
        ValidationError: If the path is missing or not a directory
    """
    try:
        resolved = Path(path).resolve()
    except (ValueError, RuntimeError) as e:
        raise ValidationError(f"Invalid path: {e}") from e

    if not resolved.is_dir():
        raise ValidationError(
            f"Path does not exist or is not a directory: {resolved}"
        )

    return resolved


def validate_length(
    value: int,
    min_value: int = 0,
    max_value: int = 255,
    field_name: str = "length",
) -> int:
    """
    Validate an integer length against inclusive bounds.

    Raises:
        ValidationError: If the value is not an int or out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")

    if value < min_value or value > max_value:
        raise ValidationError(
            f"{field_name} must be between {min_value} and {max_value}"
        )

    return value
