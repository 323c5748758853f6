"""
Key Files
=========

Writes generated key blobs to disk using the toolkit's file names:

    blake3   blake3.txt
    ed25519  ed25519.sk (private), ed25519.pk (public)
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Final, Sequence

from rcli.core.crypto.formats import SignFormat
from rcli.utils.validators import ValidationError, validate_output_dir

_WRITE_FLAGS: Final[int] = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)

_KEY_FILE_NAMES: Final[dict[SignFormat, tuple[str, ...]]] = {
    SignFormat.BLAKE3: ("blake3.txt",),
    SignFormat.ED25519: ("ed25519.sk", "ed25519.pk"),
}


def key_file_names(format: SignFormat | str) -> list[str]:
    """File names for a family's key blobs, in generation order."""
    return list(_KEY_FILE_NAMES[SignFormat.parse(format)])


def write_key_files(
    format: SignFormat | str,
    blobs: Sequence[bytes],
    output_dir: str | Path,
) -> list[Path]:
    """
    Write generated key blobs into a directory.

    Existing files are overwritten. On POSIX systems files are owner
    read/write only from the moment they exist, and an existing file is
    tightened to 0600 before the key is written.

    Returns:
        Paths written, in blob order

    Raises:
        ValidationError: If output_dir is not a directory or the blob
            count does not match the family
    """
    directory = validate_output_dir(output_dir)
    names = key_file_names(format)

    if len(blobs) != len(names):
        raise ValidationError(
            f"{SignFormat.parse(format)} expects {len(names)} key blob(s), got {len(blobs)}"
        )

    written = []
    for name, blob in zip(names, blobs):
        path = directory / name
        fd = os.open(path, _WRITE_FLAGS, 0o600)
        with os.fdopen(fd, "wb") as handle:
            # The mode above only applies to new files
            if platform.system().lower() != "windows":
                os.fchmod(handle.fileno(), 0o600)
            handle.write(blob)
        written.append(path)

    return written
