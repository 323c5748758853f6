"""
Input Sources
=============

Turns an input designator into a readable byte stream.

"-" means standard input; anything else is a file path. Streams are
always read to completion before an operation returns.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from rcli.core.errors import InputNotFoundError, InvalidEncodingError
from rcli.utils.validators import STDIN_DESIGNATOR

DEFAULT_CHUNK_SIZE = 64 * 1024

Message = Union[bytes, bytearray, memoryview, BinaryIO]


@contextmanager
def open_input(designator: str | Path) -> Iterator[BinaryIO]:
    """
    Open an input source for binary reading.

    Standard input is yielded as-is and left open; files are closed on
    every exit path.

    Raises:
        InputNotFoundError: If the file cannot be opened
    """
    if designator == STDIN_DESIGNATOR:
        yield sys.stdin.buffer
        return

    try:
        handle = open(designator, "rb")
    except OSError as e:
        raise InputNotFoundError(f"Cannot open input {str(designator)!r}: {e.strerror}") from e

    with handle:
        yield handle


def read_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Read a binary stream to EOF."""
    buffer = bytearray()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        buffer.extend(chunk)
    return bytes(buffer)


def read_input(designator: str | Path, chunk_size: Optional[int] = None) -> bytes:
    """Read an entire input source into memory."""
    with open_input(designator) as stream:
        return read_stream(stream, chunk_size or DEFAULT_CHUNK_SIZE)


def read_input_text(designator: str | Path, chunk_size: Optional[int] = None) -> str:
    """
    Read an entire input source as UTF-8 text.

    Raises:
        InvalidEncodingError: If the bytes are not valid UTF-8
    """
    data = read_input(designator, chunk_size)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError("Input is not valid UTF-8 text") from e


def read_message(message: Message) -> bytes:
    """Return a message as bytes, reading it to EOF if it is a stream."""
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    return read_stream(message)
