import io
import sys

import pytest

from rcli.core.config import ToolkitConfig


@pytest.fixture(autouse=True)
def fresh_config():
    ToolkitConfig.reset_instance()
    yield
    ToolkitConfig.reset_instance()


@pytest.fixture
def stdin_bytes(monkeypatch):
    """Replace stdin with one that yields the given bytes."""

    def _set(data: bytes):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _set


@pytest.fixture
def aead_key():
    return bytes(range(32))


@pytest.fixture
def aead_nonce():
    return b"\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09\x0a\x0b"
