"""
rcli - Text Signing and Encryption Toolkit
==========================================

Signs, verifies, encrypts and decrypts byte streams, and manages the
key material for each algorithm.

Notice:
- Key material is never logged
- Binary results are returned as URL-safe unpadded base64
- Decryption fails closed on authentication errors
"""

from rcli.core.config import ToolkitConfig
from rcli.core.logging import configure_logging, get_secure_logger
from rcli.core.text import (
    process_decrypt,
    process_encrypt,
    process_generate_key,
    process_text_sign,
    process_text_verify,
)

__version__ = "0.1.0"

__all__ = [
    "ToolkitConfig",
    "configure_logging",
    "get_secure_logger",
    "process_decrypt",
    "process_encrypt",
    "process_generate_key",
    "process_text_sign",
    "process_text_verify",
    "__version__",
]
