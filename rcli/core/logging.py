"""
Secure Logging
==============

Logging helpers that keep key material out of log output.

Features:
- Automatic secret filtering on every handler
- Optional rotating log file
- Configuration driven setup for the ``rcli`` logger tree
"""

from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Pattern

from rcli.core.config import LoggingConfig


_SENSITIVE_PATTERNS: Final[list[tuple[str, Pattern[str]]]] = [
    ("password", re.compile(r'(?i)(password|passwd|pwd)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("secret", re.compile(r'(?i)(secret|private[_-]?key)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("key", re.compile(r'(?i)\bkey\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("nonce", re.compile(r'(?i)\bnonce\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    # Long base64/base64url runs: encoded keys, signatures, ciphertext
    ("base64_secret", re.compile(r'[A-Za-z0-9+/_-]{40,}={0,2}')),
    ("hex_secret", re.compile(r'(?i)(?:0x)?[a-f0-9]{32,}')),
]

_REDACTED_TEXT: Final[str] = "[REDACTED]"

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class SecureLogFilter(logging.Filter):
    """
    Log filter that removes sensitive information from log messages.

    Messages and string arguments are scanned for key/nonce assignments
    and long encoded blobs, which are replaced with [REDACTED].
    """

    def __init__(self, name: str = "", additional_patterns: Optional[list[Pattern[str]]] = None) -> None:
        super().__init__(name)
        self._additional_patterns = additional_patterns or []

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the record in place. The record is always kept."""
        if record.msg and isinstance(record.msg, str):
            record.msg = self._sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._sanitize(v) if isinstance(v, str) else v
                               for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._sanitize(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

    def _sanitize(self, text: str) -> str:
        """Remove sensitive data from text."""
        result = text

        for name, pattern in _SENSITIVE_PATTERNS:
            result = pattern.sub(f"{name}={_REDACTED_TEXT}", result)

        for pattern in self._additional_patterns:
            result = pattern.sub(_REDACTED_TEXT, result)

        return result


class SecureRotatingFileHandler(RotatingFileHandler):
    """Rotating file handler that creates its directory and rejects traversal."""

    def __init__(
        self,
        filename: str | Path,
        mode: str = "a",
        maxBytes: int = 10 * 1024 * 1024,
        backupCount: int = 5,
        encoding: str = "utf-8",
    ) -> None:
        if ".." in Path(filename).parts:
            raise ValueError("Log path cannot contain path traversal sequences")

        log_path = Path(filename).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        super().__init__(
            str(log_path),
            mode=mode,
            maxBytes=maxBytes,
            backupCount=backupCount,
            encoding=encoding,
        )


def get_secure_logger(
    name: str,
    level: str = "INFO",
    enable_console: bool = True,
    log_file: Optional[Path] = None,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = "%H:%M:%S",
    max_file_size: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Create a logger with automatic secret filtering.

    Args:
        name: Logger name (typically "rcli" or a child of it)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to write to stderr
        log_file: Optional path of a rotating log file
        fmt: Record format string
        datefmt: Timestamp format string
        max_file_size: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    secure_filter = SecureLogFilter()
    formatter = logging.Formatter(fmt, datefmt=datefmt)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(secure_filter)
        logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = SecureRotatingFileHandler(
            filename=log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(secure_filter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the ``rcli`` logger tree from a LoggingConfig.

    Call once at program start. Library code only ever calls
    logging.getLogger("rcli.<area>").
    """
    config = config or LoggingConfig()
    return get_secure_logger(
        "rcli",
        level=config.level,
        enable_console=config.enable_console,
        log_file=config.log_file,
        fmt=config.format,
        datefmt=config.date_format,
    )
