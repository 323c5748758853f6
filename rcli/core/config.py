"""
Toolkit Configuration
=====================

Immutable, environment-aware configuration for the text engine.

Features:
- Immutable configuration after initialization
- Environment variable override support (RCLI_ prefix)
- Key material and nonces are never read from the environment
- Type-safe configuration access
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Any, Optional


_SENSITIVE_KEYS: Final[frozenset[str]] = frozenset({
    "password", "secret", "key", "token", "nonce",
    "private", "credential", "auth",
})

# Fixed by BLAKE3 keyed mode
MAC_KEY_SIZE: Final[int] = 32

# Password generator takes a u8 length
MAX_GENPASS_LENGTH: Final[int] = 255


def _is_sensitive_key(key: str) -> bool:
    """Check if a configuration key might contain sensitive data."""
    key_lower = key.lower()
    return any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS)


@dataclass(frozen=True, slots=True)
class CryptoConfig:
    """Immutable engine configuration."""

    mac_key_size: int = MAC_KEY_SIZE
    default_nonce: str = "000000000000"
    genpass_length: int = 32
    read_chunk_size: int = 64 * 1024

    def __post_init__(self) -> None:
        """Validate engine settings."""
        if self.mac_key_size != MAC_KEY_SIZE:
            raise ValueError(f"MAC key size must be {MAC_KEY_SIZE} bytes")
        if self.genpass_length < MAC_KEY_SIZE:
            raise ValueError(
                f"Generated MAC key length must be at least {MAC_KEY_SIZE} characters"
            )
        if self.genpass_length > MAX_GENPASS_LENGTH:
            raise ValueError(
                f"Generated MAC key length must be at most {MAX_GENPASS_LENGTH} characters"
            )
        if self.read_chunk_size <= 0:
            raise ValueError("Read chunk size must be positive")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Immutable logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%H:%M:%S"
    enable_console: bool = True
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate logging settings."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {self.level}")


class ToolkitConfig:
    """
    Centralized, immutable configuration loader with environment override support.

    Usage:
        config = ToolkitConfig.load()
        chunk = config.crypto.read_chunk_size
        level = config.logging.level
    """

    __slots__ = ("_crypto", "_logging", "_frozen")

    _instance: Optional[ToolkitConfig] = None

    def __init__(
        self,
        crypto: Optional[CryptoConfig] = None,
        logging: Optional[LoggingConfig] = None,
    ) -> None:
        """Initialize configuration. Use ToolkitConfig.load() for standard initialization."""
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_crypto", crypto or CryptoConfig())
        object.__setattr__(self, "_logging", logging or LoggingConfig())
        object.__setattr__(self, "_frozen", True)

    @property
    def crypto(self) -> CryptoConfig:
        """Get engine configuration."""
        return self._crypto

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._logging

    @classmethod
    def load(cls, env_prefix: str = "RCLI") -> ToolkitConfig:
        """
        Load configuration with environment variable overrides.

        Environment variables use the prefix and double underscores
        between section and key.

        Examples:
            RCLI_LOGGING__LEVEL=DEBUG
            RCLI_LOGGING__LOG_FILE=/var/log/rcli.log
            RCLI_CRYPTO__READ_CHUNK_SIZE=1048576

        Args:
            env_prefix: Prefix for environment variables (default: RCLI)

        Returns:
            Configured ToolkitConfig instance
        """
        env_overrides = cls._parse_env_overrides(env_prefix)

        crypto_kwargs: dict[str, Any] = {}
        if "crypto.genpass_length" in env_overrides:
            crypto_kwargs["genpass_length"] = int(
                env_overrides["crypto.genpass_length"]
            )
        if "crypto.read_chunk_size" in env_overrides:
            crypto_kwargs["read_chunk_size"] = int(
                env_overrides["crypto.read_chunk_size"]
            )

        logging_kwargs: dict[str, Any] = {}
        if "logging.level" in env_overrides:
            logging_kwargs["level"] = env_overrides["logging.level"]
        if "logging.enable_console" in env_overrides:
            logging_kwargs["enable_console"] = env_overrides["logging.enable_console"].lower() == "true"
        if "logging.log_file" in env_overrides:
            logging_kwargs["log_file"] = Path(env_overrides["logging.log_file"])

        return cls(
            crypto=CryptoConfig(**crypto_kwargs) if crypto_kwargs else None,
            logging=LoggingConfig(**logging_kwargs) if logging_kwargs else None,
        )

    @staticmethod
    def _parse_env_overrides(prefix: str) -> dict[str, str]:
        """Parse environment variables with the given prefix."""
        overrides: dict[str, str] = {}
        prefix_upper = f"{prefix.upper()}_"

        for key, value in os.environ.items():
            if key.startswith(prefix_upper):
                # RCLI_SECTION__KEY -> section.key
                config_key = key[len(prefix_upper):].lower().replace("__", ".")

                # Key material is never taken from the environment
                if _is_sensitive_key(config_key):
                    continue

                overrides[config_key] = value

        return overrides

    @classmethod
    def get_instance(cls) -> ToolkitConfig:
        """
        Get or create the singleton configuration instance.

        Returns:
            The global ToolkitConfig instance
        """
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance. Use only for testing."""
        cls._instance = None

    def __repr__(self) -> str:
        return f"ToolkitConfig(level={self._logging.level}, chunk={self._crypto.read_chunk_size})"

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, "_frozen") and self._frozen:
            raise AttributeError("ToolkitConfig is immutable after initialization")
        super().__setattr__(name, value)
