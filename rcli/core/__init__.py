"""
Core module - Configuration, logging, errors and the text engine.
"""

from rcli.core.config import ToolkitConfig
from rcli.core.logging import get_secure_logger, SecureLogFilter

__all__ = ["ToolkitConfig", "get_secure_logger", "SecureLogFilter"]
