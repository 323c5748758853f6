"""
Utils module - Input sources, validation, password generation and key files.
"""

from rcli.utils.genpass import generate_password
from rcli.utils.sources import open_input, read_input
from rcli.utils.validators import (
    ValidationError,
    validate_input_file,
    validate_output_dir,
)

__all__ = [
    "generate_password",
    "open_input",
    "read_input",
    "ValidationError",
    "validate_input_file",
    "validate_output_dir",
]
