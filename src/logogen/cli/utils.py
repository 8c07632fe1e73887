"""
Utility functions for the CLI.

This module contains helper functions used by CLI commands,
such as path generation and exit code constants.
"""

from datetime import datetime

# Exit codes; success is click's default 0
EXIT_UPSTREAM = 1
EXIT_VALIDATION_OR_CONFIG = 2


def default_output_path(ext: str, prefix: str = "logo") -> str:
    """Return default output path: <prefix>_<YYYYMMDD>_<HHMMSS>.<ext> in current directory."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}.{ext or 'png'}"


__all__ = [
    "EXIT_UPSTREAM",
    "EXIT_VALIDATION_OR_CONFIG",
    "default_output_path",
]
