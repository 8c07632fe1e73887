"""
Command-line interface for logogen.

This package contains CLI implementations using Click.
Uses only the public API: from logogen import ...
"""

from logogen.cli.commands import cli, main

__all__ = ["cli", "main"]
