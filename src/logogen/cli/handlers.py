"""
Error handling for the CLI.

Maps library exceptions to exit codes and user-facing messages. Upstream
failures and empty responses share one generic retry-later message; the
distinction is kept in the logs.
"""

import sys
from collections.abc import Callable

import click

from logogen import (
    ConfigurationError,
    LogogenError,
    NoImageDataError,
    UpstreamError,
    ValidationError,
)
from logogen.cli import output
from logogen.cli.utils import EXIT_UPSTREAM, EXIT_VALIDATION_OR_CONFIG
from logogen.logging_config import get_logger

logger = get_logger(__name__)

_RETRY_LATER = {
    "generate": "An error occurred while generating the logo. Please try again later.",
    "refine": "An error occurred while refining the logo. Please try again later.",
}
_UNEXPECTED = {
    "generate": "An unexpected error occurred while saving the generated logo.",
    "refine": "An unexpected error occurred while saving the refined logo.",
}


def map_exception_to_exit(exc: BaseException, action: str = "generate") -> tuple[int, str]:
    """Map an exception to (exit_code, user_message). Raw error text is never shown."""
    if isinstance(exc, ValidationError):
        msg = exc.args[0] if exc.args else "Validation failed."
        if getattr(exc, "field", None):
            msg = f"{msg} (field: {exc.field})"
        return (EXIT_VALIDATION_OR_CONFIG, msg)
    if isinstance(exc, ConfigurationError):
        return (EXIT_VALIDATION_OR_CONFIG, exc.args[0] if exc.args else "Invalid configuration.")
    if isinstance(exc, (UpstreamError, NoImageDataError)):
        return (EXIT_UPSTREAM, _RETRY_LATER.get(action, _RETRY_LATER["generate"]))
    if isinstance(exc, LogogenError):
        return (EXIT_UPSTREAM, exc.args[0] if exc.args else "An error occurred.")
    return (EXIT_UPSTREAM, _UNEXPECTED.get(action, _UNEXPECTED["generate"]))


def run_with_error_handling(
    fn: Callable[[], None],
    *,
    action: str = "generate",
    quiet: bool = False,
) -> None:
    """
    Run fn(); on exception map to exit code and message, print and sys.exit.
    Keeps the command bodies free of try/except for known errors.
    """
    try:
        fn()
    except Exception as e:
        if isinstance(e, (UpstreamError, NoImageDataError)):
            logger.debug("%s failed: %s (%s)", action, e, type(e).__name__)
        elif not isinstance(e, LogogenError):
            # Raw detail only with -vv
            logger.debug("Unexpected error during %s", action, exc_info=True)
        code, msg = map_exception_to_exit(e, action)
        if quiet:
            click.echo(msg, err=True)
        else:
            output.print_error(msg)
        sys.exit(code)


__all__ = [
    "map_exception_to_exit",
    "run_with_error_handling",
]
