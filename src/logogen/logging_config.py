"""
Logging policy for logogen.

Everything logs under the "logogen" logger. Nothing is emitted until
set_verbosity or configure_logging is called, so library users keep control
of their own logging setup.

Verbosity levels:
- 0 (default): INFO, activity and timing only
- 1: INFO plus the prompt sent to the model
- 2: DEBUG plus request URL, status and timing

Logs never carry the API key or full image data. Base64 image data in request
and response bodies is replaced with a size placeholder, and long response
text is clipped. LOGOGEN_VERBOSITY (0/1/2) is read by the CLI; its flags win.
"""

import json
import logging
import os
from typing import Any

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER_NAME = "logogen"
VERBOSITY_ENV = "LOGOGEN_VERBOSITY"

# verbosity -> (logger level, log prompt text)
VERBOSITY_LEVELS: dict[int, tuple[int, bool]] = {
    0: (logging.INFO, False),
    1: (logging.INFO, True),
    2: (logging.DEBUG, True),
}

PROMPT_LOG_MAX = 50_000
RESPONSE_LOG_MAX = 2000
IMAGE_DATA_MIN_LEN = 200
# Human-readable fields that are kept whole even when long
_KEEP_WHOLE_KEYS = frozenset({"text", "message"})

_log_prompts: bool = False
_handler_installed: bool = False


def _root() -> logging.Logger:
    global _handler_installed
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _handler_installed:
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
        _handler_installed = True
    return root


def set_verbosity(level: int) -> None:
    """Set verbosity 0, 1 or 2. Values below 0 mean 0, values above 2 mean 2."""
    global _log_prompts
    level = max(0, min(level, 2))
    log_level, _log_prompts = VERBOSITY_LEVELS[level]
    _root().setLevel(log_level)


def configure_logging(verbose_level: int = 0, quiet: bool = False) -> None:
    """
    Configure logging for a CLI run.

    quiet drops to WARNING, so only failures are logged and prompts never are.
    """
    global _log_prompts
    if quiet:
        _root().setLevel(logging.WARNING)
        _log_prompts = False
        return
    set_verbosity(verbose_level)


def log_prompts() -> bool:
    """True if prompt text is logged (verbosity 1 or 2)."""
    return _log_prompts


def get_verbosity_from_env() -> int:
    """Read LOGOGEN_VERBOSITY; anything other than "1" or "2" is 0."""
    raw = os.environ.get(VERBOSITY_ENV, "").strip()
    return int(raw) if raw in ("1", "2") else 0


def get_logger(name: str) -> logging.Logger:
    """Return a logger under logogen (e.g. logogen.core.client)."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_prompt(logger: logging.Logger, prompt: str) -> None:
    """Log the prompt sent to the model when prompt logging is on."""
    if not _log_prompts:
        return
    if len(prompt) > PROMPT_LOG_MAX:
        prompt = prompt[:PROMPT_LOG_MAX] + "..."
    logger.info("Prompt (used): %s", prompt)


def clip(text: str, limit: int = RESPONSE_LOG_MAX) -> str:
    """Clip long text (e.g. a raw response body) for a log line."""
    if len(text) > limit:
        return text[:limit] + f"... <truncated, {len(text)} chars total>"
    return text


def redact_image_data(obj: Any, parent_key: str | None = None) -> Any:
    """
    Return a copy of a JSON-like value with long strings replaced by a size
    placeholder. Values under "text" or "message" keys are kept as they are.
    """
    if isinstance(obj, dict):
        return {k: redact_image_data(v, k) for k, v in obj.items()}
    if isinstance(obj, list):
        return [redact_image_data(v) for v in obj]
    if (
        isinstance(obj, str)
        and len(obj) >= IMAGE_DATA_MIN_LEN
        and parent_key not in _KEEP_WHOLE_KEYS
    ):
        return f"<string, {len(obj)} chars>"
    return obj


def format_api_body(body: Any, indent: int | None = 2) -> str:
    """Serialize a request or response body for logging, image data redacted."""
    return json.dumps(redact_image_data(body), indent=indent, default=str)


__all__ = [
    "clip",
    "configure_logging",
    "format_api_body",
    "get_logger",
    "get_verbosity_from_env",
    "log_prompt",
    "log_prompts",
    "redact_image_data",
    "set_verbosity",
]
