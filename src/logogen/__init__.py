"""
logogen - AI logo generation and refinement

Describe a business, get a logo from a Gemini image model, then refine it
with free-text feedback.

Library usage:
- Build one client at startup: LogoClient.from_config(Config.from_env()).
  A missing API key raises ConfigurationError.
- client.generate(description) and client.refine(prior_image, feedback)
  return an ImagePayload or raise UpstreamError / NoImageDataError.
- Logging: control verbosity with set_verbosity(0|1|2) or configure_logging(verbose_level, quiet);
  LOGOGEN_VERBOSITY env (0/1/2) is read when the CLI runs.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("logogen")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source in development)
    __version__ = "0.0.0.dev"

from logogen.core.client import LogoClient
from logogen.core.config import DEFAULT_BASE_URL, DEFAULT_MODEL, Config
from logogen.core.image import ImagePayload
from logogen.core.prompt import (
    build_generation_prompt,
    build_refinement_prompt,
    validate_description,
    validate_feedback,
)
from logogen.logging_config import configure_logging, set_verbosity
from logogen.utils.exceptions import (
    ConfigurationError,
    LogogenError,
    NoImageDataError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "ImagePayload",
    "LogoClient",
    "LogogenError",
    "NoImageDataError",
    "UpstreamError",
    "ValidationError",
    "build_generation_prompt",
    "build_refinement_prompt",
    "configure_logging",
    "set_verbosity",
    "validate_description",
    "validate_feedback",
]
