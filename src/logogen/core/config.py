"""
Configuration management for logogen.

This module handles the API key, model selection, and transport settings.
Configuration is loaded once at process start and passed explicitly to the
client; there is no module-level shared instance.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from logogen.logging_config import get_logger
from logogen.utils.exceptions import ConfigurationError

logger = get_logger(__name__)

# Load environment variables from .env file
load_dotenv()

# Default configuration constants
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_TIMEOUT = 120  # seconds; enforced by the transport, not the client

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


@dataclass
class Config:
    """Configuration for logogen."""

    # API Configuration (api_key excluded from repr to avoid leaking secrets)
    api_key: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL

    # Transport timeout (seconds)
    request_timeout: int = DEFAULT_TIMEOUT

    # Debug: log raw API payload/response with image data truncated
    debug_api: bool = False

    _validated: bool = field(default=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create a Config instance from environment variables.

        Environment variables:
            GEMINI_API_KEY: Required; API_KEY is accepted as a fallback
            LOGOGEN_MODEL: Optional image model ID
            LOGOGEN_BASE_URL: Optional API base URL
            LOGOGEN_TIMEOUT: Optional request timeout in seconds
            LOGOGEN_DEBUG_API: Optional; 1/true/yes logs truncated payloads

        Returns:
            Config instance populated from environment

        Raises:
            ConfigurationError: If LOGOGEN_TIMEOUT is not an integer
        """
        api_key = ""
        for name in API_KEY_ENV_VARS:
            api_key = os.getenv(name, "").strip()
            if api_key:
                break

        raw_timeout = os.getenv("LOGOGEN_TIMEOUT", "").strip()
        try:
            timeout = int(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(
                f"LOGOGEN_TIMEOUT must be an integer number of seconds, got {raw_timeout!r}."
            ) from e

        debug_api = os.getenv("LOGOGEN_DEBUG_API", "").strip().lower() in ("1", "true", "yes")

        return cls(
            api_key=api_key,
            base_url=os.getenv("LOGOGEN_BASE_URL") or DEFAULT_BASE_URL,
            model=os.getenv("LOGOGEN_MODEL") or DEFAULT_MODEL,
            request_timeout=timeout,
            debug_api=debug_api,
        )

    def validate(self) -> None:
        """
        Validate the configuration. Call once at startup; a failure is fatal.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        logger.debug("Validating config")

        if not self.api_key:
            raise ConfigurationError(
                "Gemini API key is required. "
                "Set GEMINI_API_KEY (or API_KEY) environment variable or provide it explicitly."
            )
        if not self.model:
            raise ConfigurationError("Model ID cannot be empty")
        if not self.base_url:
            raise ConfigurationError("API base URL cannot be empty")
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}."
            )

        self._validated = True

    def is_valid(self) -> bool:
        """Return True if validate() has been called successfully."""
        return self._validated

    def set_api_key(self, api_key: str) -> None:
        """
        Set the Gemini API key.

        Raises:
            ConfigurationError: If API key is empty
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("API key cannot be empty")

        self.api_key = api_key.strip()
        self._validated = False  # Need to revalidate

    def set_model(self, model: str) -> None:
        """
        Set the image model ID.

        Raises:
            ConfigurationError: If model is empty
        """
        if not model:
            raise ConfigurationError("Model ID cannot be empty")

        self.model = model
