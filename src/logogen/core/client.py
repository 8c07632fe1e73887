"""
Logo generation and refinement via the Gemini generateContent API.

One LogoClient is built at process start with the API key and passed to
whatever needs it. Each operation is a single request/response round trip:
no retries, no cancellation. Every failure surfaces as UpstreamError (the
call failed) or NoImageDataError (the call succeeded without an image).
"""

import time
from dataclasses import dataclass
from types import TracebackType
from typing import Any

import requests

from logogen.core.config import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT, Config
from logogen.core.image import ImagePayload
from logogen.core.prompt import build_generation_prompt, build_refinement_prompt
from logogen.core.schema import extract_image_payload, first_finish_reason
from logogen.logging_config import clip, format_api_body, get_logger, log_prompt
from logogen.utils.exceptions import (
    ConfigurationError,
    LogogenError,
    NoImageDataError,
    UpstreamError,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Operation:
    """Per-operation messages so generation and refinement failures are told apart."""

    name: str
    failure_message: str
    no_image_message: str


_GENERATION = _Operation(
    name="generation",
    failure_message="Failed to generate logo.",
    no_image_message="Invalid response from Gemini API: No image data found.",
)
_REFINEMENT = _Operation(
    name="refinement",
    failure_message="Failed to refine logo.",
    no_image_message="Invalid response from Gemini API: No refined image data found.",
)


def _describe_status(status_code: int, model: str) -> str:
    """Map an HTTP status to a diagnostic message (logged, never shown to users)."""
    if status_code in (401, 403):
        return f"Authentication failed ({status_code}). Check your Gemini API key."
    if status_code == 404:
        return f"Model not found or endpoint unavailable: {model}"
    if status_code == 429:
        return "Rate limit or quota exceeded (429)."
    if status_code >= 500:
        return f"Gemini service error: {status_code}"
    return f"API request failed with status {status_code}"


class LogoClient:
    """Client for generating and refining logos with a Gemini image model."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        debug_api: bool = False,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Gemini API key
            model: Image model ID
            base_url: API base URL (without trailing slash)
            timeout: Transport timeout in seconds
            session: Optional requests session; one is created (and owned) if omitted
            debug_api: Log request/response bodies with image data truncated

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key:
            raise ConfigurationError("Gemini API key is required to create a LogoClient.")
        self._api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.debug_api = debug_api
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_config(cls, config: Config, session: requests.Session | None = None) -> "LogoClient":
        """
        Build a client from a Config, validating it first if needed.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if not config.is_valid():
            config.validate()
        return cls(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.request_timeout,
            session=session,
            debug_api=config.debug_api,
        )

    def __repr__(self) -> str:
        return f"LogoClient(model={self.model!r}, base_url={self.base_url!r})"

    def __enter__(self) -> "LogoClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, description: str) -> ImagePayload:
        """
        Generate a logo for a business description.

        The description is not re-validated; callers check it is non-empty.

        Raises:
            UpstreamError: If the API call fails
            NoImageDataError: If the response carries no usable image
        """
        prompt = build_generation_prompt(description)
        logger.info("Generating logo model=%s", self.model)
        log_prompt(logger, prompt)
        return self._run(_GENERATION, [{"text": prompt}])

    def refine(self, prior_image: ImagePayload, feedback: str) -> ImagePayload:
        """
        Refine a previously generated logo with free-text feedback.

        The prior image is sent first and the instruction second, so the
        model reads the text as feedback on that image. prior_image is not
        modified; a new payload is returned.

        Raises:
            UpstreamError: If the API call fails
            NoImageDataError: If the response carries no usable image
        """
        instruction = build_refinement_prompt(feedback)
        logger.info(
            "Refining logo model=%s prior_mime_type=%s", self.model, prior_image.mime_type
        )
        log_prompt(logger, instruction)
        parts = [
            {"inlineData": {"mimeType": prior_image.mime_type, "data": prior_image.bytes}},
            {"text": instruction},
        ]
        return self._run(_REFINEMENT, parts)

    def _build_payload(self, parts: list[dict[str, Any]]) -> dict[str, Any]:
        """Build the generateContent body restricted to image output."""
        return {
            "contents": [{"parts": parts}],
            "generationConfig": {"responseModalities": ["IMAGE"]},
        }

    def _do_request(self, payload: dict[str, Any], op: _Operation) -> tuple[Any, float]:
        """POST the payload and return (decoded JSON body, elapsed seconds).

        Non-200 statuses become UpstreamError; a non-JSON body becomes NoImageDataError.
        Transport exceptions propagate to _run.
        """
        logger.debug("API request url=%s model=%s timeout=%s", self.url, self.model, self.timeout)
        if self.debug_api:
            logger.info("API request payload (image data truncated): %s", format_api_body(payload))
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        start_time = time.time()
        response = self._session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        elapsed = time.time() - start_time
        logger.debug("API response status=%s time=%.2fs", response.status_code, elapsed)

        if response.status_code != 200:
            detail = _describe_status(response.status_code, self.model)
            logger.error(
                "Error calling Gemini API for logo %s: %s body=%s",
                op.name,
                detail,
                clip(response.text),
            )
            raise UpstreamError(
                op.failure_message,
                original_error=requests.HTTPError(detail, response=response),
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "Gemini API returned a non-JSON body for logo %s: %s",
                op.name,
                clip(response.text),
            )
            raise NoImageDataError(op.no_image_message, response=clip(response.text)) from e

        if self.debug_api:
            logger.info("API response (image data truncated): %s", format_api_body(body))
        return body, elapsed

    def _run(self, op: _Operation, parts: list[dict[str, Any]]) -> ImagePayload:
        """Issue one request and extract the image, normalizing every failure."""
        payload = self._build_payload(parts)
        try:
            body, elapsed = self._do_request(payload, op)
        except LogogenError:
            raise
        except requests.exceptions.RequestException as e:
            logger.error("Error calling Gemini API for logo %s: %s", op.name, e)
            raise UpstreamError(op.failure_message, original_error=e) from e
        except Exception as e:
            logger.exception("Unexpected error calling Gemini API for logo %s", op.name)
            raise UpstreamError(op.failure_message, original_error=e) from e

        image = extract_image_payload(body)
        if image is None:
            logger.error(
                "No image data in Gemini response for logo %s finish_reason=%s",
                op.name,
                first_finish_reason(body),
            )
            raise NoImageDataError(op.no_image_message, response=clip(format_api_body(body, None)))

        logger.info(
            "Logo %s done in %.1fs model=%s mime_type=%s",
            op.name,
            elapsed,
            self.model,
            image.mime_type,
        )
        return image
