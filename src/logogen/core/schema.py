"""
Response schema for the Gemini generateContent endpoint.

Every field is optional and list items are validated lazily: only the first
candidate and its first part are ever checked, so a malformed later
candidate or part cannot hide a usable image. Extraction is total and
returns None instead of raising when the shape is unexpected.
"""

from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from logogen.core.image import ImagePayload

_M = TypeVar("_M", bound=BaseModel)


class InlineData(BaseModel):
    """Binary data embedded in a content part."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    data: str | None = None
    mime_type: str | None = Field(
        default=None, validation_alias=AliasChoices("mimeType", "mime_type")
    )


class Part(BaseModel):
    """One unit of a multi-part payload: text or inline data."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    text: str | None = None
    inline_data: InlineData | None = Field(
        default=None, validation_alias=AliasChoices("inlineData", "inline_data")
    )


class Content(BaseModel):
    model_config = {"extra": "ignore"}

    parts: list[Any] | None = None


class Candidate(BaseModel):
    """Candidate metadata; its content is validated on its own by first_part."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    finish_reason: str | None = Field(
        default=None, validation_alias=AliasChoices("finishReason", "finish_reason")
    )


class GenerateContentResponse(BaseModel):
    """Top-level response envelope; only the fields logogen reads."""

    model_config = {"extra": "ignore"}

    candidates: list[Any] | None = None


def _validate(model: type[_M], obj: Any) -> _M | None:
    try:
        return model.model_validate(obj)
    except ValidationError:
        return None


def parse_response(body: Any) -> GenerateContentResponse | None:
    """Validate the envelope of a decoded JSON body; None if it does not fit."""
    return _validate(GenerateContentResponse, body)


def _first_candidate(body: Any) -> dict[str, Any] | None:
    response = parse_response(body)
    if response is None or not response.candidates:
        return None
    candidate = response.candidates[0]
    return candidate if isinstance(candidate, dict) else None


def first_part(body: Any) -> Part | None:
    """Return the first part of the first candidate, or None if it is missing or malformed."""
    candidate = _first_candidate(body)
    if candidate is None:
        return None
    content = _validate(Content, candidate.get("content"))
    if content is None or not content.parts:
        return None
    return _validate(Part, content.parts[0])


def extract_image_payload(body: Any) -> ImagePayload | None:
    """
    Return the image in the first part of the first candidate, if any.

    Returns None when there are no candidates, no content, no parts, the
    first part has no inline data, the data is empty, or the MIME type is
    not an image type. Later candidates and parts are never looked at.
    """
    part = first_part(body)
    if part is None or part.inline_data is None:
        return None
    inline = part.inline_data
    if not inline.data or not inline.mime_type:
        return None
    if not inline.mime_type.strip().lower().startswith("image/"):
        return None
    return ImagePayload(bytes=inline.data, mime_type=inline.mime_type)


def first_finish_reason(body: Any) -> str | None:
    """Return the first candidate's finish reason, for logging."""
    candidate = _first_candidate(body)
    if candidate is None:
        return None
    parsed = _validate(Candidate, candidate)
    return parsed.finish_reason if parsed is not None else None
