"""
Image payload exchanged between the client and its callers.

The payload is the base64 text and MIME type exactly as the model returned
them; no decoding or re-encoding happens unless a caller asks for it.
"""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from logogen.utils.exceptions import ValidationError


def _format_from_mime_type(mime_type: str) -> str:
    """Infer a file extension from a MIME type (e.g. 'image/jpeg' -> 'jpg')."""
    if not mime_type or not mime_type.strip().lower().startswith("image/"):
        return "png"
    subtype = mime_type.split("/", 1)[1].lower().split(";")[0].strip()
    subtype = subtype.split("+", 1)[0]  # image/svg+xml -> svg
    if subtype == "jpeg":
        return "jpg"
    return subtype or "png"


@dataclass(frozen=True)
class ImagePayload:
    """Base64-encoded image data plus its MIME type. Immutable."""

    bytes: str  # base64 text, as carried in the API envelope
    mime_type: str

    @property
    def data_url(self) -> str:
        """Data URL suitable for direct display (data:<mime>;base64,<bytes>)."""
        return f"data:{self.mime_type};base64,{self.bytes}"

    @property
    def extension(self) -> str:
        """File extension matching the MIME type, without the dot."""
        return _format_from_mime_type(self.mime_type)

    def decode(self) -> bytes:
        """Return the raw image bytes."""
        return base64.b64decode(self.bytes)

    @classmethod
    def from_file(cls, path: str | Path) -> ImagePayload:
        """
        Load a previously saved image so it can be refined.

        The MIME type is taken from the detected image format, not the
        file extension.

        Raises:
            ValidationError: If the file is not a recognizable image
        """
        raw = Path(path).read_bytes()
        try:
            with Image.open(io.BytesIO(raw)) as img:
                fmt = img.format
        except UnidentifiedImageError as e:
            raise ValidationError(f"Not a recognizable image file: {path}", field="image") from e

        mime_type = Image.MIME.get(fmt or "")
        if not mime_type:
            raise ValidationError(f"Unsupported image format {fmt!r}: {path}", field="image")
        return cls(bytes=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)
