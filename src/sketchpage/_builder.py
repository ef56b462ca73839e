"""Build the chat-completion request from an image and prompts."""

from __future__ import annotations

import base64
import binascii
import mimetypes
from pathlib import Path

from sketchpage._config import GatewayConfig
from sketchpage._exceptions import PreconditionError
from sketchpage._types import ChatRequest, ImagePayload, Message, TextPart

DEFAULT_IMAGE = "contoso_layout_sketch.jpg"
DEFAULT_MEDIA_TYPE = "image/jpeg"

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful frontend developer who can write HTML and CSS code "
    "from user descriptions and images."
)
DEFAULT_INSTRUCTION = (
    "Write HTML and CSS code for a web page based on the following hand-drawn sketch."
)


def guess_media_type(path: str | Path) -> str:
    media_type, _ = mimetypes.guess_type(str(path))
    if media_type and media_type.startswith("image/"):
        return media_type
    return DEFAULT_MEDIA_TYPE


def load_image(path: str | Path, media_type: str | None = None) -> ImagePayload:
    """Read an image file once, resolving relative paths against the cwd."""
    resolved = Path(path).expanduser()
    if not resolved.is_absolute():
        resolved = Path.cwd() / resolved
    if not resolved.exists():
        raise PreconditionError("image", f"Image file not found at {resolved}")
    if not resolved.is_file():
        raise PreconditionError("image", f"Image path is not a regular file: {resolved}")
    try:
        data = resolved.read_bytes()
    except OSError as exc:
        raise PreconditionError("image", f"Could not read image file {resolved}: {exc}") from exc
    return ImagePayload(data=data, media_type=media_type or guess_media_type(resolved))


def encode_data_uri(data: bytes, media_type: str = DEFAULT_MEDIA_TYPE) -> str:
    return ImagePayload(data=data, media_type=media_type).to_data_uri()


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a base64 data URI into ``(media_type, data)``."""
    if not uri.startswith("data:"):
        raise ValueError("not a data URI")
    header, sep, encoded = uri[len("data:") :].partition(",")
    if not sep or not header.endswith(";base64"):
        raise ValueError("only base64 data URIs are supported")
    media_type = header[: -len(";base64")]
    try:
        return media_type, base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 payload: {exc}") from exc


def build_request(
    image: ImagePayload,
    instruction: str = DEFAULT_INSTRUCTION,
    *,
    system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    config: GatewayConfig | None = None,
) -> ChatRequest:
    """Assemble a validated request. Performs no I/O."""
    cfg = config or GatewayConfig()
    return ChatRequest(
        messages=(
            Message(role="system", content=system_prompt),
            Message(role="user", content=(TextPart(text=instruction), image.to_part())),
        ),
        model=cfg.model,
        temperature=cfg.temperature,
        top_p=cfg.top_p,
        max_tokens=cfg.max_tokens,
    )
