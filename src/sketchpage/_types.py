"""Request and result types for a single multimodal chat completion."""

from __future__ import annotations

import base64
import enum
from dataclasses import dataclass, field
from typing import Any, TypeAlias

# --- Content parts ---


@dataclass(frozen=True, slots=True)
class TextPart:
    """A plain text content part."""

    text: str


@dataclass(frozen=True, slots=True)
class ImagePart:
    """An image content part referencing a URL or data URI."""

    url: str


ContentPart: TypeAlias = TextPart | ImagePart
Content: TypeAlias = str | tuple[ContentPart, ...]


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """Raw image bytes plus their MIME type."""

    data: bytes
    media_type: str = "image/jpeg"

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"

    def to_part(self) -> ImagePart:
        return ImagePart(url=self.to_data_uri())


@dataclass(frozen=True, slots=True)
class Message:
    """A chat message."""

    role: str
    content: Content = ""


def _content_to_wire(content: Content) -> str | list[dict[str, Any]]:
    if isinstance(content, str):
        return content
    parts: list[dict[str, Any]] = []
    for part in content:
        if isinstance(part, TextPart):
            parts.append({"type": "text", "text": part.text})
        else:
            parts.append({"type": "image_url", "image_url": {"url": part.url}})
    return parts


def _check_unit_interval(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


def validate_generation(model: str, temperature: float, top_p: float, max_tokens: int) -> None:
    """Raise ``ValueError`` if any generation parameter is out of range."""
    if not isinstance(model, str) or not model.strip():
        raise ValueError("model must be a non-empty string")
    _check_unit_interval("temperature", temperature)
    _check_unit_interval("top_p", top_p)
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
        raise ValueError(f"max_tokens must be a positive integer, got {max_tokens!r}")


@dataclass(frozen=True, slots=True)
class ChatRequest:
    """A system message followed by one user message holding text and an image.

    The message layout and generation parameters are checked on construction.
    """

    messages: tuple[Message, ...]
    model: str
    temperature: float = 0.7
    top_p: float = 0.95
    max_tokens: int = 500

    def __post_init__(self) -> None:
        validate_generation(self.model, self.temperature, self.top_p, self.max_tokens)
        if len(self.messages) != 2:
            raise ValueError(f"expected 2 messages, got {len(self.messages)}")
        system, user = self.messages
        if system.role != "system" or not isinstance(system.content, str):
            raise ValueError("first message must be a plain-text system message")
        if user.role != "user" or isinstance(user.content, str):
            raise ValueError("second message must be a user message with content parts")
        if (
            len(user.content) != 2
            or not isinstance(user.content[0], TextPart)
            or not isinstance(user.content[1], ImagePart)
        ):
            raise ValueError("user message must contain a text part followed by an image part")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for the chat-completions endpoint."""
        return {
            "messages": [
                {"role": m.role, "content": _content_to_wire(m.content)} for m in self.messages
            ],
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
            "model": self.model,
        }


# --- Results ---


@dataclass(frozen=True, slots=True)
class Candidate:
    """One generated completion."""

    content: str
    role: str = "assistant"
    finish_reason: str = ""


class FailureKind(enum.Enum):
    PRECONDITION = "precondition"
    TRANSPORT = "transport"
    PROVIDER = "provider"
    INTERNAL = "internal"


@dataclass(frozen=True, slots=True)
class Success:
    """A 2xx response with at least one candidate."""

    candidates: tuple[Candidate, ...]
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.candidates[0].content


@dataclass(frozen=True, slots=True)
class Failure:
    """Any failure, tagged with its kind and the pipeline stage it happened in."""

    kind: FailureKind
    stage: str
    message: str
    status_code: int | None = None
    raw: dict[str, Any] | str | None = None


Result: TypeAlias = Success | Failure
