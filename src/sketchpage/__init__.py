"""sketchpage: turn an image into generated text via a hosted chat-completions model."""

from sketchpage._builder import (
    DEFAULT_INSTRUCTION,
    DEFAULT_SYSTEM_PROMPT,
    build_request,
    decode_data_uri,
    encode_data_uri,
    guess_media_type,
    load_image,
)
from sketchpage._config import GatewayConfig, resolve_credential
from sketchpage._exceptions import APIError, PreconditionError, TransportError
from sketchpage._gateway import InferenceGateway
from sketchpage._presenter import exit_code, present
from sketchpage._types import (
    Candidate,
    ChatRequest,
    Failure,
    FailureKind,
    ImagePart,
    ImagePayload,
    Message,
    Result,
    Success,
    TextPart,
)

__all__ = [
    "DEFAULT_INSTRUCTION",
    "DEFAULT_SYSTEM_PROMPT",
    "APIError",
    "Candidate",
    "ChatRequest",
    "Failure",
    "FailureKind",
    "GatewayConfig",
    "ImagePart",
    "ImagePayload",
    "InferenceGateway",
    "Message",
    "PreconditionError",
    "Result",
    "Success",
    "TextPart",
    "TransportError",
    "build_request",
    "decode_data_uri",
    "encode_data_uri",
    "exit_code",
    "guess_media_type",
    "load_image",
    "present",
    "resolve_credential",
]
