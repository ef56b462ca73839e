"""InferenceGateway: one chat-completions call, classified into a Result."""

from __future__ import annotations

import logging
from typing import Any

from sketchpage._async_http import async_post_json
from sketchpage._config import GatewayConfig
from sketchpage._exceptions import APIError, PreconditionError, TransportError
from sketchpage._http import post_json
from sketchpage._types import Candidate, ChatRequest, Failure, FailureKind, Result, Success

logger = logging.getLogger(__name__)


def error_message(body: dict[str, Any] | str | None) -> str:
    """Pull a human-readable message out of a provider error body."""
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict):
            msg = err.get("message") or err.get("code")
            if msg:
                return str(msg)
        elif isinstance(err, str) and err:
            return err
        if isinstance(body.get("message"), str) and body["message"]:
            return body["message"]
    elif isinstance(body, str) and body.strip():
        return body.strip()
    return "no error message in response body"


def _parse_response(raw: dict[str, Any] | str) -> Result:
    if not isinstance(raw, dict):
        return Failure(
            FailureKind.PROVIDER, "response", "response body is not a JSON object", raw=raw
        )
    choices = raw.get("choices")
    if not isinstance(choices, list):
        return Failure(
            FailureKind.PROVIDER, "response", "response has no list of choices", raw=raw
        )
    candidates: list[Candidate] = []
    for choice in choices:
        message = choice.get("message") if isinstance(choice, dict) else None
        if not isinstance(message, dict):
            continue
        content = message.get("content")
        if not isinstance(content, str):
            continue
        candidates.append(
            Candidate(
                content=content,
                role=message.get("role") or "assistant",
                finish_reason=choice.get("finish_reason") or "",
            )
        )
    if not candidates:
        return Failure(
            FailureKind.PROVIDER, "response", "response contains no text candidates", raw=raw
        )
    return Success(candidates=tuple(candidates), raw=raw)


class InferenceGateway:
    """Sends a ``ChatRequest`` to the configured endpoint exactly once.

    Usage::

        gateway = InferenceGateway(GatewayConfig(), token)
        result = gateway.send(request)
    """

    def __init__(self, config: GatewayConfig, credential: str) -> None:
        credential = (credential or "").strip()
        if not credential:
            raise PreconditionError("credential", "credential must be a non-empty token")
        if any(ch.isspace() for ch in credential):
            raise PreconditionError("credential", "credential must not contain whitespace")
        self._config = config
        self._url = config.url
        self._headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @staticmethod
    def _classify_error(exc: APIError | TransportError) -> Failure:
        if isinstance(exc, TransportError):
            return Failure(FailureKind.TRANSPORT, "request", str(exc))
        return Failure(
            FailureKind.PROVIDER,
            "response",
            error_message(exc.body),
            status_code=exc.status_code,
            raw=exc.body,
        )

    def send(self, request: ChatRequest) -> Result:
        """POST the request and return ``Success`` or a tagged ``Failure``."""
        logger.info("POST %s (model=%s)", self._url, request.model)
        try:
            raw = post_json(
                self._url, self._headers, request.to_payload(), timeout=self._config.timeout
            )
        except (APIError, TransportError) as exc:
            logger.debug("chat completion failed: %s", type(exc).__name__)
            return self._classify_error(exc)
        return _parse_response(raw)

    async def asend(self, request: ChatRequest) -> Result:
        """Async variant of :meth:`send` backed by ``httpx``."""
        logger.info("POST %s (model=%s)", self._url, request.model)
        try:
            raw = await async_post_json(
                self._url, self._headers, request.to_payload(), timeout=self._config.timeout
            )
        except (APIError, TransportError) as exc:
            logger.debug("chat completion failed: %s", type(exc).__name__)
            return self._classify_error(exc)
        return _parse_response(raw)
