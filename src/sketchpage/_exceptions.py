"""Exceptions raised by the loading and transport helpers."""

from __future__ import annotations

from typing import Any


class PreconditionError(Exception):
    """Raised when a required input (credential, image file) is unavailable."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(message)


class TransportError(Exception):
    """Raised when the HTTP call could not complete (DNS, TLS, refused, timeout)."""


class APIError(Exception):
    """Raised when the inference endpoint returns a non-2xx status."""

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")
