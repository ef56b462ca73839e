"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from sketchpage._config import GatewayConfig
from sketchpage._types import ImagePayload

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"

CHAT_RESPONSE: dict[str, Any] = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "<html>...</html>"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
}


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json."""

    def __init__(
        self,
        json_data: Any = None,
        status_code: int = 200,
        text: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300
        self.headers: dict[str, str] = headers or {}

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON")
        return self._json_data


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(endpoint="https://example.com", model="test-model")


@pytest.fixture
def image() -> ImagePayload:
    return ImagePayload(data=JPEG_BYTES, media_type="image/jpeg")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside an empty temp directory with no credential or overrides set."""
    monkeypatch.chdir(tmp_path)
    for var in ("GITHUB_TOKEN", "SKETCHPAGE_ENDPOINT", "SKETCHPAGE_MODEL", "SKETCHPAGE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path
