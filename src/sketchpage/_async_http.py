"""Async HTTP helper using ``httpx``."""

from __future__ import annotations

from typing import Any

import httpx

from sketchpage._exceptions import APIError, TransportError


def _read_body_httpx(r: httpx.Response) -> dict[str, Any] | str:
    try:
        return r.json()
    except ValueError:
        return r.text


async def async_post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float = 60,
) -> dict[str, Any] | str:
    """POST JSON once asynchronously; same contract as ``post_json``."""
    try:
        async with httpx.AsyncClient() as client:
            r = await client.post(url, headers=headers, json=payload, timeout=timeout)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(f"{type(exc).__name__}: {exc}") from exc
    if not r.is_success:
        raise APIError(r.status_code, _read_body_httpx(r))
    return _read_body_httpx(r)
