"""Thin HTTP helper around ``requests``: one POST, no retries."""

from __future__ import annotations

from typing import Any

import requests

from sketchpage._exceptions import APIError, TransportError


def _read_body(r: requests.Response) -> dict[str, Any] | str:
    try:
        return r.json()
    except ValueError:
        return r.text


def _raise_for_status(r: requests.Response) -> None:
    if not r.ok:
        raise APIError(r.status_code, _read_body(r))


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float = 60,
) -> dict[str, Any] | str:
    """POST JSON once and return the parsed body, or the raw text if it is not JSON.

    Raises ``APIError`` on non-2xx and ``TransportError`` when no response arrives.
    """
    try:
        r = requests.post(url, headers=headers, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"{type(exc).__name__}: {exc}") from exc
    _raise_for_status(r)
    return _read_body(r)
