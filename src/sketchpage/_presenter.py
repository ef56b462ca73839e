"""Render a Result for the terminal."""

from __future__ import annotations

import json

from sketchpage._types import Failure, Result, Success


def _format_raw(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return json.dumps(raw, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(raw)


def present(result: Result) -> str:
    """Return the first candidate's text, or a stage-labelled diagnostic."""
    match result:
        case Success():
            return result.text
        case Failure(kind=kind, stage=stage, message=message):
            lines = [f"error [{kind.value}] during {stage}: {message}"]
            if result.status_code is not None:
                lines.append(f"HTTP status: {result.status_code}")
            if result.raw is not None:
                lines.append(f"response body: {_format_raw(result.raw)}")
            return "\n".join(lines)
        case _:
            raise TypeError(f"unexpected result type {type(result).__name__}")


def exit_code(result: Result) -> int:
    match result:
        case Success():
            return 0
        case Failure():
            return 1
        case _:
            raise TypeError(f"unexpected result type {type(result).__name__}")
