"""Command-line entry point: image + prompt in, generated text out."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from sketchpage._builder import (
    DEFAULT_IMAGE,
    DEFAULT_INSTRUCTION,
    DEFAULT_SYSTEM_PROMPT,
    build_request,
    load_image,
)
from sketchpage._config import DEFAULT_TOKEN_ENV, GatewayConfig, resolve_credential
from sketchpage._exceptions import PreconditionError
from sketchpage._gateway import InferenceGateway
from sketchpage._logging import setup_console_logging
from sketchpage._presenter import exit_code, present
from sketchpage._types import Failure, FailureKind, Result

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sketchpage",
        description="Send an image to a hosted multimodal chat model and print the reply.",
    )
    parser.add_argument(
        "image",
        nargs="?",
        default=DEFAULT_IMAGE,
        help=f"Image path, relative to the current directory (default: {DEFAULT_IMAGE})",
    )
    parser.add_argument("--prompt", default=DEFAULT_INSTRUCTION, help="User instruction text")
    parser.add_argument("--system", default=DEFAULT_SYSTEM_PROMPT, help="System prompt")
    parser.add_argument("--model", default=None, help="Model identifier")
    parser.add_argument("--endpoint", default=None, help="Inference endpoint base URL")
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument("--top-p", dest="top_p", type=float, default=None)
    parser.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    parser.add_argument(
        "--timeout", type=float, default=None, help="Request timeout in seconds (default: 60)"
    )
    parser.add_argument(
        "--media-type", dest="media_type", default=None, help="Override the image MIME type"
    )
    parser.add_argument(
        "--token-env",
        dest="token_env",
        default=DEFAULT_TOKEN_ENV,
        help=f"Environment variable holding the API token (default: {DEFAULT_TOKEN_ENV})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> Result:
    """Run the pipeline once, turning every failure into a ``Failure``."""
    try:
        credential = resolve_credential(args.token_env)
        config = GatewayConfig.from_env(
            endpoint=args.endpoint,
            model=args.model,
            temperature=args.temperature,
            top_p=args.top_p,
            max_tokens=args.max_tokens,
            timeout=args.timeout,
        )
        image = load_image(args.image, args.media_type)
        logger.debug("loaded %d bytes (%s)", len(image.data), image.media_type)
        request = build_request(image, args.prompt, system_prompt=args.system, config=config)
    except PreconditionError as exc:
        return Failure(FailureKind.PRECONDITION, exc.stage, str(exc))
    except ValueError as exc:
        return Failure(FailureKind.PRECONDITION, "config", str(exc))
    return InferenceGateway(config, credential).send(request)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    load_dotenv(Path.cwd() / ".env")
    setup_console_logging("DEBUG" if args.verbose else None)
    try:
        result = run(args)
        output = present(result)
    except Exception as exc:
        logger.exception("unexpected error")
        result = Failure(FailureKind.INTERNAL, "internal", f"{type(exc).__name__}: {exc}")
        output = present(result)
    code = exit_code(result)
    print(output, file=sys.stdout if code == 0 else sys.stderr)
    return code
