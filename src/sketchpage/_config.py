"""Gateway configuration and credential lookup."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any

from sketchpage._exceptions import PreconditionError
from sketchpage._types import validate_generation

DEFAULT_BASE_URL = "https://models.inference.ai.azure.com"
DEFAULT_PATH = "/chat/completions"
DEFAULT_MODEL = "Llama-4-Maverick-17B-128E-Instruct-FP8"
DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"

ENDPOINT_ENV = "SKETCHPAGE_ENDPOINT"
MODEL_ENV = "SKETCHPAGE_MODEL"


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    """Everything the gateway needs besides the credential."""

    endpoint: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    top_p: float = 0.95
    max_tokens: int = 500
    timeout: float = 60.0
    path: str = DEFAULT_PATH

    def __post_init__(self) -> None:
        if not self.endpoint.startswith(("https://", "http://")):
            raise ValueError(f"endpoint must be an http(s) URL, got {self.endpoint!r}")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError(f"timeout must be a positive finite number, got {self.timeout}")
        validate_generation(self.model, self.temperature, self.top_p, self.max_tokens)

    @property
    def url(self) -> str:
        return self.endpoint.rstrip("/") + self.path

    @classmethod
    def from_env(cls, **overrides: Any) -> GatewayConfig:
        """Build a config from env overrides; explicit non-``None`` kwargs win."""
        values: dict[str, Any] = {}
        if endpoint := os.environ.get(ENDPOINT_ENV):
            values["endpoint"] = endpoint
        if model := os.environ.get(MODEL_ENV):
            values["model"] = model
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def resolve_credential(env_var: str = DEFAULT_TOKEN_ENV) -> str:
    """Return the token from ``env_var`` without surrounding whitespace."""
    key = os.environ.get(env_var, "").strip()
    if not key:
        raise PreconditionError(
            "credential",
            f"{env_var} environment variable is not set. It is used as the API key for "
            f"the inference endpoint; export {env_var}=<your token> and retry.",
        )
    if any(ch.isspace() for ch in key):
        raise PreconditionError("credential", f"{env_var} must not contain whitespace")
    return key
