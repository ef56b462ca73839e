"""02 - Async request with a custom prompt.

Same single request, awaited through the httpx-backed ``asend``, with the
result variants handled explicitly.
"""

import asyncio

from sketchpage import (
    Failure,
    GatewayConfig,
    InferenceGateway,
    Success,
    build_request,
    load_image,
    resolve_credential,
)


async def main() -> None:
    config = GatewayConfig(temperature=0.2)
    gateway = InferenceGateway(config, resolve_credential())
    request = build_request(
        load_image("photo.png"),
        "List every object visible in this image.",
        system_prompt="You are a precise visual inventory assistant.",
        config=config,
    )
    match await gateway.asend(request):
        case Success() as ok:
            print(ok.text)
        case Failure(kind=kind, message=message):
            print(f"{kind.value}: {message}")


asyncio.run(main())
