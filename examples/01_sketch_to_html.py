"""01 - Sketch to HTML.

Load a hand-drawn page sketch, send it with the default frontend-developer
prompts and print the generated HTML/CSS. Requires GITHUB_TOKEN.
"""

from sketchpage import (
    GatewayConfig,
    InferenceGateway,
    build_request,
    exit_code,
    load_image,
    present,
    resolve_credential,
)

config = GatewayConfig(max_tokens=800)
gateway = InferenceGateway(config, resolve_credential())

image = load_image("contoso_layout_sketch.jpg")
request = build_request(image, config=config)

result = gateway.send(request)
print(present(result))
raise SystemExit(exit_code(result))
