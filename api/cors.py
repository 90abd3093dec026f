"""
Per-route cross-origin policy.

Read routes use ``cors``, which allows any origin. Preflight and write routes
use ``cors_with_options``, which only echoes origins from the configured
whitelist. The decision is stored on ``request.state`` and applied to the
outgoing response by ``CrossOriginMiddleware`` (and by the error handlers),
so error responses carry the same headers as successful ones.
"""

from fastapi import Request

from app.config import settings

ALLOWED_METHODS = "GET,HEAD,PUT,POST,DELETE"


def cors(request: Request) -> None:
    request.state.cors_headers = {"Access-Control-Allow-Origin": "*"}


def cors_with_options(request: Request) -> None:
    headers = {"Vary": "Origin"}
    origin = request.headers.get("origin")
    if origin and origin in settings.cors_whitelist:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
    if request.method == "OPTIONS":
        headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
        headers["Access-Control-Allow-Headers"] = ", ".join(settings.cors_allow_headers)
    request.state.cors_headers = headers


def cors_headers_for(request: Request) -> dict:
    return dict(getattr(request.state, "cors_headers", None) or {})
