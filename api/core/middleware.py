"""
ASGI middleware shared by every router.
"""

from __future__ import annotations

from starlette.types import ASGIApp, Receive, Scope, Send

API_PREFIX = "/api/"


class StripTrailingSlashMiddleware:
    """
    Route `/api/v1/posts/` exactly like `/api/v1/posts`, for every method.

    The SPA fallback matches any GET path, which stops Starlette's own
    slash redirect from ever running. Older clients call the API with a
    trailing slash, so the path is normalised before routing instead.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path: str = scope["path"]
            if path.startswith(API_PREFIX) and len(path) > len(API_PREFIX) and path.endswith("/"):
                stripped = path.rstrip("/")
                scope = dict(scope)
                scope["path"] = stripped
                scope["raw_path"] = stripped.encode("utf-8")
        await self.app(scope, receive, send)
