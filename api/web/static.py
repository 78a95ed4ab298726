"""
Serving of the single-page-app bundle.

Layout expected under the dist directory (as produced by `yarn build`):
`index.html`, `favicon.ico`, `js/`, `css/`, `img/`.

- Asset directories are mounted as static files.
- Any other GET outside `/api/` gets the file with that name when it exists,
  otherwise `index.html` so the client-side router can take over.
- Unmatched requests of any method outside `/api/` get a plain-text 404
  page. API paths keep FastAPI's JSON errors.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

ASSET_DIRS = ("js", "css", "img")
API_PREFIX = "/api/"
NOT_FOUND_PAGE = "not found page"

logger = logging.getLogger(__name__)


def _is_api_path(path: str) -> bool:
    return path.startswith(API_PREFIX) or path == API_PREFIX.rstrip("/")


def _not_found_page() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_PAGE, status_code=404)


def register_static_site(app: FastAPI, dist_path: str) -> None:
    """
    Mount the bundle at `dist_path` onto `app`. Call after every API router
    is included: the SPA fallback route matches any GET path.
    """
    dist = Path(dist_path).resolve()
    if not dist.is_dir():
        logger.warning("dist_missing path=%s", dist)

    for name in ASSET_DIRS:
        directory = dist / name
        if directory.is_dir():
            app.mount(f"/{name}", StaticFiles(directory=directory), name=name)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_page(request: Request, exc: StarletteHTTPException) -> Response:
        # The GET fallback matches every path, so other methods surface as 405.
        if exc.status_code in (404, 405) and not _is_api_path(request.url.path):
            return _not_found_page()
        return await http_exception_handler(request, exc)

    @app.get("/{full_path:path}", include_in_schema=False)
    async def single_page_app(full_path: str) -> Response:
        if _is_api_path(f"/{full_path}"):
            raise StarletteHTTPException(status_code=404)

        if full_path:
            candidate = (dist / full_path).resolve()
            if candidate.is_file() and dist in candidate.parents:
                return FileResponse(candidate)

        index = dist / "index.html"
        if index.is_file():
            return FileResponse(index)
        return _not_found_page()
