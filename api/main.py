from __future__ import annotations

import argparse
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from auth import router as auth_router
from categories import router as categories_router
from core import config, db
from core.log import setup_logging
from core.middleware import StripTrailingSlashMiddleware
from posts import router as posts_router
from sponsors import router as sponsors_router
from web.static import register_static_site

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One client per process; a failed ping aborts startup.
    client, database = await db.connect(
        config.mongodb_uri(),
        config.database_name(),
        server_selection_timeout_ms=config.server_selection_timeout_ms(),
        timeout_ms=config.mongodb_timeout_ms(),
    )
    app.state.mongo = client
    app.state.database = database
    try:
        yield
    finally:
        app.state.database = None
        app.state.mongo = None
        await client.close()


def create_app(*, dist_path: str | None = None) -> FastAPI:
    setup_logging(config.log_level())

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    # Allow the frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(StripTrailingSlashMiddleware)

    app.include_router(posts_router.router, prefix=API_PREFIX, tags=["posts"])
    app.include_router(categories_router.router, prefix=API_PREFIX, tags=["categories"])
    app.include_router(sponsors_router.router, prefix=API_PREFIX, tags=["sponsors"])
    app.include_router(auth_router.router, prefix=API_PREFIX, tags=["auth"])

    @app.get("/health")
    async def health(database: AsyncDatabase = Depends(db.get_database)) -> dict:
        try:
            await database.command("ping")
        except PyMongoError as exc:
            raise HTTPException(status_code=503, detail="Database is unreachable.") from exc
        return {"status": "ok"}

    register_static_site(app, dist_path or config.dist_path())
    return app


app = create_app()


def main() -> None:
    import uvicorn

    parser = argparse.ArgumentParser(description="Serve the content API and the built frontend.")
    parser.add_argument("--dburi", default=config.mongodb_uri(), help="MongoDB URI, e.g. mongodb://ip:port")
    parser.add_argument(
        "--dist",
        default=config.dist_path(),
        help="Path to the built app distribution (e.g. using yarn build --mode production)",
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=1323)
    args = parser.parse_args()

    # The lifespan reads its settings from the environment.
    os.environ["MONGODB_URI"] = args.dburi
    os.environ["DIST_PATH"] = args.dist
    uvicorn.run(create_app(dist_path=args.dist), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
