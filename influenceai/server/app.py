"""
FastAPI application factory for the InfluenceAI web app.

Creates the app with API routes, error handling, and static file serving.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from influenceai import __version__
from influenceai.config.loader import load_config

logger = logging.getLogger("influenceai.server")

STATIC_DIR = Path(__file__).parent.parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load config if the caller did not provide one."""
    if not hasattr(app.state, "config"):
        app.state.config = load_config()
    logger.info("InfluenceAI server ready (search key from $%s)", app.state.config.get("api_key_env"))
    yield


def create_app(config: dict = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="InfluenceAI API",
        description="Search-backed influence scores for public figures",
        version=__version__,
        lifespan=lifespan,
    )

    if config:
        app.state.config = config

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    # Include API routers BEFORE mounting static files
    from influenceai.server.routes.health import router as health_router
    from influenceai.server.routes.celebrity import router as celebrity_router

    app.include_router(health_router)
    app.include_router(celebrity_router)

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

        index_html = STATIC_DIR / "index.html"

        @app.get("/", include_in_schema=False)
        async def index():
            return FileResponse(index_html)

    return app
