import logging

from fastapi import FastAPI

from comics_lite.entrypoints.http.exception_handlers import register_exception_handlers
from comics_lite.entrypoints.http.routes.comics import router as comics_router
from comics_lite.entrypoints.http.routes.favorites import router as favorites_router
from comics_lite.entrypoints.http.routes.health import router as health_router

logger = logging.getLogger(__name__)


def build_app() -> FastAPI:
    app = FastAPI(
        title="Comics Lite API",
        description="""
        Backend for the comics browser.

        ## Features
        - Browse the Marvel comics catalog page by page
        - Comic detail with creator and variants fetched concurrently
        - Favorite comics stored locally

        ## Authentication
        Catalog requests are signed server-side with MARVEL_PUBLIC_KEY and
        MARVEL_PRIVATE_KEY; clients send no credentials.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(comics_router, prefix="/v1")
    app.include_router(favorites_router, prefix="/v1")

    logger.info("Comics Lite API built")
    return app


app = build_app()
