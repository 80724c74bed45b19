"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from image_service.routers import playground, progress, shapes

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Image Service",
        description=(
            "On-demand SVG generators: progress bars, progress donuts, "
            "star ratings, badges and gradients, driven by query parameters."
        ),
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    # Preview page, hidden from API docs
    app.include_router(playground.router, include_in_schema=False)

    # Image generators (public)
    for r in [progress, shapes]:
        app.include_router(r.router)

    logger.debug("Image service app created")
    return app
