"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modelhub import __version__
from modelhub.config import get_settings
from modelhub.logging_config import setup_logging
from modelhub.routers import compare, demo, inference, models


def create_app() -> FastAPI:
    """Build the app with the three façade endpoints and the catalog routes."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Model Hub API",
        description="Uniform inference, comparison and demo lookups across model providers",
        version=__version__,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Façade endpoints are served both at the root and under /api
    for prefix in ("", "/api"):
        app.include_router(inference.router, prefix=prefix)
        app.include_router(compare.router, prefix=prefix)
        app.include_router(demo.router, prefix=prefix)
    app.include_router(models.router, prefix="/api")

    @app.get("/api/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
