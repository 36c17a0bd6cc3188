"""
Tempo Worklogs API - Main FastAPI application
"""

from fastapi import FastAPI

from .. import __version__
from .routers import worklogs


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Tempo Worklogs API",
        description="Aggregate Tempo worklogs over a date range, enriched with Jira issue keys.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.include_router(worklogs.router, prefix="/api/worklogs", tags=["worklogs"])

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "version": __version__}

    return app


# Create the default app instance
app = create_app()
