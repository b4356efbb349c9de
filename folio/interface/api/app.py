"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config import Settings
from folio.interface.api.routes import admin, comments, health
from folio.util.di.container import create_container, setup_di
from folio.util.observability import instrument_fastapi


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, scripts/start_app.py handles this.
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Folio API",
        description="Backend API for the Folio portfolio site - blog comments and moderation",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # The admin panel sends its session cookie, so credentials are allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
