from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from engcalc.api.routes import formulas
from engcalc.core.config import get_settings
from engcalc.core.exceptions import register_exception_handlers
from engcalc.core.logging import configure_logging
from engcalc.core.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """
    Application factory for the Engineering Calculator backend.
    Every evaluable formula is served as a query-parameterised GET under /api.
    """

    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Engineering formulas with step-by-step work shown.",
        version=settings.api_version,
    )

    cors_origins = settings.resolved_cors_origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(formulas.router)

    @app.get("/", tags=["info"])
    async def api_info() -> dict[str, Any]:
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "endpoints": [
                "/health",
                "/api/health",
                "/api/categories",
                "/api/formulas",
                "/api/formulas/{formula_id}",
                "/api/{formula_id}",
            ],
        }

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
