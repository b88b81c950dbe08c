# 📄 File: ecopilot/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts EcoPilot, connects all the different parts
# together and makes sure everything is ready to answer the mobile and web apps.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with middleware setup, router
# registration, exception handlers and external client cleanup on shutdown.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - ecopilot.shared.config.settings
# - ecopilot.api.middleware (CORS, logging, localization, slowapi rate limiting)
# - ecopilot.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from ecopilot.api.middleware import (
    REQUEST_ID_HEADER,
    LocalizationMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
    setup_rate_limiting,
)
from ecopilot.api.v1.router import api_v1_router
from ecopilot.modules.care_advice.presentation.dependencies import get_tavily_client
from ecopilot.modules.geocoding.presentation.dependencies import get_nominatim_client
from ecopilot.modules.weather.presentation.dependencies import get_openweather_client
from ecopilot.shared.config.settings import Settings, get_settings
from ecopilot.shared.core.dependencies import get_app_settings
from ecopilot.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

logger = logging.getLogger(__name__)

API_CLIENT_PROVIDERS = (get_nominatim_client, get_openweather_client, get_tavily_client)


async def close_api_clients() -> None:
    """Close the external API clients that were actually created."""
    for provider in API_CLIENT_PROVIDERS:
        if not provider.cache_info().currsize:
            continue
        client = provider()
        if client is not None:
            await client.close()
        provider.cache_clear()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Configures logging on startup and releases external API sessions on shutdown.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    log_startup_event(
        settings.APP_NAME,
        settings.APP_VERSION,
        {
            "environment": settings.ENVIRONMENT,
            "weather_api": settings.has_weather_api_key,
            "tavily_api": settings.has_tavily_api_key,
        },
    )
    logger.info("🌱 EcoPilot API startup complete")

    try:
        yield
    finally:
        try:
            await close_api_clients()
            logger.info("✅ API clients cleanup complete")
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}")
        log_shutdown_event(settings.APP_NAME)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to build the app with; the cached environment
            settings when omitted

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    custom_settings = settings is not None
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    if custom_settings:
        app.dependency_overrides[get_app_settings] = lambda: settings

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================
    # Starlette runs the last added middleware first: CORS -> logging -> localization -> rate limit

    setup_rate_limiting(app, settings)
    app.add_middleware(LocalizationMiddleware, default_locale=settings.DEFAULT_LANGUAGE)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Content-Language", "Retry-After"],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running ``python -m ecopilot.main`` or the ``ecopilot`` script.
    """
    settings = get_settings()
    uvicorn.run(
        "ecopilot.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
