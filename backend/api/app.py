"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import configure_logging

from .dependencies import get_container
from .middleware.auth import validation_error_handler
from .models.responses import ApiError, api_error_handler
from .routes import health
from modules.auth.routes import router as auth_router
from modules.categories.routes import router as categories_router
from modules.orders.routes import router as orders_router
from modules.products.routes import router as products_router
from modules.users.routes import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Fails startup on missing configuration and makes sure the unique
    indexes exist before the first request.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    settings.validate_required()

    container = get_container()
    container.user_repository.ensure_indexes()
    container.category_repository.ensure_indexes()

    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Storefront catalogue, account and order API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
    app.include_router(orders_router, prefix="/api/v1/auth", tags=["orders"])
    app.include_router(users_router, prefix="/api/v1/user", tags=["users"])
    app.include_router(categories_router, prefix="/api/v1/category", tags=["categories"])
    app.include_router(products_router, prefix="/api/v1/product", tags=["products"])

    return app


# Application instance for uvicorn
app = create_app()
