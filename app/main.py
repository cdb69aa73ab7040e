"""FastAPI application entry point"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.infrastructure.config.settings import Settings, settings as default_settings
from app.infrastructure.init_data import init_default_admin
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.stores import RecordStores, build_stores
from app.presentation.api.v1.errors import register_error_handlers
from app.presentation.api.v1.routers import assets, reports, tickets, users

logger = logging.getLogger(__name__)


def create_app(stores: Optional[RecordStores] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application

    When ``stores`` is given it is used as-is and startup skips store
    construction and default data seeding.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        setup_logging(settings)
        logger.info("🚀 Initializing %s %s...", settings.APP_NAME, settings.APP_VERSION)
        if getattr(app.state, "stores", None) is None:
            app.state.stores = build_stores(settings)
            if settings.SEED_DEFAULT_ADMIN:
                await init_default_admin(app.state.stores, settings)

        try:
            yield
        except (KeyboardInterrupt, asyncio.CancelledError):
            # Normal shutdown - don't log as error
            pass
        finally:
            logger.info("👋 Shutting down application...")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.stores = stores

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )

    register_error_handlers(app)

    app.include_router(users.router, prefix=settings.API_V1_PREFIX)
    app.include_router(tickets.router, prefix=settings.API_V1_PREFIX)
    app.include_router(assets.router, prefix=settings.API_V1_PREFIX)
    app.include_router(reports.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok"}

    return app


app = create_app()
