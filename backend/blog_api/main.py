"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.application.pipeline import RequestPipeline
from blog_api.config import Settings, get_settings
from blog_api.infrastructure.database import Base, engine
from blog_api.infrastructure.logging.access_log import access_log_middleware
from blog_api.infrastructure.logging.log_config import setup_logging
from blog_api.presentation.api.errors import ErrorNormalizer, register_exception_handlers
from blog_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, dispose the pool."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "%s %s started in %s mode, docs at /api-docs",
        settings.app_title,
        settings.app_version,
        settings.app_env,
    )

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json",
    )
    app.state.settings = settings

    # Every failure, inside or outside the pipeline, is rendered by one normalizer
    normalizer = ErrorNormalizer(settings.app_env)
    app.state.pipeline = RequestPipeline(normalizer)
    register_exception_handlers(app, normalizer)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(access_log_middleware)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "blog_api.main:app",
        host="0.0.0.0",
        port=_settings.port,
        reload=not _settings.is_production,
    )
