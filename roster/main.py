from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.errors import register_exception_handlers
from roster.api.v1.routers import api_router, health_router
from roster.core.config import get_settings
from roster.core.constants import SERVICE_VERSION
from roster.core.logging import configure_logging
from roster.database.session import dispose_engine

# Structured logging (ECS JSON format)
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Graceful shutdown
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Character roster CRUD service",
        version=SERVICE_VERSION,
        docs_url=f"{settings.api_prefix}/docs",
        openapi_url=f"{settings.api_prefix}/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


__all__ = ["app", "create_app"]
