"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from level_blueprint.interface.dependencies import shutdown, startup
from level_blueprint.interface.error_handlers import register_error_handlers
from level_blueprint.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Level Blueprint Backend",
        version="1.0.0",
        description=(
            "Turns game level-design parameters into production-ready level "
            "blueprints using the caller's own OpenAI API key."
        ),
        lifespan=_lifespan,
    )

    # Any origin may call the API; there is no allow-list.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Liveness probe ──────────────────────────────────────────────────

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Level Blueprint Backend is running"

    return app
