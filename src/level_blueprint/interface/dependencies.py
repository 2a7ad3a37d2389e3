"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from level_blueprint.infrastructure.config import get_settings
from level_blueprint.infrastructure.openai_adapter import OpenAIAdapter
from level_blueprint.services.generate_blueprints import GenerateBlueprintsUseCase

_http_client: httpx.AsyncClient | None = None
_openai_adapter: OpenAIAdapter | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _openai_adapter  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.upstream_timeout_seconds))
    _openai_adapter = OpenAIAdapter(
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
        timeout=settings.upstream_timeout_seconds,
        http_client=_http_client,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _openai_adapter  # noqa: PLW0603

    _openai_adapter = None
    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> GenerateBlueprintsUseCase:
    """Build the use case around the shared OpenAI adapter."""
    assert _openai_adapter is not None, "startup() was not called"

    return GenerateBlueprintsUseCase(
        llm_gateway=_openai_adapter,
        variant=get_settings().blueprint_variant,
    )
