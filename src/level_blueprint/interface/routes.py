"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from level_blueprint.domain.exceptions import LevelBlueprintError, UnexpectedError
from level_blueprint.interface.dependencies import get_use_case
from level_blueprint.interface.schemas import (
    ErrorResponse,
    LevelBlueprintRequest,
    LevelBlueprintResponse,
)
from level_blueprint.services.generate_blueprints import GenerateBlueprintsUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/level-blueprint",
    response_model=LevelBlueprintResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing API key or required fields"},
        500: {"model": ErrorResponse, "description": "Upstream or server error"},
    },
)
async def generate_level_blueprints(
    body: LevelBlueprintRequest | None = None,
    use_case: GenerateBlueprintsUseCase = Depends(get_use_case),
) -> LevelBlueprintResponse:
    """Generate level blueprints from the given design parameters."""
    # A missing body is treated like an empty one so the key check reports it.
    body = body or LevelBlueprintRequest()
    try:
        result = await use_case.execute(
            body.api_key,
            genre=body.genre,
            camera=body.camera,
            stage_position=body.stage_position,
            playtime=body.playtime,
            difficulty=body.difficulty,
            focus=body.focus,
            count=body.count,
            theme_keywords=body.theme_keywords,
            extra_notes=body.extra_notes,
        )
    except LevelBlueprintError:
        raise
    except Exception as exc:
        logger.exception("Server error")
        raise UnexpectedError(str(exc)) from exc
    return LevelBlueprintResponse(content=result.content)
