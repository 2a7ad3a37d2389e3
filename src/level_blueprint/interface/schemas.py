"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LevelBlueprintRequest(BaseModel):
    """Request body for ``POST /api/level-blueprint``.

    Every field is optional here so that presence checks happen in the
    domain layer, in order, with their own error responses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    api_key: str | None = Field(default=None, alias="apiKey")
    genre: str | None = None
    camera: str | None = None
    stage_position: str | None = Field(default=None, alias="stagePosition")
    playtime: str | None = None
    difficulty: str | None = None
    focus: str | None = None
    theme_keywords: str | None = Field(default=None, alias="themeKeywords")
    count: int | float | str | None = None
    extra_notes: str | None = Field(default=None, alias="extraNotes")


class LevelBlueprintResponse(BaseModel):
    """Successful response from ``POST /api/level-blueprint``."""

    content: str


class ErrorResponse(BaseModel):
    """Error envelope returned on all failure paths."""

    error: str
    message: str | None = None
    detail: str | None = None
