"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from level_blueprint.domain.exceptions import MissingCredentialError, MissingFieldError

MIN_LEVEL_COUNT = 1
MAX_LEVEL_COUNT = 10

NO_THEME_KEYWORDS = "none"
NO_EXTRA_NOTES = "No additional notes."

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def normalize_count(raw: Any) -> int:
    """Parse the leading integer of *raw* and clamp it to ``[1, 10]``.

    Unparseable or non-positive values fall back to 1.
    """
    match = _LEADING_INT_RE.match(str(raw)) if raw is not None else None
    value = int(match.group(1)) if match else 0
    if value < MIN_LEVEL_COUNT:
        value = MIN_LEVEL_COUNT
    return min(value, MAX_LEVEL_COUNT)


@dataclass(frozen=True, slots=True)
class ApiKey:
    """Caller-supplied upstream credential, trimmed and non-empty."""

    value: str

    @classmethod
    def from_string(cls, raw: str | None) -> ApiKey:
        key = (raw or "").strip()
        if not key:
            raise MissingCredentialError(
                "Please send your OpenAI API key in the 'apiKey' field."
            )
        return cls(value=key)

    def __repr__(self) -> str:
        return "ApiKey(value='***')"


@dataclass(frozen=True, slots=True)
class LevelBrief:
    """Validated level-design parameters ready for prompt assembly.

    Required fields are checked for presence only (``None``, ``""`` and ``0``
    count as missing); their content is passed through verbatim.
    """

    genre: str
    camera: str
    stage_position: str
    playtime: str
    difficulty: str
    focus: str
    count: int
    theme_keywords: str = NO_THEME_KEYWORDS
    extra_notes: str = NO_EXTRA_NOTES

    @classmethod
    def from_fields(
        cls,
        *,
        genre: Any,
        camera: Any,
        stage_position: Any,
        playtime: Any,
        difficulty: Any,
        focus: Any,
        count: Any,
        theme_keywords: Any = None,
        extra_notes: Any = None,
    ) -> LevelBrief:
        """Check presence of every required field and apply the defaults."""
        required = (genre, camera, stage_position, playtime, difficulty, focus, count)
        if not all(required):
            raise MissingFieldError("Missing required fields")

        notes = str(extra_notes).strip() if extra_notes else ""
        return cls(
            genre=str(genre),
            camera=str(camera),
            stage_position=str(stage_position),
            playtime=str(playtime),
            difficulty=str(difficulty),
            focus=str(focus),
            count=normalize_count(count),
            theme_keywords=str(theme_keywords) if theme_keywords else NO_THEME_KEYWORDS,
            extra_notes=notes or NO_EXTRA_NOTES,
        )
