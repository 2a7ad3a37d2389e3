"""Generate-level-blueprints use case.

Validates the caller's parameters, assembles the prompt pair and delegates
the single completion call to the injected :class:`LlmGateway`.
"""

from __future__ import annotations

import logging
from typing import Any

from level_blueprint.domain.entities import BlueprintResult, BlueprintVariant
from level_blueprint.domain.ports.llm_gateway import LlmGateway
from level_blueprint.domain.value_objects import ApiKey, LevelBrief
from level_blueprint.services.prompt_templates import build_user_prompt, system_prompt

logger = logging.getLogger(__name__)


class GenerateBlueprintsUseCase:
    """Turns one level-design request into one blueprint document.

    Parameters
    ----------
    llm_gateway:
        Adapter that can send prompts to an LLM.
    variant:
        Output contract to request from the model.
    """

    def __init__(
        self,
        llm_gateway: LlmGateway,
        variant: BlueprintVariant = BlueprintVariant.WITH_LAYOUT_DATA,
    ) -> None:
        self._llm = llm_gateway
        self._variant = variant
        self._system_prompt = system_prompt(variant)

    async def execute(self, api_key: str | None, **fields: Any) -> BlueprintResult:
        """Validate, build the prompt and return the model's raw text.

        The credential is checked before the level fields; both checks run
        before any upstream call.
        """
        key = ApiKey.from_string(api_key)
        brief = LevelBrief.from_fields(**fields)

        logger.info(
            "Generating %d blueprint(s): genre=%s camera=%s variant=%s",
            brief.count,
            brief.genre,
            brief.camera,
            self._variant.value,
        )
        user_prompt = build_user_prompt(brief, self._variant)
        content = await self._llm.complete(self._system_prompt, user_prompt, api_key=key.value)

        logger.info("Blueprint generated (%d chars)", len(content))
        return BlueprintResult(content=content)
