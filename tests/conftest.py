from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from level_blueprint.domain.entities import BlueprintVariant
from level_blueprint.infrastructure.openai_adapter import OpenAIAdapter
from level_blueprint.interface.app import create_app
from level_blueprint.interface.dependencies import get_use_case
from level_blueprint.services.generate_blueprints import GenerateBlueprintsUseCase


def completion_envelope(content: str) -> dict[str, Any]:
    return {
        "id": "chatcmpl-test-123",
        "object": "chat.completion",
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


class FakeUpstream:
    """Records chat-completion calls and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=completion_envelope("## Level 1: Test")
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    @property
    def last_user_prompt(self) -> str:
        return self.last_body["messages"][1]["content"]

    def adapter(self) -> OpenAIAdapter:
        return OpenAIAdapter(
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        )


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def client(upstream: FakeUpstream) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: GenerateBlueprintsUseCase(
        llm_gateway=upstream.adapter(),
        variant=BlueprintVariant.WITH_LAYOUT_DATA,
    )
    return TestClient(app)


@pytest.fixture()
def valid_payload() -> dict[str, Any]:
    return {
        "apiKey": "sk-test-123",
        "genre": "2D Action Platformer",
        "camera": "Side-scrolling",
        "stagePosition": "Mid",
        "playtime": "8-12 minutes",
        "difficulty": "Medium-Hard",
        "focus": "Combat",
        "themeKeywords": "abandoned toy factory",
        "count": 3,
        "extraNotes": "Lean into eerie music-box motifs.",
    }
