import httpx
import pytest
from conftest import completion_envelope
from fastapi.testclient import TestClient

from level_blueprint.interface.app import create_app
from level_blueprint.interface.dependencies import get_use_case
from level_blueprint.services.generate_blueprints import GenerateBlueprintsUseCase

ENDPOINT = "/api/level-blueprint"


def test_root_liveness(client, upstream) -> None:
    upstream.respond = lambda request: httpx.Response(503, text="down")

    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Level Blueprint Backend is running"
    assert upstream.calls == 0


@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_missing_api_key_is_rejected(client, upstream, valid_payload, api_key) -> None:
    if api_key is None:
        del valid_payload["apiKey"]
    else:
        valid_payload["apiKey"] = api_key

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "No API key provided"
    assert "apiKey" in data["message"]
    assert upstream.calls == 0


def test_api_key_checked_before_other_fields(client, upstream) -> None:
    resp = client.post(ENDPOINT, json={"genre": "Roguelike"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "No API key provided"
    assert upstream.calls == 0


@pytest.mark.parametrize(
    "field", ["genre", "camera", "stagePosition", "playtime", "difficulty", "focus", "count"]
)
def test_missing_required_field_is_rejected(client, upstream, valid_payload, field) -> None:
    del valid_payload[field]

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields"}
    assert upstream.calls == 0


def test_empty_required_field_is_rejected(client, upstream, valid_payload) -> None:
    valid_payload["focus"] = ""

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields"}
    assert upstream.calls == 0


def test_zero_count_counts_as_missing(client, upstream, valid_payload) -> None:
    valid_payload["count"] = 0

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 400
    assert upstream.calls == 0


def test_wrongly_typed_field_is_a_client_error(client, upstream, valid_payload) -> None:
    valid_payload["genre"] = {"name": "platformer"}

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"
    assert upstream.calls == 0


def test_empty_body_reports_missing_api_key(client, upstream) -> None:
    resp = client.post(ENDPOINT)
    assert resp.status_code == 400
    assert resp.json()["error"] == "No API key provided"
    assert upstream.calls == 0


def test_numeric_field_without_api_key_reports_missing_api_key(client, upstream) -> None:
    resp = client.post(ENDPOINT, json={"genre": "Roguelike", "playtime": 15})
    assert resp.status_code == 400
    assert resp.json()["error"] == "No API key provided"
    assert upstream.calls == 0


def test_numeric_text_field_is_interpolated(client, upstream, valid_payload) -> None:
    valid_payload["playtime"] = 15

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 200
    assert "- Target playtime: 15" in upstream.last_user_prompt


def test_success_returns_upstream_content_verbatim(client, upstream, valid_payload) -> None:
    content = "## Level 1: Gears\n\n```level-json\n{\"rooms\": []}\n```\n  "
    upstream.respond = lambda request: httpx.Response(200, json=completion_envelope(content))

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 200
    assert resp.json() == {"content": content}
    assert upstream.calls == 1


def test_prompt_carries_every_field(client, upstream, valid_payload) -> None:
    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 200

    prompt = upstream.last_user_prompt
    for key in ("genre", "camera", "stagePosition", "playtime", "difficulty", "focus",
                "themeKeywords", "extraNotes"):
        assert valid_payload[key] in prompt
    assert "Generate 3 level blueprints." in prompt


@pytest.mark.parametrize("notes", [None, "", "  \n "])
def test_blank_notes_use_fallback(client, upstream, valid_payload, notes) -> None:
    if notes is None:
        del valid_payload["extraNotes"]
    else:
        valid_payload["extraNotes"] = notes

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 200
    assert "No additional notes." in upstream.last_user_prompt


@pytest.mark.parametrize(("count", "expected"), [(15, 10), (5, 5), ("7", 7), (-4, 1), ("abc", 1)])
def test_count_is_normalized(client, upstream, valid_payload, count, expected) -> None:
    valid_payload["count"] = count

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 200
    assert f"Generate {expected} level blueprints." in upstream.last_user_prompt


def test_caller_key_is_sent_upstream(client, upstream, valid_payload) -> None:
    valid_payload["apiKey"] = "  sk-caller-key  "

    client.post(ENDPOINT, json=valid_payload)
    assert upstream.requests[0].headers["authorization"] == "Bearer sk-caller-key"


def test_upstream_failure_detail_is_passed_through(client, upstream, valid_payload) -> None:
    upstream.respond = lambda request: httpx.Response(429, text="rate limited")

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 500
    assert resp.json() == {"error": "OpenAI API error", "detail": "rate limited"}
    assert upstream.calls == 1


def test_malformed_envelope_yields_empty_content(client, upstream, valid_payload) -> None:
    upstream.respond = lambda request: httpx.Response(200, json={"id": "chatcmpl-x"})

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 200
    assert resp.json() == {"content": ""}


def test_transport_failure_is_a_server_error(client, upstream, valid_payload) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    upstream.respond = refuse

    resp = client.post(ENDPOINT, json=valid_payload)
    assert resp.status_code == 500
    assert resp.json()["error"] == "Server error"
    assert resp.json()["detail"]


def test_unexpected_error_is_a_server_error(valid_payload) -> None:
    class _BrokenGateway:
        async def complete(self, system_prompt: str, user_prompt: str, *, api_key: str) -> str:
            raise RuntimeError("boom")

    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: GenerateBlueprintsUseCase(
        llm_gateway=_BrokenGateway()
    )
    client = TestClient(app)

    resp = client.post(
        ENDPOINT, json=valid_payload, headers={"Origin": "https://levels.example.com"}
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Server error", "detail": "boom"}
    assert resp.headers["access-control-allow-origin"] == "*"


def test_cross_origin_requests_are_allowed(client) -> None:
    resp = client.get("/", headers={"Origin": "https://levels.example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"
