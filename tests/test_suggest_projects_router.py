"""Route tests for the suggest-projects function.

Drives the FastAPI app through ASGITransport with the upstream gateway mocked by respx.
"""

from __future__ import annotations

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from respx import MockRouter

from suggest_engine.config import Settings, get_settings
from suggest_engine.main import app

from .conftest import (
    CORS_ALLOW_HEADERS,
    CORS_ORIGIN,
    GATEWAY_URL,
    make_projects,
    tool_call_response,
)


def assert_cors(response: httpx.Response) -> None:
    assert response.headers["access-control-allow-origin"] == CORS_ORIGIN
    assert response.headers["access-control-allow-headers"] == CORS_ALLOW_HEADERS


@pytest.mark.asyncio
async def test_preflight_returns_empty_success(client: AsyncClient) -> None:
    response = await client.options("/suggest-projects")

    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/suggest-projects", "/functions/v1/suggest-projects"])
async def test_success_returns_tool_arguments_verbatim(
    client: AsyncClient, respx_mock: MockRouter, valid_body: dict, path: str
) -> None:
    projects = make_projects()
    route = respx_mock.post(GATEWAY_URL).mock(
        return_value=httpx.Response(200, json=tool_call_response(projects))
    )

    response = await client.post(path, json=valid_body)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == projects
    assert_cors(response)

    assert route.call_count == 1
    sent = json.loads(route.calls.last.request.content)
    assert [m["role"] for m in sent["messages"]] == ["system", "user"]
    assert sent["tool_choice"]["function"]["name"] == "suggest_projects"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "upstream_status, status, message",
    [
        (429, 429, "Rate limits exceeded, please try again later."),
        (402, 402, "Payment required, please add funds to your Lovable AI workspace."),
        (500, 500, "AI gateway error"),
        (400, 500, "AI gateway error"),
        (404, 500, "AI gateway error"),
    ],
)
async def test_upstream_failures_map_to_fixed_bodies(
    client: AsyncClient,
    respx_mock: MockRouter,
    valid_body: dict,
    upstream_status: int,
    status: int,
    message: str,
) -> None:
    respx_mock.post(GATEWAY_URL).mock(return_value=httpx.Response(upstream_status, text="nope"))

    response = await client.post("/suggest-projects", json=valid_body)

    assert response.status_code == status
    assert response.json() == {"error": message}
    assert_cors(response)


@pytest.mark.asyncio
async def test_missing_tool_call_is_500(
    client: AsyncClient, respx_mock: MockRouter, valid_body: dict
) -> None:
    respx_mock.post(GATEWAY_URL).mock(
        return_value=httpx.Response(200, json={"choices": [{"message": {"content": "ideas"}}]})
    )

    response = await client.post("/suggest-projects", json=valid_body)

    assert response.status_code == 500
    assert response.json() == {"error": "No tool call in response"}
    assert_cors(response)


@pytest.mark.asyncio
async def test_missing_credential_is_500_without_upstream_call(
    client: AsyncClient,
    respx_mock: MockRouter,
    valid_body: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("LOVABLE_API_KEY", "")

    response = await client.post("/suggest-projects", json=valid_body)

    assert response.status_code == 500
    assert response.json() == {"error": "LOVABLE_API_KEY is not configured"}
    assert len(respx_mock.calls) == 0
    assert_cors(response)


@pytest.mark.asyncio
async def test_missing_selection_is_400(client: AsyncClient, respx_mock: MockRouter) -> None:
    response = await client.post("/suggest-projects", json={"skillLevel": "Beginner"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: interest, department"}
    assert len(respx_mock.calls) == 0
    assert_cors(response)


@pytest.mark.asyncio
async def test_unknown_selection_is_permissive_by_default(
    client: AsyncClient, respx_mock: MockRouter, valid_body: dict
) -> None:
    respx_mock.post(GATEWAY_URL).mock(
        return_value=httpx.Response(200, json=tool_call_response(make_projects()))
    )

    response = await client.post(
        "/suggest-projects", json={**valid_body, "department": "Space Tourism"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_unknown_selection_rejected_when_catalogs_enforced(
    client: AsyncClient,
    respx_mock: MockRouter,
    valid_body: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENFORCE_CATALOGS", "true")

    response = await client.post(
        "/suggest-projects", json={**valid_body, "skillLevel": "Wizard"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Unknown selections for: skillLevel"}
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
async def test_unparseable_body_is_500(client: AsyncClient, respx_mock: MockRouter) -> None:
    response = await client.post(
        "/suggest-projects",
        content=b"not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 500
    assert response.json()["error"]
    assert_cors(response)


@pytest.mark.asyncio
async def test_health_reports_gateway_credential(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    response = await client.get("/health")
    assert response.json()["checks"]["ai_gateway"]["status"] == "ok"

    monkeypatch.setenv("LOVABLE_API_KEY", "")
    response = await client.get("/health")
    assert response.json()["status"] == "degraded"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "upstream_body",
    [
        {"choices": {"0": {}}},
        {"choices": [{"message": "text only"}]},
        {"choices": [{"message": {"tool_calls": ["oops"]}}]},
    ],
)
async def test_malformed_upstream_body_is_no_tool_call(
    client: AsyncClient, respx_mock: MockRouter, valid_body: dict, upstream_body: dict
) -> None:
    respx_mock.post(GATEWAY_URL).mock(return_value=httpx.Response(200, json=upstream_body))

    response = await client.post("/suggest-projects", json=valid_body)

    assert response.status_code == 500
    assert response.json() == {"error": "No tool call in response"}
    assert_cors(response)


@pytest.mark.asyncio
async def test_unhandled_exception_still_carries_cors(valid_body: dict) -> None:
    def broken_settings() -> Settings:
        raise RuntimeError("settings backend unavailable")

    app.dependency_overrides[get_settings] = broken_settings
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://testserver") as c:
            response = await c.post("/suggest-projects", json=valid_body)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "settings backend unavailable"}
    assert_cors(response)
