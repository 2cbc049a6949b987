"""Shared fixtures for suggestion engine tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from suggest_engine.main import app

GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"

CORS_ORIGIN = "*"
CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"


def make_projects(count: int = 5) -> dict[str, Any]:
    return {
        "projects": [
            {
                "title": f"Classroom Helper {i}",
                "description": "A small tool that helps teachers track homework. Built for schools.",
                "difficulty": ["Easy", "Medium", "Hard"][i % 3],
                "technologies": ["React", "Supabase"],
                "estimatedTime": "2-3 weeks",
            }
            for i in range(count)
        ]
    }


def tool_call_response(arguments: Any) -> dict[str, Any]:
    """Chat-completion body carrying a single suggest_projects tool call."""
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return {
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {"name": "suggest_projects", "arguments": arguments},
                        }
                    ],
                }
            }
        ]
    }


@pytest.fixture(autouse=True)
def gateway_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configure the gateway credential and default strictness for every test."""
    monkeypatch.setenv("LOVABLE_API_KEY", "test-lovable-key")
    monkeypatch.setenv("AI_GATEWAY_URL", GATEWAY_URL)
    monkeypatch.delenv("ENFORCE_CATALOGS", raising=False)
    monkeypatch.delenv("REQUIRE_EXACT_PROJECT_COUNT", raising=False)
    monkeypatch.delenv("AI_GATEWAY_TIMEOUT", raising=False)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """In-process client for the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c


@pytest.fixture
def valid_body() -> dict[str, str]:
    return {
        "skillLevel": "Beginner",
        "interest": "Web Development",
        "department": "Education",
    }
