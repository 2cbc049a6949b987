"""
AI gateway client for schema-constrained project suggestions.

Sends one chat-completion request with the suggest_projects tool forced,
maps upstream failures onto the error taxonomy and re-validates the
structured arguments before they are handed back to callers.
"""
import json
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from suggest_engine.config import Settings
from suggest_engine.errors import (
    ConfigError,
    GatewayError,
    PaymentRequiredError,
    RateLimitedError,
)
from suggest_engine.logging_config import logger
from suggest_engine.models import SuggestionRequest, SuggestionResponse
from suggest_engine.services.suggest_projects_tool import (
    SUGGEST_PROJECTS_TOOL,
    SUGGEST_PROJECTS_TOOL_CHOICE,
)
from suggest_engine.services.suggestion_prompt import (
    PROJECT_COUNT,
    SUGGESTION_SYSTEM_PROMPT,
    build_user_prompt,
)


class AIGatewayClient:
    """Single-shot client for the chat-completions gateway"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.api_key = settings.LOVABLE_API_KEY
        if not self.api_key:
            raise ConfigError("LOVABLE_API_KEY is not configured")

    def build_payload(self, request: SuggestionRequest) -> Dict[str, Any]:
        """Chat-completion body with the two messages and the forced tool"""
        return {
            "model": self.settings.AI_MODEL,
            "messages": [
                {"role": "system", "content": SUGGESTION_SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(request)},
            ],
            "tools": [SUGGEST_PROJECTS_TOOL],
            "tool_choice": SUGGEST_PROJECTS_TOOL_CHOICE,
        }

    async def suggest_projects(self, request: SuggestionRequest) -> Dict[str, Any]:
        """Return the parsed suggest_projects arguments for the given selections"""
        payload = self.build_payload(request)

        logger.info(
            "Calling AI gateway",
            model=self.settings.AI_MODEL,
            skill_level=request.skill_level,
            interest=request.interest,
            department=request.department,
        )

        try:
            async with httpx.AsyncClient(timeout=self.settings.gateway_timeout) as client:
                response = await client.post(
                    self.settings.AI_GATEWAY_URL,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                )
        except httpx.TimeoutException:
            logger.error("AI gateway timed out", timeout=self.settings.gateway_timeout)
            raise GatewayError("AI gateway timed out")

        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError:
            logger.error("AI gateway returned a non-JSON body", body=response.text)
            raise GatewayError("AI gateway returned an invalid response")

        tool_call = self._extract_tool_call(data)
        if not tool_call:
            raise GatewayError("No tool call in response")

        return self._parse_arguments(tool_call)

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        if response.status_code == 429:
            logger.warning("AI gateway rate limited")
            raise RateLimitedError()
        if response.status_code == 402:
            logger.warning("AI gateway payment required")
            raise PaymentRequiredError()

        logger.error(
            "AI gateway error",
            status=response.status_code,
            body=response.text,
        )
        raise GatewayError("AI gateway error")

    @staticmethod
    def _extract_tool_call(data: Any) -> Optional[Dict[str, Any]]:
        """choices[0].message.tool_calls[0], or None when any level is missing or mistyped"""
        if not isinstance(data, dict):
            return None
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message")
        if not isinstance(message, dict):
            return None
        tool_calls = message.get("tool_calls")
        if not isinstance(tool_calls, list) or not tool_calls:
            return None
        if not isinstance(tool_calls[0], dict):
            return None
        return tool_calls[0]

    def _parse_arguments(self, tool_call: Dict[str, Any]) -> Dict[str, Any]:
        function = tool_call.get("function")
        if not isinstance(function, dict):
            raise GatewayError("Invalid tool call arguments")
        arguments = function.get("arguments")
        try:
            projects = json.loads(arguments)
        except (TypeError, json.JSONDecodeError) as e:
            logger.error("Tool call arguments are not valid JSON", error=str(e))
            raise GatewayError("Invalid tool call arguments")

        try:
            validated = SuggestionResponse.model_validate(projects)
        except ValidationError as e:
            logger.error(
                "Tool call arguments do not match the project schema",
                error=str(e),
            )
            raise GatewayError("Tool call arguments do not match the project schema")

        self._check_count(validated.projects)
        return projects

    def _check_count(self, projects: List[Any]) -> None:
        if len(projects) == PROJECT_COUNT:
            return
        logger.warning(
            "Unexpected number of project suggestions",
            expected=PROJECT_COUNT,
            received=len(projects),
        )
        if self.settings.REQUIRE_EXACT_PROJECT_COUNT:
            raise GatewayError(
                f"Expected {PROJECT_COUNT} project suggestions, received {len(projects)}"
            )
