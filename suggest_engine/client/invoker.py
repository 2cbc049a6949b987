"""
Client-side invoker for the suggest-projects function.

Owns the finder's state (busy flag, displayed projects, notifications) and
only changes it through request_suggestions and select_for_build.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

import httpx
from pydantic import ValidationError

from suggest_engine.catalogs import REQUIRED_SELECTIONS
from suggest_engine.logging_config import logger
from suggest_engine.models import ProjectIdea, SuggestionRequest, SuggestionResponse

FIELD_LABELS = {
    "skillLevel": "skill level",
    "interest": "area of interest",
    "department": "department",
}


@dataclass(frozen=True)
class Notification:
    """Toast shown to the user"""
    title: str
    description: str
    variant: str = "default"


@dataclass
class InvokerState:
    busy: bool = False
    projects: List[ProjectIdea] = field(default_factory=list)
    last_request: Optional[SuggestionRequest] = None
    notifications: List[Notification] = field(default_factory=list)


@dataclass(frozen=True)
class BuildRequestDraft:
    """Prefilled fields handed to the build-request lead form"""
    project_title: str
    project_description: str
    skill_level: Optional[str] = None
    interest: Optional[str] = None
    department: Optional[str] = None


def unmet_selections(params: Mapping[str, Optional[str]]) -> List[str]:
    """Mandatory fields that are blank or not one of the offered options"""
    unmet = []
    for name, allowed in REQUIRED_SELECTIONS.items():
        value = params.get(name)
        if not value or value not in allowed:
            unmet.append(name)
    return unmet


class SuggestionInvoker:
    """Calls the suggest-projects function on behalf of the project finder"""

    def __init__(
        self,
        function_url: str,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        on_notify: Optional[Callable[[Notification], None]] = None,
        timeout: Optional[float] = None,
    ):
        self.function_url = function_url
        self.api_key = api_key
        self.http_client = http_client
        self.on_notify = on_notify
        # Seconds for the default client; None waits as long as the function does
        self.timeout = timeout
        self.state = InvokerState()

    def can_submit(self, params: Mapping[str, Optional[str]]) -> bool:
        return not self.state.busy and not unmet_selections(params)

    def _notify(self, notification: Notification) -> None:
        self.state.notifications.append(notification)
        if self.on_notify:
            self.on_notify(notification)

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "x-client-info": "suggest-engine-invoker"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _post(self, body: Dict[str, Optional[str]]) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.post(self.function_url, json=body, headers=self._headers())
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self.function_url, json=body, headers=self._headers())

    async def request_suggestions(self, params: Mapping[str, Optional[str]]) -> List[ProjectIdea]:
        """
        Ask the function for project ideas.

        Args:
            params: form selections keyed by wire name (skillLevel, interest,
                department, projectType, timeCommitment)

        Returns:
            The displayed project list after the call
        """
        if self.state.busy:
            logger.info("Suggestion request ignored, one is already in flight")
            return self.state.projects

        unmet = unmet_selections(params)
        if unmet:
            labels = ", ".join(FIELD_LABELS[name] for name in unmet)
            self._notify(Notification(
                title="Missing Information",
                description=f"Please select: {labels}.",
                variant="destructive",
            ))
            return self.state.projects

        request = SuggestionRequest.model_validate(
            {key: value for key, value in params.items() if value is not None}
        )
        body = request.model_dump(by_alias=True)

        self.state.busy = True
        self.state.projects = []

        try:
            response = await self._post(body)
            response.raise_for_status()
            result = SuggestionResponse.model_validate(response.json())

            self.state.projects = list(result.projects)
            self.state.last_request = request
            self._notify(Notification(
                title="Projects Found!",
                description=f"We found {len(result.projects)} exciting projects for you.",
            ))
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error(
                "Error fetching project ideas",
                error=str(e),
                error_type=type(e).__name__,
            )
            self._notify(Notification(
                title="Error",
                description="Failed to generate project ideas. Please try again.",
                variant="destructive",
            ))
        finally:
            self.state.busy = False

        return self.state.projects

    def select_for_build(self, idea: ProjectIdea) -> BuildRequestDraft:
        """Hand a suggested project to the build-request form"""
        request = self.state.last_request
        return BuildRequestDraft(
            project_title=idea.title,
            project_description=idea.description,
            skill_level=request.skill_level if request else None,
            interest=request.interest if request else None,
            department=request.department if request else None,
        )
