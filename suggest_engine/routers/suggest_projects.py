"""
suggest-projects function router
"""
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from suggest_engine.config import Settings, get_settings
from suggest_engine.errors import InvalidRequestError, SuggestionError
from suggest_engine.logging_config import logger
from suggest_engine.models import ErrorResponse, SuggestionRequest, SuggestionResponse
from suggest_engine.services.ai_gateway_client import AIGatewayClient

router = APIRouter()

# Sent on every response, preflight and errors included
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def cors_json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int) -> JSONResponse:
    return cors_json_response(ErrorResponse(error=message).model_dump(), status_code)


@router.options("/suggest-projects")
async def suggest_projects_preflight():
    """Cross-origin preflight"""
    return Response(status_code=200, headers=CORS_HEADERS)


def parse_suggestion_request(body: Any, settings: Settings) -> SuggestionRequest:
    """Build the request model, checking presence and optionally catalog membership"""
    data = SuggestionRequest.model_validate(body)

    missing = data.missing_fields()
    if missing:
        raise InvalidRequestError(f"Missing required fields: {', '.join(missing)}")

    unknown = data.unknown_selections()
    if unknown:
        if settings.ENFORCE_CATALOGS:
            raise InvalidRequestError(f"Unknown selections for: {', '.join(unknown)}")
        logger.warning("Selections outside the known catalogs", fields=unknown)

    return data


@router.post(
    "/suggest-projects",
    response_model=SuggestionResponse,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def suggest_projects(request: Request, settings: Settings = Depends(get_settings)):
    """
    Generate project ideas for a skill level, interest and department.

    Body (camelCase):
    - skillLevel: Beginner, Intermediate or Expert
    - interest: technical domain
    - department: target industry
    - projectType: optional, "Any" adds no constraint
    - timeCommitment: optional, "Flexible" adds no constraint

    Returns the suggest_projects tool arguments verbatim: {"projects": [...]}.
    """
    try:
        body = await request.json()
        data = parse_suggestion_request(body, settings)

        client = AIGatewayClient(settings)
        projects = await client.suggest_projects(data)

        logger.info(
            "Project suggestions generated",
            count=len(projects.get("projects", [])),
            department=data.department,
        )
        return cors_json_response(projects)

    except SuggestionError as e:
        logger.error(
            "Error in suggest-projects",
            error=e.message,
            error_type=type(e).__name__,
            status=e.status_code,
        )
        return error_response(e.message, e.status_code)
    except Exception as e:
        logger.error("Error in suggest-projects", error=str(e), exc_info=True)
        return error_response(str(e) or "Unknown error", 500)
