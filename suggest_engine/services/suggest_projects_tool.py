"""
Tool definition that forces the gateway to answer with structured projects
"""
from suggest_engine.models import Difficulty

TOOL_NAME = "suggest_projects"

PROJECT_IDEA_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "difficulty": {"type": "string", "enum": [d.value for d in Difficulty]},
        "technologies": {
            "type": "array",
            "items": {"type": "string"}
        },
        "estimatedTime": {"type": "string"}
    },
    "required": ["title", "description", "difficulty", "technologies", "estimatedTime"],
    "additionalProperties": False,
}

SUGGEST_PROJECTS_PARAMETERS = {
    "type": "object",
    "properties": {
        "projects": {
            "type": "array",
            "items": PROJECT_IDEA_SCHEMA,
        },
    },
    "required": ["projects"],
    "additionalProperties": False,
}

SUGGEST_PROJECTS_TOOL = {
    "type": "function",
    "function": {
        "name": TOOL_NAME,
        "description": "Return 5 actionable project suggestions.",
        "parameters": SUGGEST_PROJECTS_PARAMETERS,
    },
}

SUGGEST_PROJECTS_TOOL_CHOICE = {"type": "function", "function": {"name": TOOL_NAME}}
