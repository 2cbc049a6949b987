"""
Request and response models for project suggestions
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from suggest_engine.catalogs import ANY_PROJECT_TYPE, FLEXIBLE_TIME, REQUIRED_SELECTIONS


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SuggestionRequest(BaseModel):
    """Parameters selected in the project idea finder form"""
    model_config = ConfigDict(populate_by_name=True)

    skill_level: Optional[str] = Field(default=None, alias="skillLevel")
    interest: Optional[str] = None
    department: Optional[str] = None
    project_type: Optional[str] = Field(default=ANY_PROJECT_TYPE, alias="projectType")
    time_commitment: Optional[str] = Field(default=FLEXIBLE_TIME, alias="timeCommitment")

    def missing_fields(self) -> List[str]:
        """Wire names of mandatory selections that are absent or blank"""
        payload = self.model_dump(by_alias=True)
        return [
            name for name in REQUIRED_SELECTIONS
            if not (payload.get(name) or "").strip()
        ]

    def unknown_selections(self) -> List[str]:
        """Wire names of mandatory selections outside their catalogs"""
        payload = self.model_dump(by_alias=True)
        return [
            name for name, allowed in REQUIRED_SELECTIONS.items()
            if payload.get(name) and payload[name] not in allowed
        ]


class ProjectIdea(BaseModel):
    """A single suggested project, exactly the suggest_projects item shape"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    description: str
    difficulty: Difficulty
    technologies: List[str] = Field(min_length=1)
    estimated_time: str = Field(alias="estimatedTime")


class SuggestionResponse(BaseModel):
    """Body returned by the suggest-projects function on success"""
    model_config = ConfigDict(extra="forbid")

    projects: List[ProjectIdea]


class ErrorResponse(BaseModel):
    """Body returned by the suggest-projects function on failure"""
    error: str
