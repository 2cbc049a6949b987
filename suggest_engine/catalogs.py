"""
Fixed option sets offered by the project idea finder form
"""
from typing import Dict, Optional, Sequence

ANY_PROJECT_TYPE = "Any"
FLEXIBLE_TIME = "Flexible"

SKILL_LEVELS = ("Beginner", "Intermediate", "Expert")

INTERESTS = (
    "Machine Learning",
    "Web Development",
    "Mobile Development",
    "Data Analytics",
    "Artificial Intelligence",
    "Cybersecurity",
    "Game Development",
    "DevOps",
    "Blockchain",
    "Cloud Computing",
)

DEPARTMENTS = (
    "Education",
    "Healthcare",
    "Finance",
    "E-commerce",
    "Agriculture",
    "Transportation",
    "Entertainment",
    "Real Estate",
    "Manufacturing",
    "Government",
    "Non-profit",
    "Retail",
)

# Sentinels come first, they are the form defaults
PROJECT_TYPES = (
    ANY_PROJECT_TYPE,
    "Web App",
    "Mobile App",
    "Desktop App",
    "Game",
    "API / Backend",
    "Data Pipeline",
    "Research",
)

TIME_COMMITMENTS = (
    FLEXIBLE_TIME,
    "1-2 weeks",
    "2-4 weeks",
    "1-2 months",
    "3+ months",
)

# Wire field name -> allowed values, for the three mandatory selections
REQUIRED_SELECTIONS: Dict[str, Sequence[str]] = {
    "skillLevel": SKILL_LEVELS,
    "interest": INTERESTS,
    "department": DEPARTMENTS,
}


def is_constraint(value: Optional[str], sentinel: str) -> bool:
    """True when an optional selection narrows the request"""
    return bool(value) and value != sentinel
