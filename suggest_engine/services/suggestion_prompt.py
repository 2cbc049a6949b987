"""
Prompts for the project idea generator
"""
from suggest_engine.catalogs import ANY_PROJECT_TYPE, FLEXIBLE_TIME, is_constraint
from suggest_engine.models import SuggestionRequest

PROJECT_COUNT = 5

SUGGESTION_SYSTEM_PROMPT = """You are an expert project idea generator for students and developers.
You suggest creative, practical and trending projects tailored to a specific industry or department.
Every project must be realistic and achievable for the stated skill level, clearly useful to the
target department, and built around the requested technical interest."""


def build_user_prompt(request: SuggestionRequest) -> str:
    """Build the user prompt, adding optional constraint lines only when they narrow the request"""
    constraints = []
    if is_constraint(request.project_type, ANY_PROJECT_TYPE):
        constraints.append(f"- Preferred Project Type: {request.project_type}")
    if is_constraint(request.time_commitment, FLEXIBLE_TIME):
        constraints.append(f"- Time Commitment: {request.time_commitment}")

    constraint_block = ""
    if constraints:
        constraint_block = "\n## ADDITIONAL CONSTRAINTS:\n" + "\n".join(constraints) + "\n"

    return f"""Generate {PROJECT_COUNT} project ideas for the following profile.

## PROFILE:
- Skill Level: {request.skill_level}
- Technical Interest: {request.interest}
- Target Department: {request.department}
{constraint_block}
## REQUIREMENTS:
1. Every project must solve a real problem relevant to the {request.department} department
2. Difficulty must be appropriate for a {request.skill_level} developer
3. Every project must align with an interest in {request.interest}
4. Return exactly {PROJECT_COUNT} suggestions

For each project, provide:
- title: a catchy project title
- description: a brief description (2-3 sentences)
- difficulty: one of Easy, Medium, Hard
- technologies: the key technologies/skills involved
- estimatedTime: the estimated time to complete"""
