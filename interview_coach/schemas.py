from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Accepts the client's camelCase keys as well as snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EvaluationCriterion(_WireModel):
    name: str
    score: float
    max_score: float
    reasoning: str = ""


class SkillAssessment(_WireModel):
    skill_name: str
    level: float = Field(ge=0, le=100)
    category: str = ""
    assessment_date: int = 0
    improvement: float = 0.0


class AchievementSessionData(_WireModel):
    score: float
    difficulty: str = "Easy"
    is_first_interview: bool = False


class SessionOutcome(_WireModel):
    score: float
    difficulty: str = "Easy"
    duration: float = Field(default=0.0, ge=0)
    last_interview_date: int | None = None
