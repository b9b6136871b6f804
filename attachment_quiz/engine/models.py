from typing import List
from pydantic import BaseModel, ConfigDict, Field

from attachment_quiz.constants import Axis, ResultType


class SubmissionInput(BaseModel):
    """Raw per-axis sums and question counts for one quiz run."""
    anxiety_score: float
    avoidance_score: float
    anxiety_count: int
    avoidance_count: int


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    anxiety_point: float
    avoidance_point: float
    result_type: ResultType


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    axis: Axis


class ResultBreakdown(BaseModel):
    result_type: ResultType
    label: str
    count: int = Field(..., ge=0)
    share: float  # percentage of all respondents, one decimal


class StatsSummary(BaseModel):
    total: int = Field(..., ge=0)
    breakdown: List[ResultBreakdown]
    secure: int = Field(..., ge=0)
    others: int = Field(..., ge=0)


# Custom Error Classes
class ValidationError(ValueError):
    """Submission input is malformed or has a non-positive question count."""
    pass
