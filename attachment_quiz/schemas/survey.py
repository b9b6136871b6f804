import uuid
from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from attachment_quiz.constants import Axis, ResultType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionRequest(CamelModel):
    # Strict: JSON strings and booleans are rejected rather than coerced
    anxiety_score: float = Field(..., ge=0, strict=True)  # sum over anxiety questions
    avoidance_score: float = Field(..., ge=0, strict=True)
    anxiety_count: float = Field(..., strict=True)  # positivity is checked by the classifier
    avoidance_count: float = Field(..., strict=True)


class AnswersRequest(CamelModel):
    # question id -> Likert answer; range is checked by the tally
    answers: Dict[str, int] = Field(default_factory=dict, strict=True)


class SurveyResponseOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: uuid.UUID
    anxiety_score: float
    avoidance_score: float
    result_type: ResultType
    created_at: datetime


class SurveyStats(BaseModel):
    secure: int = Field(0, ge=0)
    anxious: int = Field(0, ge=0)
    avoidant: int = Field(0, ge=0)
    fearful: int = Field(0, ge=0)


class QuestionOut(CamelModel):
    id: str
    text: str
    axis: Axis


class QuestionnaireOut(CamelModel):
    questions: List[QuestionOut]
    options: List[int]
    default_answer: int


class ResultBreakdownOut(CamelModel):
    result_type: ResultType
    label: str
    count: int
    share: float


class StatsSummaryOut(CamelModel):
    total: int
    breakdown: List[ResultBreakdownOut]
    secure: int
    others: int
