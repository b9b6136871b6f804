import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    MetaData,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Float,
    Index,
    Uuid,
    func,
)
from sqlalchemy.orm import declarative_base

from attachment_quiz.constants import ResultType

# Define naming conventions for constraints and indexes
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)
Base = declarative_base(metadata=metadata)


class SurveyResponse(Base):
    """One classified quiz run. Written once, never updated or deleted."""
    __tablename__ = "survey_responses"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Averaged axis points, not the raw sums
    anxiety_score = Column(Float, nullable=False)
    avoidance_score = Column(Float, nullable=False)
    result_type = Column(
        Enum(ResultType, name="result_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint("anxiety_score >= 0", name="anxiety_score_non_negative"),
        CheckConstraint("avoidance_score >= 0", name="avoidance_score_non_negative"),
        Index("ix_survey_responses_result_type", "result_type"),
    )

    def __repr__(self) -> str:
        return f"<SurveyResponse id={self.id} result_type={self.result_type}>"
