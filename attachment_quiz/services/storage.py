import logging
from typing import List, Optional, Tuple

from sqlalchemy import String, func, select, type_coerce
from sqlalchemy.exc import SQLAlchemyError

from attachment_quiz.db.models import SurveyResponse
from attachment_quiz.db.session import Database
from attachment_quiz.engine.models import ClassificationResult

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The database could not complete a read or write."""
    pass


class SurveyResponseStore:
    """
    Persistence boundary for quiz results.

    Inserts are independent and there is no update path, so no locking is
    needed beyond the single-row insert itself. Failures are not retried.
    """

    def __init__(self, database: Database):
        self.database = database

    async def add(self, result: ClassificationResult) -> SurveyResponse:
        record = SurveyResponse(
            anxiety_score=result.anxiety_point,
            avoidance_score=result.avoidance_point,
            result_type=result.result_type,
        )
        try:
            async with self.database.session() as session:
                session.add(record)
                # id and created_at come from Python-side defaults; a refresh would
                # reload created_at without its offset on SQLite
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to store survey response: {e}", exc_info=True)
            raise StorageError("Failed to store survey response") from e
        logger.info(f"Stored survey response {record.id} ({record.result_type.value})")
        return record

    async def count_by_result_type(self) -> List[Tuple[Optional[str], int]]:
        """Returns (result_type, count) groups over every stored response."""
        # Read labels as plain strings so unknown values reach the aggregator instead of failing enum lookup
        label = type_coerce(SurveyResponse.result_type, String).label("result_type")
        stmt = select(label, func.count()).group_by(label)
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                rows = [(row[0], row[1]) for row in result.all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to read survey response counts: {e}", exc_info=True)
            raise StorageError("Failed to read survey response counts") from e
        logger.debug(f"Read {len(rows)} result type groups")
        return rows
