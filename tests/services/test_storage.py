import pytest
from unittest.mock import MagicMock
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from attachment_quiz.constants import ResultType
from attachment_quiz.engine import aggregate_counts, classify
from attachment_quiz.services.storage import StorageError, SurveyResponseStore


@pytest.mark.asyncio
async def test_add_persists_averaged_points(database):
    store = SurveyResponseStore(database)
    record = await store.add(classify(20, 8, 4, 4))

    assert record.id is not None
    assert record.anxiety_score == 5.0
    assert record.avoidance_score == 2.0
    assert record.result_type == ResultType.ANXIOUS
    assert record.created_at is not None


@pytest.mark.asyncio
async def test_resubmission_creates_separate_records(database):
    store = SurveyResponseStore(database)
    first = await store.add(classify(12, 12, 4, 4))
    second = await store.add(classify(12, 12, 4, 4))
    assert first.id != second.id
    assert aggregate_counts(await store.count_by_result_type())[ResultType.SECURE] == 2


@pytest.mark.asyncio
async def test_count_by_result_type_groups_rows(database):
    store = SurveyResponseStore(database)
    for args in [(12, 12, 4, 4), (12, 12, 4, 4), (20, 8, 4, 4), (16, 16, 4, 4)]:
        await store.add(classify(*args))

    rows = await store.count_by_result_type()
    assert dict(rows) == {"secure": 2, "anxious": 1, "fearful": 1}
    assert aggregate_counts(rows) == {
        ResultType.SECURE: 2,
        ResultType.ANXIOUS: 1,
        ResultType.AVOIDANT: 0,
        ResultType.FEARFUL: 1,
    }


@pytest.mark.asyncio
async def test_count_on_empty_table(database):
    store = SurveyResponseStore(database)
    assert await store.count_by_result_type() == []


@pytest.mark.asyncio
async def test_unrecognized_stored_label_is_skipped(database):
    async with database.session() as session:
        await session.execute(text(
            "INSERT INTO survey_responses (id, anxiety_score, avoidance_score, result_type, created_at) "
            "VALUES ('0f0e0d0c0b0a49088706050403020100', 1.0, 1.0, 'legacy', CURRENT_TIMESTAMP)"
        ))
        await session.commit()
    store = SurveyResponseStore(database)
    await store.add(classify(8, 18, 4, 4))

    stats = aggregate_counts(await store.count_by_result_type())
    assert stats[ResultType.AVOIDANT] == 1
    assert sum(stats.values()) == 1


@pytest.mark.asyncio
async def test_read_failure_raises_storage_error():
    failing_db = MagicMock()
    failing_db.session.side_effect = OperationalError("SELECT", {}, Exception("db down"))
    store = SurveyResponseStore(failing_db)

    with pytest.raises(StorageError):
        await store.count_by_result_type()


@pytest.mark.asyncio
async def test_write_failure_raises_storage_error():
    failing_db = MagicMock()
    failing_db.session.side_effect = OperationalError("INSERT", {}, Exception("db down"))
    store = SurveyResponseStore(failing_db)

    with pytest.raises(StorageError):
        await store.add(classify(20, 8, 4, 4))


@pytest.mark.asyncio
async def test_added_record_keeps_timezone(database):
    store = SurveyResponseStore(database)
    record = await store.add(classify(20, 8, 4, 4))

    assert record.created_at.tzinfo is not None
    assert record.created_at.utcoffset() is not None
