from fastapi import APIRouter, HTTPException, Depends, Request, status
import logging

from attachment_quiz.engine import Classifier, QUESTIONS, LIKERT_OPTIONS, DEFAULT_ANSWER
from attachment_quiz.engine import aggregate_counts, summarize, tally_answers
from attachment_quiz.engine.models import ValidationError
from attachment_quiz.schemas.survey import (
    AnswersRequest,
    QuestionnaireOut,
    StatsSummaryOut,
    SubmissionRequest,
    SurveyResponseOut,
    SurveyStats,
)
from attachment_quiz.services.storage import StorageError, SurveyResponseStore

router = APIRouter()
logger = logging.getLogger(__name__)


def get_classifier(request: Request) -> Classifier:
    return Classifier(threshold=request.app.state.settings.result_threshold)


def get_store(request: Request) -> SurveyResponseStore:
    return SurveyResponseStore(request.app.state.database)


async def _read_stats(store: SurveyResponseStore):
    try:
        rows = await store.count_by_result_type()
    except StorageError as e:
        logger.error(f"Stats read failed: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    except Exception as e:
        logger.exception(f"Unexpected error while reading stats: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return aggregate_counts(rows)


async def _classify_and_store(classifier: Classifier, store: SurveyResponseStore,
                              anxiety_score, avoidance_score, anxiety_count, avoidance_count):
    try:
        result = classifier.classify(anxiety_score, avoidance_score, anxiety_count, avoidance_count)
    except ValidationError as e:
        logger.warning(f"Rejected submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    try:
        record = await store.add(result)
    except StorageError as e:
        logger.error(f"Submission could not be stored: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    except Exception as e:
        logger.exception(f"Unexpected error while storing submission: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

    logger.info(
        f"Submission classified as {result.result_type.value}",
        extra={
            "result_type": result.result_type,
            "anxiety_point": result.anxiety_point,
            "avoidance_point": result.avoidance_point,
        },
    )
    return SurveyResponseOut.model_validate(record)


@router.post("/submit", response_model=SurveyResponseOut, status_code=status.HTTP_201_CREATED)
async def submit_survey(
    submission: SubmissionRequest,
    classifier: Classifier = Depends(get_classifier),
    store: SurveyResponseStore = Depends(get_store),
):
    """
    Classifies one quiz run from its per-axis sums and stores the averaged
    points with the resulting attachment style.
    """
    return await _classify_and_store(
        classifier,
        store,
        submission.anxiety_score,
        submission.avoidance_score,
        submission.anxiety_count,
        submission.avoidance_count,
    )


@router.post("/submit/answers", response_model=SurveyResponseOut, status_code=status.HTTP_201_CREATED)
async def submit_answers(
    submission: AnswersRequest,
    classifier: Classifier = Depends(get_classifier),
    store: SurveyResponseStore = Depends(get_store),
):
    """
    Same as /submit, but tallies raw Likert answers server-side first.
    Unanswered questions count as the mid-point.
    """
    try:
        tally = tally_answers(submission.answers)
    except ValidationError as e:
        logger.warning(f"Rejected answers: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return await _classify_and_store(
        classifier,
        store,
        tally.anxiety_score,
        tally.avoidance_score,
        tally.anxiety_count,
        tally.avoidance_count,
    )


@router.get("/stats", response_model=SurveyStats)
async def get_stats(store: SurveyResponseStore = Depends(get_store)):
    """Counts of every attachment style over all stored responses, zeros included."""
    stats = await _read_stats(store)
    return SurveyStats(**{result_type.value: count for result_type, count in stats.items()})


@router.get("/stats/summary", response_model=StatsSummaryOut)
async def get_stats_summary(store: SurveyResponseStore = Depends(get_store)):
    """Dashboard view: ranked breakdown with shares, and secure vs. the rest."""
    stats = await _read_stats(store)
    return StatsSummaryOut.model_validate(summarize(stats).model_dump())


@router.get("/questions", response_model=QuestionnaireOut)
async def get_questions():
    return QuestionnaireOut(
        questions=[q.model_dump() for q in QUESTIONS],
        options=list(LIKERT_OPTIONS),
        default_answer=DEFAULT_ANSWER,
    )
