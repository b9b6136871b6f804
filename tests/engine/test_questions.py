# tests/engine/test_questions.py
import pytest
from attachment_quiz.constants import Axis, ResultType
from attachment_quiz.engine import classify
from attachment_quiz.engine.models import ValidationError
from attachment_quiz.engine.questions import DEFAULT_ANSWER, LIKERT_OPTIONS, QUESTIONS, tally_answers


def test_question_bank_has_four_per_axis():
    anxiety = [q for q in QUESTIONS if q.axis == Axis.ANXIETY]
    avoidance = [q for q in QUESTIONS if q.axis == Axis.AVOIDANCE]
    assert len(anxiety) == 4
    assert len(avoidance) == 4
    assert len({q.id for q in QUESTIONS}) == len(QUESTIONS)

def test_unanswered_questions_default_to_mid_point():
    submission = tally_answers({})
    assert submission.anxiety_score == 4 * DEFAULT_ANSWER
    assert submission.avoidance_score == 4 * DEFAULT_ANSWER
    assert submission.anxiety_count == 4
    assert submission.avoidance_count == 4

def test_tally_sums_each_axis():
    answers = {"a1": 5, "a2": 5, "a3": 5, "a4": 5, "b1": 2, "b2": 2, "b3": 2, "b4": 2}
    submission = tally_answers(answers)
    assert submission.anxiety_score == 20
    assert submission.avoidance_score == 8

def test_tallied_submission_classifies():
    answers = {"a1": 5, "a2": 5, "a3": 5, "a4": 5, "b1": 2, "b2": 2, "b3": 2, "b4": 2}
    s = tally_answers(answers)
    result = classify(s.anxiety_score, s.avoidance_score, s.anxiety_count, s.avoidance_count)
    assert result.result_type == ResultType.ANXIOUS

def test_unknown_question_rejected():
    with pytest.raises(ValidationError, match="z9"):
        tally_answers({"z9": 3})

@pytest.mark.parametrize("value", [0, 6, 2.5, "3", True])
def test_out_of_range_answer_rejected(value):
    with pytest.raises(ValidationError):
        tally_answers({"a1": value})

def test_likert_options_are_one_to_five():
    assert LIKERT_OPTIONS == (1, 2, 3, 4, 5)
    assert DEFAULT_ANSWER in LIKERT_OPTIONS

def test_mixed_type_unknown_keys_rejected_as_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        tally_answers({1: 3, "z": 3})
    assert "1" in str(exc_info.value)
    assert "z" in str(exc_info.value)
