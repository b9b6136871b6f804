# attachment_quiz/engine/questions.py
# The quiz itself: eight Likert questions, four per axis, asked in interleaved order.

from typing import Dict, List, Mapping

from attachment_quiz.constants import Axis
from .models import Question, SubmissionInput, ValidationError

LIKERT_OPTIONS = (1, 2, 3, 4, 5)
DEFAULT_ANSWER = 3  # mid-point, used for any question left unanswered

QUESTIONS: List[Question] = [
    Question(id="a1", axis=Axis.ANXIETY,
             text="💖 (카톡 읽씹) 연인의 카톡 답장이 1시간 이상 늦어지면, '혹시 내가 뭐 잘못했나?' 하는 생각이 스멀스멀 올라온다."),
    Question(id="b1", axis=Axis.AVOIDANCE,
             text="🌵 (나만의 시간) 아무리 사랑하는 사이라도, 주말 내내 꼭 붙어있기보다 나만의 시간이 반드시 필요하다."),
    Question(id="a2", axis=Axis.ANXIETY,
             text="💖 (애정 확인) 나는 연인에게 \"사랑해\" 같은 애정 표현을 자주 들어야 마음이 놓인다."),
    Question(id="b2", axis=Axis.AVOIDANCE,
             text="🌵 (혼자 해결) 힘든 일이 생겼을 때, 연인에게 털어놓기보다 일단 혼자 해결하는 게 편하다."),
    Question(id="a3", axis=Axis.ANXIETY,
             text="💖 (나 없이?) 연인이 나 없이 친구들과 신나게 놀고 있으면, 나도 모르게 살짝 서운하다."),
    Question(id="b3", axis=Axis.AVOIDANCE,
             text="🌵 (비밀의 방) 나의 모든 것을 100% 다 오픈하는 것은 좀 부담스럽다."),
    Question(id="a4", axis=Axis.ANXIETY,
             text="💖 (상상의 나래) 가끔 '이 사람이 갑자기 날 떠나면 어떡하지?' 하는 상상을 하곤 한다."),
    Question(id="b4", axis=Axis.AVOIDANCE,
             text="🌵 (독립 선언) 나는 '독립적이고 멋진 사람'으로 보이는 것이 더 중요하다."),
]

QUESTIONS_BY_ID: Dict[str, Question] = {q.id: q for q in QUESTIONS}


def tally_answers(answers: Mapping[str, int], questions: List[Question] = QUESTIONS) -> SubmissionInput:
    """
    Sums Likert answers per axis into a submission.

    Every question counts toward its axis; unanswered ones contribute
    DEFAULT_ANSWER, so both counts are always positive for a full bank.

    Raises:
        ValidationError: on an unknown question id or a value outside LIKERT_OPTIONS.
    """
    known = {q.id for q in questions}
    unknown = sorted((str(k) for k in set(answers) - known))
    if unknown:
        raise ValidationError(f"Unknown question ids: {', '.join(unknown)}")
    for question_id, value in answers.items():
        if isinstance(value, bool) or value not in LIKERT_OPTIONS:
            raise ValidationError(f"Invalid answer {value!r} for question '{question_id}'")

    sums = {Axis.ANXIETY: 0, Axis.AVOIDANCE: 0}
    counts = {Axis.ANXIETY: 0, Axis.AVOIDANCE: 0}
    for q in questions:
        sums[q.axis] += answers.get(q.id, DEFAULT_ANSWER)
        counts[q.axis] += 1

    return SubmissionInput(
        anxiety_score=sums[Axis.ANXIETY],
        avoidance_score=sums[Axis.AVOIDANCE],
        anxiety_count=counts[Axis.ANXIETY],
        avoidance_count=counts[Axis.AVOIDANCE],
    )
