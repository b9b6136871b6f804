# attachment_quiz/constants.py
from enum import Enum

# Cutoff at or above which an axis average counts as "high".
# Was 3.0 before the scale was re-tuned.
DEFAULT_THRESHOLD = 3.2


class ResultType(str, Enum):
    SECURE = "secure"
    ANXIOUS = "anxious"
    AVOIDANT = "avoidant"
    FEARFUL = "fearful"

    @property
    def label(self) -> str:
        return RESULT_LABELS[self]


class Axis(str, Enum):
    ANXIETY = "anxiety"
    AVOIDANCE = "avoidance"


# Display names shown on the result screen and the dashboard
RESULT_LABELS = {
    ResultType.SECURE: "안정형 (안전기지 🏕️)",
    ResultType.ANXIOUS: "불안형 (애정 갈구 💌)",
    ResultType.AVOIDANT: "회피형 (거리두기 🧊)",
    ResultType.FEARFUL: "혼란형 (복잡미묘 🎭)",
}
