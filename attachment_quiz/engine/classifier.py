# attachment_quiz/engine/classifier.py
# Maps the two axis averages of a quiz run onto one of the four attachment styles.

import logging
import math
import numbers
from typing import Any

from attachment_quiz.constants import DEFAULT_THRESHOLD, ResultType
from .models import ClassificationResult, ValidationError

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid score
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


class Classifier:
    """
    Quadrant classifier over (anxiety, avoidance) averages.

    A point equal to the threshold counts as high on its axis, so every pair
    of finite numbers lands in exactly one quadrant.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        if not _is_number(threshold):
            raise ValueError(f"Threshold must be a finite number, got {threshold!r}")
        self.threshold = float(threshold)

    def classify_points(self, anxiety_point: float, avoidance_point: float) -> ResultType:
        high_anxiety = anxiety_point >= self.threshold
        high_avoidance = avoidance_point >= self.threshold

        if high_anxiety and not high_avoidance:
            return ResultType.ANXIOUS
        if high_avoidance and not high_anxiety:
            return ResultType.AVOIDANT
        if high_anxiety and high_avoidance:
            return ResultType.FEARFUL
        return ResultType.SECURE

    def classify(self, anxiety_score: Any, avoidance_score: Any,
                 anxiety_count: Any, avoidance_count: Any) -> ClassificationResult:
        """
        Validates a submission, averages both axes and classifies the result.

        Scores are not clamped to the Likert range; out-of-range sums simply
        fall into whichever quadrant the arithmetic gives.

        Raises:
            ValidationError: a field is not a finite number, a count is <= 0,
                or an axis average overflows.
        """
        fields = {
            "anxietyScore": anxiety_score,
            "avoidanceScore": avoidance_score,
            "anxietyCount": anxiety_count,
            "avoidanceCount": avoidance_count,
        }
        not_numeric = [name for name, value in fields.items() if not _is_number(value)]
        if not_numeric:
            raise ValidationError(f"Fields must be numeric: {', '.join(not_numeric)}")
        if anxiety_count <= 0 or avoidance_count <= 0:
            raise ValidationError("anxietyCount and avoidanceCount must be greater than zero")

        try:
            anxiety_point = anxiety_score / anxiety_count
            avoidance_point = avoidance_score / avoidance_count
        except OverflowError as e:
            raise ValidationError(f"Axis average is out of range: {e}") from e
        # A huge sum over a tiny count can still overflow to inf
        if not (math.isfinite(anxiety_point) and math.isfinite(avoidance_point)):
            raise ValidationError("Axis averages must be finite numbers")
        result_type = self.classify_points(anxiety_point, avoidance_point)
        logger.debug(f"Classified ({anxiety_point}, {avoidance_point}) at T={self.threshold} as {result_type.value}")

        return ClassificationResult(
            anxiety_point=anxiety_point,
            avoidance_point=avoidance_point,
            result_type=result_type,
        )


def classify(anxiety_score: Any, avoidance_score: Any, anxiety_count: Any, avoidance_count: Any,
             threshold: float = DEFAULT_THRESHOLD) -> ClassificationResult:
    """Convenience wrapper around Classifier(threshold).classify(...)."""
    return Classifier(threshold).classify(anxiety_score, avoidance_score, anxiety_count, avoidance_count)
