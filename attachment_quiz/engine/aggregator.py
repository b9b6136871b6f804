# attachment_quiz/engine/aggregator.py
# Turns stored result labels into the per-style counts shown on the dashboard.

import logging
from collections import Counter
from typing import Dict, Iterable, Optional, Tuple, Union

from attachment_quiz.constants import ResultType
from .models import ResultBreakdown, StatsSummary

logger = logging.getLogger(__name__)

Label = Union[ResultType, str, None]


def _to_result_type(label: Label) -> Optional[ResultType]:
    if isinstance(label, ResultType):
        return label
    try:
        return ResultType(label)
    except ValueError:
        return None


def aggregate_counts(rows: Iterable[Tuple[Label, int]]) -> Dict[ResultType, int]:
    """
    Overlays grouped (label, count) rows onto a zeroed count for every style.

    Rows may come from a database-side GROUP BY or from a single pass over
    the labels. Null or unknown labels are skipped. Repeated labels add up,
    so the result does not depend on row order.
    """
    stats = {result_type: 0 for result_type in ResultType}
    skipped = 0
    for label, count in rows:
        result_type = _to_result_type(label)
        if result_type is None:
            skipped += count
            continue
        stats[result_type] += count
    if skipped:
        logger.warning(f"Ignored {skipped} stored responses with an unrecognized result type")
    return stats


def aggregate(labels: Iterable[Label]) -> Dict[ResultType, int]:
    """Counts a stream of stored labels, one per response."""
    return aggregate_counts(Counter(labels).items())


def summarize(stats: Dict[ResultType, int]) -> StatsSummary:
    """
    Builds the dashboard view of a stats mapping: a ranked breakdown with
    each style's share of all respondents, plus secure vs. everyone else.
    """
    total = sum(stats.values())
    order = list(ResultType)
    ranked = sorted(order, key=lambda rt: (-stats.get(rt, 0), order.index(rt)))

    breakdown = [
        ResultBreakdown(
            result_type=rt,
            label=rt.label,
            count=stats.get(rt, 0),
            share=round(stats.get(rt, 0) * 100 / total, 1) if total else 0.0,
        )
        for rt in ranked
    ]
    secure = stats.get(ResultType.SECURE, 0)
    return StatsSummary(total=total, breakdown=breakdown, secure=secure, others=total - secure)
