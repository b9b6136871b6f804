# Scoring core: classification of a single run and aggregation of stored runs.

from .aggregator import aggregate, aggregate_counts, summarize
from .classifier import Classifier, classify
from .models import ClassificationResult, StatsSummary, SubmissionInput, ValidationError
from .questions import DEFAULT_ANSWER, LIKERT_OPTIONS, QUESTIONS, tally_answers

__all__ = [
    "Classifier",
    "classify",
    "aggregate",
    "aggregate_counts",
    "summarize",
    "ClassificationResult",
    "StatsSummary",
    "SubmissionInput",
    "ValidationError",
    "QUESTIONS",
    "LIKERT_OPTIONS",
    "DEFAULT_ANSWER",
    "tally_answers",
]
