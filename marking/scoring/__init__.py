"""Deterministic rubric scoring."""

from marking.scoring.criteria import CRITERIA, CRITERION_PATTERNS, detect_criteria, present_count
from marking.scoring.engine import mark_prompting_response

__all__ = [
    "CRITERIA",
    "CRITERION_PATTERNS",
    "detect_criteria",
    "present_count",
    "mark_prompting_response",
]
