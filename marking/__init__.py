"""Rule-based marking of prompt-writing answers (Role, Task, Context, Format)."""

from marking.scoring import detect_criteria, mark_prompting_response
from marking.text import word_count
from marking.validation import validate_mark_result

__all__ = ["detect_criteria", "mark_prompting_response", "word_count", "validate_mark_result"]
