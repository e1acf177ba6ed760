"""Rubric criterion detection: literal phrase presence, one rule set per criterion."""

from marking.text import normalize_text

CRITERIA = ("Role", "Task", "Context", "Format")

# Criterion -> match phrases. Matching is substring presence on trimmed,
# lower-cased text; criteria are independent and may all match at once.
CRITERION_PATTERNS: dict[str, tuple[str, ...]] = {
    "Role": ("role:", "you are a", "act as", "as a "),
    "Task": ("task:", "give me", "create", "produce", "generate", "write", "build", "plan"),
    "Context": (
        "context:",
        "i am",
        "we are",
        "for me",
        "for a",
        "audience",
        "staff",
        "team",
        "colleagues",
        "workplace",
        "social",
        "event",
        "budget",
        "london",
        "accessibility",
        "dietary",
        "remote",
    ),
    "Format": (
        "format:",
        "bullet",
        "table",
        "include",
        "ensure",
        "constraints",
        "tone",
        "structure",
        "distance",
        "fees",
        "costs",
        "how long",
    ),
}


def matched_patterns(text) -> dict[str, list[str]]:
    """Per criterion, the phrases found in text (in table order)."""
    t = normalize_text(text)
    return {name: [p for p in CRITERION_PATTERNS[name] if p in t] for name in CRITERIA}


def detect_criteria(text) -> dict[str, bool]:
    """Evaluate every criterion independently. Returns {name: present} in rubric order."""
    t = normalize_text(text)
    return {name: any(p in t for p in CRITERION_PATTERNS[name]) for name in CRITERIA}


def present_count(flags: dict[str, bool]) -> int:
    return sum(1 for name in CRITERIA if flags.get(name))
