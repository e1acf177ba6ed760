"""Deterministic marking engine. Pure code, no LLM."""

from marking.content import GATED_MESSAGE, LEARN_MORE_TEXT, MODEL_ANSWER
from marking.scoring.criteria import CRITERIA, detect_criteria, present_count
from marking.text import word_count

MIN_WORDS_GATE = 20
MAX_STRENGTHS = 3

TAG_OK = "ok"
TAG_MID = "mid"  # reserved for the client; never emitted here
TAG_BAD = "bad"
TAG_STATUSES = (TAG_OK, TAG_MID, TAG_BAD)

GRID_SECURE = "✓ Secure"
GRID_MISSING = "✗ Missing"

SCORE_BY_COUNT = {4: 10, 3: 8, 2: 6, 1: 4, 0: 4}

MSG_EXCELLENT = "Excellent – you've followed the prompt formula."
MSG_GOOD = "Good – try adding audience or tone to strengthen further."
MSG_NEEDS_IMPROVEMENT = "Needs improvement – use the formula: role, task, context, format."

STRENGTHS = {
    "Role": "You clearly set a role for the AI.",
    "Task": "You specify what you want the AI to do.",
    "Context": "You include context about who/what the plan is for.",
    "Format": "You set useful formatting constraints for the output.",
}
GENERIC_STRENGTH = "You’ve started shaping the prompt — add the missing stages for more control."

# Criterion -> (detail when present, detail when missing)
GRID_DETAILS = {
    "Role": ("Role is present.", "Add a role (e.g., tour guide / travel planner)."),
    "Task": ("Task is present.", "State what you want AI to produce."),
    "Context": ("Context is present.", "Add who it’s for / when / where / constraints."),
    "Format": ("Format constraints are present.", "Add format details (bullets, costs, distances, timing, tone)."),
}


def _gated_result(wc: int) -> dict:
    return {
        "gated": True,
        "wordCount": wc,
        "message": GATED_MESSAGE,
        "score": None,
        "strengths": None,
        "tags": None,
        "grid": None,
        "learnMoreText": None,
        "modelAnswer": None,
    }


def score_for(count: int) -> int:
    return SCORE_BY_COUNT[count]


def message_for(count: int) -> str:
    if count == 4:
        return MSG_EXCELLENT
    if count >= 2:
        return MSG_GOOD
    return MSG_NEEDS_IMPROVEMENT


def build_strengths(flags: dict[str, bool]) -> list[str]:
    """One sentence per present criterion in rubric order, padded to 2, cut to 3."""
    strengths = [STRENGTHS[name] for name in CRITERIA if flags[name]]
    if len(strengths) < 2:
        strengths.append(GENERIC_STRENGTH)
    return strengths[:MAX_STRENGTHS]


def build_tags(flags: dict[str, bool]) -> list[dict]:
    return [{"label": name, "status": TAG_OK if flags[name] else TAG_BAD} for name in CRITERIA]


def build_grid(flags: dict[str, bool]) -> list[dict]:
    grid = []
    for name in CRITERIA:
        present_detail, missing_detail = GRID_DETAILS[name]
        grid.append({
            "label": name,
            "status": GRID_SECURE if flags[name] else GRID_MISSING,
            "detail": present_detail if flags[name] else missing_detail,
        })
    return grid


def mark_prompting_response(answer_text) -> dict:
    """
    Mark a prompt-writing answer against the Role/Task/Context/Format rubric.

    Answers under MIN_WORDS_GATE words get a gated result: a "please add to
    your answer" message and nothing else. No score, feedback, tags or model
    answer is returned below the gate.

    Never raises. Non-string input is marked as an empty answer.
    """
    wc = word_count(answer_text)
    if wc < MIN_WORDS_GATE:
        return _gated_result(wc)

    flags = detect_criteria(answer_text)
    count = present_count(flags)

    return {
        "gated": False,
        "wordCount": wc,
        "score": score_for(count),
        "message": message_for(count),
        "strengths": build_strengths(flags),
        "tags": build_tags(flags),
        "grid": build_grid(flags),
        "learnMoreText": LEARN_MORE_TEXT,
        "modelAnswer": MODEL_ANSWER,
    }
