"""Schema validation for mark results."""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


@lru_cache(maxsize=None)
def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_mark_result(data: dict) -> None:
    """Validate a mark result against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("mark_result")
    jsonschema.validate(data, schema)
