#!/usr/bin/env python3
"""
Repeatability harness: mark the same answer N times; assert identical results.
Exits 0 if stable, 1 if unstable. Prints a variance report on failure.

Usage: python scripts/repeatability_check.py [--runs 10] [--answer path]

Without --answer, the built-in model answer is marked.
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from marking.content import MODEL_ANSWER
from marking.scoring import detect_criteria, mark_prompting_response
from marking.scoring.criteria import matched_patterns

DEFAULT_RUNS = 10


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--answer", type=Path, default=None, help="Text file holding the answer to mark")
    args = parser.parse_args()

    if args.answer:
        if not args.answer.exists():
            print(f"Error: answer file not found: {args.answer}", file=sys.stderr)
            sys.exit(1)
        answer_text = args.answer.read_text(encoding="utf-8")
    else:
        answer_text = MODEL_ANSWER

    print(f"Marking answer {args.runs} times...")
    results = [mark_prompting_response(answer_text) for _ in range(args.runs)]

    first = results[0]
    variances = []
    for i, r in enumerate(results[1:], start=1):
        run_num = i + 1
        for field in sorted(first):
            if r.get(field) != first.get(field):
                variances.append((field, run_num, f"{r.get(field)!r} != {first.get(field)!r}"))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        for field, run, detail in variances:
            print(f"  Run {run} - {field}: {detail}")
        print("\nRepeatability check FAILED.")
        sys.exit(1)

    print("\nPASS: Repeatability check passed.")
    print("\n--- Run metrics ---")
    print(f"  runs: {args.runs}")
    print(f"  word_count: {first['wordCount']}")
    print(f"  gated: {first['gated']}")
    if not first["gated"]:
        print(f"  score: {first['score']}")
        print(f"  criteria: {json.dumps(detect_criteria(answer_text))}")
        print(f"  matched_patterns: {json.dumps(matched_patterns(answer_text))}")
    sys.exit(0)


if __name__ == "__main__":
    main()
