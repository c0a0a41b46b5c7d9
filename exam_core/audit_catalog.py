from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from .answers import is_real_number
from .catalog import CatalogError, load_catalog
from .evaluation import SCORERS
from .types import Question

log = logging.getLogger(__name__)

SINGLE_KEY_TYPES: tuple[str, ...] = ("SINGLE_CHOICE", "TRUE_FALSE")


def _audit_question(q: Question) -> list[str]:
    warnings: list[str] = []
    n_correct = sum(1 for o in q.options if o.is_correct)

    if q.type not in SCORERS:
        warnings.append(f"{q.id}: unknown type {q.type!r} (always sent to review)")
    if is_real_number(q.points) and q.points < 0:
        warnings.append(f"{q.id}: negative points {q.points}")

    if q.type in SINGLE_KEY_TYPES and n_correct != 1:
        warnings.append(f"{q.id}: {q.type} has {n_correct} correct options (expected 1)")
    elif q.type == "MULTI_SELECT" and n_correct == 0:
        warnings.append(f"{q.id}: MULTI_SELECT has no correct options")

    settings = q.settings if isinstance(q.settings, dict) else {}
    if q.type == "NUMBER" and not is_real_number(settings.get("target")):
        warnings.append(f"{q.id}: NUMBER without numeric target")
    if q.type == "RANGE":
        lo, hi = settings.get("min"), settings.get("max")
        if not (is_real_number(lo) and is_real_number(hi)):
            warnings.append(f"{q.id}: RANGE without numeric min/max")
        elif lo > hi:
            warnings.append(f"{q.id}: RANGE min {lo} > max {hi}")

    dup_opts = [oid for oid, n in Counter(o.id for o in q.options).items() if n > 1]
    for oid in dup_opts:
        warnings.append(f"{q.id}: duplicate option id {oid!r}")
    return warnings


def audit_questions(questions: Iterable[Question]) -> dict[str, object]:
    qs = list(questions)
    warnings: list[str] = []
    totals: dict[str, int] = dict(Counter(q.type for q in qs))

    for qid, n in Counter(q.id for q in qs).items():
        if n > 1:
            warnings.append(f"duplicate question id {qid!r} ({n}x)")
    for q in qs:
        warnings.extend(_audit_question(q))

    return {"warnings": warnings, "totals": totals, "questions": len(qs)}


def print_report(summary: dict[str, object]) -> None:
    print("=== Catalog Audit ===")
    print(f"Questions: {summary['questions']}")
    totals: dict[str, int] = summary["totals"]  # type: ignore[assignment]
    for qtype in sorted(totals):
        print(f"  {qtype:<14}{totals[qtype]:4d}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")


def write_summary(summary: dict[str, object], path: Path) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check a question catalog for grading defects.")
    ap.add_argument("--catalog", required=True, help="catalog JSON file")
    ap.add_argument("--out", default=None, help="write the JSON summary here")
    a = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    try:
        questions = load_catalog(a.catalog)
    except CatalogError as e:
        log.error("%s", e)
        return 1
    summary = audit_questions(questions)
    print_report(summary)
    if a.out:
        write_summary(summary, Path(a.out))
        log.info("Summary written to %s", a.out)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
