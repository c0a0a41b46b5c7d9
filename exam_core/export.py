"""Helpers to export a scoring breakdown in JSON/CSV formats."""
from __future__ import annotations

from typing import Any, Dict, List
import csv
import io

from .grading import percent
from .types import PerQuestionResult, SubmissionResult

_FIELDS: tuple[str, ...] = (
    "questionId",
    "type",
    "max",
    "score",
    "needsReview",
    "correct",
    "feedback",
)


def _normalize_row(row: PerQuestionResult) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    data = row.to_dict()
    for key in _FIELDS:
        val = data.get(key)
        if key in {"max", "score"}:
            out[key] = float(val or 0.0)
        elif key in {"needsReview", "correct"}:
            out[key] = "" if val is None else ("true" if val else "false")
        else:
            out[key] = "" if val is None else str(val)
    return out


def to_json(result: SubmissionResult) -> Dict[str, Any]:
    """Return a JSON-safe payload with the breakdown and the rounded percentage."""

    payload = result.to_dict()
    payload["percent"] = percent(result.total_score, result.total_max)
    return payload


def to_csv(result: SubmissionResult) -> str:
    """Render per-question rows as CSV with a fixed header."""

    rows: List[Dict[str, Any]] = [_normalize_row(r) for r in result.by_question]
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_FIELDS, lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return buf.getvalue()


__all__ = ["to_json", "to_csv"]
