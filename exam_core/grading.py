"""Helpers around the engine used at submit time and by the reviewer screen."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Sequence

from . import config
from .answers import is_blank
from .types import PerQuestionResult, Question, RawAnswer, SubmissionResult


def missing_required(questions: Sequence[Question], answers: Mapping[str, RawAnswer]) -> List[str]:
    """Ids of required questions left blank, in catalog order."""

    return [q.id for q in questions if q.required and is_blank(answers.get(q.id))]


def percent(obtained: float, total: float, ndigits: Optional[int] = None) -> float:
    if ndigits is None:
        ndigits = config.PERCENT_DIGITS
    if not total or total <= 0:
        return 0.0
    scale = 10 ** ndigits
    # half-up, like the web app's Math.round; round() would go half-to-even
    x = obtained / total * (100 * scale)
    if not math.isfinite(x):
        return 0.0
    return math.floor(x + 0.5) / scale


def _override_score(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        v = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def apply_manual_grades(result: SubmissionResult, overrides: Mapping[str, object]) -> SubmissionResult:
    """
    Return a copy of `result` with reviewer scores written over the engine's.
    - overrides: question id -> score; non-numeric or non-finite scores count as 0
    - overridden rows are no longer pending review
    Unknown question ids raise KeyError.
    """
    rows: Dict[str, PerQuestionResult] = {r.question_id: r for r in result.by_question}
    unknown = [qid for qid in overrides if qid not in rows]
    if unknown:
        raise KeyError(f"no such question in result: {', '.join(map(str, unknown))}")

    by_question = [
        replace(r, score=_override_score(overrides[r.question_id]), needs_review=False)
        if r.question_id in overrides else r
        for r in result.by_question
    ]
    return SubmissionResult(
        total_score=sum((r.score for r in by_question), 0.0),
        total_max=sum((r.max for r in by_question), 0.0),
        needs_review_count=sum(1 for r in by_question if r.needs_review),
        by_question=by_question,
    )


__all__ = ["missing_required", "percent", "apply_manual_grades"]
