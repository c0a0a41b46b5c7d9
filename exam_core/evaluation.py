# exam_core/evaluation.py
from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Optional, Sequence
import logging, math

from .types import EvalConfig, PerQuestionResult, Question, RawAnswer, SubmissionResult
from .answers import (
    as_bool_pick,
    as_choice_token,
    as_choice_tokens,
    as_number,
    is_blank,
    is_real_number,
    resolve_option,
)
from .config import (
    MISSING_TARGET_FEEDBACK,
    UNANSWERED_FEEDBACK,
    UNKNOWN_TYPE_FEEDBACK,
    default_eval_config,
)


log = logging.getLogger(__name__)

Scorer = Callable[[Question, RawAnswer, float, EvalConfig], PerQuestionResult]


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def _max_points(q: Question) -> float:
    try:
        pts = float(q.points)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(pts) or pts < 0:
        return 0.0
    return pts


def _row(q: Question, max_pts: float, score: float, **extra) -> PerQuestionResult:
    return PerQuestionResult(
        question_id=q.id,
        type=q.type,
        max=max_pts,
        score=score,
        needs_review=extra.pop("needs_review", False),
        **extra,
    )


def _penalty(cfg: EvalConfig) -> float:
    try:
        return float(cfg.wrong_pick_penalty_per_option or 0.0)
    except (TypeError, ValueError):
        return 0.0


def _first_correct(q: Question):
    return next((o for o in q.options if o.is_correct), None)


def _score_single_choice(q: Question, ans: RawAnswer, max_pts: float, cfg: EvalConfig) -> PerQuestionResult:
    token = as_choice_token(ans)
    picked = resolve_option(q, token) if token is not None else None
    key = _first_correct(q)
    ok = picked is not None and key is not None and picked.label == key.label
    return _row(q, max_pts, max_pts if ok else 0.0, correct=ok)


def _score_multi_select(q: Question, ans: RawAnswer, max_pts: float, cfg: EvalConfig) -> PerQuestionResult:
    picked_ids = set()
    for token in as_choice_tokens(ans):
        opt = resolve_option(q, token)
        if opt is not None:
            picked_ids.add(opt.id)
    correct_ids = {o.id for o in q.options if o.is_correct}

    true_pos = sum(1 for oid in picked_ids if oid in correct_ids)
    false_pos = sum(1 for oid in picked_ids if oid not in correct_ids)

    # kept as three checks; duplicate option ids can make them disagree
    all_match = (
        true_pos == len(correct_ids)
        and false_pos == 0
        and len(picked_ids) == len(correct_ids)
    )

    if cfg.allow_partial_credit and correct_ids:
        penalty = _penalty(cfg)
        portion = true_pos / len(correct_ids)
        deduction = penalty * false_pos * max_pts if false_pos else 0.0
        score = portion * max_pts - deduction
    else:
        score = max_pts if all_match else 0.0
    if math.isnan(score):
        score = 0.0
    score = _clamp(score, 0.0, max_pts)
    return _row(q, max_pts, score, correct=all_match)


def _score_true_false(q: Question, ans: RawAnswer, max_pts: float, cfg: EvalConfig) -> PerQuestionResult:
    key = _first_correct(q)
    key_is_true = any(o.is_correct and o.label == "A" for o in q.options) or (
        str((key.text if key else "") or "").upper() == "TRUE"
    )
    picked_true = as_bool_pick(ans, lambda tok: resolve_option(q, tok))
    ok = key_is_true == picked_true
    return _row(q, max_pts, max_pts if ok else 0.0, correct=ok)


def _score_number(q: Question, ans: RawAnswer, max_pts: float, cfg: EvalConfig) -> PerQuestionResult:
    settings = q.settings if isinstance(q.settings, dict) else {}
    target = settings.get("target")
    if not is_real_number(target):
        log.debug("question %s: NUMBER without target, sent to review", q.id)
        return _row(q, max_pts, 0.0, needs_review=True, feedback=MISSING_TARGET_FEEDBACK)

    raw_tol = settings.get("tolerance")
    try:
        tol = float(raw_tol if raw_tol is not None else 0)
    except (TypeError, ValueError):
        tol = 0.0
    except OverflowError:
        tol = math.inf if raw_tol > 0 else 0.0
    if math.isnan(tol):
        tol = 0.0

    try:
        goal = float(target)
    except OverflowError:
        goal = math.inf if target > 0 else -math.inf

    val = as_number(ans)
    ok = math.isfinite(val) and abs(val - goal) <= max(0.0, tol)
    return _row(q, max_pts, max_pts if ok else 0.0, correct=ok)


def _score_manual(q: Question, ans: RawAnswer, max_pts: float, cfg: EvalConfig) -> PerQuestionResult:
    # no answer key exists for these types; a reviewer assigns the score
    return _row(q, max_pts, 0.0, needs_review=True)


SCORERS: Dict[str, Scorer] = {
    "SINGLE_CHOICE": _score_single_choice,
    "MULTI_SELECT": _score_multi_select,
    "TRUE_FALSE": _score_true_false,
    "NUMBER": _score_number,
    "RANGE": _score_manual,
    "SHORT_TEXT": _score_manual,
    "ESSAY": _score_manual,
}


def evaluate_question(q: Question, ans: RawAnswer, cfg: EvalConfig) -> PerQuestionResult:
    max_pts = _max_points(q)
    if q.required and is_blank(ans):
        return _row(q, max_pts, 0.0, correct=False, feedback=UNANSWERED_FEEDBACK)
    scorer = SCORERS.get(q.type) if isinstance(q.type, str) else None
    if scorer is None:
        log.debug("question %s: unknown type %r, sent to review", q.id, q.type)
        return _row(q, max_pts, 0.0, needs_review=True, feedback=UNKNOWN_TYPE_FEEDBACK)
    return scorer(q, ans, max_pts, cfg)


def evaluate(
    questions: Sequence[Question],
    answers: Optional[Mapping[str, RawAnswer]] = None,
    config: Optional[EvalConfig] = None,
) -> SubmissionResult:
    """
    Score a submission.
    - questions: catalog in display order; output rows keep this order
    - answers: question id -> raw submitted value (missing ids count as None)
    - config: scoring policy; None uses the configured defaults
    Never raises on odd answer shapes; problems show up as review flags/feedback.
    """
    cfg = config if config is not None else default_eval_config()
    answers = answers or {}

    by_question: List[PerQuestionResult] = [
        evaluate_question(q, answers.get(q.id), cfg) for q in questions
    ]
    total_score = sum((r.score for r in by_question), 0.0)
    total_max = sum((r.max for r in by_question), 0.0)
    needs_review_count = sum(1 for r in by_question if r.needs_review)
    return SubmissionResult(
        total_score=total_score,
        total_max=total_max,
        needs_review_count=needs_review_count,
        by_question=by_question,
    )


evaluate_submission = evaluate

__all__ = ["evaluate", "evaluate_submission", "evaluate_question", "SCORERS"]
