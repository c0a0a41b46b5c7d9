"""Conversions from the untyped raw answer to what each scorer needs.

The answer store hands over whatever the participant's client sent: ``None``,
a string, a number, a boolean or a list of strings. Each question type reads
that value through exactly one of the helpers below, so a shape that does not
fit the type degrades to "no pick" instead of raising.
"""
from __future__ import annotations

import math
from typing import Callable, List, Optional

from .types import AnswerOption, Question, RawAnswer


def is_blank(raw: RawAnswer) -> bool:
    if raw is None:
        return True
    if isinstance(raw, (list, tuple)) and len(raw) == 0:
        return True
    if isinstance(raw, str) and raw.strip() == "":
        return True
    return False


def _token_text(token: object) -> str:
    if isinstance(token, bool):
        # match the lowercase literals the web client serialises
        return "true" if token else "false"
    return str(token).strip()


def resolve_option(question: Question, token: object) -> Optional[AnswerOption]:
    """Match a token to an option by id first, then by label ignoring case."""

    s = _token_text(token)
    for opt in question.options:
        if opt.id == s:
            return opt
    wanted = s.upper()
    for opt in question.options:
        if str(opt.label or "").upper() == wanted:
            return opt
    return None


def as_choice_token(raw: RawAnswer) -> Optional[str]:
    return raw if isinstance(raw, str) else None


def as_choice_tokens(raw: RawAnswer) -> List[str]:
    if isinstance(raw, (list, tuple)):
        return [_token_text(t) for t in raw]
    if isinstance(raw, str):
        return [raw]
    return []


def as_bool_pick(raw: RawAnswer, resolve: Callable[[str], Optional[AnswerOption]]) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        s = raw.strip().upper()
        if s in ("TRUE", "FALSE"):
            return s == "TRUE"
        opt = resolve(raw)
        return opt is not None and opt.label == "A"
    return False


def as_number(raw: RawAnswer) -> float:
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError:
            return math.nan
    if isinstance(raw, str) and raw.strip() != "":
        s = raw.strip()
        if "_" in s:
            return math.nan
        try:
            return float(s)
        except ValueError:
            return math.nan
    return math.nan


def is_real_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
