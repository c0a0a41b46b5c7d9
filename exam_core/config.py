from __future__ import annotations
import os, json, pathlib
from typing import Optional

from .types import EvalConfig


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


ALLOW_PARTIAL_CREDIT: bool = True
WRONG_PICK_PENALTY: float = 0.0
PERCENT_DIGITS: int = 2

UNANSWERED_FEEDBACK: str = "Tidak dijawab"
MISSING_TARGET_FEEDBACK: str = "Target number tidak diset"
UNKNOWN_TYPE_FEEDBACK: str = "Tipe tidak dikenali"

# // env overrides for deployments; defaults match the exam app.
ALLOW_PARTIAL_CREDIT = _env_bool("EXAM_ALLOW_PARTIAL_CREDIT", ALLOW_PARTIAL_CREDIT)
WRONG_PICK_PENALTY = _env_float("EXAM_WRONG_PICK_PENALTY", WRONG_PICK_PENALTY)
PERCENT_DIGITS = _env_int("EXAM_PERCENT_DIGITS", PERCENT_DIGITS)


def load_config(path: str = "config.json") -> dict:
    cfg: dict = {}
    p = pathlib.Path(path)
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    if not isinstance(cfg, dict):
        cfg = {}
    e = os.environ
    if e.get("EXAM_ALLOW_PARTIAL_CREDIT"):
        cfg["allowPartialCredit"] = _env_bool("EXAM_ALLOW_PARTIAL_CREDIT", ALLOW_PARTIAL_CREDIT)
    if e.get("EXAM_WRONG_PICK_PENALTY"):
        cfg["wrongPickPenaltyPerOption"] = _env_float("EXAM_WRONG_PICK_PENALTY", WRONG_PICK_PENALTY)
    return cfg


def default_eval_config(cfg: Optional[dict] = None) -> EvalConfig:
    """Build an EvalConfig from a load_config() dict, falling back to module defaults."""

    cfg = cfg or {}
    allow = cfg.get("allowPartialCredit", ALLOW_PARTIAL_CREDIT)
    penalty = cfg.get("wrongPickPenaltyPerOption", WRONG_PICK_PENALTY)
    try:
        penalty = float(penalty)
    except (TypeError, ValueError):
        penalty = WRONG_PICK_PENALTY
    return EvalConfig(allow_partial_credit=bool(allow), wrong_pick_penalty_per_option=penalty)
