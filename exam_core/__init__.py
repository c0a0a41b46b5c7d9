from .types import (
    AnswerOption,
    EvalConfig,
    PerQuestionResult,
    Question,
    QuestionType,
    RawAnswer,
    SubmissionResult,
)
from .evaluation import evaluate, evaluate_submission
from .catalog import CatalogError, load_catalog, parse_catalog
from .grading import apply_manual_grades, missing_required, percent

__all__ = [
    "AnswerOption",
    "EvalConfig",
    "PerQuestionResult",
    "Question",
    "QuestionType",
    "RawAnswer",
    "SubmissionResult",
    "evaluate",
    "evaluate_submission",
    "CatalogError",
    "load_catalog",
    "parse_catalog",
    "apply_manual_grades",
    "missing_required",
    "percent",
]
