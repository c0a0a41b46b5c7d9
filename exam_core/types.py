from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union
QuestionType = Literal["SINGLE_CHOICE","MULTI_SELECT","TRUE_FALSE","SHORT_TEXT","ESSAY","NUMBER","RANGE"]
QUESTION_TYPES: tuple[str, ...] = ("SINGLE_CHOICE","MULTI_SELECT","TRUE_FALSE","SHORT_TEXT","ESSAY","NUMBER","RANGE")
RawAnswer = Union[None, str, int, float, bool, List[str]]
@dataclass(frozen=True)
class AnswerOption:
    id: str; label: str; text: str = ""
    is_correct: bool = False
@dataclass(frozen=True)
class Question:
    id: str; type: str
    points: float = 0.0
    required: bool = False
    options: List[AnswerOption] = field(default_factory=list)
    settings: Optional[Dict[str, Any]] = None
@dataclass(frozen=True)
class EvalConfig:
    allow_partial_credit: bool = True
    # fraction of the question's points per wrong MULTI_SELECT pick, e.g. 0.25
    wrong_pick_penalty_per_option: float = 0.0
@dataclass(frozen=True)
class PerQuestionResult:
    question_id: str
    type: str
    max: float
    score: float
    needs_review: bool
    correct: Optional[bool] = None
    feedback: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "questionId": self.question_id,
            "type": self.type,
            "max": self.max,
            "score": self.score,
            "needsReview": self.needs_review,
        }
        if self.correct is not None:
            out["correct"] = self.correct
        if self.feedback is not None:
            out["feedback"] = self.feedback
        return out
@dataclass(frozen=True)
class SubmissionResult:
    total_score: float
    total_max: float
    needs_review_count: int
    by_question: List[PerQuestionResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "totalMax": self.total_max,
            "needsReviewCount": self.needs_review_count,
            "byQuestion": [row.to_dict() for row in self.by_question],
        }
