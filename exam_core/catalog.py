"""Load question catalogs exported by the exam admin into engine types.

Accepts the admin export shape (camelCase, ``isCorrect``) as well as
snake_case keys. Question ``type`` is kept as a free string so that newer
types reach the engine, which sends them to review.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .types import AnswerOption, Question


class CatalogError(ValueError):
    pass


class OptionModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    label: str = ""
    text: str = ""
    is_correct: bool = Field(False, validation_alias=AliasChoices("isCorrect", "is_correct"))
    order: Optional[int] = None


class QuestionModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    type: str
    points: float = 0.0
    required: bool = False
    options: List[OptionModel] = Field(default_factory=list)
    settings: Optional[Dict[str, Any]] = None

    def to_question(self) -> Question:
        opts = self.options
        if any(o.order is not None for o in opts):
            # stable: options without an order keep their place after ordered ones
            opts = sorted(opts, key=lambda o: (o.order is None, o.order or 0))
        return Question(
            id=self.id,
            type=self.type,
            points=self.points,
            required=self.required,
            options=[
                AnswerOption(id=o.id, label=o.label, text=o.text, is_correct=o.is_correct)
                for o in opts
            ],
            settings=self.settings,
        )


def parse_catalog(data: Union[List[Any], Dict[str, Any]]) -> List[Question]:
    raw = data.get("questions") if isinstance(data, dict) else data
    if not isinstance(raw, list):
        raise CatalogError("catalog must be a list of questions or {'questions': [...]}")
    out: List[Question] = []
    for idx, entry in enumerate(raw):
        try:
            out.append(QuestionModel.model_validate(entry).to_question())
        except ValidationError as e:
            raise CatalogError(f"question #{idx}: {e}") from e
    return out


def load_catalog(path: Union[str, Path]) -> List[Question]:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise CatalogError(f"cannot read catalog {p}: {e}") from e
    return parse_catalog(data)


__all__ = ["CatalogError", "OptionModel", "QuestionModel", "parse_catalog", "load_catalog"]
