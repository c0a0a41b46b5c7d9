from __future__ import annotations

import pytest

from exam_core.types import AnswerOption, Question


def build_choice_question(
    qid: str = "q1",
    *,
    qtype: str = "SINGLE_CHOICE",
    correct: tuple[str, ...] = ("A",),
    labels: tuple[str, ...] = ("A", "B", "C", "D"),
    points: float = 2.0,
    required: bool = False,
) -> Question:
    """Options get ids '<qid>-<label>' and text 'Option <label>'."""

    options = [
        AnswerOption(
            id=f"{qid}-{label.lower()}",
            label=label,
            text=f"Option {label}",
            is_correct=label in correct,
        )
        for label in labels
    ]
    return Question(id=qid, type=qtype, points=points, required=required, options=options)


def build_true_false(
    qid: str = "tf1",
    *,
    true_is_correct: bool = True,
    texts: tuple[str, str] = ("Benar", "Salah"),
    points: float = 1.0,
    required: bool = False,
) -> Question:
    options = [
        AnswerOption(id=f"{qid}-a", label="A", text=texts[0], is_correct=true_is_correct),
        AnswerOption(id=f"{qid}-b", label="B", text=texts[1], is_correct=not true_is_correct),
    ]
    return Question(id=qid, type="TRUE_FALSE", points=points, required=required, options=options)


def build_plain(
    qid: str,
    qtype: str,
    *,
    points: float = 4.0,
    required: bool = False,
    settings: dict | None = None,
) -> Question:
    return Question(id=qid, type=qtype, points=points, required=required, settings=settings)


@pytest.fixture
def mixed_catalog() -> list[Question]:
    return [
        build_choice_question("sc", points=2.0),
        build_choice_question("ms", qtype="MULTI_SELECT", correct=("A", "C"), points=4.0),
        build_plain("es", "ESSAY", points=4.0),
    ]


@pytest.fixture
def catalog_payload() -> list[dict]:
    """Admin export shape: camelCase keys, numeric ids, one unknown type."""

    return [
        {
            "id": "q1",
            "type": "SINGLE_CHOICE",
            "points": 2,
            "required": True,
            "options": [
                {"id": 11, "label": "B", "text": "Jakarta", "isCorrect": True, "order": 2},
                {"id": 10, "label": "A", "text": "Bandung", "isCorrect": False, "order": 1},
            ],
        },
        {"id": "q2", "type": "NUMBER", "points": 3, "settings": {"target": 10, "tolerance": 0.5}},
        {"id": "q3", "type": "MATRIX", "points": 1},
    ]
