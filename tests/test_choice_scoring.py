from __future__ import annotations

import pytest

from exam_core.evaluation import evaluate
from exam_core.types import AnswerOption, EvalConfig, Question

from tests.conftest import build_choice_question, build_true_false


def _one(q, ans, cfg=None):
    return evaluate([q], {q.id: ans}, cfg or EvalConfig()).by_question[0]


# ---- SINGLE_CHOICE ----

@pytest.mark.parametrize("token", ["q1-b", "B", "b", "  b  "])
def test_single_choice_by_id_or_label(token):
    q = build_choice_question("q1", correct=("B",), points=2.0)
    row = _one(q, token)
    assert row.score == 2.0
    assert row.correct is True
    assert row.needs_review is False


@pytest.mark.parametrize("token", ["q1-a", "C", "nonsense", "q9-b"])
def test_single_choice_wrong_or_unresolved(token):
    q = build_choice_question("q1", correct=("B",))
    row = _one(q, token)
    assert row.score == 0
    assert row.correct is False


@pytest.mark.parametrize("ans", [1, True, ["B"], 2.5])
def test_single_choice_non_string_is_no_pick(ans):
    q = build_choice_question("q1", correct=("B",))
    row = _one(q, ans)
    assert row.score == 0 and row.correct is False


def test_single_choice_id_wins_over_label():
    # option whose id collides with another option's label
    q = Question(
        id="q",
        type="SINGLE_CHOICE",
        points=1,
        options=[
            AnswerOption(id="B", label="A", text="x", is_correct=True),
            AnswerOption(id="o2", label="B", text="y", is_correct=False),
        ],
    )
    assert _one(q, "B").correct is True


def test_single_choice_first_correct_is_key():
    q = build_choice_question("q1", correct=("A", "C"))
    assert _one(q, "A").correct is True
    assert _one(q, "C").correct is False


def test_single_choice_without_key_never_correct():
    q = build_choice_question("q1", correct=())
    assert _one(q, "A").score == 0


# ---- MULTI_SELECT ----

def _ms(points=4.0):
    return build_choice_question("m", qtype="MULTI_SELECT", correct=("A", "B"), points=points)


@pytest.mark.parametrize(
    "ans,expected",
    [
        (["A", "B"], 4.0),
        (["m-b", "a"], 4.0),
        (["A", "B", "A"], 4.0),
        (["A"], 0.0),
        (["A", "B", "C"], 0.0),
        (["C", "D"], 0.0),
        ([], 0.0),
        ("A", 0.0),
    ],
)
def test_multi_select_all_or_nothing(ans, expected):
    row = _one(_ms(), ans, EvalConfig(allow_partial_credit=False))
    assert row.score == expected
    assert row.correct is (expected == 4.0)


def test_multi_select_partial_credit_with_penalty():
    row = _one(_ms(points=8.0), ["A", "C"], EvalConfig(wrong_pick_penalty_per_option=0.25))
    assert row.score == pytest.approx(0.25 * 8.0)
    assert row.correct is False


def test_multi_select_partial_credit_without_penalty():
    row = _one(_ms(), "b", EvalConfig())
    assert row.score == pytest.approx(2.0)
    assert row.correct is False


def test_multi_select_penalty_clamps_at_zero():
    row = _one(_ms(), ["A", "C", "D"], EvalConfig(wrong_pick_penalty_per_option=1.0))
    assert row.score == 0.0


def test_multi_select_unresolved_tokens_are_dropped():
    row = _one(_ms(), ["A", "B", "zzz", 7], EvalConfig())
    assert row.score == 4.0
    assert row.correct is True


def test_multi_select_no_correct_options_falls_back_to_exact_match():
    q = build_choice_question("m", qtype="MULTI_SELECT", correct=(), points=3.0)
    assert _one(q, [], EvalConfig()).score == 3.0
    assert _one(q, ["A"], EvalConfig()).score == 0.0


# ---- TRUE_FALSE ----

@pytest.mark.parametrize("ans", [True, "TRUE", "true", " True ", "A", "tf-a"])
def test_true_false_label_a_means_true(ans):
    q = build_true_false("tf", true_is_correct=True)
    row = _one(q, ans)
    assert row.correct is True
    assert row.score == q.points


@pytest.mark.parametrize("ans", [False, "FALSE", "b", "tf-b", "maybe", 0])
def test_true_false_picks_that_mean_false(ans):
    q = build_true_false("tf", true_is_correct=True)
    assert _one(q, ans).correct is False


def test_true_false_string_true_ignores_labels():
    # keyed through option text; labels are not A/B
    q = Question(
        id="tf",
        type="TRUE_FALSE",
        points=1,
        options=[
            AnswerOption(id="t", label="X", text="true", is_correct=True),
            AnswerOption(id="f", label="Y", text="false", is_correct=False),
        ],
    )
    assert _one(q, "TRUE").correct is True
    assert _one(q, True).correct is True
    assert _one(q, "FALSE").correct is False
    # resolves to X, which is not label "A"
    assert _one(q, "t").correct is False


def test_true_false_false_key():
    q = build_true_false("tf", true_is_correct=False)
    assert _one(q, False).correct is True
    assert _one(q, "B").correct is True
    assert _one(q, "TRUE").correct is False
