from __future__ import annotations

import pytest
from helpers import answer_all, build_session

from personality_survey.models.survey import Option, Question, Survey
from personality_survey.services import scoring


def _survey(*option_scores: tuple[int, ...]) -> Survey:
    questions = tuple(
        Question(
            id=f"q-{number}",
            text=f"Question {number}",
            options=tuple(Option(text=f"Option {score}", score=score) for score in scores),
        )
        for number, scores in enumerate(option_scores, start=1)
    )
    return Survey(title="Test", questions=questions)


@pytest.mark.parametrize(
    ("percentage", "category"),
    [
        (100, "Highly Extroverted"),
        (80, "Highly Extroverted"),
        (79.999, "Moderately Extroverted"),
        (60, "Moderately Extroverted"),
        (59.9, "Ambivert"),
        (40, "Ambivert"),
        (39.99, "Moderately Introverted"),
        (20, "Moderately Introverted"),
        (19.999, "Highly Introverted"),
        (0, "Highly Introverted"),
    ],
)
def test_categorize_uses_inclusive_lower_bounds(percentage: float, category: str) -> None:
    assert scoring.categorize(percentage).category == category


def test_categorize_returns_sentinel_without_percentage() -> None:
    result = scoring.categorize(None)

    assert result == scoring.NO_DATA_RESULT
    assert result.category == "Not Enough Data"


def test_percentage_is_none_for_zero_maximum() -> None:
    assert scoring.percentage(0, 0) is None
    assert scoring.percentage(5, 10) == 50


def test_max_score_sums_the_best_option_of_each_question() -> None:
    survey = _survey((1, 2, 3), (5, 0), (2, 2))

    assert scoring.max_score(survey) == 3 + 5 + 2


def test_single_yes_answer_is_highly_extroverted() -> None:
    survey = _survey((10, 0))

    summary = scoring.score_survey(survey, [10])

    assert summary.total == 10
    assert summary.maximum == 10
    assert summary.percentage == 100
    assert summary.result.category == "Highly Extroverted"
    assert summary.display == "10 / 10"


def test_lowest_answers_on_five_point_scale_hit_the_twenty_percent_boundary() -> None:
    survey = _survey((1, 2, 3, 4, 5), (1, 2, 3, 4, 5))

    summary = scoring.score_survey(survey, [1, 1])

    assert summary.total == 2
    assert summary.maximum == 10
    assert summary.percentage == 20
    assert summary.result.category == "Moderately Introverted"


def test_empty_survey_scores_to_sentinel() -> None:
    summary = scoring.score_survey(Survey(), [])

    assert summary.percentage is None
    assert summary.result == scoring.NO_DATA_RESULT
    assert summary.display == "0 / 0"


def test_total_stays_within_bounds_for_non_negative_scores() -> None:
    survey = _survey((0, 3, 1), (2, 4), (1, 1, 6))
    choices = [
        [0, 2, 1],
        [3, 4, 6],
        [1, 4, 1],
    ]

    for answers in choices:
        summary = scoring.score_survey(survey, answers)
        assert 0 <= summary.total <= summary.maximum


def test_every_category_carries_its_description() -> None:
    results = [result for _, result in scoring.CATEGORY_THRESHOLDS] + [scoring.FALLBACK_RESULT]

    assert [result.category for result in results] == [
        "Highly Extroverted",
        "Moderately Extroverted",
        "Ambivert",
        "Moderately Introverted",
        "Highly Introverted",
    ]
    assert results[2].description == (
        "You're right in the middle! You can be social when needed but also enjoy introspection and solitude."
    )
    assert all(result.description for result in results)


def test_percentage_is_none_for_negative_maximum() -> None:
    assert scoring.percentage(-5, -1) is None
    assert scoring.categorize(scoring.percentage(-5, -1)) == scoring.NO_DATA_RESULT


def test_negative_authored_scores_cannot_reach_the_top_category() -> None:
    state = answer_all(build_session([("Crowds?", [("Hate", -5), ("Meh", -1)])]), [0])

    summary = state.mode.summary
    assert (summary.total, summary.maximum) == (0, 0)
    assert summary.result == scoring.NO_DATA_RESULT
