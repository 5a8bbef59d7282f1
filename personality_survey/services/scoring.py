from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from personality_survey.models.survey import Result, ScoreSummary, Survey

# Evaluated top-down, first match wins; each bound is inclusive.
CATEGORY_THRESHOLDS: Tuple[Tuple[float, Result], ...] = (
    (
        80,
        Result(
            category="Highly Extroverted",
            description=(
                "You're outgoing, energetic, and thrive in social settings. "
                "You draw energy from interactions with others."
            ),
        ),
    ),
    (
        60,
        Result(
            category="Moderately Extroverted",
            description=(
                "You enjoy social interactions but also appreciate your alone time. "
                "You're well-balanced in your approach."
            ),
        ),
    ),
    (
        40,
        Result(
            category="Ambivert",
            description=(
                "You're right in the middle! You can be social when needed "
                "but also enjoy introspection and solitude."
            ),
        ),
    ),
    (
        20,
        Result(
            category="Moderately Introverted",
            description=(
                "You prefer quieter settings and meaningful conversations. "
                "You recharge through solitary activities."
            ),
        ),
    ),
)

FALLBACK_RESULT = Result(
    category="Highly Introverted",
    description=(
        "You're reflective, thoughtful, and prefer deep connections over large gatherings. "
        "You find energy in solitude."
    ),
)

NO_DATA_RESULT = Result(
    category="Not Enough Data",
    description="This survey has no scorable questions, so no personality type can be determined.",
)


def total_score(answers: Iterable[int]) -> int:
    """Return the sum of the recorded answer scores."""

    return sum(answers)


def max_score(survey: Survey) -> int:
    """Return the best achievable total for ``survey``."""

    return survey.max_score


def percentage(total: int, maximum: int) -> float | None:
    """Return ``total`` as a percentage of ``maximum``.

    ``None`` signals that no percentage exists because the maximum is not positive.
    """

    if maximum <= 0:
        return None
    return 100 * total / maximum


def categorize(value: float | None) -> Result:
    """Map a percentage onto one of the five personality categories."""

    if value is None:
        return NO_DATA_RESULT

    for threshold, result in CATEGORY_THRESHOLDS:
        if value >= threshold:
            return result
    return FALLBACK_RESULT


def score_survey(survey: Survey, answers: Sequence[int]) -> ScoreSummary:
    """Compute the full score summary for a finished take-pass."""

    total = total_score(answers)
    maximum = max_score(survey)
    ratio = percentage(total, maximum)
    return ScoreSummary(total=total, maximum=maximum, percentage=ratio, result=categorize(ratio))
