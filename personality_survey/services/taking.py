from __future__ import annotations

import logging

from personality_survey.models.session import Creating, SessionState, ShowingResults, TakingQuestion

from .scoring import score_survey

logger = logging.getLogger(__name__)


def can_take_survey(state: SessionState) -> bool:
    """Return True when the survey has at least one question to answer."""

    return len(state.survey.questions) > 0


def start_survey(state: SessionState) -> SessionState:
    """Begin a new take-pass at the first question with no answers recorded."""

    if not can_take_survey(state):
        logger.debug("Cannot start a survey without questions")
        return state

    logger.info("Starting survey with %s questions", len(state.survey.questions))
    return state.model_copy(update={"answers": (), "mode": TakingQuestion(index=0)})


def answer_question(state: SessionState, score: int) -> SessionState:
    """Record ``score`` for the current question and advance.

    Answering the last question computes the score summary once and shows it.
    """

    mode = state.mode
    if not isinstance(mode, TakingQuestion):
        return state

    answers = (*state.answers, int(score))
    last_index = len(state.survey.questions) - 1
    if mode.index < last_index:
        return state.model_copy(update={"answers": answers, "mode": TakingQuestion(index=mode.index + 1)})

    summary = score_survey(state.survey, answers)
    logger.info("Survey completed: %s (%s)", summary.result.category, summary.display)
    return state.model_copy(update={"answers": answers, "mode": ShowingResults(summary=summary)})


def reset_survey(state: SessionState) -> SessionState:
    """Clear the answers and go back to the first question of the same survey."""

    if state.is_creating or not can_take_survey(state):
        return state.model_copy(update={"answers": ()})
    return state.model_copy(update={"answers": (), "mode": TakingQuestion(index=0)})


def back_to_creator(state: SessionState) -> SessionState:
    """Reset the take-pass and return to editing; the survey itself is kept."""

    return reset_survey(state).model_copy(update={"mode": Creating()})


def show_creator(state: SessionState) -> SessionState:
    if state.is_creating:
        return state
    return state.model_copy(update={"mode": Creating()})
