"""Pure transitions for building a survey out of draft questions.

Every function takes the current :class:`SessionState` and returns the next
one. Rejected edits return the state they were given, unchanged.
"""

from __future__ import annotations

import logging

from personality_survey.models.session import SessionState
from personality_survey.models.survey import MIN_OPTIONS, DraftQuestion, Option, Question

logger = logging.getLogger(__name__)


def _in_range(state: SessionState, index: int) -> bool:
    return 0 <= index < len(state.draft.options)


def _with_draft(state: SessionState, draft: DraftQuestion) -> SessionState:
    return state.model_copy(update={"draft": draft})


def add_option(state: SessionState) -> SessionState:
    """Append an empty option scored one higher than the current option count."""

    options = state.draft.options
    option = Option(text="", score=len(options) + 1)
    return _with_draft(state, state.draft.model_copy(update={"options": (*options, option)}))


def update_option(state: SessionState, index: int, text: str) -> SessionState:
    """Replace the label of the draft option at ``index``."""

    if not _in_range(state, index):
        return state

    options = list(state.draft.options)
    options[index] = options[index].model_copy(update={"text": text})
    return _with_draft(state, state.draft.model_copy(update={"options": tuple(options)}))


def update_option_score(state: SessionState, index: int, score: int) -> SessionState:
    """Replace the score of the draft option at ``index``; negative scores become 0."""

    if not _in_range(state, index):
        return state

    options = list(state.draft.options)
    options[index] = options[index].model_copy(update={"score": max(0, int(score))})
    return _with_draft(state, state.draft.model_copy(update={"options": tuple(options)}))


def remove_option(state: SessionState, index: int) -> SessionState:
    """Drop the draft option at ``index`` while more than two options remain."""

    options = state.draft.options
    if len(options) <= MIN_OPTIONS:
        logger.debug("Refusing to remove option %s: draft already at %s options", index, len(options))
        return state
    if not _in_range(state, index):
        return state

    remaining = tuple(option for position, option in enumerate(options) if position != index)
    return _with_draft(state, state.draft.model_copy(update={"options": remaining}))


def update_question_text(state: SessionState, text: str) -> SessionState:
    return _with_draft(state, state.draft.model_copy(update={"text": text}))


def add_question(state: SessionState) -> SessionState:
    """Commit the draft to the survey and start a fresh draft.

    Nothing changes unless the draft text and every option label are non-empty.
    """

    draft = state.draft
    if not draft.is_committable:
        logger.debug("Draft question is incomplete; not committing")
        return state

    question = Question(
        id=f"q-{state.next_question_number}",
        text=draft.text,
        options=draft.options,
    )
    survey = state.survey.model_copy(update={"questions": (*state.survey.questions, question)})
    logger.debug("Added question %s with %s options", question.id, len(question.options))
    return state.model_copy(
        update={
            "survey": survey,
            "draft": DraftQuestion.initial(),
            "next_question_number": state.next_question_number + 1,
        }
    )


def remove_question(state: SessionState, question_id: str) -> SessionState:
    """Remove the question with ``question_id``, keeping the order of the rest."""

    questions = state.survey.questions
    remaining = tuple(question for question in questions if question.id != question_id)
    if len(remaining) == len(questions):
        return state

    return state.model_copy(update={"survey": state.survey.model_copy(update={"questions": remaining})})


def update_survey_title(state: SessionState, text: str) -> SessionState:
    return state.model_copy(update={"survey": state.survey.model_copy(update={"title": text})})


def update_survey_description(state: SessionState, text: str) -> SessionState:
    return state.model_copy(update={"survey": state.survey.model_copy(update={"description": text})})
