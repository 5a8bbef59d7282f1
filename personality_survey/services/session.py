"""Single entry point for moving a survey session from one state to the next."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from personality_survey.models import actions
from personality_survey.models.session import SessionState, TakingQuestion
from personality_survey.models.survey import MIN_OPTIONS, Question

from . import authoring, taking

logger = logging.getLogger(__name__)

_Handler = Callable[[SessionState, actions.SurveyAction], SessionState]

_AUTHORING_HANDLERS: Dict[type, _Handler] = {
    actions.AddOption: lambda state, action: authoring.add_option(state),
    actions.UpdateOption: lambda state, action: authoring.update_option(state, action.index, action.text),
    actions.UpdateOptionScore: lambda state, action: authoring.update_option_score(state, action.index, action.score),
    actions.RemoveOption: lambda state, action: authoring.remove_option(state, action.index),
    actions.UpdateQuestionText: lambda state, action: authoring.update_question_text(state, action.text),
    actions.AddQuestion: lambda state, action: authoring.add_question(state),
    actions.RemoveQuestion: lambda state, action: authoring.remove_question(state, action.question_id),
    actions.UpdateSurveyTitle: lambda state, action: authoring.update_survey_title(state, action.text),
    actions.UpdateSurveyDescription: lambda state, action: authoring.update_survey_description(state, action.text),
}

_SESSION_HANDLERS: Dict[type, _Handler] = {
    actions.StartSurvey: lambda state, action: taking.start_survey(state),
    actions.AnswerQuestion: lambda state, action: taking.answer_question(state, action.score),
    actions.ResetSurvey: lambda state, action: taking.reset_survey(state),
    actions.BackToCreator: lambda state, action: taking.back_to_creator(state),
    actions.ShowCreator: lambda state, action: taking.show_creator(state),
}


@dataclass(frozen=True)
class Progress:
    """Position of the respondent within the survey being taken."""

    index: int
    total: int

    @property
    def label(self) -> str:
        return f"Question {self.index + 1} of {self.total}"

    @property
    def fraction(self) -> float:
        return (self.index + 1) / self.total


def new_session() -> SessionState:
    """Return a blank session: empty survey, fresh draft, creating mode."""

    return SessionState()


def reduce(state: SessionState, action: actions.SurveyAction | Mapping[str, Any]) -> SessionState:
    """Apply ``action`` to ``state`` and return the resulting state.

    ``action`` may also be the dict form of an action, e.g. ``{"type": "add_option"}``.

    Authoring actions only take effect while the survey is being created, so
    the question list cannot shift underneath a take-pass.
    """

    action = actions.parse_action(action)
    handler = _SESSION_HANDLERS.get(type(action))
    if handler is None:
        handler = _AUTHORING_HANDLERS[type(action)]
        if not state.is_creating:
            logger.debug("Ignoring %s outside of creating mode", action.type)
            return state

    logger.debug("Dispatching %s", action.type)
    return handler(state, action)


def current_question(state: SessionState) -> Question | None:
    """Return the question being answered, if a take-pass is in progress."""

    mode = state.mode
    if not isinstance(mode, TakingQuestion):
        return None
    questions = state.survey.questions
    if mode.index >= len(questions):
        return None
    return questions[mode.index]


def progress(state: SessionState) -> Progress | None:
    """Return the progress indicator for the current question, if any."""

    if current_question(state) is None:
        return None
    return Progress(index=state.mode.index, total=len(state.survey.questions))


def can_add_question(state: SessionState) -> bool:
    return state.draft.is_committable


def can_remove_options(state: SessionState) -> bool:
    return len(state.draft.options) > MIN_OPTIONS


def can_take_survey(state: SessionState) -> bool:
    return taking.can_take_survey(state)
