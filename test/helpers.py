from __future__ import annotations

from typing import Sequence, Tuple

from personality_survey.models import actions
from personality_survey.models.session import SessionState
from personality_survey.services import session


def build_session(questions: Sequence[Tuple[str, Sequence[Tuple[str, int]]]]) -> SessionState:
    """Author ``questions`` through the reducer, the way the UI would."""

    current = session.new_session()
    for text, options in questions:
        current = session.reduce(current, actions.UpdateQuestionText(text=text))
        for _ in range(len(options) - len(current.draft.options)):
            current = session.reduce(current, actions.AddOption())
        for index, (label, score) in enumerate(options):
            current = session.reduce(current, actions.UpdateOption(index=index, text=label))
            current = session.reduce(current, actions.UpdateOptionScore(index=index, score=score))
        current = session.reduce(current, actions.AddQuestion())
    return current


def answer_all(current: SessionState, scores: Sequence[int]) -> SessionState:
    current = session.reduce(current, actions.StartSurvey())
    for score in scores:
        current = session.reduce(current, actions.AnswerQuestion(score=score))
    return current
