from __future__ import annotations

import streamlit as st

from personality_survey.models.actions import SurveyAction
from personality_survey.models.session import SessionState
from personality_survey.services import session

SESSION_KEY = "survey_session"


def ensure_defaults() -> None:
    """Create a blank survey session the first time the page runs."""

    st.session_state.setdefault(SESSION_KEY, session.new_session())


def get_session() -> SessionState:
    """Return the current survey session."""

    return st.session_state[SESSION_KEY]


def dispatch(action: SurveyAction) -> None:
    """Apply ``action`` and store the resulting session in place of the old one."""

    st.session_state[SESSION_KEY] = session.reduce(get_session(), action)
