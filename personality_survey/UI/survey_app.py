from __future__ import annotations

import streamlit as st

from personality_survey.UI import components, state
from personality_survey.core.config import settings
from personality_survey.models.session import ShowingResults


def run_app() -> None:
    """Entry point for the Streamlit-based survey UI."""

    st.set_page_config(page_title=settings.page.title, page_icon=settings.page.icon, layout=settings.page.layout)

    state.ensure_defaults()
    current = state.get_session()

    components.render_header()
    components.render_mode_selector(current)

    if current.is_creating:
        components.render_survey_details(current)
        components.render_draft_editor(current)
        components.render_question_list(current)
        return

    if isinstance(current.mode, ShowingResults):
        components.render_results(current.mode.summary)
        return

    components.render_question(current)
