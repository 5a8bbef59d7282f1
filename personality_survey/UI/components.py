from __future__ import annotations

from typing import Any, Callable

import streamlit as st

from personality_survey.models import actions
from personality_survey.models.session import SessionState
from personality_survey.models.survey import Question, ScoreSummary
from personality_survey.services import session

from . import state

TITLE_KEY = "survey_title"
DESCRIPTION_KEY = "survey_description"
QUESTION_TEXT_KEY = "draft_question_text"
OPTION_TEXT_PREFIX = "draft_option_text_"
OPTION_SCORE_PREFIX = "draft_option_score_"
ANSWER_PREFIX = "answer_"


def _bind(key: str, value: Any) -> None:
    """Mirror the session value into a widget key before the widget renders."""

    st.session_state[key] = value


def _on_change(key: str, build: Callable[[Any], actions.SurveyAction]) -> Callable[[], None]:
    def _callback() -> None:
        state.dispatch(build(st.session_state[key]))

    return _callback


def render_header() -> None:
    st.title("Personality Survey")
    st.caption("Create and discover your personality type")


def render_mode_selector(current: SessionState) -> None:
    """Render the Create Survey / Take Survey tabs."""

    create_col, take_col = st.columns(2)
    with create_col:
        st.button(
            "Create Survey",
            key="mode_create_button",
            type="primary" if current.is_creating else "secondary",
            on_click=state.dispatch,
            args=(actions.ShowCreator(),),
        )
    with take_col:
        st.button(
            "Take Survey",
            key="mode_take_button",
            type="secondary" if current.is_creating else "primary",
            disabled=not session.can_take_survey(current),
            on_click=state.dispatch,
            args=(actions.StartSurvey(),),
        )


def render_survey_details(current: SessionState) -> None:
    _bind(TITLE_KEY, current.survey.title)
    st.text_input(
        "Survey Title",
        key=TITLE_KEY,
        placeholder="e.g., Introvert vs Extrovert Test",
        on_change=_on_change(TITLE_KEY, lambda value: actions.UpdateSurveyTitle(text=value)),
    )

    _bind(DESCRIPTION_KEY, current.survey.description)
    st.text_area(
        "Description",
        key=DESCRIPTION_KEY,
        placeholder="Brief description of your survey...",
        on_change=_on_change(DESCRIPTION_KEY, lambda value: actions.UpdateSurveyDescription(text=value)),
    )


def render_draft_editor(current: SessionState) -> None:
    """Render the question text, its answer options and the commit button."""

    draft = current.draft

    _bind(QUESTION_TEXT_KEY, draft.text)
    st.text_input(
        "Question",
        key=QUESTION_TEXT_KEY,
        placeholder="Enter your question...",
        on_change=_on_change(QUESTION_TEXT_KEY, lambda value: actions.UpdateQuestionText(text=value)),
    )

    st.markdown("**Answer Options**")
    removable = session.can_remove_options(current)
    for index, option in enumerate(draft.options):
        text_key = f"{OPTION_TEXT_PREFIX}{index}"
        score_key = f"{OPTION_SCORE_PREFIX}{index}"
        _bind(text_key, option.text)
        _bind(score_key, option.score)

        text_col, score_col, remove_col = st.columns([8, 2, 1], vertical_alignment="bottom")
        with text_col:
            st.text_input(
                f"Option {index + 1}",
                key=text_key,
                placeholder=f"Option {index + 1}...",
                label_visibility="collapsed",
                on_change=_on_change(
                    text_key,
                    lambda value, index=index: actions.UpdateOption(index=index, text=value),
                ),
            )
        with score_col:
            st.number_input(
                "Score",
                key=score_key,
                min_value=0,
                step=1,
                format="%d",
                label_visibility="collapsed",
                on_change=_on_change(
                    score_key,
                    lambda value, index=index: actions.UpdateOptionScore(index=index, score=int(value)),
                ),
            )
        with remove_col:
            if removable:
                st.button(
                    "✕",
                    key=f"remove_option_{index}",
                    help="Remove this option",
                    on_click=state.dispatch,
                    args=(actions.RemoveOption(index=index),),
                )

    st.button("+ Add Option", key="add_option_button", on_click=state.dispatch, args=(actions.AddOption(),))

    st.button(
        "Add Question",
        key="add_question_button",
        type="primary",
        disabled=not session.can_add_question(current),
        on_click=state.dispatch,
        args=(actions.AddQuestion(),),
    )


def render_question_list(current: SessionState) -> None:
    """List the committed questions with a remove button for each."""

    questions = current.survey.questions
    if not questions:
        return

    st.divider()
    st.markdown(f"### Questions ({len(questions)})")
    for number, question in enumerate(questions, start=1):
        with st.container(border=True):
            text_col, remove_col = st.columns([12, 1])
            with text_col:
                st.markdown(f"**{number}. {question.text}**")
                st.markdown("\n".join(f"- {option.text} ({option.score})" for option in question.options))
            with remove_col:
                st.button(
                    "✕",
                    key=f"remove_question_{question.id}",
                    help="Remove this question",
                    on_click=state.dispatch,
                    args=(actions.RemoveQuestion(question_id=question.id),),
                )


def render_question(current: SessionState) -> None:
    """Render progress and the active question; picking an option answers it."""

    question = session.current_question(current)
    position = session.progress(current)
    if question is None or position is None:
        return

    st.progress(position.fraction)
    st.caption(position.label)

    with st.container(border=True):
        st.markdown(f"#### {question.text}")
        answer_key = f"{ANSWER_PREFIX}{question.id}"
        st.radio(
            "Select an answer",
            options=list(range(len(question.options))),
            format_func=lambda index: question.options[index].text,
            index=None,
            key=answer_key,
            label_visibility="collapsed",
            on_change=_on_answer,
            args=(answer_key, question),
        )


def _on_answer(answer_key: str, question: Question) -> None:
    selected = st.session_state.get(answer_key)
    if selected is None:
        return
    state.dispatch(actions.AnswerQuestion(score=question.options[selected].score))


def render_results(summary: ScoreSummary) -> None:
    """Show the personality category, its description and the raw score."""

    st.markdown(
        """
        <style>
        .survey-result {
            text-align: center;
            padding: 1.5rem 1rem;
        }
        .survey-result .score-label {
            color: #718096;
            font-size: 0.9rem;
            margin-bottom: 0.25rem;
        }
        .survey-result .score-value {
            color: #667eea;
            font-size: 2rem;
            font-weight: 600;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown(f"## {summary.result.category}")
    st.write(summary.result.description)
    st.markdown(
        f"""
        <div class="survey-result">
            <div class="score-label">Your Score</div>
            <div class="score-value">{summary.display}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    retake_col, create_col = st.columns(2)
    with retake_col:
        st.button(
            "Retake Survey",
            key="retake_survey_button",
            on_click=state.dispatch,
            args=(actions.ResetSurvey(),),
        )
    with create_col:
        st.button(
            "Create New Survey",
            key="create_new_survey_button",
            type="primary",
            on_click=state.dispatch,
            args=(actions.BackToCreator(),),
        )
