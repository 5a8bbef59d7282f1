from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError


class SurveyAction(BaseModel):
    """Base class for every user intent the session reducer understands."""

    model_config = {"extra": "forbid", "frozen": True}


class AddOption(SurveyAction):
    type: Literal["add_option"] = Field(default="add_option", frozen=True)


class UpdateOption(SurveyAction):
    type: Literal["update_option"] = Field(default="update_option", frozen=True)
    index: int
    text: str


class UpdateOptionScore(SurveyAction):
    type: Literal["update_option_score"] = Field(default="update_option_score", frozen=True)
    index: int
    score: int


class RemoveOption(SurveyAction):
    type: Literal["remove_option"] = Field(default="remove_option", frozen=True)
    index: int


class UpdateQuestionText(SurveyAction):
    type: Literal["update_question_text"] = Field(default="update_question_text", frozen=True)
    text: str


class AddQuestion(SurveyAction):
    type: Literal["add_question"] = Field(default="add_question", frozen=True)


class RemoveQuestion(SurveyAction):
    type: Literal["remove_question"] = Field(default="remove_question", frozen=True)
    question_id: str


class UpdateSurveyTitle(SurveyAction):
    type: Literal["update_survey_title"] = Field(default="update_survey_title", frozen=True)
    text: str


class UpdateSurveyDescription(SurveyAction):
    type: Literal["update_survey_description"] = Field(default="update_survey_description", frozen=True)
    text: str


class StartSurvey(SurveyAction):
    type: Literal["start_survey"] = Field(default="start_survey", frozen=True)


class AnswerQuestion(SurveyAction):
    type: Literal["answer_question"] = Field(default="answer_question", frozen=True)
    score: int = Field(ge=0)


class ResetSurvey(SurveyAction):
    type: Literal["reset_survey"] = Field(default="reset_survey", frozen=True)


class BackToCreator(SurveyAction):
    type: Literal["back_to_creator"] = Field(default="back_to_creator", frozen=True)


class ShowCreator(SurveyAction):
    type: Literal["show_creator"] = Field(default="show_creator", frozen=True)


Action = Annotated[
    Union[
        AddOption,
        UpdateOption,
        UpdateOptionScore,
        RemoveOption,
        UpdateQuestionText,
        AddQuestion,
        RemoveQuestion,
        UpdateSurveyTitle,
        UpdateSurveyDescription,
        StartSurvey,
        AnswerQuestion,
        ResetSurvey,
        BackToCreator,
        ShowCreator,
    ],
    Field(discriminator="type"),
]

_ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


def parse_action(payload: Any) -> SurveyAction:
    """Validate ``payload`` (an action or its dict form) as one known action.

    Raises ``TypeError`` for anything that is not a supported action.
    """

    try:
        return _ACTION_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise TypeError(f"Unsupported survey action: {payload!r}") from exc
