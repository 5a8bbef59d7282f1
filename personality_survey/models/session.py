from __future__ import annotations

from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, Field

from personality_survey.models.survey import DraftQuestion, ScoreSummary, Survey


class Creating(BaseModel):
    """The author is editing the survey."""

    kind: Literal["creating"] = Field(default="creating", frozen=True)

    model_config = {"extra": "forbid", "frozen": True}


class TakingQuestion(BaseModel):
    """The respondent is looking at the question at ``index``."""

    kind: Literal["taking"] = Field(default="taking", frozen=True)
    index: int = Field(default=0, ge=0)

    model_config = {"extra": "forbid", "frozen": True}


class ShowingResults(BaseModel):
    """Every question was answered and the cached score is on screen."""

    kind: Literal["results"] = Field(default="results", frozen=True)
    summary: ScoreSummary

    model_config = {"extra": "forbid", "frozen": True}


Mode = Annotated[
    Union[Creating, TakingQuestion, ShowingResults],
    Field(discriminator="kind"),
]


class SessionState(BaseModel):
    """Everything a single survey session owns.

    Instances are never mutated; every transition returns a copy.
    """

    survey: Survey = Field(default_factory=Survey)
    draft: DraftQuestion = Field(default_factory=DraftQuestion.initial)
    answers: Tuple[int, ...] = ()
    mode: Mode = Field(default_factory=Creating)
    next_question_number: int = Field(default=1, ge=1)

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def is_creating(self) -> bool:
        return self.mode.kind == "creating"

    @property
    def is_taking(self) -> bool:
        return self.mode.kind == "taking"

    @property
    def is_showing_results(self) -> bool:
        return self.mode.kind == "results"
