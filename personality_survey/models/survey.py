from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

MIN_OPTIONS = 2


class Option(BaseModel):
    """A selectable answer choice carrying a label and a score."""

    text: str = ""
    score: int = Field(ge=0)

    model_config = {"extra": "forbid", "frozen": True}


class Question(BaseModel):
    """A committed survey question with its answer options."""

    id: str
    text: str
    options: Tuple[Option, ...]

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("text")
    @classmethod
    def _ensure_text(cls, value: str) -> str:
        if not value:
            raise ValueError("question text cannot be empty")
        return value

    @model_validator(mode="after")
    def _ensure_valid_options(self) -> "Question":
        if len(self.options) < MIN_OPTIONS:
            raise ValueError(f"a question needs at least {MIN_OPTIONS} options")

        if not all(option.text for option in self.options):
            raise ValueError("every option must have text")

        return self

    @property
    def max_score(self) -> int:
        """Return the highest score any option of this question awards."""

        return max(option.score for option in self.options)


class Survey(BaseModel):
    """The authored artifact: title, description and ordered questions."""

    title: str = ""
    description: str = ""
    questions: Tuple[Question, ...] = ()

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("questions")
    @classmethod
    def _ensure_unique_ids(cls, value: Tuple[Question, ...]) -> Tuple[Question, ...]:
        ids = [question.id for question in value]
        if len(ids) != len(set(ids)):
            raise ValueError("question ids must be unique")
        return value

    @property
    def question_ids(self) -> Tuple[str, ...]:
        return tuple(question.id for question in self.questions)

    @property
    def max_score(self) -> int:
        """Sum of the best achievable score of every question."""

        return sum(question.max_score for question in self.questions)


def _initial_options() -> Tuple[Option, ...]:
    return (Option(text="", score=1), Option(text="", score=2))


class DraftQuestion(BaseModel):
    """The in-progress question being edited before it is committed.

    Unlike :class:`Question`, a draft may hold empty text anywhere; only the
    commit step checks it.
    """

    text: str = ""
    options: Tuple[Option, ...] = Field(default_factory=_initial_options)

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def initial(cls) -> "DraftQuestion":
        """Return the blank draft: no text and two empty options scored 1 and 2."""

        return cls()

    @property
    def is_committable(self) -> bool:
        """Return True when the text and every option label are filled in."""

        return bool(self.text) and all(option.text for option in self.options)


class Result(BaseModel):
    """A personality category and its description."""

    category: str
    description: str

    model_config = {"extra": "forbid", "frozen": True}


class ScoreSummary(BaseModel):
    """Outcome of one completed take-pass."""

    total: int
    maximum: int
    percentage: float | None = None
    result: Result

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def display(self) -> str:
        """Return the literal score shown on the results screen."""

        return f"{self.total} / {self.maximum}"
