from .actions import Action, SurveyAction, parse_action
from .session import Creating, Mode, SessionState, ShowingResults, TakingQuestion
from .survey import DraftQuestion, Option, Question, Result, ScoreSummary, Survey

__all__ = [
    "Action",
    "Creating",
    "DraftQuestion",
    "Mode",
    "Option",
    "Question",
    "Result",
    "ScoreSummary",
    "SessionState",
    "ShowingResults",
    "Survey",
    "SurveyAction",
    "TakingQuestion",
    "parse_action",
]
