from .scoring import categorize, score_survey
from .session import Progress, current_question, new_session, progress, reduce

__all__ = [
    "Progress",
    "categorize",
    "current_question",
    "new_session",
    "progress",
    "reduce",
    "score_survey",
]
