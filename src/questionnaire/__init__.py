"""
Questionnaire Package

In-memory model of a questionnaire: an ordered collection of typed
questions (yes/no, short answer, Likert scale), each validating and
storing its own response.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Persistence of responses
    - Presentation / front-end wiring
    - Concurrent access

Questions validate answers. Questionnaires order, index and query them.
Everything else (reports, definitions, text output) lives in separate layers.
"""

from .errors import (
    QuestionnaireError,
    InvalidArgumentError,
    QuestionNotFoundError,
    QuestionOutOfRangeError,
)
from .questions import (
    Question,
    YesNo,
    ShortAnswer,
    Likert,
    LikertResponseOption,
    QuestionType,
    create_question,
)
from .model import Questionnaire

__version__ = "0.1.0"

__all__ = [
    "QuestionnaireError",
    "InvalidArgumentError",
    "QuestionNotFoundError",
    "QuestionOutOfRangeError",
    "Question",
    "YesNo",
    "ShortAnswer",
    "Likert",
    "LikertResponseOption",
    "QuestionType",
    "create_question",
    "Questionnaire",
]
