"""
Question Types

Defines the answerable units of a questionnaire:
    - YesNo (yes / no, any case)
    - ShortAnswer (free text up to 280 characters)
    - Likert (one of five agreement phrases, any case)

ARCHITECTURAL RULE:
    A question owns its answer.
    The only way to change the answer is answer(), which validates first
    and stores second. A rejected response never touches the stored answer.

    prompt and required are fixed at construction.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .errors import InvalidArgumentError


class QuestionType(Enum):
    """Closed set of question variants."""
    YES_NO = "yes_no"
    SHORT_ANSWER = "short_answer"
    LIKERT = "likert"


class LikertResponseOption(Enum):
    """
    The five points of the agreement scale, in scale order.

    Matching against a response is case-insensitive and exact:
    "agree" matches AGREE, "Agree nor Disagree" matches nothing.
    """

    STRONGLY_AGREE = "Strongly Agree"
    AGREE = "Agree"
    NEITHER = "Neither Agree nor Disagree"
    DISAGREE = "Disagree"
    STRONGLY_DISAGREE = "Strongly Disagree"

    @property
    def text(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: Optional[str]) -> Optional["LikertResponseOption"]:
        """Return the option matching text (any case), or None."""
        if not isinstance(text, str):
            return None
        folded = text.casefold()
        for option in cls:
            if option.value.casefold() == folded:
                return option
        return None


class Question(ABC):
    """
    Base class for all question variants.

    Properties:
        prompt:
            Question text, never empty

        required:
            Whether the questionnaire is incomplete until this is answered

        current_answer:
            Last accepted response, verbatim (case is not normalized).
            Empty string until answered.

    Subclasses supply question_type and _validate_response().
    """

    question_type: QuestionType

    def __init__(self, prompt: str, required: bool = False):
        if not isinstance(prompt, str) or not prompt:
            raise InvalidArgumentError("Prompt cannot be None or empty")
        self._prompt = prompt
        self._required = bool(required)
        self._answer = ""

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def required(self) -> bool:
        return self._required

    @property
    def current_answer(self) -> str:
        return self._answer

    @property
    def is_answered(self) -> bool:
        return self._answer != ""

    def answer(self, response: str) -> None:
        """
        Validate and store a response.

        Raises:
            InvalidArgumentError: If response is None, not a string, or
                fails this variant's rule. The previous answer is kept.
        """
        if not isinstance(response, str):
            raise InvalidArgumentError("Response cannot be None")
        self._validate_response(response)
        self._answer = response

    @abstractmethod
    def _validate_response(self, response: str) -> None:
        """Raise InvalidArgumentError if response is not acceptable."""

    def copy(self) -> "Question":
        """Return an independent question with the same prompt, flag and answer."""
        duplicate = type(self)(self._prompt, self._required)
        duplicate._answer = self._answer
        return duplicate

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prompt={self._prompt!r}, "
            f"required={self._required!r}, answer={self._answer!r})"
        )


class YesNo(Question):
    """Accepts "yes" or "no" in any case."""

    question_type = QuestionType.YES_NO

    def _validate_response(self, response: str) -> None:
        if response.casefold() not in ("yes", "no"):
            raise InvalidArgumentError("Response must be yes or no")


class ShortAnswer(Question):
    """Accepts any text up to MAX_LENGTH characters, the empty string included."""

    question_type = QuestionType.SHORT_ANSWER

    MAX_LENGTH = 280

    def _validate_response(self, response: str) -> None:
        if len(response) > self.MAX_LENGTH:
            raise InvalidArgumentError(
                f"Response cannot be longer than {self.MAX_LENGTH} characters"
            )


class Likert(Question):
    """Accepts exactly one of the LikertResponseOption phrases, in any case."""

    question_type = QuestionType.LIKERT

    def _validate_response(self, response: str) -> None:
        if LikertResponseOption.from_text(response) is None:
            raise InvalidArgumentError("Invalid Likert answer")

    @property
    def selected_option(self) -> Optional[LikertResponseOption]:
        """Scale point of the current answer, or None when unanswered."""
        return LikertResponseOption.from_text(self._answer)


_QUESTION_CLASSES = {
    QuestionType.YES_NO: YesNo,
    QuestionType.SHORT_ANSWER: ShortAnswer,
    QuestionType.LIKERT: Likert,
}


def create_question(question_type, prompt: str, required: bool = False) -> Question:
    """
    Build a question from its type.

    Args:
        question_type: QuestionType member or its string value (any case)
        prompt: Question text
        required: Required flag

    Raises:
        InvalidArgumentError: If the type is unknown or the prompt is empty
    """
    if isinstance(question_type, str):
        try:
            question_type = QuestionType(question_type.strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown question type: {question_type!r}")
    if not isinstance(question_type, QuestionType):
        raise InvalidArgumentError(f"Unknown question type: {question_type!r}")
    return _QUESTION_CLASSES[question_type](prompt, required)
