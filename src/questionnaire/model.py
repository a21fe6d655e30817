"""
Questionnaire Container

An ordered sequence of questions, each registered under a unique,
caller-chosen identifier.

INVARIANTS:
    - Identifiers are non-empty strings and unique
    - Every identifier maps to exactly one position in [0, size)
    - Positions are dense: removing a question shifts later ones down
    - Question numbers seen by callers are 1-based

The identifier -> position index is rebuilt from the sequence after every
structural change (remove, sort) rather than patched entry by entry.

Answers are not routed through the questionnaire. Callers answer the
Question objects directly; the questionnaire only reads them back.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Callable, Dict, Iterator, List, Optional, Tuple, TypeVar, Union

from .errors import InvalidArgumentError, QuestionNotFoundError, QuestionOutOfRangeError
from .questions import Question

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Questionnaire:
    """
    Root container for a set of questions.

    Example:
        q = Questionnaire()
        q.add_question("enjoy", YesNo("Do you enjoy programming?", True))
        q.get_question("enjoy").answer("Yes")
        q.is_complete()   # True
    """

    def __init__(self, name: str = "Questionnaire"):
        self.name = name
        self._identifiers: List[str] = []
        self._questions: List[Question] = []
        self._positions: Dict[str, int] = {}

    def _reindex(self) -> None:
        self._positions = {identifier: pos for pos, identifier in enumerate(self._identifiers)}

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_question(self, identifier: str, question: Question) -> None:
        """
        Append a question under a new identifier.

        Raises:
            InvalidArgumentError: If identifier is None/empty or already used,
                or question is not a Question
        """
        if not isinstance(identifier, str) or not identifier:
            raise InvalidArgumentError("Identifier cannot be None or empty")
        if identifier in self._positions:
            raise InvalidArgumentError(f"Duplicate question identifier: {identifier}")
        if not isinstance(question, Question):
            raise InvalidArgumentError(f"Not a Question: {question!r}")

        self._positions[identifier] = len(self._questions)
        self._identifiers.append(identifier)
        self._questions.append(question)
        logger.debug("Added question %r at position %d", identifier, len(self._questions))

    def remove_question(self, identifier: str) -> None:
        """
        Remove a question; every later question moves up one position.

        Raises:
            QuestionNotFoundError: If identifier is not registered
        """
        position = self._position_of(identifier)
        del self._identifiers[position]
        del self._questions[position]
        self._reindex()
        logger.debug("Removed question %r from position %d", identifier, position + 1)

    def sort(
        self,
        comparator: Optional[Callable[[Question, Question], int]] = None,
        *,
        key: Optional[Callable[[Question], object]] = None,
        reverse: bool = False,
    ) -> None:
        """
        Reorder questions in place. Identifiers follow their questions.

        Args:
            comparator: Two-argument ordering returning <0, 0 or >0
            key: Alternative one-argument sort key (used when comparator is None)
            reverse: Sort descending

        Raises:
            InvalidArgumentError: If neither comparator nor key is given
        """
        if comparator is not None:
            if not callable(comparator):
                raise InvalidArgumentError("Comparator must be callable")
            sort_key = cmp_to_key(comparator)
        elif key is not None:
            if not callable(key):
                raise InvalidArgumentError("Key must be callable")
            sort_key = key
        else:
            raise InvalidArgumentError("Comparator cannot be None")

        pairs = sorted(
            zip(self._identifiers, self._questions),
            key=lambda pair: sort_key(pair[1]),
            reverse=reverse,
        )
        self._identifiers = [identifier for identifier, _ in pairs]
        self._questions = [question for _, question in pairs]
        self._reindex()
        logger.debug("Sorted %d questions", len(self._questions))

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def _position_of(self, identifier: str) -> int:
        position = self._positions.get(identifier) if isinstance(identifier, str) else None
        if position is None:
            raise QuestionNotFoundError(f"No question found with identifier: {identifier}")
        return position

    def get_question(self, key: Union[int, str]) -> Question:
        """
        Retrieve a question by 1-based number or by identifier.

        Args:
            key: int question number (1 = first) or str identifier

        Raises:
            QuestionOutOfRangeError: If a number is outside [1, size]
            QuestionNotFoundError: If an identifier is not registered
        """
        if isinstance(key, str):
            return self._questions[self._position_of(key)]
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidArgumentError(f"Question key must be int or str, got {type(key).__name__}")
        if key < 1 or key > len(self._questions):
            raise QuestionOutOfRangeError(f"No question number {key}")
        return self._questions[key - 1]

    def identifiers(self) -> List[str]:
        """Identifiers in current question order."""
        return list(self._identifiers)

    def items(self) -> List[Tuple[str, Question]]:
        """(identifier, question) pairs in current question order."""
        return list(zip(self._identifiers, self._questions))

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(list(self._questions))

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier in self._positions

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_required_questions(self) -> List[Question]:
        """Required questions in order. These are the live objects, not copies."""
        return [q for q in self._questions if q.required]

    def get_optional_questions(self) -> List[Question]:
        """Optional questions in order. These are the live objects, not copies."""
        return [q for q in self._questions if not q.required]

    def is_complete(self) -> bool:
        """True when every required question has a non-empty answer."""
        return all(q.current_answer != "" for q in self._questions if q.required)

    def get_responses(self) -> List[str]:
        """Current answer of every question, "" for unanswered ones."""
        return [q.current_answer for q in self._questions]

    def filter(self, predicate: Callable[[Question], bool]) -> "Questionnaire":
        """
        Build an independent questionnaire of copies of matching questions.

        Identifiers and relative order are preserved. Answering a question in
        the result never affects this questionnaire, and vice versa.

        Raises:
            InvalidArgumentError: If predicate is None
        """
        if predicate is None or not callable(predicate):
            raise InvalidArgumentError("Predicate cannot be None")

        filtered = Questionnaire(name=self.name)
        for identifier, question in zip(self._identifiers, self._questions):
            if predicate(question):
                filtered.add_question(identifier, question.copy())
        logger.debug("Filter kept %d of %d questions", len(filtered), len(self))
        return filtered

    def fold(self, combine: Callable[[Question, R], R], seed: R) -> R:
        """
        Left-to-right accumulation: result = combine(question, result).

        Example:
            q.fold(lambda question, n: n + (question.current_answer.lower() == "yes"), 0)
        """
        result = seed
        for question in self._questions:
            result = combine(question, result)
        return result

    def __str__(self) -> str:
        from .backends.text import render_text

        return render_text(self)

    def __repr__(self) -> str:
        return f"Questionnaire(name={self.name!r}, questions={len(self._questions)})"
