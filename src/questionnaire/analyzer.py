"""
Questionnaire Analyzer: completion status and inventory.

Produces a read-only report on a Questionnaire:
    - Question counts (total, required, optional, per type)
    - Answer coverage (answered, unanswered, required still open)
    - Completion percentage
    - Warning flags

IMPORTANT: This does NOT modify the questionnaire or its questions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from questionnaire.model import Questionnaire
from questionnaire.questions import QuestionType


@dataclass
class QuestionnaireReport:
    """Summary report for a questionnaire."""

    questionnaire_name: str
    total_questions: int = 0
    required_questions: int = 0
    optional_questions: int = 0
    questions_by_type: Dict[str, int] = field(default_factory=dict)

    # Answer coverage
    answered_questions: int = 0
    unanswered_questions: int = 0
    unanswered_required: List[str] = field(default_factory=list)
    is_complete: bool = True
    completion_percent: float = 100.0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_questionnaire(questionnaire: Questionnaire) -> QuestionnaireReport:
    """
    Summarize a Questionnaire.

    completion_percent counts answered required questions against all
    required questions; with no required questions it is 100.

    Returns a QuestionnaireReport with metrics and warnings.
    """
    report = QuestionnaireReport(questionnaire_name=questionnaire.name)
    report.questions_by_type = {qt.value: 0 for qt in QuestionType}

    answered_required = 0
    for identifier, question in questionnaire.items():
        report.total_questions += 1
        report.questions_by_type[question.question_type.value] += 1

        if question.is_answered:
            report.answered_questions += 1
        else:
            report.unanswered_questions += 1

        if question.required:
            report.required_questions += 1
            if question.is_answered:
                answered_required += 1
            else:
                report.unanswered_required.append(identifier)
        else:
            report.optional_questions += 1

    report.is_complete = not report.unanswered_required
    if report.required_questions > 0:
        report.completion_percent = (answered_required / report.required_questions) * 100

    # Warning flags

    if report.total_questions == 0:
        report.add_warning("Questionnaire has no questions")
    elif report.required_questions == 0:
        report.add_warning("No required questions: questionnaire is always complete")

    if report.unanswered_required:
        report.add_warning(
            f"Incomplete: unanswered required questions: {', '.join(report.unanswered_required)}"
        )

    return report
