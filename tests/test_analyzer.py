"""
Tests for the Questionnaire Analyzer.

Tests verify that the analyzer correctly:
    - Counts questions by flag and type
    - Tracks answered / unanswered questions
    - Reports completion
    - Raises warning flags
"""

import pytest
from questionnaire.model import Questionnaire
from questionnaire.questions import YesNo, ShortAnswer, Likert
from questionnaire.analyzer import analyze_questionnaire
from questionnaire.examples import build_example_questionnaire


def test_empty_questionnaire():
    """An empty questionnaire is complete but flagged."""
    report = analyze_questionnaire(Questionnaire(name="Empty"))

    assert report.questionnaire_name == "Empty"
    assert report.total_questions == 0
    assert report.is_complete
    assert report.completion_percent == 100.0
    assert "Questionnaire has no questions" in report.warnings


def test_counts_by_flag_and_type():
    report = analyze_questionnaire(build_example_questionnaire())

    assert report.total_questions == 3
    assert report.required_questions == 2
    assert report.optional_questions == 1
    assert report.questions_by_type == {"yes_no": 1, "short_answer": 1, "likert": 1}


def test_unanswered_required_in_order():
    questionnaire = build_example_questionnaire()
    report = analyze_questionnaire(questionnaire)

    assert report.answered_questions == 0
    assert report.unanswered_questions == 3
    assert report.unanswered_required == ["enjoy", "fun"]
    assert not report.is_complete
    assert report.completion_percent == 0.0
    assert any(w.startswith("Incomplete:") and "enjoy, fun" in w for w in report.warnings)


def test_partial_completion():
    questionnaire = build_example_questionnaire()
    questionnaire.get_question("enjoy").answer("Yes")
    questionnaire.get_question("language").answer("Python")

    report = analyze_questionnaire(questionnaire)

    assert report.answered_questions == 2
    assert report.unanswered_required == ["fun"]
    assert report.completion_percent == pytest.approx(50.0)


def test_complete_questionnaire_has_no_warnings():
    questionnaire = build_example_questionnaire()
    questionnaire.get_question("enjoy").answer("Yes")
    questionnaire.get_question("fun").answer("Strongly Agree")

    report = analyze_questionnaire(questionnaire)

    assert report.is_complete == questionnaire.is_complete()
    assert report.is_complete
    assert report.completion_percent == 100.0
    assert report.warnings == []


def test_optional_only_warning():
    questionnaire = Questionnaire()
    questionnaire.add_question("c", ShortAnswer("Comments?", False))

    report = analyze_questionnaire(questionnaire)

    assert report.is_complete
    assert report.completion_percent == 100.0
    assert len(report.warnings) == 1
    assert "No required questions" in report.warnings[0]


def test_analyzer_does_not_modify():
    questionnaire = Questionnaire()
    question = YesNo("Q?", True)
    questionnaire.add_question("q", question)
    questionnaire.add_question("l", Likert("L.", False))

    analyze_questionnaire(questionnaire)

    assert questionnaire.identifiers() == ["q", "l"]
    assert question.current_answer == ""


def test_add_warning_deduplicates():
    report = analyze_questionnaire(Questionnaire())
    report.add_warning("Questionnaire has no questions")
    assert report.warnings.count("Questionnaire has no questions") == 1
