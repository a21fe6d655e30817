"""
Demo: Answer the example questionnaire, then print the analyzer report
and the text rendering.
"""

import logging

from questionnaire.examples import build_example_questionnaire
from questionnaire.analyzer import analyze_questionnaire
from questionnaire.backends import ReportMode, render_text
from questionnaire.serialization import questionnaire_to_yaml


def print_report(report):
    """Pretty-print a QuestionnaireReport."""
    print()
    print("=" * 70)
    print(f"QUESTIONNAIRE REPORT: {report.questionnaire_name}")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Total Questions:       {report.total_questions}")
    print(f"  Required:              {report.required_questions}")
    print(f"  Optional:              {report.optional_questions}")
    for question_type, count in report.questions_by_type.items():
        print(f"    {question_type}: {count}")
    print()

    print("✅ COMPLETION")
    print(f"  Answered:              {report.answered_questions}/{report.total_questions}")
    print(f"  Complete:              {'YES' if report.is_complete else 'NO'}")
    print(f"  Required Answered:     {report.completion_percent:.1f}%")
    if report.unanswered_required:
        print(f"  Still Open:            {', '.join(report.unanswered_required)}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Questionnaire is complete!")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    questionnaire = build_example_questionnaire()

    # Partially answer and report
    questionnaire.get_question("enjoy").answer("Yes")
    print_report(analyze_questionnaire(questionnaire))

    # Finish, sort by prompt length and report again
    questionnaire.get_question("language").answer("Python")
    questionnaire.get_question("fun").answer("Strongly Agree")
    questionnaire.sort(lambda a, b: len(a.prompt) - len(b.prompt))
    print_report(analyze_questionnaire(questionnaire))

    print(render_text(questionnaire, mode=ReportMode.DETAILED))
    print()

    # Definition only, answers are not exported
    print(questionnaire_to_yaml(questionnaire))
