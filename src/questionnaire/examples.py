"""
Example questionnaire builder for demos and tests.

Builds a short course-feedback questionnaire with one question of each type:
    enjoy    - YesNo, required
    language - ShortAnswer, optional
    fun      - Likert, required
"""
from questionnaire.model import Questionnaire
from questionnaire.questions import YesNo, ShortAnswer, Likert


def build_example_questionnaire(name: str = "Programming Feedback") -> Questionnaire:
    questionnaire = Questionnaire(name=name)
    questionnaire.add_question("enjoy", YesNo("Do you enjoy programming?", True))
    questionnaire.add_question("language", ShortAnswer("What's your favorite language?", False))
    questionnaire.add_question("fun", Likert("Programming is fun.", True))
    return questionnaire
