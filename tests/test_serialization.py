"""
Tests for serialization of questionnaire definitions.

These tests ensure JSON/YAML round-trip of structure using the explicit
serialization functions in `questionnaire.serialization`, and that answers
are never carried along.
"""

import pytest
import yaml

from questionnaire.errors import InvalidArgumentError
from questionnaire.examples import build_example_questionnaire
from questionnaire.questions import YesNo, ShortAnswer, Likert
from questionnaire.serialization import (
    questionnaire_to_dict,
    questionnaire_from_dict,
    questionnaire_to_json,
    questionnaire_from_json,
    questionnaire_to_yaml,
    questionnaire_from_yaml,
)


def test_to_dict_shape():
    d = questionnaire_to_dict(build_example_questionnaire())
    assert d["name"] == "Programming Feedback"
    assert d["questions"][0] == {
        "id": "enjoy",
        "type": "yes_no",
        "prompt": "Do you enjoy programming?",
        "required": True,
    }
    assert [q["id"] for q in d["questions"]] == ["enjoy", "language", "fun"]


def test_json_roundtrip():
    questionnaire = build_example_questionnaire()
    before = questionnaire_to_dict(questionnaire)
    restored = questionnaire_from_json(questionnaire_to_json(questionnaire))
    assert questionnaire_to_dict(restored) == before
    assert isinstance(restored.get_question("enjoy"), YesNo)
    assert isinstance(restored.get_question("language"), ShortAnswer)
    assert isinstance(restored.get_question("fun"), Likert)


def test_yaml_keeps_question_order():
    questionnaire = build_example_questionnaire()
    questionnaire.sort(key=lambda q: q.prompt)
    restored = questionnaire_from_yaml(questionnaire_to_yaml(questionnaire))
    assert restored.identifiers() == questionnaire.identifiers()


def test_answers_are_not_serialized():
    questionnaire = build_example_questionnaire()
    questionnaire.get_question("enjoy").answer("Yes")

    yaml_str = questionnaire_to_yaml(questionnaire)
    assert "answer" not in yaml.safe_load(yaml_str)["questions"][0]

    restored = questionnaire_from_yaml(yaml_str)
    assert restored.get_question("enjoy").current_answer == ""


def test_from_hand_written_yaml():
    restored = questionnaire_from_yaml(
        """
name: Intake
questions:
  - id: smoker
    type: yes_no
    prompt: Do you smoke?
    required: true
  - id: notes
    type: short_answer
    prompt: Anything else?
"""
    )
    assert restored.name == "Intake"
    assert restored.get_question("smoker").required
    assert not restored.get_question("notes").required


def test_unknown_type_rejected():
    with pytest.raises(InvalidArgumentError):
        questionnaire_from_dict(
            {"name": "Bad", "questions": [{"id": "x", "type": "ranking", "prompt": "?"}]}
        )


def test_duplicate_ids_rejected():
    with pytest.raises(InvalidArgumentError):
        questionnaire_from_dict(
            {
                "questions": [
                    {"id": "x", "type": "yes_no", "prompt": "A?"},
                    {"id": "x", "type": "yes_no", "prompt": "B?"},
                ]
            }
        )


def test_non_mapping_rejected():
    with pytest.raises(InvalidArgumentError):
        questionnaire_from_yaml("- just\n- a list\n")


@pytest.mark.parametrize(
    "yaml_str",
    [
        "questions: [just-a-string]\n",
        "questions: [null]\n",
        "questions: abc\n",
        "questions:\n  - id: q1\n    type: [yes_no]\n    prompt: Ok?\n",
    ],
)
def test_malformed_definitions_rejected(yaml_str):
    """Malformed entries should raise InvalidArgumentError, not a raw Python error."""
    with pytest.raises(InvalidArgumentError):
        questionnaire_from_yaml(yaml_str)


@pytest.mark.parametrize("value,expected", [("'false'", False), ("'yes'", True), ("false", False)])
def test_required_flag_strings_parsed(value, expected):
    """Quoted required flags should be parsed, not truth-tested."""
    restored = questionnaire_from_yaml(
        f"questions:\n  - id: q1\n    type: yes_no\n    prompt: Ok?\n    required: {value}\n"
    )
    assert restored.get_question("q1").required is expected


@pytest.mark.parametrize("value", ["'sometimes'", "3", "[true]"])
def test_invalid_required_flag_rejected(value):
    """Unrecognised required flags should be rejected."""
    with pytest.raises(InvalidArgumentError):
        questionnaire_from_yaml(
            f"questions:\n  - id: q1\n    type: yes_no\n    prompt: Ok?\n    required: {value}\n"
        )
