"""
Serialization helpers for questionnaire definitions.

Converts the structure of a Questionnaire (identifiers, question types,
prompts, required flags) to and from dict, JSON and YAML.

Answers are not part of the format: a loaded questionnaire
always starts unanswered.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from questionnaire.csv_parser import parse_required_flag
from questionnaire.errors import InvalidArgumentError
from questionnaire.model import Questionnaire
from questionnaire.questions import Question, create_question


def question_to_dict(identifier: str, q: Question) -> Dict[str, Any]:
    return {
        "id": identifier,
        "type": q.question_type.value,
        "prompt": q.prompt,
        "required": q.required,
    }


def required_from_value(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        try:
            return parse_required_flag(value)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
    raise InvalidArgumentError(f"Invalid required flag: {value!r}")


def question_from_dict(d: Dict[str, Any]) -> Question:
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"Question definition must be a mapping, got {d!r}")
    if "type" not in d:
        raise InvalidArgumentError(f"Question definition has no type: {d!r}")
    return create_question(d["type"], d.get("prompt"), required_from_value(d.get("required")))


def questionnaire_to_dict(q: Questionnaire) -> Dict[str, Any]:
    return {
        "name": q.name,
        "questions": [question_to_dict(identifier, question) for identifier, question in q.items()],
    }


def questionnaire_from_dict(d: Dict[str, Any]) -> Questionnaire:
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"Questionnaire definition must be a mapping, got {type(d).__name__}")
    q = Questionnaire(name=d.get("name") or "Questionnaire")
    entries = d.get("questions") or []
    if not isinstance(entries, list):
        raise InvalidArgumentError(f"questions must be a list, got {type(entries).__name__}")
    for entry in entries:
        question = question_from_dict(entry)
        q.add_question(entry.get("id"), question)
    return q


def questionnaire_to_json(q: Questionnaire) -> str:
    return json.dumps(questionnaire_to_dict(q), sort_keys=True)


def questionnaire_from_json(s: str) -> Questionnaire:
    d = json.loads(s)
    return questionnaire_from_dict(d)


def questionnaire_to_yaml(q: Questionnaire) -> str:
    return yaml.safe_dump(questionnaire_to_dict(q), sort_keys=False)


def questionnaire_from_yaml(s: str) -> Questionnaire:
    d = yaml.safe_load(s)
    return questionnaire_from_dict(d)
