"""
CSV Parser for questionnaire definitions.

Builds a Questionnaire from a CSV table of questions.

CSV Format:
    id, type, prompt, required

    - type: yes_no | short_answer | likert (any case)
    - required: true/false, yes/no, 1/0 (any case); blank means optional
    - Rows keep their file order; question numbers follow it
"""

import csv
import os
import warnings
from dataclasses import dataclass
from io import StringIO
from typing import List, Optional

from questionnaire.errors import InvalidArgumentError, QuestionnaireError
from questionnaire.model import Questionnaire
from questionnaire.questions import create_question


class CSVParseError(QuestionnaireError):
    """Raised when CSV parsing fails."""
    pass


REQUIRED_COLUMNS = ['id', 'type', 'prompt']
KNOWN_COLUMNS = REQUIRED_COLUMNS + ['required']

_TRUE_VALUES = {'true', 'yes', '1', 'y'}
_FALSE_VALUES = {'false', 'no', '0', 'n', ''}


@dataclass
class CSVRow:
    """Parsed CSV row."""
    id: str
    type: str
    prompt: str
    required: bool = False


def parse_required_flag(value: Optional[str]) -> bool:
    """
    Interpret a required-column cell.

    Raises:
        ValueError: If the cell is not a recognised boolean
    """
    folded = (value or '').strip().lower()
    if folded in _TRUE_VALUES:
        return True
    if folded in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid required flag: {value!r}")


def _parse_csv_rows(csv_content: str) -> List[CSVRow]:
    """Parse CSV content into structured rows."""
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        raise CSVParseError("CSV is empty")

    fieldnames = [name.strip() for name in reader.fieldnames]
    missing = [col for col in REQUIRED_COLUMNS if col not in fieldnames]
    if missing:
        raise CSVParseError(f"Missing required columns: {missing}")

    unknown = [col for col in fieldnames if col not in KNOWN_COLUMNS]
    if unknown:
        warnings.warn(f"Ignoring unknown columns: {unknown}", UserWarning)

    rows = []
    for row_num, raw in enumerate(reader, start=2):  # Start at 2 (header is line 1)
        row = {(k or '').strip(): (v or '') for k, v in raw.items()}
        try:
            rows.append(CSVRow(
                id=row.get('id', '').strip(),
                type=row.get('type', '').strip(),
                prompt=row.get('prompt', '').strip(),
                required=parse_required_flag(row.get('required')),
            ))
        except ValueError as e:
            raise CSVParseError(f"Error parsing row {row_num}: {str(e)}") from e

    return rows


def parse_csv_string(csv_content: str, questionnaire_name: str = "CSVQuestionnaire") -> Questionnaire:
    """
    Parse CSV content into a Questionnaire.

    Args:
        csv_content: CSV as string
        questionnaire_name: Name for the questionnaire

    Returns:
        Questionnaire with one unanswered question per row

    Raises:
        CSVParseError: If parsing fails
    """
    rows = _parse_csv_rows(csv_content)

    ids = [row.id for row in rows if row.id]
    duplicates = {i for i in ids if ids.count(i) > 1}
    if duplicates:
        raise CSVParseError(f"Duplicate question ids: {sorted(duplicates)}")

    questionnaire = Questionnaire(name=questionnaire_name)
    for row_num, row in enumerate(rows, start=2):
        try:
            questionnaire.add_question(row.id, create_question(row.type, row.prompt, row.required))
        except InvalidArgumentError as e:
            raise CSVParseError(f"Error parsing row {row_num}: {str(e)}") from e

    return questionnaire


def parse_csv_file(filepath: str, questionnaire_name: Optional[str] = None) -> Questionnaire:
    """
    Parse CSV file into a Questionnaire.

    Args:
        filepath: Path to CSV file
        questionnaire_name: Optional name (defaults to the file's base name)

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVParseError: If parsing fails
    """
    try:
        with open(filepath, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    if questionnaire_name is None:
        questionnaire_name = os.path.splitext(os.path.basename(filepath))[0]

    return parse_csv_string(content, questionnaire_name=questionnaire_name)


__all__ = [
    "parse_csv_string",
    "parse_csv_file",
    "parse_required_flag",
    "CSVParseError",
]
