"""
Plain-text report generator for questionnaires.

Supports two modes:
    - PLAIN: "Question: <prompt>\n\nAnswer: <answer>" per question
    - DETAILED: same, each block headed by number, identifier, type and flag

Blocks are joined by a blank line. There is no trailing newline, and an
empty questionnaire renders as "".
"""

from enum import Enum
from typing import List

from questionnaire.model import Questionnaire


class ReportMode(Enum):
    """Rendering modes for text output."""
    PLAIN = "plain"          # Prompt and answer only
    DETAILED = "detailed"    # Plus number, identifier, type, required flag


def _render_block(number: int, identifier: str, question, mode: ReportMode) -> str:
    body = f"Question: {question.prompt}\n\nAnswer: {question.current_answer}"
    if mode == ReportMode.DETAILED:
        flag = "required" if question.required else "optional"
        header = f"[{number}] {identifier} ({question.question_type.value}, {flag})"
        return f"{header}\n{body}"
    return body


def render_text(questionnaire: Questionnaire, mode: ReportMode = ReportMode.PLAIN) -> str:
    """
    Render a questionnaire as text.

    Args:
        questionnaire: Questionnaire to render
        mode: PLAIN or DETAILED

    Returns:
        Rendered text, "" for an empty questionnaire
    """
    blocks: List[str] = [
        _render_block(number, identifier, question, mode)
        for number, (identifier, question) in enumerate(questionnaire.items(), start=1)
    ]
    return "\n\n".join(blocks)


def save_text_file(questionnaire: Questionnaire, filename: str,
                   mode: ReportMode = ReportMode.PLAIN) -> None:
    """
    Render and save to file.

    Args:
        questionnaire: Questionnaire to render
        filename: Output file path
        mode: Rendering mode
    """
    text = render_text(questionnaire, mode=mode)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(text)


__all__ = ["ReportMode", "render_text", "save_text_file"]
