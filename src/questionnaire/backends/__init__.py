"""Backends for questionnaire output generation (plain text reports)."""

from .text import ReportMode, render_text, save_text_file

__all__ = ["ReportMode", "render_text", "save_text_file"]
