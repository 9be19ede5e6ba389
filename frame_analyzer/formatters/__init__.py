"""Formatters for summary and metric output."""

from .value_formatter import format_summary_line, format_value

__all__ = ["format_summary_line", "format_value"]
