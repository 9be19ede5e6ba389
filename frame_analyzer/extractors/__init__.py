"""Column and cell extraction utilities for frame tables."""

from .column_matcher import ColumnMatcher
from .number_parser import parse_number

__all__ = ["ColumnMatcher", "parse_number"]
