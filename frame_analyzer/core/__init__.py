"""Core components for frame trace analysis."""

from .analyzer import FrameAnalyzer
from .stat_definitions import DEFAULT_AGGREGATE_STATS, DEFAULT_TABS
from .types import (
    AggregateStatDefinition,
    AggregationResult,
    AnalysisConfig,
    FrameRecord,
    FrameSeries,
    StatSummary,
    TabConfig,
    Table,
)

__all__ = [
    "FrameAnalyzer",
    "DEFAULT_AGGREGATE_STATS",
    "DEFAULT_TABS",
    "AggregateStatDefinition",
    "AggregationResult",
    "AnalysisConfig",
    "FrameRecord",
    "FrameSeries",
    "StatSummary",
    "TabConfig",
    "Table",
]
