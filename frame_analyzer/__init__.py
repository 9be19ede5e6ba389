"""
Frame Analyzer - per-frame profiler CSV aggregation tool
"""

__version__ = "1.0.0"

from .core.analyzer import FrameAnalyzer
from .core.types import AggregateStatDefinition, AnalysisConfig, StatSummary, Table

__all__ = ["FrameAnalyzer", "AggregateStatDefinition", "AnalysisConfig", "StatSummary", "Table"]
