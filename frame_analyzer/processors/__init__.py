"""Processors for frame table ingestion and aggregation."""

from .table_ingestor import TableIngestor
from .frame_aggregator import FrameAggregator
from .summary_calculator import SummaryCalculator
from .stat_loader import StatDefinitionLoader, load_stat_definitions

__all__ = [
    "TableIngestor",
    "FrameAggregator",
    "SummaryCalculator",
    "StatDefinitionLoader",
    "load_stat_definitions",
]
