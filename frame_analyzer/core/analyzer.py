"""
Main frame trace analyzer orchestrator.
"""

from typing import Dict, List, Optional, Sequence

from ..core.types import (
    AggregateStatDefinition,
    AggregationResult,
    AnalysisConfig,
    FrameSeries,
    MAX_FRAMES_TO_PROCESS,
    StatSummary,
    Table,
)
from ..extractors import ColumnMatcher
from ..formatters import format_summary_line
from ..processors import FrameAggregator, SummaryCalculator, TableIngestor
from ..utils.logging import get_logger

logger = get_logger(__name__)


class FrameAnalyzer:
    """Main orchestrator for frame trace analysis."""

    def __init__(
        self,
        frame_limit: int = MAX_FRAMES_TO_PROCESS,
        stat_definitions: Optional[Sequence[AggregateStatDefinition]] = None
    ):
        """
        Initialize the FrameAnalyzer.

        Args:
            frame_limit: Maximum number of frames processed per run
            stat_definitions: Aggregate stats to compute (default: built-in list)
        """
        # Configuration
        self.config = AnalysisConfig(
            frame_limit=frame_limit,
            stat_definitions=stat_definitions
        )

        # Published results of the most recent successful run
        self.table: Optional[Table] = None
        self.aggregate_series: Dict[str, List[float]] = {}
        self.summaries: Dict[str, Optional[StatSummary]] = {}
        self.frame_series = FrameSeries()
        self.warnings: List[str] = []
        self.had_negative_value = False

        # Initialize components
        self.column_matcher = ColumnMatcher()
        self.table_ingestor = TableIngestor()
        self.frame_aggregator = FrameAggregator(self.column_matcher, SummaryCalculator())

    def run(self, payload: str) -> Optional[AggregationResult]:
        """
        Ingest and aggregate one payload.

        An empty payload is skipped and the previous results stay published.
        Results are published only after the whole pass has completed.

        Args:
            payload: Raw CSV text

        Returns:
            AggregationResult, or None when the payload was empty
        """
        if not payload:
            logger.debug("Empty payload, skipping analysis")
            return None

        # Step 1: Parse the payload into a table
        table, ingest_warnings = self.table_ingestor.ingest(payload)

        # Step 2: Per-frame pass and summary pass
        result = self.frame_aggregator.aggregate(
            table,
            self.config.stat_definitions,
            self.config.frame_limit
        )
        result.warnings = ingest_warnings + result.warnings

        # Step 3: Publish
        self.table = table
        self.aggregate_series = result.aggregate_series
        self.summaries = result.summaries
        self.frame_series = result.frame_series
        self.warnings = result.warnings
        self.had_negative_value = result.had_negative_value

        logger.info("Processed %d frames across %d columns", len(result.frame_series), len(table.columns))
        return result

    def process_trace_file(self, file_path: str) -> Optional[AggregationResult]:
        """
        Read a UTF-8 CSV trace file and analyze it.

        Args:
            file_path: Path to the trace CSV file
        """
        print(f"Processing {file_path}...")
        with open(file_path, 'r', encoding='utf-8') as f:
            payload = f.read()

        result = self.run(payload)
        if result is None:
            print("File is empty, nothing to analyze.")
            return None

        print(f"Processed {len(self.frame_series)} frames with {len(self.table.columns)} columns")
        print(f"Computed {len(self.summaries)} aggregate stats, "
              f"{sum(1 for s in self.summaries.values() if s is None)} without values")
        return result

    def summary_lines(self) -> List[str]:
        """Readout lines for every aggregate stat, in definition order."""
        return [format_summary_line(name, summary) for name, summary in self.summaries.items()]
