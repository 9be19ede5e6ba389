"""
Per-frame aggregation of raw profiler columns.
"""

import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.types import (
    AggregateStatDefinition,
    AggregationResult,
    FrameRecord,
    FrameSeries,
    MAX_FRAMES_TO_PROCESS,
    Table,
)
from ..extractors import ColumnMatcher
from ..utils.logging import get_logger
from .summary_calculator import SummaryCalculator

logger = get_logger(__name__)

FRAME_TIME_COLUMN = "FrameTime"
GAME_THREAD_TIME_COLUMN = "GameThreadTime"
RENDER_THREAD_TIME_COLUMN = "RenderThreadTime"
PER_FRAME_KB_COLUMN = "FileIO/PerFrameKB"

NEGATIVE_VALUE_WARNING = (
    "*Found frames with negative aggregate values. "
    "Please review log before accepting results as accurate.*"
)


class FrameAggregator:
    """Computes aggregate stat series and derived frame series from a table."""

    def __init__(self, column_matcher: Optional[ColumnMatcher] = None,
                 summary_calculator: Optional[SummaryCalculator] = None):
        """
        Initialize with collaborators.

        Args:
            column_matcher: ColumnMatcher used to discover physics columns
            summary_calculator: SummaryCalculator used for the post-pass
        """
        self.column_matcher = column_matcher or ColumnMatcher()
        self.summary_calculator = summary_calculator or SummaryCalculator()

    @staticmethod
    def compute_stat_value(table: Table, frame_number: int,
                           stat: AggregateStatDefinition) -> Tuple[bool, float]:
        """
        Compute one aggregate stat for one frame.

        Add columns count only when they parse to a non-negative number;
        subtract columns count whenever they parse. Absent columns are skipped.

        Args:
            table: Source table
            frame_number: Row index
            stat: Stat definition

        Returns:
            Tuple of (has_valid_contribution, total)
        """
        has_valid_contribution = False
        total = 0.0

        for label in stat.add_labels:
            value = table.value(frame_number, label)
            if not math.isnan(value) and value >= 0.0:
                total += value
                has_valid_contribution = True

        for label in stat.subtract_labels:
            value = table.value(frame_number, label)
            if not math.isnan(value):
                total -= value

        return has_valid_contribution, total

    @staticmethod
    def _log_negative_value(table: Table, frame_number: int,
                            stat: AggregateStatDefinition) -> None:
        logger.warning("FrameNumber : %d DisplayName : %s", frame_number, stat.display_name)
        for label in stat.add_labels:
            value = table.value(frame_number, label)
            if not math.isnan(value) and value >= 0.0:
                logger.warning("AddValue : %s", value)
        for label in stat.subtract_labels:
            value = table.value(frame_number, label)
            if not math.isnan(value):
                logger.warning("SubtractValue : %s", value)

    @staticmethod
    def physics_time(table: Table, frame_number: int, physics_columns: Sequence[str]) -> float:
        """Sum of the physics/worker columns for one frame; NaN cells propagate."""
        return sum((table.value(frame_number, column) for column in physics_columns), 0.0)

    def aggregate(
        self,
        table: Table,
        stat_definitions: Sequence[AggregateStatDefinition],
        frame_limit: int = MAX_FRAMES_TO_PROCESS
    ) -> AggregationResult:
        """
        Run the per-frame pass and the summary pass over a table.

        Nothing is shared with the caller until both passes have finished.

        Args:
            table: Parsed table
            stat_definitions: Aggregate stats to compute, in display order
            frame_limit: Maximum number of frames to process

        Returns:
            AggregationResult with series, summaries, frame series and warnings
        """
        aggregate_series: Dict[str, List[float]] = {
            stat.display_name: [] for stat in stat_definitions
        }
        frame_series = FrameSeries()
        had_negative_value = False

        physics_columns = self.column_matcher.physics_columns(table.columns)
        frame_count = min(frame_limit, len(table))

        for frame_number in range(frame_count):
            for stat in stat_definitions:
                has_valid_contribution, total = self.compute_stat_value(table, frame_number, stat)
                if not has_valid_contribution:
                    continue
                if total < 0.0:
                    had_negative_value = True
                    self._log_negative_value(table, frame_number, stat)
                aggregate_series[stat.display_name].append(max(0.0, total))

            frame_series.append(FrameRecord(
                frame_number=frame_number,
                frame_time=table.value(frame_number, FRAME_TIME_COLUMN),
                game_thread_time=table.value(frame_number, GAME_THREAD_TIME_COLUMN),
                render_thread_time=table.value(frame_number, RENDER_THREAD_TIME_COLUMN),
                per_frame_kb=table.value(frame_number, PER_FRAME_KB_COLUMN),
                physics_time=self.physics_time(table, frame_number, physics_columns),
            ))

        warnings: List[str] = []
        if had_negative_value:
            warnings.append(NEGATIVE_VALUE_WARNING)

        summaries = self.summary_calculator.summarize_all(aggregate_series)
        for name, summary in summaries.items():
            if summary is None:
                warnings.append(f"WARNING : {name} had no values")

        return AggregationResult(
            aggregate_series=aggregate_series,
            summaries=summaries,
            frame_series=frame_series,
            warnings=warnings,
            had_negative_value=had_negative_value,
        )
