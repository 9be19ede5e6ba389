"""
Summary statistics over aggregate stat series.
"""

import math
from typing import Dict, List, Optional, Sequence

from ..core.types import StatSummary


class SummaryCalculator:
    """Reduces aggregate stat series to five-number summaries."""

    @staticmethod
    def index_at(count: int, fraction: float) -> int:
        """Index of the element at a fraction of a sorted sequence."""
        return min(count - 1, int(math.floor(count * fraction)))

    def summarize(self, values: Sequence[float]) -> Optional[StatSummary]:
        """
        Summarize one series.

        The series is sorted into a copy; the caller's sequence keeps its
        frame order.

        Args:
            values: Aggregate stat values in frame order

        Returns:
            StatSummary, or None when the series has no values
        """
        if not values:
            return None

        ordered = sorted(values)
        count = len(ordered)

        return StatSummary(
            p2=round(ordered[self.index_at(count, 0.02)], 2),
            average=round(sum(ordered) / count, 2),
            median=round(ordered[count // 2], 2),
            p98=round(ordered[self.index_at(count, 0.98)], 2),
            max=round(ordered[-1], 2),
            sample_count=count,
        )

    def summarize_all(self, series: Dict[str, List[float]]) -> Dict[str, Optional[StatSummary]]:
        """
        Summarize every series, keeping the definition order of the keys.

        Args:
            series: Mapping of stat display name -> values

        Returns:
            Mapping of stat display name -> StatSummary or None
        """
        return {name: self.summarize(values) for name, values in series.items()}
