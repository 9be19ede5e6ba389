"""
Value formatting utilities for human-readable output.
"""

import math
from typing import Optional

from ..core.types import StatSummary


def format_value(value: Optional[float], digits: int = 2, suffix: str = "") -> str:
    """
    Format a metric value with a fixed number of decimals.

    Args:
        value: Metric value, None when it has no JSON representation
        digits: Number of decimals
        suffix: Unit appended after the number (e.g., " ms")

    Returns:
        Formatted string (e.g., "1.235 ms"), or "-" for NaN and None
    """
    if value is None or math.isnan(value):
        return "-"
    return f"{value:.{digits}f}{suffix}"


def format_summary_line(name: str, summary: Optional[StatSummary]) -> str:
    """
    Format the readout line for one aggregate stat.

    Args:
        name: Stat display name
        summary: Stat summary, or None when the stat had no values

    Returns:
        Formatted line (e.g., "Frame Time - (2% : 1.00ms, Avg : ...)")
    """
    if summary is None:
        return f"WARNING : {name} had no values"
    return (f"{name} - (2% : {summary.p2:.2f}ms, Avg : {summary.average:.2f}ms, "
            f"Med : {summary.median:.2f}ms, 98% : {summary.p98:.2f}ms, "
            f"Max : {summary.max:.2f}ms)")
