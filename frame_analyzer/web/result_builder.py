"""
Result builder for web interface output.
"""

import math
from typing import Any, Dict, List, Optional, Sequence

from ..core.stat_definitions import DEFAULT_TABS
from ..core.types import StatSummary, TabConfig
from ..formatters import format_summary_line


def _json_number(value: float) -> Optional[float]:
    """NaN and infinities have no JSON representation."""
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _json_series(values: Sequence[float]) -> List[Optional[float]]:
    return [_json_number(v) for v in values]


def _json_summary(summary: Optional[StatSummary]) -> Optional[Dict[str, Any]]:
    if summary is None:
        return None
    return {key: _json_number(value) if isinstance(value, float) else value
            for key, value in summary.to_dict().items()}


def prepare_results(analyzer, tabs: Sequence[TabConfig] = DEFAULT_TABS) -> Dict[str, Any]:
    """
    Convert analyzer results to a structured format for JSON/HTML output.

    Args:
        analyzer: FrameAnalyzer instance with a completed run
        tabs: Column groups published for comparison views

    Returns:
        Dictionary with structured results for rendering
    """
    table = analyzer.table
    columns = table.columns if table is not None else []
    rows = table.rows if table is not None else []

    # Main chart series
    series = analyzer.frame_series
    frame_series = {
        'frame_numbers': list(series.frame_numbers),
        'frame_time': _json_series(series.frame_time),
        'game_thread_time': _json_series(series.game_thread_time),
        'render_thread_time': _json_series(series.render_thread_time),
        'physics_time': _json_series(series.physics_time),
        'per_frame_kb': _json_series(series.per_frame_kb),
    }

    # Row-per-frame view of the same data
    frames = []
    for record in series.records():
        frames.append({
            'frame_number': record.frame_number,
            'frame_time': _json_number(record.frame_time),
            'game_thread_time': _json_number(record.game_thread_time),
            'render_thread_time': _json_number(record.render_thread_time),
            'physics_time': _json_number(record.physics_time),
            'per_frame_kb': _json_number(record.per_frame_kb),
        })

    # Aggregate stat readout
    aggregate_stats = []
    for name, summary in analyzer.summaries.items():
        aggregate_stats.append({
            'name': name,
            'has_values': summary is not None,
            'summary': _json_summary(summary),
            'display': format_summary_line(name, summary),
            'values': _json_series(analyzer.aggregate_series.get(name, [])),
        })

    # Column groups for the per-tab comparison views
    tab_groups = []
    for tab in tabs:
        tab_groups.append({
            'label': tab.label,
            'thread': tab.thread,
            'digits': tab.digits,
            'suffix': tab.suffix,
            'columns': analyzer.column_matcher.columns_for_tab(columns, tab),
        })

    return {
        'summary': {
            'frame_count': len(series),
            'row_count': len(rows),
            'column_count': len(columns),
            'had_negative_value': analyzer.had_negative_value,
            'stats_without_values': [s['name'] for s in aggregate_stats if not s['has_values']],
        },
        'frame_series': frame_series,
        'frames': frames,
        'aggregate_stats': aggregate_stats,
        'tabs': tab_groups,
        'table': {
            'columns': list(columns),
            'rows': rows,
        },
        'warnings': list(analyzer.warnings),
    }
