"""
Type definitions for frame trace analysis.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..extractors.number_parser import parse_number

# Upper bound on the number of frames a single run will process.
MAX_FRAMES_TO_PROCESS = 2147483647


@dataclass(frozen=True)
class AggregateStatDefinition:
    """A named stat computed as sum(add_labels) - sum(subtract_labels) per frame."""
    display_name: str
    add_labels: Tuple[str, ...] = ()
    subtract_labels: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but keep the record immutable.
        object.__setattr__(self, 'add_labels', tuple(self.add_labels))
        object.__setattr__(self, 'subtract_labels', tuple(self.subtract_labels))


@dataclass(frozen=True)
class TabConfig:
    """Column group shown as one tab of the comparison view."""
    thread: str
    label: str
    digits: int
    suffix: str


class Table:
    """
    Rectangular CSV table of raw string cells.

    Args:
        columns: Column names in header order
        rows: One mapping of column name -> raw cell per frame
    """

    def __init__(self, columns: Sequence[str], rows: Sequence[Dict[str, str]]):
        self.columns: List[str] = list(columns)
        self.rows: List[Dict[str, str]] = list(rows)

    def __len__(self) -> int:
        return len(self.rows)

    def cell(self, frame_number: int, column: str) -> Optional[str]:
        """Return the raw cell, or None when the column is absent."""
        return self.rows[frame_number].get(column)

    def value(self, frame_number: int, column: str) -> float:
        """Return the cell parsed as a number, NaN when absent or unparseable."""
        return parse_number(self.cell(frame_number, column))


@dataclass(frozen=True)
class FrameRecord:
    """Derived values for one processed frame."""
    frame_number: int
    frame_time: float
    game_thread_time: float
    render_thread_time: float
    per_frame_kb: float
    physics_time: float


@dataclass
class FrameSeries:
    """Per-frame derived series, one list per field, all in frame order."""
    frame_numbers: List[int] = field(default_factory=list)
    frame_time: List[float] = field(default_factory=list)
    game_thread_time: List[float] = field(default_factory=list)
    render_thread_time: List[float] = field(default_factory=list)
    per_frame_kb: List[float] = field(default_factory=list)
    physics_time: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frame_numbers)

    def append(self, record: FrameRecord) -> None:
        self.frame_numbers.append(record.frame_number)
        self.frame_time.append(record.frame_time)
        self.game_thread_time.append(record.game_thread_time)
        self.render_thread_time.append(record.render_thread_time)
        self.per_frame_kb.append(record.per_frame_kb)
        self.physics_time.append(record.physics_time)

    def records(self) -> Iterator[FrameRecord]:
        for values in zip(self.frame_numbers, self.frame_time, self.game_thread_time,
                          self.render_thread_time, self.per_frame_kb, self.physics_time):
            yield FrameRecord(*values)


@dataclass(frozen=True)
class StatSummary:
    """Five-number profile of an aggregate stat series, rounded to 2 decimals."""
    p2: float
    average: float
    median: float
    p98: float
    max: float
    sample_count: int

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {
            'p2': self.p2,
            'average': self.average,
            'median': self.median,
            'p98': self.p98,
            'max': self.max,
            'sample_count': self.sample_count,
        }


@dataclass
class AggregationResult:
    """Everything one aggregation pass produces."""
    aggregate_series: Dict[str, List[float]]
    summaries: Dict[str, Optional[StatSummary]]
    frame_series: FrameSeries
    warnings: List[str]
    had_negative_value: bool = False


class AnalysisConfig:
    """Configuration for frame trace analysis."""

    def __init__(
        self,
        frame_limit: int = MAX_FRAMES_TO_PROCESS,
        stat_definitions: Optional[Sequence[AggregateStatDefinition]] = None
    ):
        """
        Initialize frame analysis configuration.

        Args:
            frame_limit: Maximum number of frames processed per run.
                         Default: MAX_FRAMES_TO_PROCESS (effectively unbounded)

            stat_definitions: Aggregate stats to compute. Default: None, which
                              selects DEFAULT_AGGREGATE_STATS
        """
        if frame_limit < 0:
            raise ValueError(f"frame_limit must be non-negative, got {frame_limit}")

        if stat_definitions is None:
            from .stat_definitions import DEFAULT_AGGREGATE_STATS
            stat_definitions = DEFAULT_AGGREGATE_STATS

        self.frame_limit = frame_limit
        self.stat_definitions: Tuple[AggregateStatDefinition, ...] = tuple(stat_definitions)

        validate_stat_definitions(self.stat_definitions)


def validate_stat_definitions(definitions: Sequence[AggregateStatDefinition]) -> None:
    """
    Check that every definition has a non-empty, unique display name.

    Raises:
        ValueError: If a name is empty or used more than once
    """
    seen = set()
    for definition in definitions:
        if not definition.display_name:
            raise ValueError("Aggregate stat definition is missing a display name")
        if definition.display_name in seen:
            raise ValueError(f"Duplicate aggregate stat name '{definition.display_name}'")
        seen.add(definition.display_name)
