"""
Schema-driven column discovery.
"""

import re
from typing import Iterable, List


class ColumnMatcher:
    """Selects columns from a table schema by naming pattern."""

    def __init__(self):
        """Initialize regex patterns for physics/worker thread columns."""
        # Physics thread naming differs between configurations, so the
        # columns are found by pattern instead of being declared.
        self.chaos_worker_pattern = re.compile(r'Chaos.*Worker.*')
        self.exclusive_physics_pattern = re.compile(r'Exclusive.*Physics')

    def is_physics_column(self, column: str) -> bool:
        """Return True if the column matches either physics/worker pattern."""
        return bool(self.chaos_worker_pattern.search(column) or
                    self.exclusive_physics_pattern.search(column))

    def physics_columns(self, columns: Iterable[str]) -> List[str]:
        """
        Find every physics/worker column in a schema.

        Args:
            columns: Column names in header order

        Returns:
            Matching column names, in header order, each listed once
        """
        matched = []
        for column in columns:
            if column not in matched and self.is_physics_column(column):
                matched.append(column)
        return matched

    @staticmethod
    def columns_for_tab(columns: Iterable[str], tab) -> List[str]:
        """
        Find the columns belonging to a tab.

        A thread written as ``/pattern/`` is a regular expression searched in
        each column name; any other thread is matched as a substring.

        Args:
            columns: Column names in header order
            tab: TabConfig describing the column group

        Returns:
            Matching column names in header order
        """
        thread = tab.thread
        if len(thread) > 1 and thread.startswith('/') and thread.endswith('/'):
            pattern = re.compile(thread[1:-1])
            return [column for column in columns if pattern.search(column)]
        return [column for column in columns if thread in column]
