"""
CSV payload ingestion with trailing-header recovery.
"""

import csv
from typing import List, Tuple

from ..core.types import Table
from ..utils.logging import get_logger

logger = get_logger(__name__)

HEADER_AT_END_SENTINEL = "[HasHeaderRowAtEnd]"

MISSING_HEADER_WARNING = (
    "WARNING : Final headers were not written, make sure traces end gracefully "
    "by not shutting down the process prematurely to prevent data loss."
)


class TableIngestor:
    """Turns a raw CSV profiler payload into a Table."""

    @staticmethod
    def recover_header(lines: List[str]) -> Tuple[List[str], bool]:
        """
        Apply the trailing-header convention to a list of lines.

        The profiler only knows its full column set when the capture ends, so
        it writes the real header as the second-to-last line followed by a
        sentinel line. When the sentinel is present the real header replaces
        the first line and both trailing lines are removed from the data.

        Args:
            lines: Payload lines without line terminators

        Returns:
            Tuple of (lines, header_recovered)
        """
        lines = list(lines)
        while lines and not lines[-1].strip():
            lines.pop()

        if len(lines) >= 2 and lines[-1].startswith(HEADER_AT_END_SENTINEL):
            lines[0] = lines[-2]
            # Keep line 0 when it is the promoted header itself.
            del lines[max(1, len(lines) - 2):]
            return lines, True

        return lines, False

    def ingest(self, raw_payload: str) -> Tuple[Table, List[str]]:
        """
        Parse a raw payload into a table of raw string cells.

        Args:
            raw_payload: CSV text as produced by the profiler

        Returns:
            Tuple of (table, warnings)
        """
        warnings: List[str] = []
        lines = [line.rstrip('\r') for line in raw_payload.split('\n')]

        lines, header_recovered = self.recover_header(lines)
        if not header_recovered:
            logger.warning("Trailing header row not found, using the first line as header")
            warnings.append(MISSING_HEADER_WARNING)

        reader = csv.DictReader(lines)
        columns = list(reader.fieldnames or [])
        rows = []
        for row in reader:
            # Cells beyond the header width land under the None key.
            row.pop(None, None)
            rows.append(row)

        logger.debug("Ingested %d frames with %d columns", len(rows), len(columns))
        return Table(columns, rows), warnings
