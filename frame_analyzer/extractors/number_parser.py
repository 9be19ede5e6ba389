"""
Lenient numeric parsing of raw CSV cells.
"""

import re
from typing import Optional

# Leading numeric prefix; trailing garbage such as units is ignored.
_NUMBER_PREFIX = re.compile(
    r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)


def parse_number(cell: Optional[str]) -> float:
    """
    Parse the leading number of a raw cell.

    Args:
        cell: Raw cell text, or None when the column is absent

    Returns:
        The parsed value, or NaN when the cell is absent or has no numeric prefix
    """
    if cell is None:
        return float('nan')

    match = _NUMBER_PREFIX.match(cell)
    if not match:
        return float('nan')

    text = match.group(1)
    if text.endswith('Infinity'):
        return float('-inf') if text.startswith('-') else float('inf')
    return float(text)
