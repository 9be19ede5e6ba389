"""
Aggregate stat definition loading from JSON using streaming parser.
"""

from typing import List

import ijson

from ..core.types import AggregateStatDefinition, validate_stat_definitions
from ..utils.logging import get_logger

logger = get_logger(__name__)


class StatDefinitionLoader:
    """Loads aggregate stat definitions from a JSON file."""

    @staticmethod
    def load_file(file_path: str) -> List[AggregateStatDefinition]:
        """
        Read stat definitions from a JSON file of the form
        ``{"stats": [{"displayName": ..., "addLabels": [...], "subtractLabels": [...]}]}``.

        Args:
            file_path: Path to the JSON file

        Returns:
            Stat definitions in file order

        Raises:
            ValueError: If an entry has no display name or names repeat
        """
        definitions = []

        with open(file_path, 'rb') as f:
            for item in ijson.items(f, 'stats.item'):
                definitions.append(AggregateStatDefinition(
                    display_name=item.get('displayName', ''),
                    add_labels=tuple(item.get('addLabels', [])),
                    subtract_labels=tuple(item.get('subtractLabels', [])),
                ))

        validate_stat_definitions(definitions)
        logger.info("Loaded %d aggregate stat definitions from %s", len(definitions), file_path)
        return definitions


def load_stat_definitions(file_path: str) -> List[AggregateStatDefinition]:
    """Module-level shortcut for StatDefinitionLoader.load_file."""
    return StatDefinitionLoader.load_file(file_path)
