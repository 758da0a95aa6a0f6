"""Listing source factory and exports."""

import logging
from typing import Any, Dict

from sources.base import ListingParseError, ListingSource

logger = logging.getLogger(__name__)


def get_source(config: Dict[str, Any]) -> ListingSource:
    """
    Factory function to get the listing source for a configuration.

    Args:
        config: Configuration dictionary from config.json

    Returns:
        DelimitedTextSource when 'input_file' is set, SeedSource otherwise

    Example:
        >>> source = get_source({"input_file": "data/listings.txt"})
        >>> print(source.get_source_name())
        "file"
    """
    input_file = config.get("input_file")

    if input_file:
        from sources.delimited import DelimitedTextSource

        logger.info(f"Initializing delimited text source: {input_file}")
        return DelimitedTextSource(config)

    from sources.seed import SeedSource

    logger.info("No input file configured - using built-in seed data")
    return SeedSource(config)


__all__ = ["get_source", "ListingSource", "ListingParseError"]
