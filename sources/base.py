"""Abstract base class for listing sources."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from models.listing import Listing
from utils.catalog import Catalog

logger = logging.getLogger(__name__)


class ListingParseError(ValueError):
    """A listing record could not be turned into a Listing."""


class ListingSource(ABC):
    """
    Abstract base class for listing sources.

    Each source (delimited text file, built-in seed data) implements this
    interface to produce Listing objects. Ordering, deduplication and
    statistics stay in the Catalog.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize source with configuration.

        Args:
            config: Full configuration dictionary from config.json
        """
        self.config = config

    @abstractmethod
    def get_source_name(self) -> str:
        """
        Return source identifier.

        Returns:
            Source name (e.g., "file", "seed")
        """
        pass

    @abstractmethod
    def load(self) -> List[Listing]:
        """
        Produce all well-formed listings of the source.

        Malformed records are logged and skipped, never raised.

        Returns:
            Listings in source order
        """
        pass

    def load_into(self, catalog: Catalog) -> int:
        """
        Replace the catalog contents with the listings of this source.

        Loading happens before the catalog is cleared, so a source that
        fails to load leaves the catalog untouched.

        Returns:
            Number of listings stored (duplicates excluded)
        """
        listings = self.load()

        catalog.clear()
        for listing in listings:
            catalog.insert(listing)

        duplicates = len(listings) - catalog.size()
        if duplicates:
            logger.info(f"Dropped {duplicates} duplicate-ranked listings")
        logger.info(
            f"Loaded {catalog.size()} listings from source '{self.get_source_name()}'"
        )
        return catalog.size()
