"""Ordered, deduplicated listing store with report queries."""

import logging
from typing import Iterator, List, Optional

from models.constants import DEFAULT_REFERENCE_CITY, Category
from models.listing import Listing, rank_key
from models.statistics import CatalogStatistics
from utils.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


class Catalog:
    """
    Hold listings ordered by total price, city and area.

    The same three-part key (see rank_key) decides both the iteration order
    and uniqueness: a listing whose key equals an already stored one is
    dropped on insert. All aggregate queries return zero or empty results
    on an empty catalog instead of raising.
    """

    def __init__(self):
        self._listings: List[Listing] = []

    def insert(self, listing: Optional[Listing]) -> bool:
        """
        Add a listing unless an equally ranked one is already stored.

        Args:
            listing: The listing to add

        Returns:
            True if the listing was stored, False for duplicates or None
        """
        if listing is None:
            return False

        key = rank_key(listing)
        if any(rank_key(existing) == key for existing in self._listings):
            logger.debug(f"Skipping duplicate-ranked listing: {listing.city} {key}")
            return False

        self._listings.append(listing)
        self._listings.sort(key=rank_key)
        return True

    def clear(self) -> None:
        """Remove all listings."""
        self._listings.clear()

    def size(self) -> int:
        """Return number of stored listings."""
        return len(self._listings)

    def iterate_ordered(self) -> Iterator[Listing]:
        """
        Yield listings in ascending rank order.

        Iterates over a snapshot taken when iteration starts; call again to
        restart.
        """
        # Re-sort, a discount may have moved a listing since it was inserted
        for listing in sorted(self._listings, key=rank_key):
            yield listing

    def average_price_per_area(self) -> float:
        """Mean price per sqm across all listings, 0.0 when empty."""
        if not self._listings:
            return 0.0
        total = sum(listing.price_per_area for listing in self._listings)
        return total / len(self._listings)

    def cheapest_total_price(self) -> int:
        """Lowest total price, 0 when empty."""
        return min((listing.total_price() for listing in self._listings), default=0)

    def most_expensive_in_city(self, city: str) -> Optional[Listing]:
        """
        Find the listing with the highest total price in a city.

        City names are matched case-insensitively. Among equal prices the
        first listing in catalog order wins.
        """
        target = city.lower()
        candidates = [
            listing
            for listing in self.iterate_ordered()
            if (listing.city or "").lower() == target
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda listing: listing.total_price())

    def sum_of_total_prices(self) -> int:
        """Sum of all total prices."""
        return sum(listing.total_price() for listing in self._listings)

    def average_total_price(self) -> float:
        """Mean total price, 0.0 when empty."""
        if not self._listings:
            return 0.0
        return self.sum_of_total_prices() / len(self._listings)

    def filter_affordable_condominiums(self, threshold_price: float) -> List[Listing]:
        """Condominiums with total price at or below the threshold, in catalog order."""
        return [
            listing
            for listing in self.iterate_ordered()
            if listing.category == Category.CONDOMINIUM
            and listing.total_price() <= threshold_price
        ]

    def compute_statistics(
        self,
        reference_city: str = DEFAULT_REFERENCE_CITY,
        affordable_threshold: Optional[float] = None,
    ) -> CatalogStatistics:
        """
        Compute every figure of the analysis report.

        Args:
            reference_city: City whose most expensive listing is reported
            affordable_threshold: Price limit for the condominium list;
                defaults to the mean total price

        Returns:
            CatalogStatistics snapshot
        """
        if affordable_threshold is None:
            affordable_threshold = self.average_total_price()

        reference_listing = self.most_expensive_in_city(reference_city)
        reference_area = (
            reference_listing.average_area_per_room() if reference_listing else None
        )

        return CatalogStatistics(
            listing_count=self.size(),
            average_price_per_area=self.average_price_per_area(),
            cheapest_total_price=self.cheapest_total_price(),
            reference_city=reference_city,
            reference_listing=reference_listing,
            reference_average_area_per_room=reference_area,
            sum_of_total_prices=self.sum_of_total_prices(),
            affordable_threshold=affordable_threshold,
            affordable_condominiums=self.filter_affordable_condominiums(
                affordable_threshold
            ),
        )

    def generate_report(
        self,
        reference_city: str = DEFAULT_REFERENCE_CITY,
        affordable_threshold: Optional[float] = None,
    ) -> str:
        """Render the analysis report as plain text."""
        statistics = self.compute_statistics(reference_city, affordable_threshold)
        return ReportGenerator().render_text(statistics)

    def describe_all(self) -> str:
        """Numbered description of every listing in rank order."""
        return ReportGenerator().render_listing_overview(self.iterate_ordered())

    def __iter__(self) -> Iterator[Listing]:
        return self.iterate_ordered()

    def __len__(self) -> int:
        """Return number of stored listings."""
        return len(self._listings)
