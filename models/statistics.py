"""Snapshot of the catalog figures used for report generation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .listing import Listing


@dataclass
class CatalogStatistics:
    """
    All figures of the analysis report, computed once per run.

    Renderers (text, Markdown, PDF) read from this object instead of
    querying the catalog again, so every output shows the same numbers.
    """

    listing_count: int

    # 1. Average price per sqm
    average_price_per_area: float

    # 2. Cheapest total price
    cheapest_total_price: int

    # 3. Most expensive listing in the reference city
    reference_city: str
    reference_listing: Optional[Listing]
    reference_average_area_per_room: Optional[float]

    # 4. Sum of all total prices
    sum_of_total_prices: int

    # 5. Condominiums at or below the threshold (mean total price by default)
    affordable_threshold: float
    affordable_condominiums: List[Listing] = field(default_factory=list)

    generated_at: datetime = field(default_factory=datetime.now)
