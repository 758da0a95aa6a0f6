"""Data models for real estate listings."""

from .constants import (
    CATEGORY_ALIASES,
    CITY_MODIFIERS,
    KIND_ALIASES,
    Category,
    ListingKind,
)
from .listing import Listing, MultiUnitListing, city_modifier, rank_key
from .statistics import CatalogStatistics

__all__ = [
    "Listing",
    "MultiUnitListing",
    "CatalogStatistics",
    "Category",
    "ListingKind",
    "CATEGORY_ALIASES",
    "KIND_ALIASES",
    "CITY_MODIFIERS",
    "city_modifier",
    "rank_key",
]
