"""Hungarian real estate constants and enums."""

from enum import Enum
from typing import Dict


class Category(Enum):
    """Listing categories."""

    FAMILY_HOUSE = "Family house"
    CONDOMINIUM = "Condominium"
    FARM = "Farm"


class ListingKind(Enum):
    """Entity shapes a listing record can take."""

    LISTING = "LISTING"
    MULTIUNIT = "MULTIUNIT"


# Legacy category spellings, mapped before enum lookup
CATEGORY_ALIASES: Dict[str, Category] = {
    "FLAT": Category.CONDOMINIUM,
    "FAMILYHOUSE": Category.FAMILY_HOUSE,
}

# Legacy record type names
KIND_ALIASES: Dict[str, ListingKind] = {
    "REALESTATE": ListingKind.LISTING,
    "PANEL": ListingKind.MULTIUNIT,
}

# City price multipliers, keyed by lowercase city name
# Both diacritic and plain spellings are listed
CITY_MODIFIERS: Dict[str, float] = {
    "budapest": 1.30,
    "debrecen": 1.20,
    "nyíregyháza": 1.15,
    "nyiregyhaza": 1.15,
}

DEFAULT_CITY_MODIFIER = 1.0

# Multi-unit building adjustments (additive on top of 1.0)
LOW_FLOOR_RANGE = (0, 2)  # inclusive
HIGH_FLOOR_THRESHOLD = 10
LOW_FLOOR_ADJUSTMENT = 0.05
HIGH_FLOOR_ADJUSTMENT = -0.05
INSULATION_ADJUSTMENT = 0.05

# City used for the "most expensive listing" line of the report
DEFAULT_REFERENCE_CITY = "Budapest"
