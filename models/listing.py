"""Real estate listing data models."""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from .constants import (
    CITY_MODIFIERS,
    DEFAULT_CITY_MODIFIER,
    HIGH_FLOOR_ADJUSTMENT,
    HIGH_FLOOR_THRESHOLD,
    INSULATION_ADJUSTMENT,
    LOW_FLOOR_ADJUSTMENT,
    LOW_FLOOR_RANGE,
    Category,
    ListingKind,
)


def city_modifier(city: Optional[str]) -> float:
    """Return the price multiplier for a city (case-insensitive)."""
    if not city:
        return DEFAULT_CITY_MODIFIER
    return CITY_MODIFIERS.get(city.lower(), DEFAULT_CITY_MODIFIER)


@dataclass
class Listing:
    """
    A single real estate listing.

    Total price and area per room are derived on every call from the current
    attribute values, so a discount is reflected immediately.
    """

    kind: ClassVar[ListingKind] = ListingKind.LISTING

    city: str
    price_per_area: float  # price per sqm, before modifiers
    area: int  # sqm
    room_count: int
    category: Category

    def apply_discount(self, percentage: int) -> None:
        """
        Reduce the price per sqm by the given percentage.

        Percentages above 100 are not rejected and produce a negative price.
        """
        self.price_per_area = self.price_per_area * (100 - percentage) / 100.0

    def total_price(self) -> int:
        """Calculate total price including the city modifier (truncated)."""
        base_price = self.price_per_area * self.area
        return int(base_price * city_modifier(self.city))

    def average_area_per_room(self) -> float:
        """Calculate average sqm per room, 0.0 when there are no rooms."""
        if self.room_count == 0:
            return 0.0
        return self.area / self.room_count

    def describe(self) -> str:
        """Human-readable summary of the listing."""
        return (
            f"Listing [City: {self.city}, Category: {self.category.name}, "
            f"Price per sqm: {self.price_per_area:.2f}, Area: {self.area} sqm, "
            f"Rooms: {self.room_count}, Total price: {self.total_price()}, "
            f"Average sqm per room: {self.average_area_per_room():.2f}]"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "city": self.city,
            "category": self.category.name,
            "price_per_area": self.price_per_area,
            "area": self.area,
            "room_count": self.room_count,
            "total_price": self.total_price(),
            "average_area_per_room": round(self.average_area_per_room(), 2),
        }

    def __str__(self) -> str:
        return self.describe()


@dataclass
class MultiUnitListing(Listing):
    """Listing in a multi-unit (panel) building with floor and insulation data."""

    kind: ClassVar[ListingKind] = ListingKind.MULTIUNIT

    floor: int
    is_insulated: bool

    def unit_modifier(self) -> float:
        """Floor and insulation adjustments, applied on top of the city price."""
        modifier = 1.0

        low, high = LOW_FLOOR_RANGE
        if low <= self.floor <= high:
            modifier += LOW_FLOOR_ADJUSTMENT
        elif self.floor >= HIGH_FLOOR_THRESHOLD:
            modifier += HIGH_FLOOR_ADJUSTMENT

        if self.is_insulated:
            modifier += INSULATION_ADJUSTMENT

        return modifier

    def total_price(self) -> int:
        """Calculate total price with city, floor and insulation modifiers."""
        base_price = float(super().total_price())
        return int(base_price * self.unit_modifier())

    def same_total_price_as(self, other: Optional[Listing]) -> bool:
        """Check whether another listing has exactly the same total price."""
        if other is None:
            return False
        return self.total_price() == other.total_price()

    def room_base_price(self) -> int:
        """
        Price per room without any city, floor or insulation modifier.

        This is not total_price() / room_count.
        """
        if self.room_count == 0:
            return 0
        base_price = self.price_per_area * self.area
        return int(base_price / self.room_count)

    def describe(self) -> str:
        """Human-readable summary including unit details."""
        return (
            f"Multi-unit listing [City: {self.city}, Category: {self.category.name}, "
            f"Price per sqm: {self.price_per_area:.2f}, Area: {self.area} sqm, "
            f"Rooms: {self.room_count}, Floor: {self.floor}, "
            f"Insulated: {'yes' if self.is_insulated else 'no'}, "
            f"Total price: {self.total_price()}, "
            f"Average sqm per room: {self.average_area_per_room():.2f}, "
            f"Room base price: {self.room_base_price()}]"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = super().to_dict()
        result["floor"] = self.floor
        result["is_insulated"] = self.is_insulated
        result["room_base_price"] = self.room_base_price()
        return result


def rank_key(listing: Listing) -> Tuple[int, str, int]:
    """
    Ordering rule for the catalog: total price, then city, then area.

    The same key decides both iteration order and uniqueness.
    """
    return (listing.total_price(), listing.city or "", listing.area)
