"""Unit tests for Listing pricing and derived values."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from models.constants import Category, ListingKind
from models.listing import Listing, city_modifier, rank_key


def make_listing(city="Budapest", price=200000, area=100, rooms=4,
                 category=Category.CONDOMINIUM):
    return Listing(
        city=city,
        price_per_area=price,
        area=area,
        room_count=rooms,
        category=category,
    )


class TestTotalPrice:
    """Test city-adjusted total price."""

    def test_city_modifiers(self):
        """Test the modifier of every priced city and the default."""
        assert make_listing(city="Budapest").total_price() == 26000000
        assert make_listing(city="Debrecen").total_price() == 24000000
        assert make_listing(city="Nyíregyháza").total_price() == 23000000
        assert make_listing(city="Kisvárda").total_price() == 20000000

    def test_city_match_is_case_insensitive(self):
        """Test upper/lower case city names get the same modifier."""
        assert make_listing(city="BUDAPEST").total_price() == 26000000
        assert make_listing(city="debrecen").total_price() == 24000000
        assert make_listing(city="NYÍREGYHÁZA").total_price() == 23000000

    def test_city_without_diacritics(self):
        """Test plain-ASCII spelling of Nyíregyháza."""
        assert make_listing(city="Nyiregyhaza").total_price() == 23000000
        assert city_modifier("nyiregyhaza") == city_modifier("Nyíregyháza")

    def test_unknown_or_missing_city(self):
        """Test unknown and empty cities fall back to no modifier."""
        assert city_modifier("Szeged") == 1.0
        assert city_modifier("") == 1.0
        assert city_modifier(None) == 1.0

    def test_total_price_truncates(self):
        """Test fractional totals are truncated, not rounded."""
        listing = make_listing(city="Eger", price=100.99, area=1)
        assert listing.total_price() == 100

    def test_total_price_is_recomputed(self):
        """Test derived values follow attribute changes."""
        listing = make_listing()
        listing.area = 50
        assert listing.total_price() == 13000000

        listing.city = "Eger"
        assert listing.total_price() == 10000000


class TestAverageAreaPerRoom:
    """Test average sqm per room."""

    def test_average_area_per_room(self):
        """Test area divided by room count."""
        listing = make_listing(price=250000, area=120, rooms=4)
        assert listing.average_area_per_room() == 30.0

    def test_zero_rooms(self):
        """Test zero rooms yields 0 instead of a division error."""
        listing = make_listing(rooms=0)
        assert listing.average_area_per_room() == 0

    def test_fractional_result(self):
        """Test non-integer averages are kept."""
        listing = make_listing(area=100, rooms=3)
        assert listing.average_area_per_room() == pytest.approx(33.333, rel=1e-3)


class TestDiscount:
    """Test price per sqm discount."""

    def test_ten_percent_discount(self):
        """Test a 10% discount on 200000."""
        listing = make_listing()
        listing.apply_discount(10)
        assert listing.price_per_area == pytest.approx(180000, abs=0.01)

    def test_discount_updates_total_price(self):
        """Test total price reflects the discounted price."""
        listing = make_listing()
        listing.apply_discount(10)
        assert listing.total_price() == 23400000

    def test_zero_discount(self):
        """Test 0% leaves the price unchanged."""
        listing = make_listing()
        listing.apply_discount(0)
        assert listing.price_per_area == 200000

    def test_discount_over_hundred_goes_negative(self):
        """Test percentages above 100 are not rejected."""
        listing = make_listing()
        listing.apply_discount(150)
        assert listing.price_per_area == pytest.approx(-100000)
        assert listing.total_price() < 0


class TestDescribe:
    """Test text rendering and serialization."""

    def test_describe_contains_all_values(self):
        """Test attributes and derived values appear in the description."""
        text = make_listing().describe()

        assert text.startswith("Listing [")
        assert "City: Budapest" in text
        assert "Category: CONDOMINIUM" in text
        assert "Price per sqm: 200000.00" in text
        assert "Area: 100 sqm" in text
        assert "Rooms: 4" in text
        assert "Total price: 26000000" in text
        assert "Average sqm per room: 25.00" in text

    def test_str_uses_describe(self):
        """Test str() matches describe()."""
        listing = make_listing()
        assert str(listing) == listing.describe()

    def test_to_dict(self):
        """Test dictionary conversion includes derived values."""
        data = make_listing(category=Category.FARM).to_dict()

        assert data["kind"] == "LISTING"
        assert data["category"] == "FARM"
        assert data["total_price"] == 26000000
        assert data["average_area_per_room"] == 25.0
        assert "floor" not in data

    def test_kind(self):
        """Test listings are tagged with their entity kind."""
        assert make_listing().kind == ListingKind.LISTING


class TestRankKey:
    """Test the ordering rule."""

    def test_sorts_by_total_price(self):
        """Test cheaper listing ranks first."""
        cheap = make_listing(city="Debrecen", price=100000, area=50, rooms=2)
        expensive = make_listing(city="Budapest", price=300000, area=100)
        assert rank_key(cheap) < rank_key(expensive)

    def test_tie_breaks_on_city_then_area(self):
        """Test equal totals fall back to city, then area."""
        eger_small = make_listing(city="Eger", price=200000, area=50)
        eger_large = make_listing(city="Eger", price=100000, area=100)
        szeged = make_listing(city="Szeged", price=100000, area=100)

        assert eger_small.total_price() == szeged.total_price()
        assert rank_key(eger_large) < rank_key(szeged)
        assert rank_key(eger_small) < rank_key(eger_large)

    def test_city_comparison_is_case_sensitive(self):
        """Test uppercase city names sort before lowercase ones."""
        upper = make_listing(city="Zalaegerszeg", price=100000, area=100)
        lower = make_listing(city="eger", price=100000, area=100)
        assert rank_key(upper) < rank_key(lower)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
