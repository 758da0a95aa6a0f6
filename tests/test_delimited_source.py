"""Unit tests for delimited text ingestion and the seed source."""

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from models.constants import Category
from models.listing import Listing, MultiUnitListing
from sources import ListingParseError, get_source
from sources.delimited import DelimitedTextParser, DelimitedTextSource
from sources.seed import SEED_RECORDS, SeedSource
from utils.catalog import Catalog

GOOD_RECORDS = [
    "LISTING#Budapest#250000#100#4#CONDOMINIUM",
    "LISTING#Debrecen#220000#120#5#FAMILY_HOUSE",
    "MULTIUNIT#Budapest#180000#70#3#CONDOMINIUM#4#no",
    "multiunit#Debrecen#120000#35#2#flat#0#YES",
    "LISTING#Kisvárda#150000#50#2#FARM",
]

BAD_RECORDS = [
    "LISTING#Szeged#abc#100#3#CONDOMINIUM",
    "MULTIUNIT#Eger#100000#60#2#CONDOMINIUM",
    "LISTING#Pécs#100000#60#2#CASTLE",
]


class TestDelimitedTextParser:
    """Test single record parsing."""

    @pytest.fixture
    def parser(self):
        """Create parser instance for testing."""
        return DelimitedTextParser()

    def test_parse_listing(self, parser):
        """Test a plain listing record."""
        listing = parser.parse_line("LISTING#Budapest#250000#100#4#CONDOMINIUM")

        assert type(listing) is Listing
        assert listing.city == "Budapest"
        assert listing.price_per_area == 250000.0
        assert listing.area == 100
        assert listing.room_count == 4
        assert listing.category == Category.CONDOMINIUM

    def test_parse_multi_unit(self, parser):
        """Test a multi-unit record with floor and insulation."""
        listing = parser.parse_line("MULTIUNIT#Debrecen#120000#35#2#CONDOMINIUM#0#yes")

        assert isinstance(listing, MultiUnitListing)
        assert listing.floor == 0
        assert listing.is_insulated is True

    def test_type_is_case_insensitive(self, parser):
        """Test lowercase record types."""
        assert type(parser.parse_line("listing#Eger#1#1#1#FARM")) is Listing
        unit = parser.parse_line("MultiUnit#Eger#1#1#1#FARM#3#No")
        assert isinstance(unit, MultiUnitListing)
        assert unit.is_insulated is False

    def test_legacy_type_names(self, parser):
        """Test REALESTATE and PANEL record types."""
        assert type(parser.parse_line("REALESTATE#Eger#1#1#1#FARM")) is Listing
        panel = parser.parse_line("PANEL#Eger#1#1#1#FARM#11#yes")
        assert isinstance(panel, MultiUnitListing)

    def test_category_aliases(self, parser):
        """Test FLAT and FAMILYHOUSE map before lookup."""
        flat = parser.parse_line("LISTING#Eger#1#1#1#FLAT")
        house = parser.parse_line("LISTING#Eger#1#1#1#familyhouse")

        assert flat.category == Category.CONDOMINIUM
        assert house.category == Category.FAMILY_HOUSE

    def test_whitespace_is_trimmed(self, parser):
        """Test spaces around fields and line endings."""
        listing = parser.parse_line(" LISTING # Eger # 1500.5 # 40 # 2 # farm \n")

        assert listing.city == "Eger"
        assert listing.price_per_area == 1500.5
        assert listing.category == Category.FARM

    def test_negative_floor_allowed(self, parser):
        """Test basement floors parse."""
        unit = parser.parse_line("MULTIUNIT#Eger#1#1#1#FARM#-1#no")
        assert unit.floor == -1

    @pytest.mark.parametrize(
        "line",
        [
            "LISTING#Budapest#250000#100#4",
            "LISTING#Budapest#250000#100#4#CONDOMINIUM#3#yes",
            "MULTIUNIT#Budapest#180000#70#3#CONDOMINIUM",
            "MULTIUNIT#Budapest#180000#70#3#CONDOMINIUM#4",
            "LISTING#Budapest#abc#100#4#CONDOMINIUM",
            "LISTING#Budapest#250000#100.5#4#CONDOMINIUM",
            "LISTING#Budapest#250000#100#four#CONDOMINIUM",
            "LISTING#Budapest#nan#100#4#CONDOMINIUM",
            "LISTING#Budapest#-1#100#4#CONDOMINIUM",
            "LISTING#Budapest#250000#-100#4#CONDOMINIUM",
            "LISTING#Budapest#250000#100#4#CASTLE",
            "MULTIUNIT#Budapest#180000#70#3#CONDOMINIUM#x#no",
            "MULTIUNIT#Budapest#180000#70#3#CONDOMINIUM#4#maybe",
            "HOUSEBOAT#Budapest#250000#100#4#CONDOMINIUM",
            "LISTING##250000#100#4#CONDOMINIUM",
            "garbage",
        ],
    )
    def test_malformed_records(self, parser, line):
        """Test every malformed record raises ListingParseError."""
        with pytest.raises(ListingParseError):
            parser.parse_line(line)

    def test_parse_error_is_value_error(self, parser):
        """Test callers can catch parse errors as ValueError."""
        with pytest.raises(ValueError):
            parser.parse_line("LISTING#Budapest")


class TestDelimitedTextSource:
    """Test file ingestion."""

    @pytest.fixture
    def input_file(self, tmp_path):
        """Write a file with good, bad and blank lines."""
        path = tmp_path / "listings.txt"
        lines = GOOD_RECORDS[:2] + [""] + BAD_RECORDS + ["   "] + GOOD_RECORDS[2:]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def test_load_skips_malformed(self, input_file):
        """Test only well-formed records are returned."""
        source = DelimitedTextSource({}, path=input_file)
        listings = source.load()

        assert len(listings) == len(GOOD_RECORDS)
        assert source.skipped_records == len(BAD_RECORDS)

    def test_malformed_records_are_logged(self, input_file, caplog):
        """Test each skipped record is reported with its line number."""
        source = DelimitedTextSource({}, path=input_file)
        with caplog.at_level(logging.WARNING):
            source.load()

        skipped = [r for r in caplog.records if "Skipping line" in r.getMessage()]
        assert len(skipped) == len(BAD_RECORDS)
        assert "Skipping line 4" in skipped[0].getMessage()

    def test_round_trip_into_catalog(self, input_file):
        """Test catalog size equals the number of well-formed records."""
        catalog = Catalog()
        count = DelimitedTextSource({}, path=input_file).load_into(catalog)

        assert count == len(GOOD_RECORDS)
        assert catalog.size() == len(GOOD_RECORDS)

    def test_load_into_replaces_contents(self, input_file):
        """Test previous catalog contents are cleared."""
        catalog = Catalog()
        catalog.insert(Listing("Eger", 1, 1, 1, Category.FARM))

        DelimitedTextSource({}, path=input_file).load_into(catalog)
        assert all(listing.city != "Eger" for listing in catalog)

    def test_undecodable_line_is_skipped(self, tmp_path, caplog):
        """Test a line that is not valid UTF-8 is skipped, the rest still load."""
        path = tmp_path / "mixed.txt"
        path.write_bytes(
            b"LISTING#Budapest#200000#100#4#CONDOMINIUM\n"
            + "LISTING#Nyíregyháza#110000#60#2#FARM\n".encode("latin-1")
            + b"LISTING#Debrecen#150000#80#3#FAMILY_HOUSE\n"
        )
        source = DelimitedTextSource({}, path=path)

        with caplog.at_level(logging.WARNING):
            listings = source.load()

        assert [listing.city for listing in listings] == ["Budapest", "Debrecen"]
        assert source.skipped_records == 1
        assert "Skipping line 2 (Not valid UTF-8" in caplog.text

    def test_undecodable_line_round_trip(self, tmp_path):
        """Test catalog size equals the number of decodable, well-formed records."""
        path = tmp_path / "mixed.txt"
        path.write_bytes(
            "\n".join(GOOD_RECORDS).encode("utf-8")
            + b"\nLISTING#Gy\xf5r#100000#50#2#FARM\n"
        )
        catalog = Catalog()

        count = DelimitedTextSource({}, path=path).load_into(catalog)
        assert count == len(GOOD_RECORDS)

    def test_path_from_config(self, input_file):
        """Test 'input_file' config key is used without an explicit path."""
        source = DelimitedTextSource({"input_file": str(input_file)})
        assert source.path == input_file
        assert source.get_source_name() == "file"

    def test_missing_file_raises(self, tmp_path):
        """Test missing file is reported to the caller."""
        source = DelimitedTextSource({}, path=tmp_path / "missing.txt")
        with pytest.raises(FileNotFoundError):
            source.load()

    def test_failed_load_keeps_catalog(self, tmp_path):
        """Test a failing source leaves the catalog untouched."""
        catalog = Catalog()
        catalog.insert(Listing("Eger", 1, 1, 1, Category.FARM))

        source = DelimitedTextSource({}, path=tmp_path / "missing.txt")
        with pytest.raises(FileNotFoundError):
            source.load_into(catalog)
        assert catalog.size() == 1

    def test_duplicates_in_file(self, tmp_path):
        """Test duplicate-ranked records collapse to one listing."""
        path = tmp_path / "dupes.txt"
        path.write_text(
            "LISTING#Eger#100000#100#3#FARM\nLISTING#Eger#100000#100#5#CONDOMINIUM\n",
            encoding="utf-8",
        )
        catalog = Catalog()
        assert DelimitedTextSource({}, path=path).load_into(catalog) == 1


class TestSeedSource:
    """Test the built-in seed dataset."""

    def test_seed_records_parse(self):
        """Test every seed record is well formed."""
        listings = SeedSource({}).load()
        assert len(listings) == len(SEED_RECORDS) == 9

    def test_seed_mix(self):
        """Test seed data contains both entity kinds."""
        listings = SeedSource({}).load()
        units = [unit for unit in listings if isinstance(unit, MultiUnitListing)]
        assert len(units) == 4

    def test_seed_load_into(self):
        """Test all seed listings have distinct ranks."""
        catalog = Catalog()
        assert SeedSource({}).load_into(catalog) == 9
        assert SeedSource({}).get_source_name() == "seed"


class TestGetSource:
    """Test the source factory."""

    def test_file_source(self, tmp_path):
        """Test configured input file selects the text source."""
        source = get_source({"input_file": str(tmp_path / "listings.txt")})
        assert isinstance(source, DelimitedTextSource)

    def test_seed_source(self):
        """Test no input file selects the seed source."""
        assert isinstance(get_source({}), SeedSource)
        assert isinstance(get_source({"input_file": None}), SeedSource)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
