"""Delimited text listing source."""

import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from models.constants import CATEGORY_ALIASES, KIND_ALIASES, Category, ListingKind
from models.listing import Listing, MultiUnitListing
from sources.base import ListingParseError, ListingSource

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "#"

# Number of fields per record type, including the type field itself
FIELD_COUNTS: Dict[ListingKind, int] = {
    ListingKind.LISTING: 6,
    ListingKind.MULTIUNIT: 8,
}

YES_NO: Dict[str, bool] = {"yes": True, "no": False}


class DelimitedTextParser:
    """
    Parser for '#'-separated listing records.

    Format:
        TYPE#city#pricePerArea#area#roomCount#category[#floor#insulated]

    TYPE is LISTING or MULTIUNIT (legacy REALESTATE / PANEL accepted);
    MULTIUNIT records carry the two extra fields.
    """

    def parse_line(self, line: str) -> Listing:
        """
        Parse one record.

        Raises:
            ListingParseError: wrong field count, unparsable number, unknown
                type or category, or invalid yes/no token
        """
        parts = [part.strip() for part in line.strip().split(FIELD_SEPARATOR)]

        kind = self.parse_kind(parts[0])
        expected = FIELD_COUNTS[kind]
        if len(parts) != expected:
            raise ListingParseError(
                f"{kind.value} record needs {expected} fields, got {len(parts)}"
            )

        city = parts[1]
        if not city:
            raise ListingParseError("City is empty")

        price_per_area = self.parse_decimal(parts[2], "price per area")
        area = self.parse_int(parts[3], "area")
        room_count = self.parse_int(parts[4], "room count")
        category = self.parse_category(parts[5])

        if kind == ListingKind.MULTIUNIT:
            return MultiUnitListing(
                city=city,
                price_per_area=price_per_area,
                area=area,
                room_count=room_count,
                category=category,
                floor=self.parse_int(parts[6], "floor", allow_negative=True),
                is_insulated=self.parse_yes_no(parts[7]),
            )

        return Listing(
            city=city,
            price_per_area=price_per_area,
            area=area,
            room_count=room_count,
            category=category,
        )

    def parse_kind(self, text: str) -> ListingKind:
        """Map a record type token (case-insensitive) to a ListingKind."""
        token = text.upper()
        if token in KIND_ALIASES:
            return KIND_ALIASES[token]
        try:
            return ListingKind(token)
        except ValueError:
            raise ListingParseError(f"Unknown record type: {text!r}") from None

    def parse_category(self, text: str) -> Category:
        """Map a category token (case-insensitive, aliases first) to a Category."""
        token = text.upper()
        if token in CATEGORY_ALIASES:
            return CATEGORY_ALIASES[token]
        try:
            return Category[token]
        except KeyError:
            raise ListingParseError(f"Unknown category: {text!r}") from None

    def parse_decimal(self, text: str, field_name: str) -> float:
        try:
            value = float(text)
        except ValueError:
            raise ListingParseError(f"Invalid {field_name}: {text!r}") from None
        if not math.isfinite(value):
            raise ListingParseError(f"Invalid {field_name}: {text!r}")
        if value < 0:
            raise ListingParseError(f"Negative {field_name}: {text!r}")
        return value

    def parse_int(
        self, text: str, field_name: str, allow_negative: bool = False
    ) -> int:
        try:
            value = int(text)
        except ValueError:
            raise ListingParseError(f"Invalid {field_name}: {text!r}") from None
        if value < 0 and not allow_negative:
            raise ListingParseError(f"Negative {field_name}: {text!r}")
        return value

    def parse_yes_no(self, text: str) -> bool:
        try:
            return YES_NO[text.lower()]
        except KeyError:
            raise ListingParseError(f"Expected yes/no, got {text!r}") from None


class DelimitedTextSource(ListingSource):
    """Listing source reading '#'-separated records from a UTF-8 text file."""

    def __init__(
        self,
        config: Dict[str, Any],
        path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the source.

        Args:
            config: Configuration dictionary; 'input_file' is used when no
                path is given
            path: Explicit input file path
        """
        super().__init__(config)
        self.path = Path(path or config["input_file"])
        self.parser = DelimitedTextParser()
        self.skipped_records = 0

    def get_source_name(self) -> str:
        """Return source identifier."""
        return "file"

    def load(self) -> List[Listing]:
        """
        Read and parse the input file.

        Lines are decoded one at a time, so a line that is not valid UTF-8 is
        skipped like any other malformed record.

        Raises:
            FileNotFoundError: the input file does not exist
            OSError: the input file cannot be read
        """
        with open(self.path, "rb") as f:
            lines = f.readlines()

        listings = self.parse_lines(lines)
        logger.info(
            f"Parsed {len(listings)} records from {self.path} "
            f"({self.skipped_records} skipped)"
        )
        return listings

    def parse_lines(self, lines: Iterable[Union[str, bytes]]) -> List[Listing]:
        """Parse records (text or raw bytes), logging and skipping malformed ones."""
        listings = []
        for line_number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                listings.append(self.parser.parse_line(self.decode_line(line)))
            except ListingParseError as e:
                self.skipped_records += 1
                if isinstance(line, bytes):
                    line = line.decode("utf-8", errors="replace")
                logger.warning(f"Skipping line {line_number} ({e}): {line.strip()}")
        return listings

    def decode_line(self, line: Union[str, bytes]) -> str:
        if isinstance(line, str):
            return line
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ListingParseError(f"Not valid UTF-8 at byte {e.start}") from None
