"""Built-in seed dataset, used when no input file is available."""

from typing import List

from models.listing import Listing
from sources.base import ListingSource
from sources.delimited import DelimitedTextParser

SEED_RECORDS: List[str] = [
    "LISTING#Budapest#250000#100#4#CONDOMINIUM",
    "LISTING#Debrecen#220000#120#5#FAMILY_HOUSE",
    "LISTING#Nyíregyháza#110000#60#2#FARM",
    "LISTING#Nyíregyháza#250000#160#6#FAMILY_HOUSE",
    "LISTING#Kisvárda#150000#50#2#CONDOMINIUM",
    "MULTIUNIT#Budapest#180000#70#3#CONDOMINIUM#4#no",
    "MULTIUNIT#Debrecen#120000#35#2#CONDOMINIUM#0#yes",
    "MULTIUNIT#Tiszaújváros#120000#75#3#CONDOMINIUM#10#no",
    "MULTIUNIT#Nyíregyháza#170000#80#3#CONDOMINIUM#7#no",
]


class SeedSource(ListingSource):
    """Listing source serving the built-in seed records."""

    def get_source_name(self) -> str:
        """Return source identifier."""
        return "seed"

    def load(self) -> List[Listing]:
        parser = DelimitedTextParser()
        return [parser.parse_line(record) for record in SEED_RECORDS]
