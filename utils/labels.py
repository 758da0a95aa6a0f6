"""Output strings for report generation."""

from typing import Dict

# Main section headers
HEADERS: Dict[str, str] = {
    "report_title": "REAL ESTATE ANALYSIS REPORT",
    "all_listings": "ALL LISTINGS IN CATALOG (sorted by total price)",
    "statistics": "Statistics",
    "affordable_condominiums": "Affordable condominiums",
    "listings": "Listings",
}

# Numbered report lines
LABELS: Dict[str, str] = {
    "average_price_per_area": "1. Average price per sqm",
    "cheapest_total_price": "2. Price of the cheapest listing",
    "reference_area_per_room": "3. Average sqm per room of the most expensive {city} listing",
    "reference_missing": "3. No listings found in {city}",
    "sum_of_total_prices": "4. Total price of all listings",
    "affordable_condominiums": "5. Condominiums with total price <= {threshold:.2f}",
    "generated": "Generated on",
    "listing_count": "Listings",
}

# Table column headers (PDF)
TABLE_HEADERS: Dict[str, str] = {
    "rank": "#",
    "city": "City",
    "category": "Category",
    "area": "Area",
    "rooms": "Rooms",
    "price_per_area": "Price/sqm",
    "total_price": "Total price",
}

# Common phrases
PHRASES: Dict[str, str] = {
    "no_affordable": "No condominiums found within the price threshold.",
    "empty_catalog": "No listings in the catalog.",
    "yes": "yes",
    "no": "no",
    "n/a": "n/a",
}
