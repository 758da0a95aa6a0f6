"""Text and Markdown rendering of the catalog analysis report."""

from typing import Any, Dict, Iterable, List

import yaml

from models.listing import Listing
from models.statistics import CatalogStatistics
from utils.labels import HEADERS, LABELS, PHRASES


class ReportGenerator:
    """Render CatalogStatistics as plain text or Markdown with YAML frontmatter."""

    RULE_WIDTH = 80

    def render_text(self, statistics: CatalogStatistics) -> str:
        """
        Render the analysis report as plain text.

        Sections appear in fixed order: average price per sqm, cheapest
        total price, reference city listing, sum of total prices and the
        affordable condominium list.
        """
        title = HEADERS["report_title"]
        lines = [title, "=" * len(title), ""]

        lines.extend(self.summary_lines(statistics))

        lines.append("")
        lines.append(
            LABELS["affordable_condominiums"].format(
                threshold=statistics.affordable_threshold
            )
            + ":"
        )
        if statistics.affordable_condominiums:
            for listing in statistics.affordable_condominiums:
                lines.append(f"   - {listing.describe()}")
        else:
            lines.append(f"   {PHRASES['no_affordable']}")

        return "\n".join(lines) + "\n"

    def summary_lines(self, statistics: CatalogStatistics) -> List[str]:
        """Report lines 1-4."""
        lines = [
            f"{LABELS['average_price_per_area']}: "
            f"{statistics.average_price_per_area:.2f}",
            f"{LABELS['cheapest_total_price']}: {statistics.cheapest_total_price}",
        ]

        city = statistics.reference_city
        if statistics.reference_average_area_per_room is not None:
            label = LABELS["reference_area_per_room"].format(city=city)
            lines.append(f"{label}: {statistics.reference_average_area_per_room:.2f}")
        else:
            lines.append(LABELS["reference_missing"].format(city=city))

        lines.append(
            f"{LABELS['sum_of_total_prices']}: {statistics.sum_of_total_prices}"
        )
        return lines

    def render_listing_overview(self, listings: Iterable[Listing]) -> str:
        """Numbered list of listings under a header, one per line."""
        listings = list(listings)
        if not listings:
            return PHRASES["empty_catalog"] + "\n"

        rule = "=" * self.RULE_WIDTH
        lines = [rule, HEADERS["all_listings"], rule]
        for idx, listing in enumerate(listings, 1):
            lines.append(f"{idx}. {listing.describe()}")
        return "\n".join(lines) + "\n"

    def generate_yaml_frontmatter(self, statistics: CatalogStatistics) -> str:
        """Generate YAML frontmatter holding the report figures."""
        frontmatter: Dict[str, Any] = {
            "generated_at": statistics.generated_at.isoformat(),
            "listing_count": statistics.listing_count,
            "average_price_per_area": round(statistics.average_price_per_area, 2),
            "cheapest_total_price": statistics.cheapest_total_price,
            "sum_of_total_prices": statistics.sum_of_total_prices,
        }

        reference = {"city": statistics.reference_city}
        if statistics.reference_listing is not None:
            reference["total_price"] = statistics.reference_listing.total_price()
            reference["average_area_per_room"] = round(
                statistics.reference_average_area_per_room, 2
            )
        frontmatter["reference"] = reference

        frontmatter["affordable_condominiums"] = {
            "threshold": round(statistics.affordable_threshold, 2),
            "listings": [
                listing.to_dict() for listing in statistics.affordable_condominiums
            ],
        }

        return yaml.dump(
            frontmatter, allow_unicode=True, sort_keys=False, default_flow_style=False
        )

    def render_markdown(self, statistics: CatalogStatistics) -> str:
        """Render the report as Markdown with YAML frontmatter."""
        frontmatter = self.generate_yaml_frontmatter(statistics).rstrip()
        content = ["---", frontmatter, "---", ""]

        content.append(f"# {HEADERS['report_title'].title()}\n")

        content.append(f"## {HEADERS['statistics']}\n")
        for line in self.summary_lines(statistics):
            content.append(f"- {line}")
        content.append("")

        content.append(f"## {HEADERS['affordable_condominiums']}\n")
        content.append(
            LABELS["affordable_condominiums"].format(
                threshold=statistics.affordable_threshold
            )
            + "\n"
        )
        if statistics.affordable_condominiums:
            content.append(self._listing_table(statistics.affordable_condominiums))
        else:
            content.append(f"*{PHRASES['no_affordable']}*")

        return "\n".join(content) + "\n"

    def _listing_table(self, listings: List[Listing]) -> str:
        """Markdown table of listings."""
        rows = [
            "| City | Category | Area (sqm) | Rooms | Price/sqm | Total price |",
            "|------|----------|-----------:|------:|----------:|------------:|",
        ]
        for listing in listings:
            rows.append(
                f"| {listing.city} | {listing.category.value} | {listing.area} "
                f"| {listing.room_count} | {listing.price_per_area:,.0f} "
                f"| {listing.total_price():,} |"
            )
        return "\n".join(rows)
