"""
PDF generator for the catalog analysis report.
Creates a one-document report: statistics box followed by a table of all listings.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from models.listing import Listing
from models.statistics import CatalogStatistics
from utils.labels import HEADERS, LABELS, PHRASES, TABLE_HEADERS
from utils.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


class PDFReportGenerator:
    """
    Generates PDF reports for the listing catalog.

    Layout:
    - Title and generation timestamp
    - Statistics box with report lines 1-4
    - Affordable condominium list
    - Table of every listing in catalog order
    """

    NAVY = (26, 58, 82)  # Headers and emphasis
    GRAY = (108, 117, 125)  # Secondary text
    LIGHT_GRAY = (248, 249, 250)  # Table backgrounds
    WHITE = (255, 255, 255)

    COLUMN_WIDTHS: Dict[str, int] = {
        "rank": 10,
        "city": 40,
        "category": 32,
        "area": 20,
        "rooms": 18,
        "price_per_area": 32,
        "total_price": 38,
    }

    PAGE_BOTTOM = 270

    def __init__(
        self,
        output_dir: str,
        run_timestamp: datetime,
        font_path: Optional[str] = None,
    ):
        """
        Initialize PDF generator.

        Args:
            output_dir: Directory for PDF output
            run_timestamp: Timestamp of the report run
            font_path: Optional TTF font with full Unicode coverage; the
                built-in Helvetica (Latin-1 only) is used otherwise
        """
        self.output_dir = Path(output_dir)
        self.run_timestamp = run_timestamp

        self.pdf = FPDF(orientation="P", unit="mm", format="A4")
        self.pdf.set_auto_page_break(auto=False, margin=15)

        self.font_family = "Helvetica"
        self.unicode_font = False
        self._setup_fonts_and_metadata(font_path)

    def _setup_fonts_and_metadata(self, font_path: Optional[str]):
        """Configure PDF fonts and metadata."""
        if font_path and Path(font_path).exists():
            self.pdf.add_font("ReportFont", "", font_path)
            self.pdf.add_font("ReportFont", "B", font_path)
            self.font_family = "ReportFont"
            self.unicode_font = True
        elif font_path:
            logger.warning(f"Font not found: {font_path} - using Helvetica")

        self.pdf.set_title(HEADERS["report_title"].title())
        self.pdf.set_creator("estate-catalog")
        self.pdf.set_subject("Real estate catalog analysis")

    def _text(self, value: str) -> str:
        """Make text safe for the active font."""
        if self.unicode_font:
            return value
        return value.encode("latin-1", "replace").decode("latin-1")

    def generate_pdf_report(
        self,
        statistics: CatalogStatistics,
        listings: List[Listing],
        filename: str = "report.pdf",
    ) -> str:
        """
        Generate the PDF report.

        Args:
            statistics: Report figures
            listings: All listings in catalog order
            filename: Output filename

        Returns:
            Path to generated PDF file
        """
        self.pdf.add_page()

        self._draw_header()
        self._draw_statistics_box(statistics)
        self._draw_affordable_section(statistics)
        self._draw_listing_table(listings)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename
        self.pdf.output(str(output_path))

        return str(output_path)

    def _line(self, text: str, height: float = 6):
        """Full-width cell followed by a line break."""
        self.pdf.cell(0, height, self._text(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _draw_header(self):
        """Draw title and timestamp."""
        self.pdf.set_font(self.font_family, "B", 20)
        self.pdf.set_text_color(*self.NAVY)
        self.pdf.cell(
            0,
            12,
            self._text(HEADERS["report_title"].title()),
            align="C",
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )

        self.pdf.set_font(self.font_family, "", 10)
        self.pdf.set_text_color(*self.GRAY)
        timestamp_str = self.run_timestamp.strftime("%Y-%m-%d %H:%M")
        self.pdf.cell(
            0,
            6,
            self._text(f"{LABELS['generated']} {timestamp_str}"),
            align="C",
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        self.pdf.ln(5)

    def _draw_statistics_box(self, statistics: CatalogStatistics):
        """Draw report lines 1-4 on a shaded background."""
        summary = ReportGenerator().summary_lines(statistics)
        summary.insert(0, f"{LABELS['listing_count']}: {statistics.listing_count}")

        y_start = self.pdf.get_y()
        self.pdf.set_fill_color(*self.LIGHT_GRAY)
        self.pdf.rect(10, y_start, 190, 6 * len(summary) + 6, "F")

        self.pdf.set_y(y_start + 3)
        self.pdf.set_font(self.font_family, "", 10)
        self.pdf.set_text_color(0, 0, 0)
        for line in summary:
            self._line(line)

        self.pdf.ln(6)

    def _draw_affordable_section(self, statistics: CatalogStatistics):
        """Draw the affordable condominium list."""
        self.pdf.set_font(self.font_family, "B", 12)
        self.pdf.set_text_color(*self.NAVY)
        self._line(
            LABELS["affordable_condominiums"].format(
                threshold=statistics.affordable_threshold
            ),
            height=8,
        )

        self.pdf.set_font(self.font_family, "", 9)
        self.pdf.set_text_color(0, 0, 0)
        if not statistics.affordable_condominiums:
            self._line(PHRASES["no_affordable"])
        for listing in statistics.affordable_condominiums:
            self._ensure_space()
            self._line(
                f"- {listing.city}, {listing.area} sqm, {listing.room_count} rooms: "
                f"{listing.total_price():,}"
            )

        self.pdf.ln(6)

    def _draw_table_header(self):
        self.pdf.set_font(self.font_family, "B", 9)
        self.pdf.set_fill_color(*self.NAVY)
        self.pdf.set_text_color(*self.WHITE)
        for key, width in self.COLUMN_WIDTHS.items():
            self.pdf.cell(
                width, 8, self._text(TABLE_HEADERS[key]), border=1, align="C", fill=True
            )
        self.pdf.ln()
        self.pdf.set_font(self.font_family, "", 8)
        self.pdf.set_text_color(0, 0, 0)

    def _ensure_space(self) -> bool:
        """Start a new page when close to the bottom margin."""
        if self.pdf.get_y() > self.PAGE_BOTTOM:
            self.pdf.add_page()
            return True
        return False

    def _draw_listing_table(self, listings: List[Listing]):
        """Draw table of all listings."""
        self.pdf.set_font(self.font_family, "B", 12)
        self.pdf.set_text_color(*self.NAVY)
        self._line(HEADERS["listings"], height=8)

        if not listings:
            self.pdf.set_font(self.font_family, "", 9)
            self.pdf.set_text_color(0, 0, 0)
            self._line(PHRASES["empty_catalog"])
            return

        self._draw_table_header()
        widths = self.COLUMN_WIDTHS

        for idx, listing in enumerate(listings, 1):
            if self._ensure_space():
                self._draw_table_header()

            # Alternating row colors
            fill = idx % 2 == 0
            if fill:
                self.pdf.set_fill_color(*self.LIGHT_GRAY)

            cells = [
                (widths["rank"], str(idx), "C"),
                (widths["city"], listing.city[:24], "L"),
                (widths["category"], listing.category.value, "L"),
                (widths["area"], f"{listing.area} m2", "R"),
                (widths["rooms"], str(listing.room_count), "C"),
                (widths["price_per_area"], f"{listing.price_per_area:,.0f}", "R"),
                (widths["total_price"], f"{listing.total_price():,}", "R"),
            ]
            for width, text, align in cells:
                self.pdf.cell(
                    width, 7, self._text(text), border=1, align=align, fill=fill
                )
            self.pdf.ln()
