"""Real estate catalog analysis: load listings, compute statistics, write reports."""

import argparse
import copy
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from models.constants import DEFAULT_REFERENCE_CITY
from models.listing import Listing
from models.statistics import CatalogStatistics
from sources import get_source
from sources.seed import SeedSource
from utils.catalog import Catalog
from utils.report_generator import ReportGenerator
from utils.report_writer import ReportWriter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Suppress font subsetting logs from PDF generation
logging.getLogger("fontTools.subset").setLevel(logging.WARNING)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "input_file": None,
    "reference_city": DEFAULT_REFERENCE_CITY,
    "affordable_threshold": None,
    "output": {
        "report_file": "output/report.txt",
        "mode": "overwrite",
        "echo": True,
        "markdown_file": None,
        "pdf_enabled": False,
        "pdf_filename": "report.pdf",
        "pdf_font_path": None,
    },
    "logging": {"level": "INFO"},
}


class CatalogReportRunner:
    """Batch job: fill a catalog from a listing source and report on it."""

    def __init__(self, config: Dict[str, Any], catalog: Optional[Catalog] = None):
        """
        Initialize the runner with configuration.

        Args:
            config: Configuration dictionary (see DEFAULT_CONFIG)
            catalog: Catalog to fill; a new empty one is created if omitted
        """
        self.config = config
        self.catalog = catalog if catalog is not None else Catalog()
        self.run_timestamp = datetime.now()

        self.reference_city = config.get("reference_city", DEFAULT_REFERENCE_CITY)
        self.affordable_threshold = config.get("affordable_threshold")

        # Output settings
        output_config = config.get("output", {})
        self.echo = output_config.get("echo", True)
        self.markdown_file = output_config.get("markdown_file")
        self.pdf_enabled = output_config.get("pdf_enabled", False)
        self.pdf_filename = output_config.get("pdf_filename", "report.pdf")
        self.pdf_font_path = output_config.get("pdf_font_path")

        report_file = Path(output_config.get("report_file", "output/report.txt"))
        self.output_folder = report_file.parent
        self.report_generator = ReportGenerator()
        self.writer = ReportWriter(
            report_file,
            mode=output_config.get("mode", "overwrite"),
            echo=self.echo,
        )

    def load_listings(self) -> int:
        """
        Replace the catalog contents from the configured source.

        Falls back to the built-in seed data when the input file is missing
        or cannot be opened.

        Returns:
            Number of listings in the catalog
        """
        source = get_source(self.config)
        try:
            return source.load_into(self.catalog)
        except OSError as e:
            logger.warning(
                f"Could not read input file ({e}) - loading seed data instead"
            )
            return SeedSource(self.config).load_into(self.catalog)

    def run(self) -> CatalogStatistics:
        """
        Execute the batch job.

        Returns:
            Statistics the reports were generated from
        """
        self.load_listings()

        if self.catalog.size() == 0:
            logger.warning("Catalog is empty - report will contain zero values")

        if self.echo:
            print(self.catalog.describe_all())

        statistics = self.catalog.compute_statistics(
            reference_city=self.reference_city,
            affordable_threshold=self.affordable_threshold,
        )

        report = self.report_generator.render_text(statistics)
        self.writer.write(report)

        if self.markdown_file:
            self._write_markdown_report(statistics)

        if self.pdf_enabled:
            self._generate_pdf_report(statistics, list(self.catalog.iterate_ordered()))

        return statistics

    def _write_markdown_report(self, statistics: CatalogStatistics) -> None:
        """Write the Markdown report with YAML frontmatter."""
        markdown_path = Path(self.markdown_file)
        try:
            markdown_path.parent.mkdir(parents=True, exist_ok=True)
            with open(markdown_path, "w", encoding="utf-8") as f:
                f.write(self.report_generator.render_markdown(statistics))
            logger.info(f"Markdown report saved: {markdown_path}")
        except OSError as e:
            logger.error(f"Failed to write Markdown report: {e}", exc_info=True)

    def _generate_pdf_report(
        self, statistics: CatalogStatistics, listings: List[Listing]
    ) -> None:
        """Generate the PDF report next to the text report."""
        try:
            from utils.pdf_generator import PDFReportGenerator

            pdf_generator = PDFReportGenerator(
                output_dir=str(self.output_folder),
                run_timestamp=self.run_timestamp,
                font_path=self.pdf_font_path,
            )
            output_path = pdf_generator.generate_pdf_report(
                statistics=statistics,
                listings=listings,
                filename=self.pdf_filename,
            )
            logger.info(f"PDF report saved: {output_path}")

        except Exception as e:
            logger.error(f"Failed to generate PDF report: {e}", exc_info=True)


def _merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from config.json, merged over the defaults.

    A missing file yields the defaults.

    Raises:
        ValueError: the file is not valid JSON or not a JSON object
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.info(f"No config file at {config_path} - using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ValueError(f"Config in {config_path} must be a JSON object")

    for section in ("output", "logging"):
        if not isinstance(config.get(section, {}), dict):
            raise ValueError(f"'{section}' in {config_path} must be a JSON object")

    # Validate write mode early
    mode = config.get("output", {}).get("mode", "overwrite")
    if mode not in ("overwrite", "append"):
        raise ValueError(f"Invalid output mode '{mode}' in {config_path}")

    return _merge_config(DEFAULT_CONFIG, config)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Analyze a real estate listing catalog and write a report."
    )
    parser.add_argument("--input", help="Listing file (#-separated records)")
    parser.add_argument("--output", help="Report output file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Config file (default: {DEFAULT_CONFIG_PATH.name})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the catalog report."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load configuration: {e}")
        return 1

    if args.input:
        config["input_file"] = args.input
    if args.output:
        config["output"]["report_file"] = args.output

    level_name = str(config.get("logging", {}).get("level", "INFO")).upper()
    logging.getLogger().setLevel(getattr(logging, level_name, logging.INFO))

    runner = CatalogReportRunner(config)
    statistics = runner.run()

    logger.info(f"Report complete: {statistics.listing_count} listings analyzed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
