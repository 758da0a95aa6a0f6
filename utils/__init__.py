"""Catalog, report rendering and output utilities."""

from .catalog import Catalog
from .report_generator import ReportGenerator
from .report_writer import ReportWriter

__all__ = [
    "Catalog",
    "ReportGenerator",
    "ReportWriter",
]
