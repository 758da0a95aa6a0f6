"""Report sink: echo to the console and save to a file."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Union

from utils.labels import LABELS

logger = logging.getLogger(__name__)

WRITE_MODES = {"overwrite": "w", "append": "a"}


class ReportWriter:
    """Write report text to a file and echo it to the console."""

    RULE_WIDTH = 80

    def __init__(
        self,
        output_path: Union[str, Path],
        mode: str = "overwrite",
        echo: bool = True,
    ):
        """
        Initialize the writer.

        Args:
            output_path: Target file; parent folders are created on write
            mode: "overwrite" or "append"
            echo: Print the report to the console before saving
        """
        if mode not in WRITE_MODES:
            raise ValueError(
                f"Unsupported write mode: {mode}. "
                f"Supported modes: {', '.join(WRITE_MODES)}"
            )
        self.output_path = Path(output_path)
        self.mode = mode
        self.echo = echo

    def write(self, report: str) -> bool:
        """
        Echo and save the report.

        Returns:
            True if the file was written, False on a write error. On a write
            error the report is printed even when echo is off.
        """
        if self.echo:
            self._print(report)

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, WRITE_MODES[self.mode], encoding="utf-8") as f:
                f.write(report)
                f.write(f"\n{LABELS['generated']}: {datetime.now().isoformat()}\n")
        except OSError as e:
            logger.error(f"Failed to write report to {self.output_path}: {e}")
            if not self.echo:
                self._print(report)
            return False

        logger.info(f"Report saved: {self.output_path}")
        return True

    def _print(self, report: str):
        rule = "=" * self.RULE_WIDTH
        print(f"\n{rule}\n{report}{rule}")
