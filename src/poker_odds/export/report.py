"""Summary report exporter."""

from pathlib import Path
from typing import Union

from poker_odds.logging_utils import get_logger
from poker_odds.models.tally import Tally

logger = get_logger(__name__)

HEADER = ("HandType", "NumberOfHands")


class ReportExportError(Exception):
    """Raised when the summary report cannot be written."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Cannot write report to {path}: {cause}")
        self.path = path
        self.cause = cause


class ReportExporter:
    """Exports a tally as ``label, count`` rows."""

    @staticmethod
    def export_tally(tally: Tally) -> str:
        """Render the report text.

        Args:
            tally: The counts to export.

        Returns:
            Header row, one row per category (best first), then a total row.
        """
        lines = [", ".join(HEADER)]
        for label, count in tally.summary_dict().items():
            lines.append(f"{label}, {count}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def write(tally: Tally, output_file: Union[str, Path]) -> Path:
        """Write the report to a file.

        Args:
            tally: The counts to export.
            output_file: Path to the output file.

        Returns:
            The path written.

        Raises:
            ReportExportError: If the file cannot be written.
        """
        path = Path(output_file)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(ReportExporter.export_tally(tally))
        except OSError as e:
            raise ReportExportError(path, e) from e
        logger.info("Wrote report for %d hands to %s", tally.total, path)
        return path
