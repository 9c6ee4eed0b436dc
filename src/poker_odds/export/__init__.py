"""Report export."""

from poker_odds.export.report import ReportExporter, ReportExportError

__all__ = ["ReportExporter", "ReportExportError"]
