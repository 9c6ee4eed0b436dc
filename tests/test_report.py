"""Tests for report export and text formatting."""

import pytest

from poker_odds.export.report import ReportExporter, ReportExportError
from poker_odds.formatters.text import TextFormatter
from poker_odds.models.card import Card
from poker_odds.models.hand import Hand
from poker_odds.models.tally import HandCategory, Tally


@pytest.fixture
def tally():
    """A small tally with a few categories filled in."""
    t = Tally()
    for _ in range(3):
        t.record(HandCategory.HIGH_CARD)
    t.record(HandCategory.PAIR)
    t.record(HandCategory.FLUSH)
    return t


class TestReportExporter:
    """Tests for the ReportExporter class."""

    def test_export_tally(self, tally):
        """Test the rendered report rows."""
        lines = ReportExporter.export_tally(tally).splitlines()
        assert lines[0] == "HandType, NumberOfHands"
        assert lines[1] == "Royal Flush, 0"
        assert "Flush, 1" in lines
        assert "Pair, 1" in lines
        assert lines[-2] == "High Card, 3"
        assert lines[-1] == "Total, 5"
        assert len(lines) == 12

    def test_write(self, tally, tmp_path):
        """Test writing the report to a file."""
        path = tmp_path / "results.csv"
        written = ReportExporter.write(tally, path)
        assert written == path
        assert path.read_text(encoding="utf-8") == ReportExporter.export_tally(tally)

    def test_write_overwrites(self, tally, tmp_path):
        """Test that an existing report is replaced."""
        path = tmp_path / "results.csv"
        path.write_text("old contents\n", encoding="utf-8")
        ReportExporter.write(tally, str(path))
        assert "old contents" not in path.read_text(encoding="utf-8")

    def test_write_failure(self, tally, tmp_path):
        """Test that I/O errors surface as ReportExportError."""
        path = tmp_path / "missing" / "results.csv"
        with pytest.raises(ReportExportError) as exc_info:
            ReportExporter.write(tally, path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, OSError)


class TestTextFormatter:
    """Tests for the TextFormatter class."""

    def test_format_hand(self):
        """Test that each card is printed on its own line."""
        hand = Hand([Card.parse("Ah"), Card.parse("Td")])
        text = TextFormatter().format_hand(hand, HandCategory.HIGH_CARD)
        assert text.splitlines() == ["Ace of Hearts", "10 of Diamonds", "=> High Card"]

    def test_format_tally(self, tally):
        """Test tally text includes frequencies and the total."""
        text = TextFormatter().format_tally(tally)
        assert "60.000%" in text
        assert text.splitlines()[-1].split() == ["Total", "5"]

    def test_format_empty_tally(self):
        """Test formatting a tally with no hands."""
        assert TextFormatter().format_tally(Tally()) == "No hands dealt."
