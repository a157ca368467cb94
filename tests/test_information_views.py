"""
Tests for the frequency range information pane and table.
"""

import pytest
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPalette

from acoustics_gui.core.frequency_range import FrequencyRange
from acoustics_gui.core.settings import ClientProperties
from acoustics_gui.errors import ConfigurationError, FormattingError
from acoustics_gui.gui.frequency_range_pane import FrequencyRangeInformationPane
from acoustics_gui.gui.frequency_range_table import FrequencyRangeInformationTable
from acoustics_gui.report.pdf import PdfFonts


EXPECTED = (
    "Relative Bandwidth = 1/3 octave",
    "Center Frequency = 1,000",
    "Start Frequency = 31.5",
    "Stop Frequency = 16,000",
)

PLACEHOLDER = (
    "Relative Bandwidth Not Available",
    "Center Frequency Not Available",
    "Start Frequency Not Available",
    "Stop Frequency Not Available",
)


@pytest.fixture
def pane(qapp):
    return FrequencyRangeInformationPane(ClientProperties(locale_name="en_US"))


@pytest.fixture
def table(qapp):
    return FrequencyRangeInformationTable("en-US")


def _pane_texts(pane):
    return (
        pane.relative_bandwidth_label.text(),
        pane.center_frequency_label.text(),
        pane.start_frequency_label.text(),
        pane.stop_frequency_label.text(),
    )


class TestInformationPane:
    """Tests for FrequencyRangeInformationPane."""
    
    def test_initial_placeholder(self, pane):
        assert _pane_texts(pane) == PLACEHOLDER
    
    def test_set_frequency_range(self, pane):
        pane.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        
        assert _pane_texts(pane) == EXPECTED
        assert pane.information() == EXPECTED
    
    def test_reset(self, pane):
        pane.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        pane.reset()
        
        assert _pane_texts(pane) == PLACEHOLDER
    
    def test_set_range(self, pane):
        pane.set_range(FrequencyRange(31.5, 16000.0, "1/3", 1000.0))
        assert _pane_texts(pane) == EXPECTED
    
    def test_failed_update_keeps_labels(self, pane):
        pane.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        with pytest.raises(FormattingError):
            pane.set_frequency_range(31.5, "bad", "1/3", 1000.0)
        
        assert _pane_texts(pane) == EXPECTED
    
    def test_invalid_locale(self, qapp):
        with pytest.raises(ConfigurationError):
            FrequencyRangeInformationPane(ClientProperties(locale_name="xx-YY"))
    
    @pytest.mark.parametrize("background, foreground", [
        (QColor(255, 255, 255), QColor(0, 0, 0)),
        (QColor(20, 20, 40), QColor(255, 255, 255)),
    ])
    def test_foreground_from_background(self, pane, background, foreground):
        pane.set_foreground_from_background(background)
        
        assert pane.autoFillBackground()
        assert pane.palette().color(QPalette.ColorRole.Window) == background
        for label in (
            pane.relative_bandwidth_label,
            pane.center_frequency_label,
            pane.start_frequency_label,
            pane.stop_frequency_label,
        ):
            assert label.palette().color(QPalette.ColorRole.WindowText) == foreground
    
    def test_export_to_pdf_advances_cursor(self, pane):
        pane.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        
        image = QImage(600, 400, QImage.Format.Format_ARGB32)
        image.fill(QColor(255, 255, 255))
        painter = QPainter(image)
        try:
            start = QPointF(20.0, 30.0)
            end = pane.export_to_pdf(painter, start, PdfFonts())
        finally:
            painter.end()
        
        assert end.x() == start.x()
        assert end.y() > start.y()


class TestInformationTable:
    """Tests for FrequencyRangeInformationTable."""
    
    def test_shape(self, table):
        assert table.rowCount() == 4
        assert table.columnCount() == 1
        assert not table.showGrid()
        assert table.horizontalHeader().isHidden()
        assert table.verticalHeader().isHidden()
    
    def test_preferred_size(self, table):
        assert table.sizeHint().width() == 160
        assert table.sizeHint().height() == 100
    
    def test_initial_placeholder(self, table):
        assert table.information() == PLACEHOLDER
    
    def test_set_frequency_range(self, table):
        table.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        assert table.information() == EXPECTED
    
    def test_reset_idempotent(self, table):
        table.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        table.reset()
        first = table.information()
        table.reset()
        
        assert first == table.information() == PLACEHOLDER
    
    def test_read_only(self, table):
        for row in range(4):
            assert not table.item(row, 0).flags() & Qt.ItemFlag.ItemIsEditable
    
    def test_pane_and_table_agree(self, pane, table):
        """Both views render the same lines for the same input."""
        for view in (pane, table):
            view.set_frequency_range(44.194, 56.123, "1/3", 50.0)
        
        assert pane.information() == table.information()
    
    def test_foreground_from_background(self, table):
        table.set_foreground_from_background(QColor(0, 0, 0))
        
        for row in range(4):
            item = table.item(row, 0)
            assert item.background().color() == QColor(0, 0, 0)
            assert item.foreground().color() == QColor(255, 255, 255)
