"""
Frequency Range Information Pane

Column of status labels showing the frequency range of the most recent
acoustic response: relative bandwidth, center, start and stop frequency.
"""

from typing import Optional

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPalette

from ..core.frequency_display import FrequencyDisplayFormatter, FormattedLabels
from ..core.frequency_range import FrequencyRange
from ..core.settings import ClientProperties
from ..report.pdf import PdfFonts, write_information_table
from ..utils.colors import foreground_from_background


class FrequencyRangeInformationPane(QFrame):
    """
    Read-only frequency range labels.
    
    All four labels are rewritten together from one FormattedLabels
    value, so the pane never shows a mix of two ranges.
    """
    
    def __init__(
        self,
        client_properties: Optional[ClientProperties] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        
        if client_properties is None:
            client_properties = ClientProperties()
        self.client_properties = client_properties
        
        # Locale is resolved once here; raises ConfigurationError
        self.formatter = FrequencyDisplayFormatter(client_properties.locale)
        
        self._init_ui()
    
    def _init_ui(self):
        """Initialize UI components."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(2)
        layout.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        
        self.relative_bandwidth_label = QLabel()
        self.center_frequency_label = QLabel()
        self.start_frequency_label = QLabel()
        self.stop_frequency_label = QLabel()
        
        for label in self._labels():
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            layout.addWidget(label)
        
        self._show(self.formatter.labels)
    
    def _labels(self) -> tuple[QLabel, QLabel, QLabel, QLabel]:
        return (
            self.relative_bandwidth_label,
            self.center_frequency_label,
            self.start_frequency_label,
            self.stop_frequency_label,
        )
    
    def _show(self, labels: FormattedLabels):
        for label, text in zip(self._labels(), labels.as_records()):
            label.setText(text)
    
    def reset(self):
        """Show "Not Available" for all values."""
        self._show(self.formatter.reset())
    
    def set_frequency_range(
        self,
        start_frequency: float,
        stop_frequency: float,
        relative_bandwidth: str,
        center_frequency: float,
    ):
        """
        Update the displayed frequency range.
        
        Generally called from an acoustic response context.
        """
        self._show(self.formatter.set_frequency_range(
            start_frequency, stop_frequency, relative_bandwidth, center_frequency,
        ))
    
    def set_range(self, frequency_range: FrequencyRange):
        """Update from a FrequencyRange value."""
        self._show(self.formatter.set_range(frequency_range))
    
    def information(self) -> tuple[str, str, str, str]:
        """Displayed lines: bandwidth, center, start, stop."""
        return self.formatter.export_records()
    
    def set_foreground_from_background(self, background: QColor):
        """Fill the background and pick a contrasting text color."""
        # Background first, so the labels inherit it
        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, background)
        self.setPalette(palette)
        self.setAutoFillBackground(True)
        
        foreground = foreground_from_background(background)
        for label in self._labels():
            label_palette = label.palette()
            label_palette.setColor(QPalette.ColorRole.WindowText, foreground)
            label.setPalette(label_palette)
    
    def export_to_pdf(
        self,
        painter: QPainter,
        initial_point: QPointF,
        fonts: PdfFonts,
    ) -> QPointF:
        """
        Write the information lines as a left-aligned single-column table.
        
        Returns:
            Cursor position below the table
        """
        return write_information_table(
            painter,
            initial_point,
            fonts,
            Qt.AlignmentFlag.AlignLeft,
            self.information(),
        )
