"""
Frequency Range Information Table

Single-column, read-only table with the same four lines as the
information pane, styled to blend into its background: no headers,
no grid, no selection.
"""

from typing import Optional, Union

from PySide6.QtWidgets import (
    QAbstractItemView, QFrame, QHeaderView, QTableWidget, QTableWidgetItem, QWidget,
)
from PySide6.QtCore import QLocale, QSize, Qt
from PySide6.QtGui import QBrush, QColor, QPalette

from ..core.frequency_display import FrequencyDisplayFormatter, FormattedLabels
from ..core.frequency_range import FrequencyRange
from ..utils.colors import foreground_from_background


class FrequencyRangeInformationTable(QTableWidget):
    """
    Table view of the current frequency range.
    
    Args:
        locale: Locale for number formatting (default: host locale)
    """
    
    ROW_COUNT = 4
    
    def __init__(
        self,
        locale: Union[str, QLocale, None] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(self.ROW_COUNT, 1, parent)
        
        self.formatter = FrequencyDisplayFormatter(locale)
        
        self._init_table()
        self.reset()
    
    def _init_table(self):
        """Read-only, headerless, gridless single column."""
        self.horizontalHeader().hide()
        self.verticalHeader().hide()
        self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.setShowGrid(False)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFrameShape(QFrame.Shape.NoFrame)
        
        for row in range(self.ROW_COUNT):
            item = QTableWidgetItem()
            item.setFlags(Qt.ItemFlag.ItemIsEnabled)
            item.setTextAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
            self.setItem(row, 0, item)
    
    def sizeHint(self) -> QSize:
        # Second-narrowest table in the layout; fits its largest values
        return QSize(160, 100)
    
    def _show(self, labels: FormattedLabels):
        for row, text in enumerate(labels.as_records()):
            self.item(row, 0).setText(text)
        self.viewport().update()
    
    def reset(self):
        """Show "Not Available" for all rows."""
        self._show(self.formatter.reset())
    
    def set_frequency_range(
        self,
        start_frequency: float,
        stop_frequency: float,
        relative_bandwidth: str,
        center_frequency: float,
    ):
        """Update the table; generally called with a prediction response."""
        self._show(self.formatter.set_frequency_range(
            start_frequency, stop_frequency, relative_bandwidth, center_frequency,
        ))
    
    def set_range(self, frequency_range: FrequencyRange):
        """Update from a FrequencyRange value."""
        self._show(self.formatter.set_range(frequency_range))
    
    def information(self) -> tuple[str, ...]:
        """Row texts, top to bottom."""
        return tuple(self.item(row, 0).text() for row in range(self.ROW_COUNT))
    
    def set_foreground_from_background(self, background: QColor):
        """Apply a background and a contrasting text color to all rows."""
        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Base, background)
        self.setPalette(palette)
        
        foreground = QBrush(foreground_from_background(background))
        for row in range(self.ROW_COUNT):
            item = self.item(row, 0)
            item.setBackground(QBrush(background))
            item.setForeground(foreground)
