"""
SPL Range Pane

Chooses the dynamic range of the sound field SPL color map, either
automatic or a fixed span in dB below the maximum level. A color bar
previews the jet palette over the selected span.
"""

from typing import Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import (
    QCheckBox, QFormLayout, QHBoxLayout, QLabel, QSpinBox,
    QVBoxLayout, QWidget,
)
from PySide6.QtCore import QLocale, QPointF, QSize, Qt, Signal
from PySide6.QtGui import QPainter

from ..core.settings import (
    ClientProperties,
    SPL_RANGE_DB_DEFAULT,
    SPL_RANGE_DB_MAX,
    SPL_RANGE_DB_MAX_EXTENDED,
    SPL_RANGE_DB_MIN,
    SPL_RANGE_DB_STEP,
)
from ..utils.formatting import format_db


def jet_colormap() -> pg.ColorMap:
    """Jet palette as used by the sound field SPL display."""
    pos = np.array([0.0, 0.125, 0.375, 0.625, 0.875, 1.0])
    color = np.array([
        (0, 0, 128),
        (0, 0, 255),
        (0, 255, 255),
        (255, 255, 0),
        (255, 0, 0),
        (128, 0, 0),
    ], dtype=np.ubyte)
    return pg.ColorMap(pos, color)


class ColorBar(QWidget):
    """Horizontal color bar painted from a pyqtgraph ColorMap."""
    
    def __init__(self, colormap: pg.ColorMap, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.colormap = colormap
        self.setMinimumHeight(16)
    
    def sizeHint(self) -> QSize:
        return QSize(200, 16)
    
    def paintEvent(self, event):
        painter = QPainter(self)
        rect = self.rect()
        gradient = self.colormap.getGradient(
            QPointF(rect.left(), 0), QPointF(rect.right(), 0)
        )
        painter.fillRect(rect, gradient)
        painter.end()


class SplRangePane(QWidget):
    """
    SPL range controls.
    
    Args:
        use_extended_range: Allow spans up to 120 dB instead of 60 dB
    
    Signals:
        splRangeChanged: (auto_range_spl, spl_range_db)
    """
    
    splRangeChanged = Signal(bool, int)
    
    def __init__(
        self,
        client_properties: Optional[ClientProperties] = None,
        use_extended_range: bool = False,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.client_properties = client_properties
        self.number_locale = client_properties.locale if client_properties else QLocale()
        self.use_extended_range = use_extended_range
        
        self._init_ui()
        self.update_spl_range(True, SPL_RANGE_DB_DEFAULT)
    
    @property
    def maximum_range_db(self) -> int:
        if self.use_extended_range:
            return SPL_RANGE_DB_MAX_EXTENDED
        return SPL_RANGE_DB_MAX
    
    def _init_ui(self):
        """Initialize UI components."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        
        form = QFormLayout()
        self.cb_auto_range = QCheckBox("Auto-Range SPL")
        self.cb_auto_range.toggled.connect(self._on_auto_range_toggled)
        form.addRow(self.cb_auto_range)
        
        self.range_spin = QSpinBox()
        self.range_spin.setLocale(self.number_locale)
        self.range_spin.setRange(SPL_RANGE_DB_MIN, self.maximum_range_db)
        self.range_spin.setSingleStep(SPL_RANGE_DB_STEP)
        self.range_spin.setSuffix(" dB")
        self.range_spin.valueChanged.connect(self._on_range_changed)
        form.addRow("SPL Range:", self.range_spin)
        layout.addLayout(form)
        
        # Color bar preview with span labels
        self.color_bar = ColorBar(jet_colormap())
        layout.addWidget(self.color_bar)
        
        scale_layout = QHBoxLayout()
        self.min_label = QLabel()
        self.min_label.setStyleSheet("color: #888; font-size: 11px;")
        scale_layout.addWidget(self.min_label)
        scale_layout.addStretch()
        self.max_label = QLabel()
        self.max_label.setStyleSheet("color: #888; font-size: 11px;")
        self.max_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        scale_layout.addWidget(self.max_label)
        layout.addLayout(scale_layout)
    
    def _on_auto_range_toggled(self, checked: bool):
        self.range_spin.setEnabled(not checked)
        self._update_scale_labels()
        self.splRangeChanged.emit(self.is_auto_range_spl(), self.get_spl_range_db())
    
    def _on_range_changed(self, value: int):
        self._update_scale_labels()
        self.splRangeChanged.emit(self.is_auto_range_spl(), value)
    
    def _update_scale_labels(self):
        if self.is_auto_range_spl():
            self.min_label.setText("Auto")
            self.max_label.setText("Max")
        else:
            self.min_label.setText(format_db(-self.get_spl_range_db(), locale=self.number_locale))
            self.max_label.setText(format_db(0, locale=self.number_locale))
    
    def get_spl_range_db(self) -> int:
        """Span below the maximum level, in dB."""
        return self.range_spin.value()
    
    def is_auto_range_spl(self) -> bool:
        return self.cb_auto_range.isChecked()
    
    def update_spl_range(self, auto_range_spl: bool, spl_range_db: int):
        """
        Set both controls, e.g. when restoring preferences.
        
        The span is clamped to the allowed range. Emits splRangeChanged once.
        """
        self.cb_auto_range.blockSignals(True)
        self.range_spin.blockSignals(True)
        try:
            self.cb_auto_range.setChecked(auto_range_spl)
            self.range_spin.setValue(spl_range_db)
            self.range_spin.setEnabled(not auto_range_spl)
        finally:
            self.cb_auto_range.blockSignals(False)
            self.range_spin.blockSignals(False)
        self._update_scale_labels()
        self.splRangeChanged.emit(self.is_auto_range_spl(), self.get_spl_range_db())
