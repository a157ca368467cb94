"""
Main window of the Acoustics GUI application.

Structure:
- Band input (center frequency, octave fraction) with a Predict button
- Frequency range information pane and table side by side
- Band preview plot on a logarithmic frequency axis
- Dithering and SPL range tool windows, PDF export
"""

import logging
from typing import Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QFileDialog, QMessageBox, QPushButton, QFrame, QComboBox,
    QDoubleSpinBox, QCheckBox, QColorDialog, QSplitter,
)
from PySide6.QtCore import Qt, QSettings, Slot
from PySide6.QtGui import QAction, QColor, QKeySequence

from ..core.frequency_range import (
    FrequencyRange,
    OctaveFraction,
    nearest_center_frequency,
)
from ..core.settings import ClientProperties, Preferences, default_settings
from ..errors import AcousticsGuiError, ConfigurationError
from ..report.pdf import PdfReport
from .frequency_range_pane import FrequencyRangeInformationPane
from .frequency_range_table import FrequencyRangeInformationTable
from .tool_windows import DitheringWindow, SplRangeWindow


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Host window for the frequency range views and tool windows."""
    
    def __init__(
        self,
        client_properties: Optional[ClientProperties] = None,
        settings: Optional[QSettings] = None,
    ):
        super().__init__()
        
        self.settings = settings if settings is not None else default_settings()
        self.client_properties = (
            client_properties if client_properties is not None
            else ClientProperties.load(self.settings)
        )
        try:
            self.preferences = Preferences.load(self.settings)
        except ConfigurationError as e:
            logger.warning("Ignoring stored preferences: %s", e)
            self.preferences = Preferences()
        self._frequency_range: Optional[FrequencyRange] = None
        
        self._init_ui()
        self._init_tool_windows()
        self._create_menus()
    
    def _init_ui(self):
        """Build the central widget."""
        self.setWindowTitle("Acoustics GUI")
        self.setMinimumSize(720, 480)
        
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        
        # Band input
        toolbar = QFrame()
        toolbar.setFrameStyle(QFrame.Shape.StyledPanel)
        toolbar_layout = QHBoxLayout(toolbar)
        toolbar_layout.setContentsMargins(8, 4, 8, 4)
        
        toolbar_layout.addWidget(QLabel("Center:"))
        self.center_spin = QDoubleSpinBox()
        self.center_spin.setRange(1.0, 24000.0)
        self.center_spin.setDecimals(1)
        self.center_spin.setValue(1000.0)
        self.center_spin.setSuffix(" Hz")
        toolbar_layout.addWidget(self.center_spin)
        
        toolbar_layout.addWidget(QLabel("Bandwidth:"))
        self.fraction_combo = QComboBox()
        for fraction in OctaveFraction:
            self.fraction_combo.addItem(f"{fraction.label} octave", fraction)
        self.fraction_combo.setCurrentIndex(1)
        toolbar_layout.addWidget(self.fraction_combo)
        
        self.cb_snap = QCheckBox("Snap to IEC 61260")
        self.cb_snap.setChecked(True)
        toolbar_layout.addWidget(self.cb_snap)
        
        toolbar_layout.addStretch()
        
        btn_predict = QPushButton("Predict")
        btn_predict.clicked.connect(self._predict)
        toolbar_layout.addWidget(btn_predict)
        
        layout.addWidget(toolbar)
        
        # Information views
        info_layout = QHBoxLayout()
        self.info_pane = FrequencyRangeInformationPane(self.client_properties)
        info_layout.addWidget(self.info_pane)
        self.info_table = FrequencyRangeInformationTable(self.client_properties.locale)
        info_layout.addWidget(self.info_table)
        
        splitter = QSplitter(Qt.Orientation.Vertical)
        info_container = QWidget()
        info_container.setLayout(info_layout)
        splitter.addWidget(info_container)
        
        # Band preview
        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('#1a1a2e')
        self.plot_widget.showGrid(x=True, y=False, alpha=0.3)
        self.plot_widget.setLogMode(x=True, y=False)
        self.plot_widget.setLabel('bottom', 'Frequency', units='Hz')
        self.plot_widget.hideAxis('left')
        self.plot_widget.setXRange(np.log10(20), np.log10(20000))
        self.plot_widget.setMouseEnabled(x=True, y=False)
        
        self.band_region = pg.LinearRegionItem(movable=False)
        self.band_region.setBrush(pg.mkBrush(100, 150, 200, 80))
        self.band_region.hide()
        self.plot_widget.addItem(self.band_region)
        
        self.center_line = pg.InfiniteLine(
            angle=90, movable=False, pen=pg.mkPen('#f38ba8', width=2)
        )
        self.center_line.hide()
        self.plot_widget.addItem(self.center_line)
        
        splitter.addWidget(self.plot_widget)
        splitter.setSizes([160, 320])
        layout.addWidget(splitter, stretch=1)
        
        self.statusBar().showMessage("No frequency range")
    
    def _init_tool_windows(self):
        """Create tool windows and restore preferences into them."""
        self.dithering_window = DitheringWindow(
            self.client_properties,
            initial_disable_dithering=not self.preferences.use_dithering,
            parent=self,
        )
        self.dithering_window.update_dithering(
            self.preferences.use_dithering, self.preferences.dithering_amount
        )
        self.dithering_window.predictRequested.connect(self._predict)
        
        self.spl_range_window = SplRangeWindow(self.client_properties, parent=self)
        self.spl_range_window.update_spl_range(
            self.preferences.auto_range_spl, self.preferences.spl_range_db
        )
        self.spl_range_window.predictRequested.connect(self._predict)
        
        for window in (self.dithering_window, self.spl_range_window):
            window.setWindowFlag(Qt.WindowType.Tool, True)
            window.restore_window_state(self.settings)
    
    def _create_menus(self):
        """Menu bar."""
        file_menu = self.menuBar().addMenu("&File")
        
        export_action = QAction("Export PDF...", self)
        export_action.setShortcut(QKeySequence.StandardKey.Print)
        export_action.triggered.connect(self._export_pdf)
        file_menu.addAction(export_action)
        
        file_menu.addSeparator()
        
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)
        
        view_menu = self.menuBar().addMenu("&View")
        
        dithering_action = QAction("Dithering Amount...", self)
        dithering_action.triggered.connect(self.dithering_window.show)
        view_menu.addAction(dithering_action)
        
        spl_action = QAction("SPL Range...", self)
        spl_action.triggered.connect(self.spl_range_window.show)
        view_menu.addAction(spl_action)
        
        view_menu.addSeparator()
        
        background_action = QAction("Background Color...", self)
        background_action.triggered.connect(self._choose_background)
        view_menu.addAction(background_action)
        
        reset_action = QAction("Reset", self)
        reset_action.triggered.connect(self.reset)
        view_menu.addAction(reset_action)
    
    @Slot()
    def _predict(self):
        """Compute the band for the current input and show it."""
        center = self.center_spin.value()
        if self.cb_snap.isChecked():
            center = nearest_center_frequency(center)
        fraction = self.fraction_combo.currentData()
        
        try:
            self.set_frequency_range(FrequencyRange.from_center(center, fraction))
        except (AcousticsGuiError, ValueError) as e:
            logger.exception("Prediction failed")
            QMessageBox.critical(self, "Error", str(e))
    
    def set_frequency_range(self, frequency_range: FrequencyRange):
        """Update all views from one frequency range."""
        self.info_pane.set_range(frequency_range)
        self.info_table.set_range(frequency_range)
        self._frequency_range = frequency_range
        
        self.band_region.setRegion([
            np.log10(frequency_range.start_frequency),
            np.log10(frequency_range.stop_frequency),
        ])
        self.band_region.show()
        self.center_line.setValue(np.log10(frequency_range.center_frequency))
        self.center_line.show()
        
        self.statusBar().showMessage(self.info_pane.information()[1])
    
    def reset(self):
        """Back to "Not Available" in all views."""
        self.info_pane.reset()
        self.info_table.reset()
        self._frequency_range = None
        self.band_region.hide()
        self.center_line.hide()
        self.statusBar().showMessage("No frequency range")
    
    def _choose_background(self):
        color = QColorDialog.getColor(QColor("#ffffff"), self, "Background Color")
        if color.isValid():
            self.info_pane.set_foreground_from_background(color)
            self.info_table.set_foreground_from_background(color)
    
    def export_pdf(self, filename: str):
        """Write the frequency range information to a PDF report."""
        with PdfReport(filename, "Frequency Range Information") as report:
            report.cursor = self.info_pane.export_to_pdf(
                report.painter, report.cursor, report.fonts
            )
    
    def _export_pdf(self):
        filename, _ = QFileDialog.getSaveFileName(
            self, "Export PDF", "frequency_range.pdf", "PDF (*.pdf)"
        )
        if not filename:
            return
        try:
            self.export_pdf(filename)
            QMessageBox.information(self, "Export", f"Exported to:\n{filename}")
        except OSError as e:
            logger.exception("PDF export failed")
            QMessageBox.critical(self, "Error", str(e))
    
    def _collect_preferences(self) -> Preferences:
        return Preferences(
            use_dithering=self.dithering_window.is_use_dithering(),
            dithering_amount=self.dithering_window.get_dithering_amount(),
            auto_range_spl=self.spl_range_window.is_auto_range_spl(),
            spl_range_db=self.spl_range_window.get_spl_range_db(),
        )
    
    def closeEvent(self, event):
        """Persist preferences and tool window geometry."""
        self.preferences = self._collect_preferences()
        self.preferences.save(self.settings)
        for window in (self.dithering_window, self.spl_range_window):
            window.save_window_state(self.settings)
        super().closeEvent(event)
