"""
Dithering Pane

Lets the user enable dithering of the sound field display and choose
the dithering amount.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QCheckBox, QDoubleSpinBox, QFormLayout, QWidget,
)
from PySide6.QtCore import QLocale, Signal

from ..core.settings import (
    ClientProperties,
    DITHERING_AMOUNT_DEFAULT,
    DITHERING_AMOUNT_MAX,
    DITHERING_AMOUNT_MIN,
)


class DitheringPane(QWidget):
    """
    Dithering controls.
    
    Signals:
        ditheringChanged: (use_dithering, dithering_amount)
    """
    
    ditheringChanged = Signal(bool, float)
    
    def __init__(
        self,
        client_properties: Optional[ClientProperties] = None,
        initial_disable_dithering: bool = False,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.client_properties = client_properties
        self.number_locale = client_properties.locale if client_properties else QLocale()
        
        self._init_ui()
        self.update_dithering(not initial_disable_dithering, DITHERING_AMOUNT_DEFAULT)
    
    def _init_ui(self):
        """Initialize UI components."""
        layout = QFormLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        
        self.cb_use_dithering = QCheckBox("Use Dithering")
        self.cb_use_dithering.toggled.connect(self._on_use_dithering_toggled)
        layout.addRow(self.cb_use_dithering)
        
        self.amount_spin = QDoubleSpinBox()
        self.amount_spin.setLocale(self.number_locale)
        self.amount_spin.setRange(DITHERING_AMOUNT_MIN, DITHERING_AMOUNT_MAX)
        self.amount_spin.setDecimals(1)
        self.amount_spin.setSingleStep(1.0)
        self.amount_spin.setSuffix(" %")
        self.amount_spin.valueChanged.connect(self._emit_changed)
        layout.addRow("Dithering Amount:", self.amount_spin)
    
    def _on_use_dithering_toggled(self, checked: bool):
        self.amount_spin.setEnabled(checked)
        self._emit_changed()
    
    def _emit_changed(self, *args):
        self.ditheringChanged.emit(self.is_use_dithering(), self.get_dithering_amount())
    
    def get_dithering_amount(self) -> float:
        """Dithering amount in percent."""
        return self.amount_spin.value()
    
    def is_use_dithering(self) -> bool:
        return self.cb_use_dithering.isChecked()
    
    def update_dithering(self, use_dithering: bool, dithering_amount: float):
        """
        Set both controls, e.g. when restoring preferences.
        
        The amount is clamped to the valid range. Emits ditheringChanged once.
        """
        self.cb_use_dithering.blockSignals(True)
        self.amount_spin.blockSignals(True)
        try:
            self.cb_use_dithering.setChecked(use_dithering)
            self.amount_spin.setValue(dithering_amount)
            self.amount_spin.setEnabled(use_dithering)
        finally:
            self.cb_use_dithering.blockSignals(False)
            self.amount_spin.blockSignals(False)
        self._emit_changed()
