"""
Dithering Amount tool window.
"""

from typing import Optional

from PySide6.QtWidgets import QStyle, QToolBar, QWidget

from ...core.settings import ClientProperties
from ..actions import PredictToolBar, SimulationActions
from ..dithering_pane import DitheringPane
from .base import ToolWindow


class DitheringWindow(ToolWindow):
    """Tool window around a DitheringPane; getters forward to the pane."""
    
    TITLE = "Dithering Amount"
    
    def __init__(
        self,
        client_properties: Optional[ClientProperties] = None,
        initial_disable_dithering: bool = False,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(self.TITLE, "dithering", client_properties, parent)
        
        # Needed by load_content(), which runs inside init_window()
        self.initial_disable_dithering = initial_disable_dithering
        
        self.init_window(QStyle.StandardPixmap.SP_FileDialogContentsView, 240, 120, False)
    
    def load_actions(self):
        self.simulation_actions = SimulationActions(self)
        self.simulation_actions.predict.triggered.connect(self._on_predict)
    
    def load_content(self) -> QWidget:
        self.dithering_pane = DitheringPane(
            self.client_properties, self.initial_disable_dithering,
        )
        return self.dithering_pane
    
    def load_tool_bar(self) -> QToolBar:
        return PredictToolBar(self.simulation_actions, self)
    
    def get_dithering_amount(self) -> float:
        return self.dithering_pane.get_dithering_amount()
    
    def is_use_dithering(self) -> bool:
        return self.dithering_pane.is_use_dithering()
    
    def update_dithering(self, use_dithering: bool, dithering_amount: float):
        """Use this when updating from Preferences."""
        self.dithering_pane.update_dithering(use_dithering, dithering_amount)
