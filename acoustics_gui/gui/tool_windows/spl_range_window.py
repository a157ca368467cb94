"""
Sound Field SPL Range tool window.
"""

from typing import Optional

from PySide6.QtWidgets import QStyle, QToolBar, QWidget

from ...core.settings import ClientProperties
from ..actions import PredictToolBar, SimulationActions
from ..spl_range_pane import SplRangePane
from .base import ToolWindow


class SplRangeWindow(ToolWindow):
    """Tool window around an SplRangePane; getters forward to the pane."""
    
    TITLE = "Sound Field SPL Range"
    
    def __init__(
        self,
        client_properties: Optional[ClientProperties] = None,
        use_extended_range: bool = False,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(self.TITLE, "splRange", client_properties, parent)
        self.use_extended_range = use_extended_range
        
        self.init_window(QStyle.StandardPixmap.SP_DesktopIcon, 300, 180, False)
    
    def load_actions(self):
        self.simulation_actions = SimulationActions(self)
        self.simulation_actions.predict.triggered.connect(self._on_predict)
    
    def load_content(self) -> QWidget:
        self.spl_range_pane = SplRangePane(
            self.client_properties, self.use_extended_range,
        )
        return self.spl_range_pane
    
    def load_tool_bar(self) -> QToolBar:
        return PredictToolBar(self.simulation_actions, self)
    
    def get_spl_range_db(self) -> int:
        return self.spl_range_pane.get_spl_range_db()
    
    def is_auto_range_spl(self) -> bool:
        return self.spl_range_pane.is_auto_range_spl()
    
    def update_spl_range(self, auto_range_spl: bool, spl_range_db: int):
        self.spl_range_pane.update_spl_range(auto_range_spl, spl_range_db)
