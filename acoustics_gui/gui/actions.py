"""
Simulation actions and the Predict tool bar shared by the tool windows.
"""

from typing import Optional

from PySide6.QtWidgets import QStyle, QToolBar, QWidget
from PySide6.QtCore import QObject
from PySide6.QtGui import QAction, QKeySequence


class SimulationActions(QObject):
    """Actions that trigger a new acoustic prediction."""
    
    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        
        self.predict = QAction("Predict", self)
        self.predict.setShortcut(QKeySequence(QKeySequence.StandardKey.Refresh))
        self.predict.setToolTip("Run a new prediction with the current settings")
        if parent is not None:
            self.predict.setIcon(
                parent.style().standardIcon(QStyle.StandardPixmap.SP_MediaPlay)
            )


class PredictToolBar(QToolBar):
    """Tool bar holding the Predict action."""
    
    def __init__(
        self,
        actions: SimulationActions,
        parent: Optional[QWidget] = None,
    ):
        super().__init__("Predict", parent)
        self.setMovable(False)
        self.addAction(actions.predict)
