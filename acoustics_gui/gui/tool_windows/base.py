"""
Tool Window base class

Small secondary window with a tool bar and one content pane. Subclasses
supply the actions, content and tool bar through the load_* hooks.
"""

from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStyle, QToolBar, QWidget
from PySide6.QtCore import QByteArray, QSettings, QSize, Signal

from ...core.settings import ClientProperties, default_settings


class ToolWindow(QMainWindow):
    """
    Base class for tool windows.
    
    Signals:
        predictRequested: The user asked for a new prediction
    """
    
    predictRequested = Signal()
    
    def __init__(
        self,
        title: str,
        settings_key: str,
        client_properties: Optional[ClientProperties] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.settings_key = settings_key
        self.client_properties = (
            client_properties if client_properties is not None else ClientProperties()
        )
        self.setWindowTitle(title)
        self.setObjectName(settings_key)
    
    def init_window(
        self,
        icon: QStyle.StandardPixmap,
        width: float,
        height: float,
        resizable: bool,
    ):
        """Build actions, tool bar and content, then size the window."""
        self.load_actions()
        
        self.tool_bar = self.load_tool_bar()
        self.addToolBar(self.tool_bar)
        
        self.setCentralWidget(self.load_content())
        self.setWindowIcon(self.style().standardIcon(icon))
        
        size = QSize(int(width), int(height)).expandedTo(self.sizeHint())
        if resizable:
            self.resize(size)
        else:
            self.setFixedSize(size)
    
    def _on_predict(self):
        self.predictRequested.emit()
    
    def load_actions(self):
        """Create the window actions. Subclasses must override this."""
        raise NotImplementedError
    
    def load_content(self) -> QWidget:
        """Return the central widget. Subclasses must override this."""
        raise NotImplementedError
    
    def load_tool_bar(self) -> QToolBar:
        """Return the window tool bar. Subclasses must override this."""
        raise NotImplementedError
    
    def save_window_state(self, settings: Optional[QSettings] = None):
        """Remember the window geometry under the settings key."""
        if settings is None:
            settings = default_settings()
        settings.setValue(f"windows/{self.settings_key}/geometry", self.saveGeometry())
    
    def restore_window_state(self, settings: Optional[QSettings] = None) -> bool:
        """Restore a remembered geometry; False if none was stored."""
        if settings is None:
            settings = default_settings()
        geometry = settings.value(f"windows/{self.settings_key}/geometry")
        if not isinstance(geometry, QByteArray):
            return False
        return self.restoreGeometry(geometry)
