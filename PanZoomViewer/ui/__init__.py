"""UI components package."""

from .viewer import ImageViewer, ZoomManager
from .widgets import ViewerCanvas, NavigatorWidget, DisplayInfoWidget
from .dialogs import HelpDialog

__all__ = [
    "ImageViewer",
    "ZoomManager",
    "ViewerCanvas",
    "NavigatorWidget",
    "DisplayInfoWidget",
    "HelpDialog",
]
