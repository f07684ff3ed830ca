"""Widget components for the viewer window."""

from .canvas import ViewerCanvas
from .navigator import NavigatorWidget
from .display_info import DisplayInfoWidget

__all__ = ["ViewerCanvas", "NavigatorWidget", "DisplayInfoWidget"]
