"""Image viewer package with modular components.

This package provides the main ImageViewer window split into logical components:
- viewer.py: Main ImageViewer class coordinating all components
- menu_builder.py: Menus, zoom toolbar and keyboard shortcuts
- zoom_manager.py: Gesture to Viewer operation mapping (Qt-free)
- status_updater.py: Status bar update logic
"""

from .viewer import ImageViewer
from .zoom_manager import ZoomManager

__all__ = ["ImageViewer", "ZoomManager"]
