"""Main image viewer application window.

This module provides the ImageViewer class, the host application around
the Viewer model. It owns no geometry of its own: the canvas' ZoomManager
holds the current Viewer and every interaction replaces it.

Features:
- Image loading from a file dialog or by drag & drop
- Pan with left-drag, cursor-anchored zoom with the mouse wheel
- Zoom in/out, fit and 1:1 buttons with keyboard shortcuts
- Navigator thumbnail showing the visible window (click to center)
- Display info table and status bar with the pixel under the cursor
- Export of the current view as an SVG document
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow,
    QStatusBar,
    QLabel,
    QFileDialog,
    QMessageBox,
    QDockWidget,
)
from PySide6.QtCore import Qt

from ...core.image_io import load_image, is_image_file
from ...core.svg_export import export_view_svg
from ...core.viewer import Viewer
from ..widgets import ViewerCanvas, NavigatorWidget, DisplayInfoWidget
from ..dialogs import HelpDialog

from .menu_builder import create_menus, update_action_states
from .status_updater import StatusUpdater

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.tif *.tiff *.bmp *.gif *.webp *.npy)"


class ImageViewer(QMainWindow):
    """Main application window for pan/zoom image viewing.

    Keyboard Shortcuts:
        - Ctrl+O: Open image
        - Ctrl+E: Export current view as SVG
        - Ctrl+W: Close image
        - +/-: Zoom in/out around the center of the view
        - f: Fit to window
        - 1: Actual size (1:1)
        - F1: Help

    Mouse Controls:
        - Mouse wheel: Zoom toward/away from the cursor
        - Left-drag: Pan

    Attributes:
        canvas: ViewerCanvas showing the image
        current_path: Path of the displayed image, or None
    """

    def __init__(self):
        super().__init__()
        self.setWindowTitle("PanZoomViewer")
        self.resize(1000, 700)

        self.current_path: Optional[str] = None

        self.canvas = ViewerCanvas(self)
        self.setCentralWidget(self.canvas)

        # Navigator dock
        self.navigator_dock = QDockWidget("Navigator")
        self.navigator_dock.setObjectName("navigator_dock")
        self.navigator_dock.setFeatures(QDockWidget.DockWidgetFloatable | QDockWidget.DockWidgetMovable)
        self.navigator_widget = NavigatorWidget(self.canvas)
        self.navigator_dock.setWidget(self.navigator_widget)
        self.addDockWidget(Qt.RightDockWidgetArea, self.navigator_dock)

        # Display info dock
        self.info_dock = QDockWidget("Display Area")
        self.info_dock.setObjectName("info_dock")
        self.info_dock.setFeatures(QDockWidget.DockWidgetFloatable | QDockWidget.DockWidgetMovable)
        self.display_info_widget = DisplayInfoWidget(self.canvas)
        self.info_dock.setWidget(self.display_info_widget)
        self.addDockWidget(Qt.RightDockWidgetArea, self.info_dock)

        self.status = QStatusBar()
        self.setStatusBar(self.status)
        self.status_pixel = QLabel()
        self.status_scale = QLabel()
        self.status.addPermanentWidget(self.status_pixel, 3)
        self.status.addPermanentWidget(self.status_scale, 1)

        self.help_dialog = HelpDialog(self)
        self.status_updater = StatusUpdater(self)

        self.canvas.viewer_changed.connect(self._on_viewer_changed)
        self.canvas.mouse_moved.connect(self.status_updater.update_mouse_status)

        create_menus(self)
        self.setAcceptDrops(True)

    def _on_viewer_changed(self, viewer: Viewer):
        self.status_updater.update_scale_status(viewer)

    def _refresh(self):
        self.navigator_widget.set_image()
        self.display_info_widget.update_info(self.canvas.viewer)
        self.status_updater.update_scale_status()
        self.status_updater.update_title()
        update_action_states(self)

    def _show_error(self, title: str, path: str, error_msg: str):
        """Show error message with file details."""
        QMessageBox.warning(self, title, f"File: {Path(path).name}\n\nError: {error_msg}")

    def load_path(self, path: str) -> bool:
        """Load an image file and display it fitted to the window.

        Returns:
            True if the image was loaded.
        """
        try:
            arr = load_image(path)
        except (RuntimeError, ValueError, OSError) as e:
            logger.warning("Cannot load %s: %s", path, e)
            self._show_error("Image Load Error", path, str(e))
            return False

        self.current_path = str(Path(path).resolve())
        self.canvas.set_image(arr, fit=True)
        logger.info("Loaded %s (%dx%d)", self.current_path, arr.shape[1], arr.shape[0])
        self._refresh()
        return True

    def open_files(self):
        """Open file dialog to load an image file."""
        path, _ = QFileDialog.getOpenFileName(self, "Open Image", "", IMAGE_FILTER)
        if path:
            self.load_path(path)

    def close_image(self):
        """Remove the displayed image."""
        self.current_path = None
        self.canvas.set_image(None)
        self.status_pixel.setText("")
        self._refresh()

    def export_svg(self, path: Optional[str] = None) -> bool:
        """Export the current view as an SVG document.

        Args:
            path: Destination file; asks with a file dialog when omitted

        Returns:
            True if a file was written.
        """
        # Ignore bool argument from QAction.triggered(bool) signal
        if isinstance(path, bool):
            path = None
        if self.canvas.array is None:
            return False
        if path is None:
            default = Path(self.current_path or "view").with_suffix(".svg").name
            path, _ = QFileDialog.getSaveFileName(self, "Export View as SVG", default, "SVG (*.svg)")
            if not path:
                return False
        try:
            out = export_view_svg(path, self.canvas.viewer, self.canvas.array)
        except (OSError, ValueError) as e:
            logger.warning("Cannot export SVG to %s: %s", path, e)
            self._show_error("SVG Export Error", path, str(e))
            return False
        logger.info("Exported view to %s", out)
        self.status.showMessage(f"Exported {out.name}", 3000)
        return True

    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        files = [u.toLocalFile() for u in e.mimeData().urls()]
        image_files = [f for f in files if is_image_file(f)]
        if image_files:
            self.load_path(image_files[0])
