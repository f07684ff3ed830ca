"""Menu, toolbar and keyboard shortcut configuration for ImageViewer.

This module handles the creation of all menus, the zoom button toolbar
and window-level keyboard shortcuts for the image viewer.
"""

from PySide6.QtGui import QAction
from PySide6.QtCore import Qt


def _window_action(viewer, text, shortcut, slot):
    action = QAction(text, viewer, shortcut=shortcut)
    action.setShortcutContext(Qt.WindowShortcut)
    action.triggered.connect(slot)
    viewer.addAction(action)
    return action


def create_menus(viewer):
    """Create all menus, the zoom toolbar and keyboard shortcuts for the viewer.

    Args:
        viewer: ImageViewer instance
    """
    menubar = viewer.menuBar()
    zoom = viewer.canvas.zoom_manager

    # File menu
    file_menu = menubar.addMenu("File")
    file_menu.addAction(QAction("Open Image...", viewer, shortcut="Ctrl+O", triggered=viewer.open_files))
    viewer.export_svg_action = QAction(
        "Export View as SVG...", viewer, shortcut="Ctrl+E", triggered=viewer.export_svg
    )
    file_menu.addAction(viewer.export_svg_action)
    file_menu.addSeparator()
    viewer.close_image_action = _window_action(viewer, "Close Image", "Ctrl+W", viewer.close_image)
    file_menu.addAction(viewer.close_image_action)
    file_menu.addAction(QAction("Quit", viewer, shortcut="Ctrl+Q", triggered=viewer.close))

    # Zoom actions, shared by the View menu and the toolbar
    viewer.zoom_in_action = _window_action(viewer, "Zoom In", "+", lambda: zoom.zoom_in())
    viewer.zoom_out_action = _window_action(viewer, "Zoom Out", "-", lambda: zoom.zoom_out())
    viewer.fit_action = _window_action(viewer, "Fit to Window", "f", lambda: zoom.fit())
    viewer.actual_size_action = _window_action(viewer, "Actual Size", "1", lambda: zoom.reset())

    # View menu
    view_menu = menubar.addMenu("View")
    view_menu.addAction(viewer.zoom_in_action)
    view_menu.addAction(viewer.zoom_out_action)
    view_menu.addSeparator()
    view_menu.addAction(viewer.fit_action)
    view_menu.addAction(viewer.actual_size_action)
    view_menu.addSeparator()
    view_menu.addAction(viewer.navigator_dock.toggleViewAction())
    view_menu.addAction(viewer.info_dock.toggleViewAction())

    # Zoom buttons
    toolbar = viewer.addToolBar("Zoom")
    toolbar.setObjectName("zoom_toolbar")
    toolbar.setMovable(False)
    toolbar.addAction(viewer.zoom_in_action)
    toolbar.addAction(viewer.zoom_out_action)
    toolbar.addAction(viewer.fit_action)
    toolbar.addAction(viewer.actual_size_action)
    viewer.zoom_toolbar = toolbar

    # Help menu
    help_menu = menubar.addMenu("Help")
    help_menu.addAction(QAction("Keyboard Shortcuts", viewer, shortcut="F1", triggered=viewer.help_dialog.show))

    update_action_states(viewer)


def update_action_states(viewer):
    """Enable view actions only while an image is shown."""
    has_image = viewer.canvas.qimage is not None
    for action in (
        viewer.export_svg_action,
        viewer.close_image_action,
        viewer.zoom_in_action,
        viewer.zoom_out_action,
        viewer.fit_action,
        viewer.actual_size_action,
    ):
        action.setEnabled(has_image)
