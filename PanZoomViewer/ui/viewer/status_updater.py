"""Status bar update logic for ImageViewer.

This module handles all status bar update operations including:
- Cursor position in image coordinates and the pixel value under it
- Current zoom display
- Window title with the current filename
"""

from pathlib import Path
from typing import Optional

import numpy as np

from ...core.viewer import Viewer


def format_pixel_value(value, dtype) -> str:
    """Format a scalar or per-channel pixel value for display."""

    def _format_scalar(x):
        if np.issubdtype(dtype, np.floating):
            return f"{float(x):.3f}"
        return str(int(x))

    if np.ndim(value) == 0:
        return _format_scalar(value)
    return "(" + ",".join(_format_scalar(x) for x in np.ravel(value)) + ")"


class StatusUpdater:
    """Manages status bar updates for the image viewer.

    This class handles formatting and updating the status bar labels
    with current viewer state information.
    """

    def __init__(self, viewer):
        """Initialize status updater.

        Args:
            viewer: ImageViewer instance
        """
        self.viewer = viewer

    def update_mouse_status(self, image_x: float, image_y: float):
        """Show the image coordinates and pixel value under the cursor.

        Args:
            image_x: Image-space x under the cursor
            image_y: Image-space y under the cursor
        """
        arr = self.viewer.canvas.array
        if arr is None:
            self.viewer.status_pixel.setText("")
            return
        ix = int(np.floor(image_x))
        iy = int(np.floor(image_y))
        h, w = arr.shape[:2]
        if 0 <= iy < h and 0 <= ix < w:
            val_str = format_pixel_value(arr[iy, ix], arr.dtype)
            self.viewer.status_pixel.setText(f"x={ix} y={iy} val={val_str}")
        else:
            self.viewer.status_pixel.setText(f"x={image_x:.1f} y={image_y:.1f}")

    def update_scale_status(self, viewer: Optional[Viewer] = None):
        """Show the current magnification (1 / scale)."""
        viewer = viewer or self.viewer.canvas.viewer
        if self.viewer.canvas.array is None:
            self.viewer.status_scale.setText("")
            return
        self.viewer.status_scale.setText(f"Zoom: {100.0 / viewer.scale:.1f}%")

    def update_title(self):
        """Update the window title with the current filename."""
        path = self.viewer.current_path
        if path is None:
            self.viewer.setWindowTitle("PanZoomViewer")
            return
        arr = self.viewer.canvas.array
        h, w = arr.shape[:2]
        self.viewer.setWindowTitle(f"{Path(path).name} ({w}x{h}) - PanZoomViewer")
