"""Paint surface that displays an image through a Viewer."""

from typing import Optional

import numpy as np
from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPainter, QResizeEvent, QWheelEvent
from PySide6.QtWidgets import QWidget

from ...core.image_io import image_size, numpy_to_qimage
from ...core.transforms import apply_canvas_transform
from ...core.viewer import Viewer
from ..viewer.zoom_manager import ZoomManager


class ViewerCanvas(QWidget):
    """Widget drawing the current image with the Viewer's transform.

    Mouse and resize events are decoded here and forwarded to the
    ZoomManager:
    - Left-drag: pan
    - Mouse wheel: zoom toward / away from the cursor
    - Resize: keep the Viewer size equal to the widget size

    Signals:
        viewer_changed: Emitted with the new Viewer after every change
        mouse_moved: Emitted with image-space (x, y) under the cursor
    """

    viewer_changed = Signal(object)
    mouse_moved = Signal(float, float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(100, 100)

        self.array: Optional[np.ndarray] = None
        self.qimage: Optional[QImage] = None
        self.background = QColor(48, 48, 48)

        self.zoom_manager = ZoomManager((self.width(), self.height()))
        self.zoom_manager.add_listener(self._on_viewer_changed)

        self._drag_last: Optional[QPointF] = None

    @property
    def viewer(self) -> Viewer:
        return self.zoom_manager.viewer

    def set_image(self, array: Optional[np.ndarray], fit: bool = True):
        """Display a new image (or nothing when ``array`` is None).

        Args:
            array: Image array of shape (H, W) or (H, W, C)
            fit: Fit the image to the widget
        """
        self.array = array
        if array is None:
            self.qimage = None
            self._drag_last = None
            self.zoom_manager.set_content(None)
        else:
            self.qimage = numpy_to_qimage(array)
            self.zoom_manager.set_content(image_size(array), fit=fit)
        self.update()

    def _on_viewer_changed(self, viewer: Viewer):
        self.update()
        self.viewer_changed.emit(viewer)

    def paintEvent(self, event):
        """Paint the background, then the image through the Viewer transform."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.background)
        if self.qimage is not None and not self.qimage.isNull():
            # Smooth when shrinking, pixelated when magnifying
            painter.setRenderHint(QPainter.SmoothPixmapTransform, self.viewer.scale > 1.0)
            apply_canvas_transform(painter, self.viewer)
            painter.drawImage(0, 0, self.qimage)
        painter.end()

    def resizeEvent(self, event: QResizeEvent):
        size = event.size()
        self.zoom_manager.resize((size.width(), size.height()))
        super().resizeEvent(event)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton and self.qimage is not None:
            self._drag_last = event.position()
            self.setCursor(Qt.ClosedHandCursor)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = event.position()
        if self._drag_last is not None:
            delta = pos - self._drag_last
            self._drag_last = pos
            self.zoom_manager.pan((delta.x(), delta.y()))
        ix, iy = self.zoom_manager.image_point_at((pos.x(), pos.y()))
        self.mouse_moved.emit(ix, iy)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton and self._drag_last is not None:
            self._drag_last = None
            self.unsetCursor()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent):
        if self.qimage is None:
            event.ignore()
            return
        pos = event.position()
        self.zoom_manager.wheel(event.angleDelta().y(), (pos.x(), pos.y()))
        event.accept()
