"""Navigator widget showing thumbnail with viewport rectangle."""

from typing import Optional, Tuple

from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QLabel
from PySide6.QtGui import QPixmap, QPainter, QPen, QColor
from PySide6.QtCore import Qt, QEvent

from ...core.constants import THUMBNAIL_SIZE
from ...core.viewer import Viewer


class NavigatorWidget(QGroupBox):
    """Navigator widget displaying thumbnail image with viewport rectangle.

    Shows a scaled-down version of the current image with a red rectangle
    indicating the image-space window currently visible in the canvas.
    Clicking on the thumbnail centers the view on that position.
    """

    def __init__(self, canvas):
        super().__init__("Navigator")
        self.canvas = canvas
        self.base_pixmap: Optional[QPixmap] = None
        self.thumb_rect: Optional[Tuple[int, int, int, int]] = None

        self.thumbnail_label = QLabel()
        self.thumbnail_label.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        self.thumbnail_label.setAlignment(Qt.AlignTop | Qt.AlignHCenter)
        self.thumbnail_label.installEventFilter(self)

        layout = QVBoxLayout(self)
        layout.addWidget(self.thumbnail_label)
        layout.addStretch()

        self.canvas.viewer_changed.connect(self.update_thumbnail)

    def set_image(self):
        """Rebuild the cached thumbnail from the canvas image."""
        if self.canvas.qimage is None or self.canvas.qimage.isNull():
            self.base_pixmap = None
        else:
            self.base_pixmap = QPixmap.fromImage(self.canvas.qimage).scaled(
                self.thumbnail_label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        self.update_thumbnail(self.canvas.viewer)

    def _thumb_factor(self) -> float:
        """Thumbnail pixels per image unit."""
        w, h = self.canvas.zoom_manager.content_size
        return min(self.base_pixmap.width() / w, self.base_pixmap.height() / h)

    def _pixmap_offset(self) -> Tuple[float, float]:
        # Label is AlignTop | AlignHCenter
        return ((self.thumbnail_label.width() - self.base_pixmap.width()) / 2.0, 0.0)

    def eventFilter(self, obj, event):
        if obj is self.thumbnail_label and event.type() == QEvent.MouseButtonPress:
            if event.button() == Qt.LeftButton:
                pos = event.position()
                self.handle_click(pos.x(), pos.y())
        return super().eventFilter(obj, event)

    def handle_click(self, x: float, y: float) -> bool:
        """Center the canvas on the image point under a label position.

        Returns:
            True if the click was on the thumbnail.
        """
        if self.base_pixmap is None or self.canvas.zoom_manager.content_size is None:
            return False
        x_offset, y_offset = self._pixmap_offset()
        px = x - x_offset
        py = y - y_offset
        if not (0 <= px <= self.base_pixmap.width() and 0 <= py <= self.base_pixmap.height()):
            return False
        factor = self._thumb_factor()
        self.canvas.zoom_manager.center_on((px / factor, py / factor))
        return True

    def update_thumbnail(self, viewer: Viewer):
        """Redraw the thumbnail and the visible-window rectangle."""
        if self.base_pixmap is None or self.canvas.zoom_manager.content_size is None:
            self.thumbnail_label.clear()
            self.thumb_rect = None
            return

        pixmap = self.base_pixmap.copy()
        factor = self._thumb_factor()
        x, y, w, h = viewer.visible_rect()
        self.thumb_rect = (int(x * factor), int(y * factor), int(w * factor), int(h * factor))

        painter = QPainter(pixmap)
        painter.setPen(QPen(QColor(255, 68, 68, 255), 2))  # Red viewport border
        painter.drawRect(*self.thumb_rect)
        painter.end()

        self.thumbnail_label.setPixmap(pixmap)
