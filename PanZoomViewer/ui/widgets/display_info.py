"""Display info widget showing the current Viewer state."""

from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QTableWidget, QTableWidgetItem
from PySide6.QtCore import Qt

from ...core.viewer import Viewer

PROPERTIES = ["Origin X", "Origin Y", "Center X", "Center Y", "Visible Width", "Visible Height", "Scale", "Zoom"]


class DisplayInfoWidget(QGroupBox):
    """Table of the visible image-space window and the current scale.

    Origin and visible size come from Viewer.visible_rect(); "Zoom" is the
    magnification (1 / scale) as a percentage.
    """

    def __init__(self, canvas):
        super().__init__()  # No title, title is in dock
        self.canvas = canvas

        self.table = QTableWidget()
        self.table.setColumnCount(2)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.horizontalHeader().setVisible(False)
        self.table.verticalHeader().setVisible(False)
        self.table.verticalHeader().setDefaultSectionSize(18)
        self.table.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.table.setRowCount(len(PROPERTIES))
        for i, prop in enumerate(PROPERTIES):
            item = QTableWidgetItem(prop)
            item.setFlags(item.flags() & ~Qt.ItemIsEditable)
            self.table.setItem(i, 0, item)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.table)

        self.canvas.viewer_changed.connect(self.update_info)
        self.update_info(self.canvas.viewer)

    def value_at(self, row: int) -> str:
        item = self.table.item(row, 1)
        return item.text() if item is not None else ""

    def update_info(self, viewer: Viewer):
        """Refresh the table from a Viewer."""
        if self.canvas.qimage is None:
            values = [""] * len(PROPERTIES)
        else:
            x, y, w, h = viewer.visible_rect()
            cx, cy = viewer.coordinates_at_center()
            values = [
                f"{x:.1f}",
                f"{y:.1f}",
                f"{cx:.1f}",
                f"{cy:.1f}",
                f"{w:.1f}",
                f"{h:.1f}",
                f"{viewer.scale:.4f}",
                f"{100.0 / viewer.scale:.1f}%",
            ]
        for i, value in enumerate(values):
            item = QTableWidgetItem(value)
            item.setFlags(item.flags() & ~Qt.ItemIsEditable)
            self.table.setItem(i, 1, item)
