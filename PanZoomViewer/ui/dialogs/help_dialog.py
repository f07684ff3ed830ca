"""Help dialog showing keyboard shortcuts."""

from PySide6.QtWidgets import QDialog, QTextEdit, QVBoxLayout

HELP_TEXT = (
    "PanZoomViewer Help\n"
    "================================\n\n"
    "[Basic]\n"
    "  Ctrl+O        : Open image\n"
    "  Ctrl+E        : Export current view as SVG\n"
    "  Ctrl+W        : Close image\n\n"
    "[View]\n"
    "  + / -         : Zoom in / out (centered)\n"
    "  Mouse wheel   : Zoom toward / away from the cursor\n"
    "  Left-drag     : Pan\n"
    "  f             : Fit to window\n"
    "  1             : Actual size (1:1)\n"
    "  Navigator     : Click to center the view on a point\n\n"
    "[Notes]\n"
    "  - Resizing the window keeps the current origin and zoom;\n"
    "    press f to fit again.\n"
)


class HelpDialog(QDialog):
    """Dialog showing keyboard shortcuts and usage help."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Help / Keyboard Shortcuts")
        self.resize(520, 420)

        text = QTextEdit(self)
        text.setReadOnly(True)
        text.setPlainText(HELP_TEXT)

        layout = QVBoxLayout(self)
        layout.addWidget(text)
