"""Application entry point.

This module provides the main() function that initializes logging and the
Qt application and displays the ImageViewer window.

Usage:
    python -m PanZoomViewer [image]

    # Or from Python:
    from PanZoomViewer import main
    main()

Environment:
    PANZOOMVIEWER_LOG_LEVEL: Logging level name (default: INFO)
    PANZOOMVIEWER_LOG_DIR: Directory for app.log (default: per-user state dir)
"""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from .ui.viewer import ImageViewer
from .utils.logging_setup import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Run the image viewer application.

    Args:
        argv: Command-line arguments (defaults to sys.argv). The first
              positional argument, if any, is opened as an image.

    Returns:
        Exit code from QApplication.exec()
    """
    if argv is None:
        argv = sys.argv
    setup_logging(
        level=os.getenv("PANZOOMVIEWER_LOG_LEVEL", "INFO"),
        log_dir=os.getenv("PANZOOMVIEWER_LOG_DIR") or None,
    )
    app = QApplication(argv)
    app.setApplicationName("PanZoomViewer")

    w = ImageViewer()
    w.show()
    args = [a for a in argv[1:] if a and not a.startswith("-")]
    if args:
        w.load_path(os.path.abspath(os.path.expanduser(args[0])))

    logger.info("PanZoomViewer started")
    try:
        return app.exec()
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
