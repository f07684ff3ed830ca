"""PanZoomViewer - pan/zoom coordinate model for 2D image viewers.

The core of this package is the immutable Viewer value: a surface size,
an image-space origin and a scale, together with pure operations mapping
between viewer space (widget pixels) and image space (content
coordinates) and deriving new Viewers from pan, zoom and resize gestures.

Core:
    - Viewer: immutable state with coordinates_at / coordinates_in_viewer,
      translate, pan, center_at_coordinates, fit_image, rescale_centered,
      rescale_fix_point, zoom_in / zoom_out, zoom_toward / zoom_away_from
    - Rendering adapters: SVG transform string, canvas scale/translate
      primitives, NumPy affine matrix, QTransform

Application:
    - ImageViewer: PySide6 window hosting a ViewerCanvas with drag panning,
      wheel zoom toward the cursor, zoom buttons, navigator and SVG export

Package Structure:
    - core/: UI-independent model, adapters and image I/O
    - ui/: Qt window, widgets and dialogs
    - utils/: logging setup

Quick Start:
    from PanZoomViewer import Viewer
    v = Viewer.with_size((800, 600)).fit_image((400, 300))
    v.zoom_toward((100.0, 75.0))

Dependencies:
    - PySide6: Qt for Python
    - numpy: Array operations
    - opencv-python: Image loading and PNG encoding
"""

from .core import (
    Viewer,
    CanvasOp,
    svg_transform,
    canvas_transform,
    apply_canvas_transform,
    affine_matrix,
    apply_affine,
    to_qtransform,
    load_image,
    is_image_file,
)
from .app import main
from .ui import ImageViewer

__version__ = "0.1.0"
__all__ = [
    "main",
    "Viewer",
    "CanvasOp",
    "svg_transform",
    "canvas_transform",
    "apply_canvas_transform",
    "affine_matrix",
    "apply_affine",
    "to_qtransform",
    "load_image",
    "is_image_file",
    "ImageViewer",
]
