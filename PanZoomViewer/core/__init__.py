"""Core (UI-independent) modules: the Viewer model, rendering adapters and image I/O."""

from .viewer import Viewer
from .transforms import (
    CanvasOp,
    svg_transform,
    canvas_transform,
    apply_canvas_transform,
    affine_matrix,
    apply_affine,
    to_qtransform,
)
from .image_io import numpy_to_qimage, load_image, is_image_file, image_size
from .svg_export import build_view_svg, export_view_svg

__all__ = [
    "Viewer",
    "CanvasOp",
    "svg_transform",
    "canvas_transform",
    "apply_canvas_transform",
    "affine_matrix",
    "apply_affine",
    "to_qtransform",
    "numpy_to_qimage",
    "load_image",
    "is_image_file",
    "image_size",
    "build_view_svg",
    "export_view_svg",
]
