"""Rendering adapters turning a Viewer into drawing-library transforms.

Every adapter describes the same image-to-viewer mapping, a uniform scale
of ``1 / viewer.scale`` applied after a translation by ``-viewer.origin``,
so that a content point ``(ix, iy)`` is drawn at
``viewer.coordinates_in_viewer((ix, iy))``:

- svg_transform: ``matrix(...)`` attribute value for an SVG group
- canvas_transform: ordered scale/translate primitives for immediate-mode
  surfaces, replayed on a QPainter by apply_canvas_transform
- affine_matrix: 3x3 homogeneous NumPy matrix (apply_affine maps points)
- to_qtransform: the equivalent QTransform
"""

from typing import List, NamedTuple

import numpy as np
from PySide6.QtGui import QPainter, QTransform

from .viewer import Viewer


class CanvasOp(NamedTuple):
    """One primitive of an immediate-mode transform ("scale" or "translate")."""

    name: str
    x: float
    y: float


def format_number(value: float) -> str:
    """Format a number for SVG output without losing precision."""
    # Adding 0.0 turns -0.0 into 0.0
    return repr(float(value) + 0.0)


def svg_transform(viewer: Viewer) -> str:
    """Return the SVG ``transform`` attribute value for the viewer.

    Args:
        viewer: Current viewer state

    Returns:
        String of the form ``"matrix(s 0 0 s tx ty)"``
    """
    s = 1.0 / viewer.scale
    ox, oy = viewer.origin
    tx, ty = format_number(-s * ox), format_number(-s * oy)
    return f"matrix({format_number(s)} 0 0 {format_number(s)} {tx} {ty})"


def canvas_transform(viewer: Viewer) -> List[CanvasOp]:
    """Return the scale then translate primitives for an immediate-mode surface."""
    s = 1.0 / viewer.scale
    ox, oy = viewer.origin
    return [CanvasOp("scale", s, s), CanvasOp("translate", -ox, -oy)]


def apply_canvas_transform(painter: QPainter, viewer: Viewer) -> None:
    """Replay canvas_transform on a QPainter, in order."""
    for op in canvas_transform(viewer):
        if op.name == "scale":
            painter.scale(op.x, op.y)
        elif op.name == "translate":
            painter.translate(op.x, op.y)
        else:
            raise ValueError(f"Unknown canvas operation: {op.name}")


def affine_matrix(viewer: Viewer) -> np.ndarray:
    """Return the 3x3 homogeneous matrix mapping image space to viewer space."""
    s = 1.0 / viewer.scale
    ox, oy = viewer.origin
    return np.array(
        [
            [s, 0.0, -s * ox],
            [0.0, s, -s * oy],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def apply_affine(matrix: np.ndarray, points) -> np.ndarray:
    """Apply a 3x3 affine matrix to points.

    Args:
        matrix: Homogeneous matrix as returned by affine_matrix
        points: A single (x, y) pair or an array-like of shape (N, 2)

    Returns:
        Array of shape (N, 2) with the transformed points
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    homogeneous = np.hstack([pts, np.ones((pts.shape[0], 1))])
    mapped = homogeneous @ matrix.T
    return mapped[:, :2]


def to_qtransform(viewer: Viewer) -> QTransform:
    """Return the QTransform equivalent of affine_matrix."""
    m = affine_matrix(viewer)
    return QTransform(m[0, 0], m[1, 0], m[0, 1], m[1, 1], m[0, 2], m[1, 2])
